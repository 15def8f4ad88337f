"""GameController - Round lifecycle on top of the state machine.

Coordinates the PathGenerator, the GameStateMachine and the GameContext.
Framework-agnostic: the Streamlit layer (actions.py) calls into this and
only adds reruns and toasts.

Contract toward the generator:
- generate is called exactly once per round start
- the returned pattern is immutable for the round
- a selected tile is correct iff it is a member of the pattern (order is ignored)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from pattern_recall.constants import GridConfig
from pattern_recall.generators.path_generator import PathGenerator
from pattern_recall.model.path import PatternPath
from pattern_recall.ui.context import GameContext
from pattern_recall.ui.state_machine import GameStateMachine

logger = logging.getLogger(__name__)


class TileSelection(Enum):
    """Result of a tile click."""

    IGNORED = "ignored"  # Not in recall mode
    ALREADY_SELECTED = "already_selected"
    CORRECT = "correct"
    WON = "won"  # Correct and completes the pattern
    WRONG = "wrong"  # Round lost


class GameController:
    """Drives rounds for one player session.

    Example:
        controller = GameController(generator=PathGenerator(seed=3))
        controller.start_round()
        controller.start_recall()
        result = controller.select_tile(controller.pattern.start)  # TileSelection.CORRECT
    """

    def __init__(
        self,
        generator: PathGenerator | None = None,
        clock: Callable[[], float] | None = None,
        width: int = GridConfig.WIDTH,
        height: int = GridConfig.HEIGHT,
        path_length: int = GridConfig.PATH_LENGTH,
        add_listener: bool = True,
    ) -> None:
        self.generator = generator or PathGenerator()
        self.sm, self.ctx = GameStateMachine.create(
            add_listener=add_listener,
            clock=clock,
            width=width,
            height=height,
            path_length=path_length,
        )

    # =========================================================================
    # ROUND LIFECYCLE
    # =========================================================================

    def start_round(self) -> PatternPath | None:
        """Generate a fresh pattern and enter MEMORIZE.

        Returns:
            The round's pattern, or None if a round cannot start now
            (already running, or a finished round awaits reset).
        """
        if not self.sm.can_start:
            logger.warning(f"[ROUND] Cannot start round from {self.sm.get_state_name()}")
            return None

        pattern = self.generator.generate_pattern(
            width=self.ctx.width,
            height=self.ctx.height,
            length=self.ctx.path_length,
        )
        self.sm.start_round(pattern=pattern)
        logger.info(
            f"[ROUND] Started: {len(pattern)} tiles, attempts={pattern.attempts}, fallback={pattern.is_fallback}"
        )
        return pattern

    def request_peek(self) -> bool:
        """Show the pattern again. Counted as a peek only when leaving recall."""
        return self.sm.try_transition("peek")

    def start_recall(self) -> bool:
        """Hide the pattern and start accepting tile clicks."""
        return self.sm.try_transition("start_recall")

    def reset(self) -> None:
        """Discard the round and return to READY."""
        self.sm.reset()
        logger.info("[ROUND] Reset")

    def select_tile(self, index: int) -> TileSelection:
        """Apply a player's tile click.

        Raises:
            ValueError: index is not a cell of the board.
        """
        if not 0 <= index < self.ctx.cell_count:
            raise ValueError(f"Tile {index} outside {self.ctx.width}x{self.ctx.height} board")

        if not self.sm.is_recall:
            return TileSelection.IGNORED

        round_ctx = self.ctx.round
        if index in round_ctx.selected:
            return TileSelection.ALREADY_SELECTED

        if index in round_ctx.pattern:
            round_ctx.selected.append(index)
            if round_ctx.is_complete:
                self.sm.win()
                logger.info(f"[ROUND] Won in {self.elapsed_label} with {round_ctx.peek_count} peek(s)")
                return TileSelection.WON
            return TileSelection.CORRECT

        self.sm.lose(cell=index)
        logger.info(f"[ROUND] Lost on tile {index} after {round_ctx.found_count} correct tile(s)")
        return TileSelection.WRONG

    # =========================================================================
    # READ-ONLY VIEW
    # =========================================================================

    @property
    def pattern(self) -> PatternPath | None:
        return self.ctx.round.pattern

    @property
    def context(self) -> GameContext:
        return self.ctx

    @property
    def status_label(self) -> str:
        return self.sm.get_status_label()

    @property
    def progress_label(self) -> str:
        return f"{self.ctx.round.found_count} / {self.ctx.path_length}"

    @property
    def elapsed_label(self) -> str:
        return self.ctx.timer.display

    @property
    def peek_count(self) -> int:
        return self.ctx.round.peek_count
