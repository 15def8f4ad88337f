"""State machine for the Pattern Recall round lifecycle.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Guarded transitions (conditions)
- Before-hooks that apply the transition's effect to the GameContext
- Explicit event-driven transitions

States (3 states):
    IDLE: No round running (ready, or showing the result of the last round)
    MEMORIZE: Pattern visible, player studies it
    RECALL: Pattern hidden, player clicks the tiles they remember

Transitions:
    IDLE -> MEMORIZE: start_round (only when no finished round is pending reset)
    MEMORIZE -> MEMORIZE: peek (selection cleared, not counted)
    RECALL -> MEMORIZE: peek (selection cleared, peek counted)
    MEMORIZE -> RECALL: start_recall
    RECALL -> IDLE: win (every pattern tile found), lose (wrong tile clicked)
    ANY -> IDLE: reset (round discarded)

Round outcome (RoundContext.outcome) is orthogonal to state: after win/lose the
machine is IDLE with an outcome set, and start_round is blocked until reset.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from pattern_recall.constants import GridConfig, StyleConfig
from pattern_recall.core.timer import RoundTimer
from pattern_recall.ui.context import GameContext, RoundOutcome

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from pattern_recall.model.path import PatternPath


class TransitionLogListener:
    """Listener that logs every state transition.

    Usage:
        sm = GameStateMachine(context=context)
        sm.add_listener(TransitionLogListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")


class GameStateMachine(StateMachine):
    """State machine for one player's rounds.

    States:
        idle: No round running
        memorize: Pattern visible
        recall: Pattern hidden, tile clicks count
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    idle = State("Idle", initial=True)
    memorize = State("Memorize")
    recall = State("Recall")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    start_round = idle.to(memorize, unless="round_finished")
    peek = memorize.to.itself() | recall.to(memorize)
    start_recall = memorize.to(recall)
    win = recall.to(idle, cond="round_complete")
    lose = recall.to(idle)
    reset = idle.to.itself() | memorize.to(idle) | recall.to(idle)

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def round_finished(self) -> bool:
        """Guard: last round ended and has not been reset yet."""
        return self.context.round.is_finished

    def round_complete(self) -> bool:
        """Guard: every pattern tile has been selected."""
        return self.context.round.is_complete

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_memorize(self) -> bool:
        return self.memorize.is_active

    @property
    def is_recall(self) -> bool:
        return self.recall.is_active

    @property
    def can_start(self) -> bool:
        return self.is_idle and not self.context.round.is_finished

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_start_round(self, pattern: PatternPath) -> None:
        """Action before a round starts: install the pattern and start the clock."""
        self.context.round.begin(pattern)
        self.context.timer.start()

    def before_peek(self, source: State) -> None:
        """Action before showing the pattern again. Only peeks out of recall are counted."""
        if source.id == self.recall.id:
            self.context.round.peek_count += 1
        self.context.round.selected = []

    def before_win(self) -> None:
        self.context.round.outcome = RoundOutcome.WON
        self.context.timer.stop()

    def before_lose(self, cell: int) -> None:
        self.context.round.wrong_cell = cell
        self.context.round.outcome = RoundOutcome.LOST
        self.context.timer.stop()

    def before_reset(self) -> None:
        self.context.clear_round()

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: GameContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or GameContext()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> GameContext:
        """Alias for model."""
        return self.model

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return self.current_state.name

    def get_status_label(self) -> str:
        """Status line text: READY / MEMORIZE / RECALL, or the last round's result."""
        outcome = self.context.round.outcome
        if self.is_idle and outcome is not None:
            return StyleConfig.STATUS_LABELS[outcome.value]
        return StyleConfig.STATUS_LABELS[self.current_state.id]

    def __repr__(self) -> str:
        return f"GameStateMachine(state={self.get_state_name()}, model={self.context!r})"

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    @staticmethod
    def create(
        add_listener: bool = True,
        clock: Callable[[], float] | None = None,
        width: int = GridConfig.WIDTH,
        height: int = GridConfig.HEIGHT,
        path_length: int = GridConfig.PATH_LENGTH,
    ) -> tuple["GameStateMachine", GameContext]:
        """Factory method to create state machine with context and optional logging listener.

        Args:
            add_listener: If True, adds TransitionLogListener.
            clock: Optional time source for the round timer (tests pass a fake clock).
            width, height, path_length: Board settings stored on the context.

        Returns:
            Tuple of (GameStateMachine, GameContext)
        """
        timer = RoundTimer(clock=clock) if clock is not None else RoundTimer()
        context = GameContext(timer=timer, width=width, height=height, path_length=path_length)
        sm = GameStateMachine(context=context)
        if add_listener:
            sm.add_listener(TransitionLogListener())
            logger.info("Created GameStateMachine with TransitionLogListener")
        else:
            logger.info("Created GameStateMachine without listener")
        return sm, context
