"""Context Classes for the Pattern Recall state machine.

Holds all mutable session state for one player. The state machine owns
the context; the UI only reads from it and renders a projection.

Architecture:
- All contexts inherit from BaseContext (provides clear() interface)
- GameContext composes all sub-contexts
- Contexts are pure data holders - no game rules

Sub-contexts:
    RoundContext: Pattern, player selection, peek count, outcome
    UIMessagesContext: Pending toast text for the next render
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pattern_recall.constants import GridConfig
from pattern_recall.core.timer import RoundTimer

if TYPE_CHECKING:
    from pattern_recall.model.message import ToastMessage
    from pattern_recall.model.path import PatternPath


class GameMode(Enum):
    """Player-facing mode. Mirrors the state machine's state values."""

    IDLE = "idle"
    MEMORIZE = "memorize"
    RECALL = "recall"


class RoundOutcome(Enum):
    """How a finished round ended."""

    WON = "won"
    LOST = "lost"


class BaseContext(ABC):
    """Abstract base class for all context dataclasses."""

    @abstractmethod
    def clear(self) -> None:
        """Reset context to initial state."""
        ...


@dataclass
class RoundContext(BaseContext):
    """State of the current round.

    ``selected`` keeps the player's correct picks in click order; it is
    always a subset of the pattern's cells.
    """

    pattern: PatternPath | None = None
    selected: list[int] = field(default_factory=list)
    peek_count: int = 0
    wrong_cell: int | None = None
    outcome: RoundOutcome | None = None

    def clear(self) -> None:
        self.pattern = None
        self.selected = []
        self.peek_count = 0
        self.wrong_cell = None
        self.outcome = None

    def begin(self, pattern: PatternPath) -> None:
        """Start a fresh round on ``pattern``."""
        self.clear()
        self.pattern = pattern

    @property
    def is_finished(self) -> bool:
        return self.outcome is not None

    @property
    def found_count(self) -> int:
        return len(self.selected)

    @property
    def is_complete(self) -> bool:
        """True once every pattern cell has been selected."""
        return self.pattern is not None and len(self.selected) == len(self.pattern)


@dataclass
class UIMessagesContext(BaseContext):
    """User-facing message carried over to the next render."""

    toast: ToastMessage | None = None

    def clear(self) -> None:
        self.toast = None

    def pop_toast(self) -> ToastMessage | None:
        toast, self.toast = self.toast, None
        return toast


@dataclass
class GameContext:
    """Shared context/model for the state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    round: RoundContext = field(default_factory=RoundContext)
    timer: RoundTimer = field(default_factory=RoundTimer)
    messages: UIMessagesContext = field(default_factory=UIMessagesContext)

    # Settings
    width: int = GridConfig.WIDTH
    height: int = GridConfig.HEIGHT
    path_length: int = GridConfig.PATH_LENGTH

    @property
    def mode(self) -> GameMode:
        return GameMode(self.state) if self.state else GameMode.IDLE

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def clear_round(self) -> None:
        self.round.clear()
        self.timer.reset()

    def __repr__(self) -> str:
        return (
            f"GameContext(state={self.state}, "
            f"found={self.round.found_count}/{self.path_length}, "
            f"peeks={self.round.peek_count}, "
            f"outcome={self.round.outcome})"
        )
