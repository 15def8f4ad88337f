"""Message - User-facing messages for the Pattern Recall UI.

Architecture:
- SIDEBAR: ONE message describing the current mode and what to do next
- BOARD (under the grid): ONE result message once a round has ended
- TOASTS: Transient feedback for clicks and rejected actions

Design Principles:
- Maximum ONE inline message per panel location at any time
- Messages know their own display level; callers decide when to display
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - round lost
    SUCCESS = "success"  # Green - round won


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for inline messages (sidebar/board panels)."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
            MessageLevel.SUCCESS: st.success,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class WrongTileMessage(ToastMessage):
    """Player clicked a tile that is not on the path."""

    x: int
    y: int

    @property
    def icon(self) -> str:
        return "❌"

    @property
    def message(self) -> str:
        return f"Wrong tile: ({self.x + 1}, {self.y + 1}) is not on the path."


@dataclass(frozen=True)
class AlreadySelectedMessage(ToastMessage):
    """Player clicked a tile they already found."""

    @property
    def icon(self) -> str:
        return "ℹ️"

    @property
    def message(self) -> str:
        return "Already found, pick another tile."


@dataclass(frozen=True)
class ActionNotAllowedMessage(ToastMessage):
    """A control was used in a mode that does not accept it."""

    action: str  # e.g. "peek", "start recall"
    mode_label: str  # e.g. "READY"

    @property
    def icon(self) -> str:
        return "⚠️"

    @property
    def message(self) -> str:
        return f"Cannot {self.action} while {self.mode_label}"


@dataclass(frozen=True)
class FallbackPathMessage(ToastMessage):
    """Generator ran out of attempts and used the snake path."""

    attempts: int

    @property
    def icon(self) -> str:
        return "🐍"

    @property
    def message(self) -> str:
        return f"No random path after {self.attempts} attempts, using the snake pattern."


# =============================================================================
# SIDEBAR - Mode context (one per state)
# =============================================================================


@dataclass(frozen=True)
class ReadyMessage(Message):
    """Sidebar: no round running."""

    path_length: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return (
            "🧠 **Ready**\n\n"
            f"Press **Start** to reveal a path of **{self.path_length}** tiles.\n"
            "Memorize it, then rebuild it from memory."
        )


@dataclass(frozen=True)
class MemorizeMessage(Message):
    """Sidebar: pattern is visible."""

    peek_count: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        text = "👀 **Memorize the green path**\n\n- Press **Recall** when you are ready"
        if self.peek_count:
            text += f"\n- Peeks used: {self.peek_count}"
        return text


@dataclass(frozen=True)
class RecallMessage(Message):
    """Sidebar: player is rebuilding the path."""

    found: int
    total: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return (
            f"🎯 **Recall: {self.found} / {self.total}**\n\n"
            "- Click every tile of the path, in any order\n"
            "- One wrong tile ends the round\n"
            "- **Peek** shows the path again (counted, progress resets)"
        )


# =============================================================================
# BOARD - Round result
# =============================================================================


@dataclass(frozen=True)
class RoundWonMessage(Message):
    elapsed: str
    peek_count: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.SUCCESS

    @property
    def message(self) -> str:
        peeks = "no peeks" if self.peek_count == 0 else f"{self.peek_count} peek(s)"
        return f"🏆 **Path complete!** Time: **{self.elapsed}** with {peeks}. Press **Play Again**."


@dataclass(frozen=True)
class RoundLostMessage(Message):
    elapsed: str
    found: int
    total: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return (
            f"💥 **Game over** after **{self.elapsed}**: {self.found} / {self.total} tiles found.\n\n"
            "The full path is revealed on the board. Press **Retry**."
        )
