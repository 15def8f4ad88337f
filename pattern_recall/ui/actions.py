"""UI Actions - All action functions for Pattern Recall.

Centralizes the functions that buttons call. Each action forwards to the
GameController and reruns the script so the board is re-projected from
the updated context.

Toasts raised by an action are queued on the context (ctx.messages) and
shown by the next render, because st.rerun() discards the current run.

This module handles:
- Round lifecycle (start_round_action, peek_action, recall_action, reset_action)
- Tile clicks (select_tile_action)
- Pending toast display (show_pending_toast)
"""

import logging

import streamlit as st

from pattern_recall.model.message import (
    ActionNotAllowedMessage,
    AlreadySelectedMessage,
    FallbackPathMessage,
    ToastMessage,
    WrongTileMessage,
)
from pattern_recall.ui.controller import GameController, TileSelection

logger = logging.getLogger(__name__)


def get_controller() -> GameController:
    """Controller of the current browser session."""
    return st.session_state.controller


def rerun_with_toast(toast: ToastMessage | None = None) -> None:
    """Queue an optional toast for the next render, then rerun.

    Raises StopExecution via st.rerun(), never returns.
    """
    if toast is not None:
        get_controller().context.messages.toast = toast
    st.rerun()


def show_pending_toast() -> None:
    """Display the toast queued by the previous run, if any."""
    toast = get_controller().context.messages.pop_toast()
    if toast is not None:
        toast.display()


# =============================================================================
# ROUND LIFECYCLE
# =============================================================================


def start_round_action() -> None:
    controller = get_controller()
    pattern = controller.start_round()
    if pattern is None:
        ActionNotAllowedMessage(action="start a round", mode_label=controller.status_label).display()
        return
    rerun_with_toast(FallbackPathMessage(attempts=pattern.attempts) if pattern.is_fallback else None)


def peek_action() -> None:
    controller = get_controller()
    if not controller.request_peek():
        ActionNotAllowedMessage(action="peek", mode_label=controller.status_label).display()
        return
    rerun_with_toast()


def recall_action() -> None:
    controller = get_controller()
    if not controller.start_recall():
        ActionNotAllowedMessage(action="start recall", mode_label=controller.status_label).display()
        return
    rerun_with_toast()


def reset_action() -> None:
    get_controller().reset()
    rerun_with_toast()


# =============================================================================
# TILE CLICKS
# =============================================================================


def select_tile_action(index: int) -> None:
    """Apply a tile click and rerun when the board changed."""
    controller = get_controller()
    result = controller.select_tile(index)
    logger.info(f"[UI] Tile {index} -> {result.name}")

    if result == TileSelection.IGNORED:
        return
    if result == TileSelection.ALREADY_SELECTED:
        AlreadySelectedMessage().display()
        return
    if result == TileSelection.WRONG:
        width = controller.context.width
        rerun_with_toast(WrongTileMessage(x=index % width, y=index // width))
    rerun_with_toast()
