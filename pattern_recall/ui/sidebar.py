"""Sidebar UI renderer for Pattern Recall.

Renders the left sidebar with:
- Start / Peek / Recall / Reset controls
- One mode message describing what to do next

All rendering logic is encapsulated to keep the main app.py concise.
"""

import logging

import streamlit as st

from pattern_recall.model.message import MemorizeMessage, ReadyMessage, RecallMessage
from pattern_recall.ui.actions import peek_action, recall_action, reset_action, start_round_action
from pattern_recall.ui.context import RoundOutcome
from pattern_recall.ui.controller import GameController

logger = logging.getLogger(__name__)


class SidebarRenderer:
    """Renders the sidebar for one controller.

    Example:
        SidebarRenderer(controller=st.session_state.controller).render()
    """

    def __init__(self, controller: GameController) -> None:
        self.controller = controller

    def render(self) -> None:
        with st.sidebar:
            st.header("🎮 Controls")
            self._render_controls()
            st.divider()
            self._render_mode_message()

    def _render_controls(self) -> None:
        sm = self.controller.sm
        round_ctx = self.controller.context.round

        if sm.is_idle:
            if round_ctx.is_finished:
                label = "🔁 Play Again" if round_ctx.outcome.name == RoundOutcome.WON.name else "🔁 Retry"
                if st.button(label, key="btn_reset", type="primary", width="stretch"):
                    reset_action()
            elif st.button("▶️ Start", key="btn_start", type="primary", width="stretch"):
                start_round_action()
            return

        col_left, col_right = st.columns(2)
        with col_left:
            if sm.is_memorize:
                if st.button("🎯 Recall", key="btn_recall", type="primary", width="stretch"):
                    recall_action()
            elif st.button("👀 Peek", key="btn_peek", width="stretch", help="Show the path again (counted)"):
                peek_action()
        with col_right:
            if st.button("✖️ Reset", key="btn_reset", width="stretch"):
                reset_action()

    def _render_mode_message(self) -> None:
        controller = self.controller
        ctx = controller.context
        sm = controller.sm

        if sm.is_memorize:
            MemorizeMessage(peek_count=ctx.round.peek_count).display()
        elif sm.is_recall:
            RecallMessage(found=ctx.round.found_count, total=ctx.path_length).display()
        elif not ctx.round.is_finished:
            ReadyMessage(path_length=ctx.path_length).display()
