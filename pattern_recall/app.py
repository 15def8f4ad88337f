"""Pattern Recall - Memorize a path of tiles, then rebuild it from memory.

A random continuous path is revealed on a 12x8 board. Study it, hide it,
then click every tile of the path. One wrong tile ends the round.

Run: streamlit run pattern_recall/app.py
"""

import logging
import traceback

import streamlit as st

from pattern_recall.constants import AppConfig
from pattern_recall.model.message import RoundLostMessage, RoundWonMessage
from pattern_recall.ui import (
    BoardRenderer,
    GameController,
    PathChart,
    SidebarRenderer,
    project_tiles,
    render_status_bar,
    select_tile_action,
    show_pending_toast,
)
from pattern_recall.ui.context import RoundOutcome

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with one game controller per browser session."""
    if "controller" not in st.session_state:
        st.session_state.controller = GameController()
        logger.info("[UI] New session controller created")


def reset_ui_state() -> None:
    """Reset the game to READY after an error.

    Replaces the controller (state machine, context, timer). The generator
    is kept so a seeded session stays reproducible.
    """
    logger.info("Resetting UI state due to error recovery")
    old = st.session_state.get("controller")
    generator = old.generator if old is not None else None
    st.session_state.controller = GameController(generator=generator)
    logger.info("UI state reset complete")


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(f"{AppConfig.ICON} {AppConfig.TITLE}")

    try:
        _run_app_ui()
    except Exception as e:
        # Log full traceback for debugging
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        reset_ui_state()

        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Main UI rendering logic, separated for error handling."""
    controller: GameController = st.session_state.controller
    ctx = controller.context
    logger.info(f"[MAIN] Render cycle starting: state={controller.sm.get_state_name()}")

    show_pending_toast()

    SidebarRenderer(controller=controller).render()
    render_status_bar(controller)

    tiles = project_tiles(mode=ctx.mode, round_ctx=ctx.round, width=ctx.width, height=ctx.height)
    BoardRenderer(width=ctx.width, on_click=select_tile_action).render(tiles=tiles)

    if ctx.round.is_finished:
        _render_round_result()


def _render_round_result() -> None:
    """Result message and path chart once a round has ended."""
    controller: GameController = st.session_state.controller
    ctx = controller.context
    round_ctx = ctx.round

    st.divider()
    if round_ctx.outcome.name == RoundOutcome.WON.name:
        RoundWonMessage(elapsed=controller.elapsed_label, peek_count=round_ctx.peek_count).display()
    else:
        RoundLostMessage(
            elapsed=controller.elapsed_label,
            found=round_ctx.found_count,
            total=ctx.path_length,
        ).display()

    chart = PathChart.for_grid(grid_width=ctx.width, grid_height=ctx.height)
    fig = chart.render_result(
        pattern=round_ctx.pattern,
        selected=round_ctx.selected,
        wrong_cell=round_ctx.wrong_cell,
        title="Path order",
    )
    st.plotly_chart(fig, key="result_chart")


if __name__ == "__main__":
    main()
