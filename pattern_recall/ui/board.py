"""Board UI renderer for Pattern Recall.

Renders the main area above and on the board:
- Status bar: status line, round clock, progress and peek count
- Tile grid as a block of Streamlit buttons, one column per grid column

Tile symbols and clickability come from the tile projection; the renderer
itself holds no game rules.
"""

import logging
from collections.abc import Callable

import streamlit as st

from pattern_recall.constants import StyleConfig, TimerConfig
from pattern_recall.core.timer import RoundTimer
from pattern_recall.ui.controller import GameController
from pattern_recall.ui.tile_view import TileView

logger = logging.getLogger(__name__)


# =============================================================================
# STATUS BAR
# =============================================================================


def _render_clock(timer: RoundTimer) -> None:
    st.metric("Time", timer.display)


# Re-renders only the clock while a round is running
_render_live_clock = st.fragment(run_every=TimerConfig.REFRESH_SECONDS)(_render_clock)


def render_status_bar(controller: GameController) -> None:
    """Status line plus clock, progress and peek metrics."""
    col_status, col_time, col_progress, col_peeks = st.columns([2, 1, 1, 1])
    with col_status:
        st.markdown(f"### {controller.status_label}")
    with col_time:
        timer = controller.context.timer
        if timer.is_running:
            _render_live_clock(timer)
        else:
            _render_clock(timer)
    with col_progress:
        st.metric("Found", controller.progress_label)
    with col_peeks:
        st.metric("Peeks", controller.peek_count)


# =============================================================================
# TILE GRID
# =============================================================================


class BoardRenderer:
    """Renders the tile board.

    Example:
        renderer = BoardRenderer(width=12, on_click=select_tile_action)
        renderer.render(tiles=project_tiles(...))
    """

    def __init__(self, width: int, on_click: Callable[[int], None]) -> None:
        """Initialize board renderer.

        Args:
            width: Tiles per row
            on_click: Called with the tile index when a clickable tile is pressed
        """
        self.width = width
        self.on_click = on_click

    def render(self, tiles: list[TileView]) -> None:
        """Render all tiles, row by row."""
        if len(tiles) % self.width != 0:
            raise ValueError(f"{len(tiles)} tiles do not fill rows of {self.width}")

        for row_start in range(0, len(tiles), self.width):
            self._render_row(tiles[row_start : row_start + self.width])

    def _render_row(self, row: list[TileView]) -> None:
        columns = st.columns(self.width, gap="small")
        for column, tile in zip(columns, row):
            with column:
                self._render_tile(tile)

    def _render_tile(self, tile: TileView) -> None:
        label = StyleConfig.TILE_SYMBOLS[tile.state.value]
        if st.button(
            label,
            key=f"tile_{tile.index}",
            width="stretch",
            disabled=not tile.clickable,
            help=f"({tile.x + 1}, {tile.y + 1})" if tile.clickable else None,
        ):
            logger.info(f"[UI] Tile {tile.index} clicked at ({tile.x}, {tile.y})")
            self.on_click(tile.index)
