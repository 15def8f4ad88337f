"""Tile projection - What each board tile shows, derived from the round state.

Pure function of (mode, round): the board renderer never decides visibility
itself.
"""

from dataclasses import dataclass
from enum import Enum

from pattern_recall.core.grid import Grid
from pattern_recall.ui.context import GameMode, RoundContext, RoundOutcome


class TileState(Enum):
    DISABLED = "disabled"
    HIDDEN = "hidden"
    PATTERN = "pattern"
    SELECTED = "selected"
    WRONG = "wrong"


@dataclass(frozen=True)
class TileView:
    """Display state of one tile.

    Attributes:
        index: Cell index (y * width + x)
        x, y: Grid coordinates
        state: What the tile shows
        clickable: True only for unselected tiles during recall
    """

    index: int
    x: int
    y: int
    state: TileState
    clickable: bool = False


def tile_state(index: int, mode: GameMode, round_ctx: RoundContext) -> TileState:
    """State of a single tile.

    - No round: DISABLED
    - MEMORIZE: pattern tiles PATTERN, rest HIDDEN
    - RECALL: selected tiles SELECTED, rest HIDDEN
    - Finished round, LOST: pattern revealed, wrong tile WRONG
    - Finished round, WON: selected tiles SELECTED
    """
    pattern = round_ctx.pattern
    if pattern is None:
        return TileState.DISABLED

    if mode == GameMode.MEMORIZE:
        return TileState.PATTERN if index in pattern else TileState.HIDDEN

    if mode == GameMode.RECALL:
        return TileState.SELECTED if index in round_ctx.selected else TileState.HIDDEN

    if round_ctx.outcome == RoundOutcome.LOST:
        if index == round_ctx.wrong_cell:
            return TileState.WRONG
        return TileState.PATTERN if index in pattern else TileState.DISABLED

    if round_ctx.outcome == RoundOutcome.WON:
        return TileState.SELECTED if index in round_ctx.selected else TileState.DISABLED

    return TileState.DISABLED


def project_tiles(mode: GameMode, round_ctx: RoundContext, width: int, height: int) -> list[TileView]:
    """Project the round onto every tile, in index order."""
    grid = Grid(width=width, height=height)
    views = []
    for index in range(grid.cell_count):
        x, y = grid.coords(index)
        state = tile_state(index=index, mode=mode, round_ctx=round_ctx)
        views.append(
            TileView(
                index=index,
                x=x,
                y=y,
                state=state,
                clickable=mode == GameMode.RECALL and state == TileState.HIDDEN,
            )
        )
    return views
