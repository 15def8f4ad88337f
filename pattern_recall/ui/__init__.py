"""User interface components for Pattern Recall.

File Structure (layout-based naming):
- sidebar.py: Round controls and the current mode message
- board.py: Status bar (status, clock, progress, peeks) and the tile grid
- result_chart.py: Plotly path-order chart after a round

Core Components:
- state_machine.py: GameStateMachine (3 states) + TransitionLogListener
- context.py: GameContext and its sub-contexts
- controller.py: GameController (round lifecycle, tile selection)
- tile_view.py: Pure projection of the round onto board tiles
- actions.py: Button action functions (start, peek, recall, reset, tile click)
"""

from pattern_recall.ui.actions import (
    peek_action,
    recall_action,
    reset_action,
    select_tile_action,
    show_pending_toast,
    start_round_action,
)
from pattern_recall.ui.board import BoardRenderer, render_status_bar
from pattern_recall.ui.context import GameContext, GameMode, RoundContext, RoundOutcome
from pattern_recall.ui.controller import GameController, TileSelection
from pattern_recall.ui.result_chart import PathChart
from pattern_recall.ui.sidebar import SidebarRenderer
from pattern_recall.ui.state_machine import GameStateMachine, TransitionLogListener
from pattern_recall.ui.tile_view import TileState, TileView, project_tiles

__all__ = [
    "GameStateMachine",
    "GameContext",
    "GameMode",
    "RoundContext",
    "RoundOutcome",
    "TransitionLogListener",
    "GameController",
    "TileSelection",
    "TileState",
    "TileView",
    "project_tiles",
    "BoardRenderer",
    "render_status_bar",
    "SidebarRenderer",
    "PathChart",
    "peek_action",
    "recall_action",
    "reset_action",
    "select_tile_action",
    "show_pending_toast",
    "start_round_action",
]
