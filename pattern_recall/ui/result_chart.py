"""PathChart - Plotly rendering of a finished round.

Renders the round result showing:
- The board as a heatmap (path cells, found cells, wrong cell)
- The path traced in generation order with step numbers
- The start cell marker
"""

import logging
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from pattern_recall.constants import ChartConfig, StyleConfig
from pattern_recall.model.path import PatternPath

logger = logging.getLogger(__name__)

# Heatmap cell categories
EMPTY, PATH, SELECTED, WRONG = 0, 1, 2, 3


def build_cell_matrix(
    pattern: PatternPath,
    selected: list[int],
    wrong_cell: Optional[int] = None,
) -> np.ndarray:
    """Category matrix of shape (height, width) for the heatmap.

    Selected overrides path; the wrong cell overrides everything.
    """
    matrix = np.full((pattern.height, pattern.width), EMPTY, dtype=int)
    grid = pattern.grid
    for index in pattern.cells:
        x, y = grid.coords(index)
        matrix[y, x] = PATH
    for index in selected:
        x, y = grid.coords(index)
        matrix[y, x] = SELECTED
    if wrong_cell is not None:
        x, y = grid.coords(wrong_cell)
        matrix[y, x] = WRONG
    return matrix


class PathChart:
    """Renders a finished round using Plotly.

    Example:
        chart = PathChart(width=12 * 48, height=8 * 48)
        fig = chart.render_result(pattern=pattern, selected=selected)
        st.plotly_chart(fig)
    """

    def __init__(
        self,
        width: int,
        height: int,
    ) -> None:
        """Initialize path chart renderer.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.width = width
        self.height = height

    @classmethod
    def for_grid(cls, grid_width: int, grid_height: int) -> "PathChart":
        """Chart sized so every grid cell is ChartConfig.CELL_PX square."""
        margin = 2 * ChartConfig.MARGIN_PX
        return cls(
            width=grid_width * ChartConfig.CELL_PX + margin,
            height=grid_height * ChartConfig.CELL_PX + margin,
        )

    def render_result(
        self,
        pattern: PatternPath,
        selected: list[int],
        wrong_cell: Optional[int] = None,
        title: Optional[str] = None,
    ) -> go.Figure:
        """Render the board and the path order for a finished round.

        Args:
            pattern: The round's pattern
            selected: Cells the player found
            wrong_cell: Cell that ended a lost round
            title: Optional chart title

        Returns:
            Plotly Figure object.
        """
        if len(pattern) == 0:
            raise ValueError("Pattern must have cells to render")

        matrix = build_cell_matrix(pattern=pattern, selected=selected, wrong_cell=wrong_cell)
        coords = np.array(pattern.coordinates())
        xs, ys = coords[:, 0], coords[:, 1]

        fig = go.Figure()
        fig.add_trace(
            go.Heatmap(
                z=matrix,
                zmin=EMPTY,
                zmax=WRONG,
                colorscale=self._colorscale(),
                showscale=False,
                xgap=2,
                ygap=2,
                hoverinfo="skip",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines+text",
                line={"color": "white", "width": 2},
                text=[str(step + 1) for step in range(len(pattern))],
                textfont={"size": ChartConfig.ORDER_FONT_SIZE, "color": "white"},
                hovertemplate="Step %{text}<br>(%{x}, %{y})<extra></extra>",
                name="Path order",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=[xs[0]],
                y=[ys[0]],
                mode="markers",
                marker={"color": StyleConfig.START_COLOR, "size": 14, "symbol": "star"},
                hoverinfo="skip",
                name="Start",
            )
        )

        fig.update_xaxes(visible=False, range=[-0.5, pattern.width - 0.5])
        fig.update_yaxes(visible=False, range=[pattern.height - 0.5, -0.5], scaleanchor="x")
        fig.update_layout(
            title=title,
            width=self.width,
            height=self.height,
            margin={m: ChartConfig.MARGIN_PX for m in ("l", "r", "t", "b")},
            showlegend=False,
            plot_bgcolor=StyleConfig.EMPTY_COLOR,
        )
        logger.debug(f"[UI] Rendered result chart: {len(pattern)} cells, {len(selected)} found")
        return fig

    @staticmethod
    def _colorscale() -> list[list]:
        """Discrete colorscale mapping EMPTY..WRONG to fixed colors."""
        colors = [StyleConfig.EMPTY_COLOR, StyleConfig.PATH_COLOR, StyleConfig.SELECTED_COLOR, StyleConfig.WRONG_COLOR]
        steps = len(colors)
        scale = []
        for i, color in enumerate(colors):
            scale.append([i / steps, color])
            scale.append([(i + 1) / steps, color])
        return scale
