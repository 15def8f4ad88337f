"""Configuration constants for Pattern Recall.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    GridConfig: Board dimensions and path length
    GeneratorConfig: Path generation search budget and selection parameters
    TimerConfig: Round timer display settings
    StyleConfig: Tile symbols and colors
    ChartConfig: Result chart rendering dimensions
"""


class AppConfig:
    """UI application settings."""

    TITLE = "Pattern Recall"
    ICON = "🧠"
    LAYOUT = "wide"


class GridConfig:
    """Board dimensions and path length."""

    WIDTH = 12  # Tiles per row
    HEIGHT = 8  # Rows
    PATH_LENGTH = 36  # Tiles the player has to memorize

    CELL_COUNT = WIDTH * HEIGHT

    # 4-neighbourhood as (dx, dy): up, down, left, right
    DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


assert 0 < GridConfig.PATH_LENGTH <= GridConfig.CELL_COUNT, "Path must fit on the grid"


class GeneratorConfig:
    """Path generation search budget and selection parameters."""

    # Whole-walk restarts before falling back to the snake path
    MAX_ATTEMPTS = 200

    # Backtracks allowed within a single attempt
    MAX_BACKTRACKS = 1000

    # Next tile is drawn uniformly from the best TOP_K scored candidates
    TOP_K = 3

    # Zero-score candidates are kept once the path is this close to its target length
    NEAR_COMPLETION_SLACK = 2


assert GeneratorConfig.TOP_K >= 1
assert GeneratorConfig.MAX_ATTEMPTS >= 1


class TimerConfig:
    """Round timer display settings."""

    REFRESH_SECONDS = 1.0  # Status bar clock refresh interval
    EMPTY_DISPLAY = "00:00"


class StyleConfig:
    """Tile symbols and colors."""

    TILE_SYMBOLS = {
        "disabled": "▫️",
        "hidden": "⬛",
        "pattern": "🟩",
        "selected": "✅",
        "wrong": "❌",
    }

    STATUS_LABELS = {
        "idle": "READY",
        "memorize": "MEMORIZE",
        "recall": "RECALL",
        "won": "CLEARED",
        "lost": "FAILED",
    }

    PATH_COLOR = "#2ecc71"
    SELECTED_COLOR = "#3498db"
    WRONG_COLOR = "#e74c3c"
    START_COLOR = "#f1c40f"
    EMPTY_COLOR = "#1e1e2e"


class ChartConfig:
    """Result chart rendering dimensions."""

    CELL_PX = 48  # Pixel size of one grid cell in the result chart
    MARGIN_PX = 20
    ORDER_FONT_SIZE = 11
