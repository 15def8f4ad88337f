"""Core foundation classes for board geometry and timing.

- Grid: Row-major index/coordinate conversion and 4-neighbourhood
- GridConfigError: Raised for unplayable grid/path configurations
- RoundTimer: Elapsed time with an injectable clock
"""

from pattern_recall.core.grid import Grid, GridConfigError
from pattern_recall.core.timer import RoundTimer, format_elapsed

__all__ = [
    "Grid",
    "GridConfigError",
    "RoundTimer",
    "format_elapsed",
]
