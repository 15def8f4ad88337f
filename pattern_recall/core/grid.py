"""Grid - Row-major tile geometry for the game board.

Cells are addressed by a single integer index ``idx = y * width + x``.
All adjacency in the game is 4-directional (Manhattan distance 1).
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator

from pattern_recall.constants import GridConfig


class GridConfigError(ValueError):
    """Grid dimensions or path length cannot describe a playable board."""


@dataclass(frozen=True)
class Grid:
    """Board dimensions with index/coordinate helpers.

    Example:
        grid = Grid(width=12, height=8)
        grid.index(x=3, y=1)  # 15
        list(grid.neighbors(15))  # [3, 27, 14, 16]
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise GridConfigError(f"Grid dimensions must be positive, got {self.width}x{self.height}")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        """Convert (x, y) to a cell index."""
        return y * self.width + x

    def coords(self, index: int) -> tuple[int, int]:
        """Convert a cell index to (x, y)."""
        return index % self.width, index // self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def contains(self, index: int) -> bool:
        return 0 <= index < self.cell_count

    def neighbors(self, index: int) -> tuple[int, ...]:
        """In-bounds 4-neighbours in up, down, left, right order."""
        return self._adjacency[index]

    @cached_property
    def _adjacency(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(self._iter_neighbors(i)) for i in range(self.cell_count))

    def _iter_neighbors(self, index: int) -> Iterator[int]:
        x, y = self.coords(index)
        for dx, dy in GridConfig.DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield self.index(nx, ny)

    def are_adjacent(self, a: int, b: int) -> bool:
        """True if two cells are orthogonal neighbours (Manhattan distance 1)."""
        return self.manhattan_distance(a, b) == 1

    def manhattan_distance(self, a: int, b: int) -> int:
        ax, ay = self.coords(a)
        bx, by = self.coords(b)
        return abs(ax - bx) + abs(ay - by)

    def interior_cells(self) -> list[int]:
        """Cells not on the outer ring. Empty when the grid is thinner than 3 in either direction."""
        return [self.index(x, y) for y in range(1, self.height - 1) for x in range(1, self.width - 1)]

    def validate_path_length(self, length: int) -> None:
        """Raise GridConfigError unless 0 < length <= cell_count."""
        if length <= 0:
            raise GridConfigError(f"Path length must be positive, got {length}")
        if length > self.cell_count:
            raise GridConfigError(
                f"Path length {length} exceeds the {self.width}x{self.height} grid ({self.cell_count} cells)"
            )
