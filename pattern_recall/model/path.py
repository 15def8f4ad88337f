"""PatternPath - The immutable path a round asks the player to memorize.

Path invariants:
- Every consecutive pair of cells is orthogonally adjacent.
- No two non-consecutive cells are orthogonally adjacent ("touching").

Search-produced paths satisfy both. The snake fallback satisfies only the
first; cells in neighbouring rows may touch.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator

from pattern_recall.core.grid import Grid


@dataclass(frozen=True)
class PathViolation:
    """Two path positions that break an invariant.

    Attributes:
        first: Position in the path (not the cell index)
        second: Position in the path, always > first
        reason: "gap" (consecutive cells not adjacent),
                "touch" (non-consecutive cells adjacent) or "duplicate"
    """

    first: int
    second: int
    reason: str


def adjacency_violations(cells: tuple[int, ...] | list[int], grid: Grid) -> list[PathViolation]:
    """Consecutive pairs that are not orthogonal neighbours."""
    return [
        PathViolation(first=i, second=i + 1, reason="gap")
        for i in range(len(cells) - 1)
        if not grid.are_adjacent(cells[i], cells[i + 1])
    ]


def touching_violations(cells: tuple[int, ...] | list[int], grid: Grid) -> list[PathViolation]:
    """Non-consecutive pairs that touch orthogonally."""
    position = {cell: i for i, cell in enumerate(cells)}
    violations = []
    for i, cell in enumerate(cells):
        for neighbor in grid.neighbors(cell):
            j = position.get(neighbor)
            if j is not None and j > i + 1:
                violations.append(PathViolation(first=i, second=j, reason="touch"))
    return violations


def duplicate_violations(cells: tuple[int, ...] | list[int]) -> list[PathViolation]:
    """Repeated cells, reported against their first occurrence."""
    first_seen: dict[int, int] = {}
    violations = []
    for i, cell in enumerate(cells):
        if cell in first_seen:
            violations.append(PathViolation(first=first_seen[cell], second=i, reason="duplicate"))
        else:
            first_seen[cell] = i
    return violations


@dataclass(frozen=True)
class PatternPath:
    """Ordered, non-repeating cells of a generated path plus generation metadata.

    Attributes:
        cells: Cell indices in walk order
        width: Grid width the path was generated for
        height: Grid height the path was generated for
        is_fallback: True if the search gave up and the snake path was used
        attempts: Search attempts consumed (max_attempts when falling back)
    """

    cells: tuple[int, ...]
    width: int
    height: int
    is_fallback: bool = False
    attempts: int = 1

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self.cell_set

    @cached_property
    def cell_set(self) -> frozenset[int]:
        return frozenset(self.cells)

    @property
    def grid(self) -> Grid:
        return Grid(width=self.width, height=self.height)

    @property
    def start(self) -> int:
        return self.cells[0]

    @property
    def end(self) -> int:
        return self.cells[-1]

    def coordinates(self) -> list[tuple[int, int]]:
        """Cells as (x, y) in walk order."""
        grid = self.grid
        return [grid.coords(cell) for cell in self.cells]

    def violations(self) -> list[PathViolation]:
        """All invariant violations (empty for a clean search-produced path)."""
        grid = self.grid
        return (
            duplicate_violations(self.cells)
            + adjacency_violations(self.cells, grid)
            + touching_violations(self.cells, grid)
        )

    @property
    def is_unambiguous(self) -> bool:
        return not self.violations()
