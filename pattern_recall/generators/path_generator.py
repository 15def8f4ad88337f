"""PathGenerator - Random continuous paths that never touch themselves.

Generates the pattern of a round as a self-avoiding walk over the grid:

**Search (one attempt):**
    1. Start on a random interior cell (outer ring excluded, more room to branch).
    2. Extend from the last cell to a valid neighbour: in bounds, unvisited, and
       not orthogonally adjacent to any path cell except the current last one.
    3. With several valid neighbours, score each by its own valid-neighbour count
       one step ahead. Zero-score candidates are dropped unless the path is within
       NEAR_COMPLETION_SLACK cells of its target. The next cell is drawn uniformly
       from the best TOP_K survivors.
    4. Dead end: pop the last cell (backtrack). A dead end at the start cell, or
       exceeding MAX_BACKTRACKS, fails the attempt.

**Retries and fallback:**
    Up to MAX_ATTEMPTS attempts with a fresh start. When all fail, a boustrophedon
    ("snake") path from (0, 0) is returned. Its consecutive cells are adjacent but
    neighbouring rows touch, so it is flagged ``is_fallback``.

Configuration: See GeneratorConfig in constants.py for tunable parameters.
"""

import logging
import random
from typing import Optional

from pattern_recall.constants import GeneratorConfig
from pattern_recall.core.grid import Grid
from pattern_recall.model.path import PatternPath

logger = logging.getLogger(__name__)


class PathGenerator:
    """Generates round patterns with bounded retries and a deterministic fallback.

    Example:
        generator = PathGenerator(seed=7)
        cells = generator.generate(width=12, height=8, length=36)
        pattern = generator.generate_pattern(width=12, height=8, length=36)
        pattern.is_fallback  # False unless the search budget was exhausted

    Pass ``rng`` (or ``seed``) to make generation reproducible.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        max_attempts: int = GeneratorConfig.MAX_ATTEMPTS,
        max_backtracks: int = GeneratorConfig.MAX_BACKTRACKS,
        top_k: int = GeneratorConfig.TOP_K,
        near_completion_slack: int = GeneratorConfig.NEAR_COMPLETION_SLACK,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        if max_attempts < 1 or max_backtracks < 0 or top_k < 1 or near_completion_slack < 0:
            raise ValueError(
                f"Invalid search budget: max_attempts={max_attempts}, max_backtracks={max_backtracks}, "
                f"top_k={top_k}, near_completion_slack={near_completion_slack}"
            )
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_attempts = max_attempts
        self.max_backtracks = max_backtracks
        self.top_k = top_k
        self.near_completion_slack = near_completion_slack

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def generate(self, width: int, height: int, length: int) -> list[int]:
        """Generate ``length`` distinct cell indices forming a path on a width x height grid.

        Raises:
            GridConfigError: non-positive dimensions or length, or length > width*height.
        """
        return list(self.generate_pattern(width=width, height=height, length=length).cells)

    def generate_pattern(self, width: int, height: int, length: int) -> PatternPath:
        """Generate a path and wrap it with fallback/attempt metadata."""
        grid = Grid(width=width, height=height)
        grid.validate_path_length(length)

        start_cells = grid.interior_cells() or list(range(grid.cell_count))
        for attempt in range(1, self.max_attempts + 1):
            path = self._attempt(grid=grid, length=length, start_cells=start_cells)
            if path is not None and len(path) == length:
                logger.info(f"[GEN] {width}x{height} path of {length} found on attempt {attempt}")
                return PatternPath(cells=tuple(path), width=width, height=height, attempts=attempt)

        logger.warning(
            f"[GEN] No {length}-cell path on {width}x{height} after {self.max_attempts} attempts, "
            "using snake fallback"
        )
        return PatternPath(
            cells=tuple(snake_path(grid=grid, length=length)),
            width=width,
            height=height,
            is_fallback=True,
            attempts=self.max_attempts,
        )

    # =========================================================================
    # SEARCH
    # =========================================================================

    def _attempt(self, grid: Grid, length: int, start_cells: list[int]) -> list[int] | None:
        """One randomized walk. Returns the path, or None if this attempt failed."""
        start = self.rng.choice(start_cells)
        path = [start]
        visited = {start}
        backtracks = 0

        while len(path) < length and backtracks < self.max_backtracks:
            neighbors = self.valid_neighbors(grid=grid, index=path[-1], visited=visited)
            nxt = self._choose_next(grid=grid, candidates=neighbors, path=path, visited=visited, length=length)

            if nxt is None:
                if len(path) == 1:
                    return None
                visited.discard(path.pop())
                backtracks += 1
                continue

            path.append(nxt)
            visited.add(nxt)

        if len(path) < length:
            logger.debug(f"[GEN] Attempt gave up at {len(path)}/{length} after {backtracks} backtracks")
            return None
        return path

    @staticmethod
    def valid_neighbors(grid: Grid, index: int, visited: set[int]) -> list[int]:
        """Unvisited neighbours of ``index`` that would not create a loop.

        ``visited`` must hold exactly the current path cells, with ``index`` as
        the last one.
        """
        return [
            n
            for n in grid.neighbors(index)
            if n not in visited and not would_create_loop(grid=grid, candidate=n, last=index, visited=visited)
        ]

    def _choose_next(
        self,
        grid: Grid,
        candidates: list[int],
        path: list[int],
        visited: set[int],
        length: int,
    ) -> int | None:
        """Pick the next cell by one-step lookahead, or None for a dead end."""
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        near_completion = length - len(path) <= self.near_completion_slack
        scored: list[tuple[int, int]] = []
        for candidate in candidates:
            visited.add(candidate)
            score = len(self.valid_neighbors(grid=grid, index=candidate, visited=visited))
            visited.discard(candidate)
            if score > 0 or near_completion:
                scored.append((candidate, score))

        if not scored:
            return None

        scored.sort(key=lambda item: item[1], reverse=True)
        top = scored[: min(self.top_k, len(scored))]
        return self.rng.choice(top)[0]


def would_create_loop(grid: Grid, candidate: int, last: int, visited: set[int]) -> bool:
    """True if ``candidate`` touches any path cell other than ``last``."""
    return any(n != last and n in visited for n in grid.neighbors(candidate))


def snake_path(grid: Grid, length: int) -> list[int]:
    """Boustrophedon path from (0, 0): left-to-right, down one row, right-to-left, ...

    Stops after ``length`` cells or when the grid is exhausted.
    """
    path: list[int] = []
    for y in range(grid.height):
        xs = range(grid.width) if y % 2 == 0 else range(grid.width - 1, -1, -1)
        for x in xs:
            if len(path) == length:
                return path
            path.append(grid.index(x, y))
    return path
