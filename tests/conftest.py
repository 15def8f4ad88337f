"""Shared pytest fixtures for pattern_recall tests.

Provides a controllable clock, a stub generator returning a fixed pattern,
and reusable controllers for all pattern_recall tests.

FIXED PATTERN:
    A 5-tile horizontal run in row 1 of the default 12x8 board:
    (1,1) (2,1) (3,1) (4,1) (5,1) -> indices 13, 14, 15, 16, 17.
    Index 0 (top-left corner) is never part of it and serves as the wrong tile.
"""

import pytest

from pattern_recall.constants import GridConfig
from pattern_recall.generators.path_generator import PathGenerator
from pattern_recall.model.path import PatternPath
from pattern_recall.ui.controller import GameController

FIXED_CELLS = (13, 14, 15, 16, 17)
WRONG_CELL = 0


# =============================================================================
# TEST DOUBLES
# =============================================================================


class FakeClock:
    """Manually advanced time source for RoundTimer."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubGenerator:
    """Generator double that always returns the same pattern and counts calls."""

    def __init__(self, pattern: PatternPath) -> None:
        self.pattern = pattern
        self.calls: list[tuple[int, int, int]] = []

    def generate_pattern(self, width: int, height: int, length: int) -> PatternPath:
        self.calls.append((width, height, length))
        return self.pattern


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fixed_pattern() -> PatternPath:
    return PatternPath(cells=FIXED_CELLS, width=GridConfig.WIDTH, height=GridConfig.HEIGHT)


@pytest.fixture
def stub_generator(fixed_pattern: PatternPath) -> StubGenerator:
    return StubGenerator(pattern=fixed_pattern)


@pytest.fixture
def controller(stub_generator: StubGenerator, clock: FakeClock) -> GameController:
    """Controller in READY with the fixed 5-tile pattern and a fake clock."""
    return GameController(
        generator=stub_generator,  # type: ignore[arg-type]
        clock=clock,
        path_length=len(FIXED_CELLS),
    )


@pytest.fixture
def seeded_generator() -> PathGenerator:
    """Reproducible generator with the default search budget."""
    return PathGenerator(seed=1234)


@pytest.fixture
def small_budget_generator() -> PathGenerator:
    """Reproducible generator that gives up quickly (for impossible boards)."""
    return PathGenerator(seed=99, max_attempts=5, max_backtracks=50)
