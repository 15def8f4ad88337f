"""Tests for pattern_recall core module.

Tests: Grid geometry, GridConfigError, RoundTimer, format_elapsed
"""

import pytest

from pattern_recall.core.grid import Grid, GridConfigError
from pattern_recall.core.timer import RoundTimer, format_elapsed
from tests.conftest import FakeClock


# =============================================================================
# GRID
# =============================================================================


class TestGridGeometry:
    """Index <-> coordinate conversion and neighbourhoods."""

    def test_index_and_coords_are_row_major(self) -> None:
        grid = Grid(width=12, height=8)
        assert grid.index(x=3, y=1) == 15
        assert grid.coords(15) == (3, 1)
        assert grid.coords(95) == (11, 7)

    def test_coords_roundtrip_for_every_cell(self) -> None:
        grid = Grid(width=5, height=3)
        for index in range(grid.cell_count):
            x, y = grid.coords(index)
            assert grid.index(x, y) == index

    def test_interior_neighbors_in_direction_order(self) -> None:
        """Neighbours come in up, down, left, right order."""
        grid = Grid(width=12, height=8)
        assert grid.neighbors(15) == (3, 27, 14, 16)

    def test_corner_has_two_neighbors(self) -> None:
        grid = Grid(width=12, height=8)
        assert set(grid.neighbors(0)) == {1, 12}
        assert set(grid.neighbors(95)) == {94, 83}

    def test_row_edges_do_not_wrap(self) -> None:
        """Last cell of a row is not a neighbour of the first cell of the next row."""
        grid = Grid(width=4, height=4)
        assert 4 not in grid.neighbors(3)
        assert 3 not in grid.neighbors(4)

    def test_manhattan_adjacency(self) -> None:
        grid = Grid(width=4, height=4)
        assert grid.are_adjacent(0, 1)
        assert grid.are_adjacent(0, 4)
        assert not grid.are_adjacent(0, 5)  # diagonal
        assert not grid.are_adjacent(3, 4)  # row wrap
        assert grid.manhattan_distance(0, 15) == 6

    def test_interior_cells_exclude_outer_ring(self) -> None:
        grid = Grid(width=4, height=4)
        assert grid.interior_cells() == [5, 6, 9, 10]

    def test_thin_grid_has_no_interior(self) -> None:
        assert Grid(width=2, height=8).interior_cells() == []
        assert Grid(width=12, height=1).interior_cells() == []

    def test_contains(self) -> None:
        grid = Grid(width=3, height=2)
        assert grid.contains(0)
        assert grid.contains(5)
        assert not grid.contains(6)
        assert not grid.contains(-1)


class TestGridValidation:
    """GridConfigError for boards that cannot hold a path."""

    @pytest.mark.parametrize("width,height", [(0, 8), (12, 0), (-1, 3)])
    def test_non_positive_dimensions_raise(self, width: int, height: int) -> None:
        with pytest.raises(GridConfigError):
            Grid(width=width, height=height)

    @pytest.mark.parametrize("length", [0, -5, 17])
    def test_invalid_path_length_raises(self, length: int) -> None:
        with pytest.raises(GridConfigError):
            Grid(width=4, height=4).validate_path_length(length)

    def test_full_grid_length_is_valid(self) -> None:
        Grid(width=4, height=4).validate_path_length(16)

    def test_grid_config_error_is_value_error(self) -> None:
        assert issubclass(GridConfigError, ValueError)


# =============================================================================
# TIMER
# =============================================================================


class TestFormatElapsed:
    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "00:00"), (5.9, "00:05"), (61, "01:01"), (599, "09:59"), (3600, "60:00"), (-3, "00:00")],
    )
    def test_format(self, seconds: float, expected: str) -> None:
        assert format_elapsed(seconds) == expected


class TestRoundTimer:
    """RoundTimer against a fake clock."""

    def test_not_started_shows_empty_display(self, clock: FakeClock) -> None:
        timer = RoundTimer(clock=clock)
        assert not timer.is_running
        assert timer.elapsed_seconds == 0.0
        assert timer.display == "00:00"

    def test_running_timer_follows_clock(self, clock: FakeClock) -> None:
        timer = RoundTimer(clock=clock)
        timer.start()
        clock.advance(75)
        assert timer.is_running
        assert timer.display == "01:15"

    def test_stop_freezes_elapsed(self, clock: FakeClock) -> None:
        timer = RoundTimer(clock=clock)
        timer.start()
        clock.advance(10)
        timer.stop()
        clock.advance(100)
        assert not timer.is_running
        assert timer.elapsed_seconds == 10
        assert timer.display == "00:10"

    def test_stop_twice_keeps_first_stop(self, clock: FakeClock) -> None:
        timer = RoundTimer(clock=clock)
        timer.start()
        clock.advance(3)
        timer.stop()
        clock.advance(3)
        timer.stop()
        assert timer.elapsed_seconds == 3

    def test_reset_returns_to_empty(self, clock: FakeClock) -> None:
        timer = RoundTimer(clock=clock)
        timer.start()
        clock.advance(42)
        timer.reset()
        assert timer.display == "00:00"
        assert not timer.is_running
