"""Integration tests — barrier bands and hazard patches on a large grid."""
from __future__ import annotations

import math

import pytest

from tile_astar import HEURISTICS, TileGrid, find_path, path_cost, step_cost


def build_corridor_grid() -> TileGrid:
    grid = TileGrid(40, 40)
    grid.fill_rect((0, 10), (19, 11), reachable=False)
    grid.fill_rect((30, 0), (30, 14), reachable=False)
    grid.fill_rect((18, 21), (21, 29), reachable=False)
    grid.fill_rect((32, 21), (34, 27), reachable=False)
    for row, col, multiplier in [
        (20, 15, 1.2), (20, 16, 1.2), (20, 17, 1.5),
        (21, 16, 1.2), (21, 17, 1.1), (22, 17, 1.25),
    ]:
        grid.set_cost_multiplier(row, col, multiplier)
    grid.set_start(3, 2)
    grid.set_target(9, 26)
    return grid


class TestCorridorLayout:
    def test_path_found(self) -> None:
        grid = build_corridor_grid()
        path = find_path(grid)
        assert path[0] == (3, 2)
        assert path[-1] == (9, 26)

    def test_path_goes_below_barrier_band(self) -> None:
        grid = build_corridor_grid()
        path = find_path(grid)
        crossings = [(r, c) for r, c in path if c in (10, 11)]
        assert crossings
        assert all(r >= 20 for r, _ in crossings)

    def test_path_is_valid(self) -> None:
        grid = build_corridor_grid()
        path = find_path(grid)
        for a, b in zip(path, path[1:]):
            assert max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1
            assert grid.cell_at(*b).reachable
            assert grid.cell_at(a[0], b[1]).reachable
            assert grid.cell_at(b[0], a[1]).reachable

    def test_cost_accounting(self) -> None:
        grid = build_corridor_grid()
        path = find_path(grid)
        total = sum(step_cost(grid, a, b) for a, b in zip(path, path[1:]))
        assert grid.target_cell.g == pytest.approx(total)
        assert path_cost(grid, path) == pytest.approx(total)

    def test_cost_at_least_straight_line_estimate(self) -> None:
        grid = build_corridor_grid()
        path = find_path(grid)
        dx, dy = abs(26 - 2), abs(9 - 3)
        octile = dx + dy + (math.sqrt(2) - 2) * min(dx, dy)
        assert path_cost(grid, path) > octile

    @pytest.mark.parametrize("name", ["diagonal", "chebyshev", "zero"])
    def test_admissible_heuristics_agree_on_cost(self, name: str) -> None:
        grid = build_corridor_grid()
        reference = path_cost(grid, find_path(grid, HEURISTICS["zero"]))
        cost = path_cost(grid, find_path(grid, HEURISTICS[name]))
        assert cost == pytest.approx(reference)

    def test_blocking_the_gap_leaves_no_path(self) -> None:
        grid = build_corridor_grid()
        grid.fill_rect((20, 10), (39, 11), reachable=False)
        assert find_path(grid) == []
