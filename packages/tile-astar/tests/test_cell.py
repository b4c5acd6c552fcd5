"""Tests for Cell defaults and search-field reset."""
from __future__ import annotations

from tile_astar.cell import Cell


class TestCellDefaults:
    def test_position(self) -> None:
        cell = Cell(3, 7)
        assert cell.row == 3
        assert cell.col == 7
        assert cell.coord == (3, 7)

    def test_static_defaults(self) -> None:
        cell = Cell(0, 0)
        assert cell.reachable is True
        assert cell.multiplier == 1.0

    def test_search_defaults(self) -> None:
        cell = Cell(0, 0)
        assert (cell.g, cell.h, cell.f) == (0.0, 0.0, 0.0)
        assert cell.parent is None


class TestCellReset:
    def test_reset_clears_search_fields(self) -> None:
        cell = Cell(1, 1)
        cell.g, cell.h, cell.f = 2.0, 3.0, 5.0
        cell.parent = (0, 0)
        cell.reset()
        assert (cell.g, cell.h, cell.f) == (0.0, 0.0, 0.0)
        assert cell.parent is None

    def test_reset_keeps_static_fields(self) -> None:
        cell = Cell(1, 1, reachable=False, multiplier=2.5)
        cell.g = 4.0
        cell.reset()
        assert cell.reachable is False
        assert cell.multiplier == 2.5
        assert cell.coord == (1, 1)
