"""Tests for the bundled distance heuristics."""
from __future__ import annotations

import math

import pytest

from tile_astar.cell import Cell
from tile_astar.heuristics import (
    HEURISTICS,
    chebyshev,
    diagonal,
    euclidean,
    manhattan,
    zero,
)


class TestDiagonal:
    def test_same_cell_is_zero(self) -> None:
        assert diagonal(Cell(3, 3), Cell(3, 3)) == 0.0

    def test_straight_line(self) -> None:
        assert diagonal(Cell(0, 0), Cell(0, 4)) == pytest.approx(4.0)
        assert diagonal(Cell(0, 0), Cell(4, 0)) == pytest.approx(4.0)

    def test_pure_diagonal(self) -> None:
        assert diagonal(Cell(0, 0), Cell(4, 4)) == pytest.approx(4 * math.sqrt(2))

    def test_mixed(self) -> None:
        # 2 diagonal steps + 3 straight steps
        assert diagonal(Cell(1, 1), Cell(3, 6)) == pytest.approx(2 * math.sqrt(2) + 3)

    def test_symmetric(self) -> None:
        a, b = Cell(2, 7), Cell(5, 1)
        assert diagonal(a, b) == pytest.approx(diagonal(b, a))


class TestOtherHeuristics:
    def test_manhattan(self) -> None:
        assert manhattan(Cell(1, 1), Cell(3, 6)) == 7.0

    def test_euclidean(self) -> None:
        assert euclidean(Cell(0, 0), Cell(3, 4)) == pytest.approx(5.0)

    def test_chebyshev(self) -> None:
        assert chebyshev(Cell(1, 1), Cell(3, 6)) == 5.0

    def test_zero(self) -> None:
        assert zero(Cell(0, 0), Cell(9, 9)) == 0.0

    def test_chebyshev_below_diagonal(self) -> None:
        a, b = Cell(0, 0), Cell(5, 8)
        assert chebyshev(a, b) <= diagonal(a, b)


class TestRegistry:
    def test_names(self) -> None:
        assert set(HEURISTICS) == {"diagonal", "manhattan", "euclidean", "chebyshev", "zero"}

    def test_lookup(self) -> None:
        assert HEURISTICS["diagonal"] is diagonal

    @pytest.mark.parametrize("name", sorted(HEURISTICS))
    def test_non_negative(self, name: str) -> None:
        fn = HEURISTICS[name]
        assert fn(Cell(4, 0), Cell(0, 7)) >= 0.0
