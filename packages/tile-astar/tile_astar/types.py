"""Shared type aliases and errors for tile-astar."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

# (row, col)
Coord = tuple[int, int]


class OutOfBoundsError(IndexError):
    """Raised when a row/column pair falls outside the grid."""

    def __init__(self, row: int, col: int, num_rows: int, num_cols: int) -> None:
        self.row = row
        self.col = col
        super().__init__(
            f"({row}, {col}) out of bounds for {num_rows}x{num_cols} grid"
        )


class InvalidArgumentError(ValueError):
    """Raised on a non-positive cost multiplier or grid dimension."""


class InvalidStateError(RuntimeError):
    """Raised when a search is requested on a grid that cannot be searched."""


if TYPE_CHECKING:
    from tile_astar.cell import Cell

# (node, target) -> estimated remaining cost, >= 0
Heuristic = Callable[["Cell", "Cell"], float]
