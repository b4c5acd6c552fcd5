"""TileGrid - fixed-size row/column grid of Cells with start and target."""
from __future__ import annotations

import math
from typing import Iterator

from tile_astar.cell import Cell
from tile_astar.types import Coord, InvalidArgumentError, OutOfBoundsError

_DIRS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def _check_multiplier(multiplier: float) -> None:
    # NaN fails every comparison, so test for the valid range.
    if not (multiplier > 0 and math.isfinite(multiplier)):
        raise InvalidArgumentError(f"multiplier must be finite and > 0, got {multiplier}")


class TileGrid:
    """Owns a rectangular array of Cells.

    Cells are created once and stored row-major. Configuration calls mutate
    their static attributes; ``find_path`` writes their search fields.
    """

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows <= 0 or num_cols <= 0:
            raise InvalidArgumentError(
                f"grid dimensions must be > 0, got {num_rows}x{num_cols}"
            )
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._cells: list[Cell] = [
            Cell(row, col) for row in range(num_rows) for col in range(num_cols)
        ]
        self._start: Coord | None = None
        self._target: Coord | None = None

    # --- Properties ---

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def start(self) -> Coord | None:
        return self._start

    @property
    def target(self) -> Coord | None:
        return self._target

    @property
    def start_cell(self) -> Cell | None:
        return None if self._start is None else self.cell_at(*self._start)

    @property
    def target_cell(self) -> Cell | None:
        return None if self._target is None else self.cell_at(*self._target)

    # --- Access ---

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._num_rows and 0 <= col < self._num_cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._num_rows, self._num_cols)

    def cell_at(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row * self._num_cols + col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        return iter(self._cells)

    # --- Configuration ---

    def set_reachable(self, row: int, col: int, reachable: bool) -> None:
        self.cell_at(row, col).reachable = reachable

    def set_cost_multiplier(self, row: int, col: int, multiplier: float) -> None:
        _check_multiplier(multiplier)
        self.cell_at(row, col).multiplier = float(multiplier)

    def set_start(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._start = (row, col)

    def set_target(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._target = (row, col)

    def fill_rect(
        self,
        corner1: Coord,
        corner2: Coord,
        *,
        reachable: bool | None = None,
        multiplier: float | None = None,
    ) -> None:
        """Configure an inclusive rectangle of cells.

        Both corners are validated before any cell changes. Attributes left
        as None are not touched.
        """
        self._check_bounds(*corner1)
        self._check_bounds(*corner2)
        if multiplier is not None:
            _check_multiplier(multiplier)
        r1, c1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        r2, c2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for row in range(r1, r2 + 1):
            for col in range(c1, c2 + 1):
                cell = self._cells[row * self._num_cols + col]
                if reachable is not None:
                    cell.reachable = reachable
                if multiplier is not None:
                    cell.multiplier = float(multiplier)

    def clear(self) -> None:
        """Restore every cell to open terrain and unset start/target."""
        for cell in self._cells:
            cell.reachable = True
            cell.multiplier = 1.0
            cell.reset()
        self._start = None
        self._target = None

    def reset_search(self) -> None:
        for cell in self._cells:
            cell.reset()

    # --- Topology ---

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Cells in the 3x3 block around ``cell``, clipped to the grid."""
        result: list[Cell] = []
        for dr, dc in _DIRS:
            row, col = cell.row + dr, cell.col + dc
            if self.in_bounds(row, col):
                result.append(self._cells[row * self._num_cols + col])
        return result

    def is_diagonal_blocked(self, a: Cell, b: Cell) -> bool:
        """True if a step from ``a`` to ``b`` would cut an unreachable corner.

        The two flanking cells are (a.row, b.col) and (b.row, a.col); for an
        orthogonal step they coincide with ``a`` and ``b``.
        """
        return not (
            self.cell_at(a.row, b.col).reachable
            and self.cell_at(b.row, a.col).reachable
        )
