"""Distance estimates for find_path.

Every function takes ``(node, target)`` and returns a non-negative float.
Cells are addressed by row and column, so the column index plays the role
of x and the row index the role of y.

``diagonal`` (octile distance) is admissible and consistent for the unit
move costs of find_path when every multiplier is 1.0. Multipliers below 1.0
make it an overestimate, and the search then returns a good path rather than
a provably cheapest one.
"""
from __future__ import annotations

import math

from tile_astar.cell import Cell
from tile_astar.types import Heuristic


def _deltas(node: Cell, target: Cell) -> tuple[int, int]:
    return abs(node.col - target.col), abs(node.row - target.row)


def diagonal(node: Cell, target: Cell) -> float:
    dx, dy = _deltas(node, target)
    diag = min(dx, dy)
    straight = dx + dy
    return straight + (math.sqrt(2) - 2.0) * diag


def manhattan(node: Cell, target: Cell) -> float:
    dx, dy = _deltas(node, target)
    return float(dx + dy)


def euclidean(node: Cell, target: Cell) -> float:
    dx, dy = _deltas(node, target)
    return math.hypot(dx, dy)


def chebyshev(node: Cell, target: Cell) -> float:
    dx, dy = _deltas(node, target)
    return float(max(dx, dy))


def zero(node: Cell, target: Cell) -> float:
    """No estimate; the search degrades to Dijkstra."""
    return 0.0


HEURISTICS: dict[str, Heuristic] = {
    "diagonal": diagonal,
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
    "zero": zero,
}
