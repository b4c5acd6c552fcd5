"""tile-astar - A* pathfinding over weighted 2D tile grids."""
from __future__ import annotations

from tile_astar.types import (
    Coord,
    Heuristic,
    InvalidArgumentError,
    InvalidStateError,
    OutOfBoundsError,
)
from tile_astar.cell import Cell
from tile_astar.grid import TileGrid
from tile_astar.heuristics import HEURISTICS, chebyshev, diagonal, euclidean, manhattan, zero
from tile_astar.pathfind import find_path, path_cost, step_cost

__all__ = [
    "Coord",
    "Heuristic",
    "InvalidArgumentError",
    "InvalidStateError",
    "OutOfBoundsError",
    "Cell",
    "TileGrid",
    "HEURISTICS",
    "chebyshev",
    "diagonal",
    "euclidean",
    "manhattan",
    "zero",
    "find_path",
    "path_cost",
    "step_cost",
]
