"""Cell - one grid position plus its search bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass

from tile_astar.types import Coord


@dataclass(slots=True)
class Cell:
    """A single tile of a TileGrid.

    ``row``, ``col``, ``reachable`` and ``multiplier`` describe the tile.
    ``g``, ``h``, ``f`` and ``parent`` are written by ``find_path`` and only
    mean something after a search. ``parent`` is the coordinate of the
    predecessor cell, resolved through the owning grid.
    """

    row: int
    col: int
    reachable: bool = True
    multiplier: float = 1.0
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    parent: Coord | None = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def reset(self) -> None:
        self.g = 0.0
        self.h = 0.0
        self.f = 0.0
        self.parent = None
