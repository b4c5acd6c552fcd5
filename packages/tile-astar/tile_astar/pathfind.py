"""A* pathfinding over a TileGrid."""
from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING

from tile_astar.heuristics import diagonal
from tile_astar.types import Coord, Heuristic, InvalidStateError

if TYPE_CHECKING:
    from tile_astar.cell import Cell
    from tile_astar.grid import TileGrid

logger = logging.getLogger(__name__)

_SQRT2 = math.sqrt(2)

_OPEN = 1
_CLOSED = 2


def step_cost(grid: TileGrid, a: Coord, b: Coord) -> float:
    """Cost of moving from ``a`` into the adjacent cell ``b``."""
    base = 1.0 if a[0] == b[0] or a[1] == b[1] else _SQRT2
    return base * grid.cell_at(*b).multiplier


def path_cost(grid: TileGrid, path: list[Coord]) -> float:
    return sum(step_cost(grid, a, b) for a, b in zip(path, path[1:]))


def _check_endpoints(grid: TileGrid) -> tuple[Cell, Cell]:
    start = grid.start_cell
    target = grid.target_cell
    if start is None or target is None:
        raise InvalidStateError("start and target must both be set before find_path")
    if not start.reachable:
        raise InvalidStateError(f"start cell {start.coord} is not reachable")
    if not target.reachable:
        raise InvalidStateError(f"target cell {target.coord} is not reachable")
    return start, target


def find_path(grid: TileGrid, heuristic: Heuristic | None = None) -> list[Coord]:
    """Return the cheapest (row, col) path from the grid's start to its target.

    Moves are 8-connected. An orthogonal step costs 1.0 and a diagonal step
    sqrt(2), both scaled by the multiplier of the cell being entered. A
    diagonal step is refused when either flanking orthogonal cell is
    unreachable.

    The result runs from start to target inclusive, or is empty when the
    target cannot be reached. Raises InvalidStateError if start or target is
    unset or unreachable; the grid is left untouched in that case.
    ``heuristic`` defaults to ``heuristics.diagonal``.

    Open cells with equal f are expanded in the order they were queued. A
    cell whose f improves is queued again, behind any existing entries of
    the same f. Cells already expanded still take a strictly better f and
    parent but are not expanded again.
    """
    start, target = _check_endpoints(grid)
    if heuristic is None:
        heuristic = diagonal
    name = getattr(heuristic, "__name__", repr(heuristic))
    logger.debug("find_path %s -> %s (heuristic=%s)", start.coord, target.coord, name)

    grid.reset_search()
    state: dict[Coord, int] = {}
    open_heap: list[tuple[float, int, Coord]] = []
    counter = 0

    start.h = heuristic(start, target)
    start.f = start.g + start.h
    current: Cell | None = start

    while current is not target:
        for n in grid.neighbors(current):
            if not n.reachable or grid.is_diagonal_blocked(current, n):
                continue
            g = current.g + step_cost(grid, current.coord, n.coord)
            h = heuristic(n, target)
            f = g + h

            seen = state.get(n.coord)
            if seen is not None and f >= n.f:
                continue
            n.parent = current.coord
            n.g = g
            n.h = h
            n.f = f
            if seen is None or seen == _OPEN:
                state[n.coord] = _OPEN
                heapq.heappush(open_heap, (f, counter, n.coord))
                counter += 1

        state[current.coord] = _CLOSED

        current = None
        while open_heap:
            f, _, coord = heapq.heappop(open_heap)
            cell = grid.cell_at(*coord)
            # Skip entries superseded by a later improvement.
            if state[coord] == _OPEN and f == cell.f:
                current = cell
                break
        if current is None:
            closed = sum(1 for s in state.values() if s == _CLOSED)
            logger.debug(
                "find_path %s -> %s: no path after expanding %d cells",
                start.coord, target.coord, closed,
            )
            return []

    path: list[Coord] = [target.coord]
    node = target
    while node is not start:
        node = grid.cell_at(*node.parent)
        path.append(node.coord)
    path.reverse()

    logger.debug(
        "find_path %s -> %s: %d cells, cost %.3f",
        start.coord, target.coord, len(path), target.g,
    )
    return path
