"""Demo grid layouts: barriers, hazards, and start/target placement."""
from __future__ import annotations

import random
from typing import Callable

from tile_astar import TileGrid

# Smallest grid (rows, cols) each layout fits on
MIN_SIZE: dict[str, tuple[int, int]] = {
    "corridor": (35, 30),
    "open": (2, 2),
    "scatter": (4, 4),
}


def corridor(grid: TileGrid, seed: int = 0) -> None:
    """Barrier bands with a narrow gap and a small hazard patch."""
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


def open_field(grid: TileGrid, seed: int = 0) -> None:
    """No barriers; start and target in opposite corners."""
    grid.set_start(0, 0)
    grid.set_target(grid.num_rows - 1, grid.num_cols - 1)


def scatter(grid: TileGrid, seed: int = 0) -> None:
    """Random barriers and hazards, corners kept open for start and target."""
    rng = random.Random(seed)
    for cell in grid.cells():
        roll = rng.random()
        if roll < 0.22:
            grid.set_reachable(cell.row, cell.col, False)
        elif roll < 0.35:
            grid.set_cost_multiplier(cell.row, cell.col, rng.choice([1.25, 1.5, 2.0, 3.0]))

    last_row, last_col = grid.num_rows - 1, grid.num_cols - 1
    grid.fill_rect((0, 0), (1, 1), reachable=True, multiplier=1.0)
    grid.fill_rect((last_row - 1, last_col - 1), (last_row, last_col), reachable=True, multiplier=1.0)
    grid.set_start(0, 0)
    grid.set_target(last_row, last_col)


LAYOUTS: dict[str, Callable[[TileGrid, int], None]] = {
    "corridor": corridor,
    "open": open_field,
    "scatter": scatter,
}


def apply_layout(grid: TileGrid, name: str, seed: int = 0) -> None:
    """Reset ``grid`` and populate it with the named layout."""
    min_rows, min_cols = MIN_SIZE[name]
    if grid.num_rows < min_rows or grid.num_cols < min_cols:
        raise ValueError(
            f"layout '{name}' needs at least {min_rows}x{min_cols}, "
            f"grid is {grid.num_rows}x{grid.num_cols}"
        )
    grid.clear()
    LAYOUTS[name](grid, seed)
