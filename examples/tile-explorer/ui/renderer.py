"""Grid, endpoint, and path rendering."""
from __future__ import annotations

import pygame

from tile_astar import Coord, TileGrid
from ui.constants import (
    COLOR_BARRIER,
    COLOR_GRID_LINE,
    COLOR_HOVER,
    COLOR_PATH,
    COLOR_START,
    COLOR_TARGET,
    hazard_color,
)


def _cell_rect(row: int, col: int, tile_size: int) -> pygame.Rect:
    return pygame.Rect(col * tile_size, row * tile_size, tile_size, tile_size)


def draw_grid(surface: pygame.Surface, grid: TileGrid, tile_size: int) -> None:
    """Draw barriers and hazard shading. Columns map to x, rows to y."""
    for cell in grid.cells():
        color = COLOR_BARRIER if not cell.reachable else hazard_color(cell.multiplier)
        rect = _cell_rect(cell.row, cell.col, tile_size)
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)


def draw_path(surface: pygame.Surface, path: list[Coord], tile_size: int) -> None:
    """Fill path cells and connect their centers."""
    inset = max(1, tile_size // 5)
    for row, col in path:
        rect = _cell_rect(row, col, tile_size).inflate(-2 * inset, -2 * inset)
        pygame.draw.rect(surface, COLOR_PATH, rect)
    if len(path) > 1:
        half = tile_size // 2
        points = [(col * tile_size + half, row * tile_size + half) for row, col in path]
        pygame.draw.lines(surface, COLOR_PATH, False, points, 2)


def draw_endpoints(surface: pygame.Surface, grid: TileGrid, tile_size: int) -> None:
    for coord, color in ((grid.start, COLOR_START), (grid.target, COLOR_TARGET)):
        if coord is None:
            continue
        rect = _cell_rect(coord[0], coord[1], tile_size)
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)


def draw_hover(surface: pygame.Surface, row: int, col: int, tile_size: int) -> None:
    pygame.draw.rect(surface, COLOR_HOVER, _cell_rect(row, col, tile_size), 2)
