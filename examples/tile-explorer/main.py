"""Tile Explorer — interactive A* over a weighted tile grid.

Controls:
  Space       Find path
  Left-click  Toggle barrier
  Right-click Cycle hazard multiplier
  S / T       Move start / target to the hovered cell
  H           Cycle heuristic
  C           Clear path
  R           Reload layout
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from game.layouts import LAYOUTS, MIN_SIZE, apply_layout
from tile_astar import HEURISTICS, InvalidStateError, TileGrid, find_path, path_cost
from ui.constants import (
    COLOR_BG,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_TILE_SIZE,
    FPS,
    HAZARD_STEPS,
    compute_layout,
)
from ui.renderer import draw_endpoints, draw_grid, draw_hover, draw_path
from ui.status import SearchStatus

logger = logging.getLogger("tile_explorer")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tile Explorer — tile-astar visual demo")
    p.add_argument("--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})")
    p.add_argument("--cols", type=int, default=DEFAULT_COLS, help=f"Grid columns (default: {DEFAULT_COLS})")
    p.add_argument("--tile-size", type=int, default=DEFAULT_TILE_SIZE,
                   help=f"Tile edge in pixels (default: {DEFAULT_TILE_SIZE})")
    p.add_argument("--layout", choices=sorted(LAYOUTS), default="corridor",
                   help="Initial layout (default: corridor)")
    p.add_argument("--seed", type=int, default=42, help="Seed for the scatter layout (default: 42)")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="diagonal",
                   help="Initial heuristic (default: diagonal)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: INFO)")
    args = p.parse_args()
    min_rows, min_cols = MIN_SIZE[args.layout]
    if args.rows < min_rows or args.cols < min_cols:
        p.error(f"layout '{args.layout}' needs at least {min_rows} rows and {min_cols} cols")
    args.tile_size = max(4, min(48, args.tile_size))
    return args


class ExplorerState:
    """Holds the grid, the last search result, and UI selections."""

    def __init__(self, args: argparse.Namespace) -> None:
        self.grid = TileGrid(args.rows, args.cols)
        self.layout = args.layout
        self.seed = args.seed
        self.heuristic_names = sorted(HEURISTICS)
        self.heuristic_index = self.heuristic_names.index(args.heuristic)
        self.path: list[tuple[int, int]] = []
        self.status = SearchStatus(self.heuristic_name)
        self.reload()

    @property
    def heuristic_name(self) -> str:
        return self.heuristic_names[self.heuristic_index]

    def reload(self) -> None:
        apply_layout(self.grid, self.layout, self.seed)
        self.path = []
        self.status.note(f"Layout '{self.layout}' loaded")

    def search(self) -> None:
        try:
            self.path = find_path(self.grid, HEURISTICS[self.heuristic_name])
        except InvalidStateError as exc:
            self.path = []
            self.status.rejected(exc)
            return
        if not self.path:
            self.status.no_path(self.grid.start, self.grid.target)
            return
        cost = path_cost(self.grid, self.path)
        logger.info("path: %d cells, cost %.3f (%s)", len(self.path), cost, self.heuristic_name)
        self.status.path_found(self.path, cost)

    def toggle_barrier(self, row: int, col: int) -> None:
        cell = self.grid.cell_at(row, col)
        self.grid.set_reachable(row, col, not cell.reachable)
        self.path = []

    def cycle_hazard(self, row: int, col: int) -> None:
        cell = self.grid.cell_at(row, col)
        later = [m for m in HAZARD_STEPS if m > cell.multiplier]
        multiplier = later[0] if later else HAZARD_STEPS[0]
        self.grid.set_cost_multiplier(row, col, multiplier)
        self.path = []
        self.status.note(f"({row}, {col}) multiplier {multiplier}")

    def cycle_heuristic(self) -> None:
        self.heuristic_index = (self.heuristic_index + 1) % len(self.heuristic_names)
        self.status.heuristic = self.heuristic_name


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    layout = compute_layout(args.rows, args.cols, args.tile_size)
    tile_size = layout["tile_size"]

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("Tile Explorer")
    clock = pygame.time.Clock()

    state = ExplorerState(args)

    running = True
    while running:
        clock.tick(FPS)

        mouse_x, mouse_y = pygame.mouse.get_pos()
        hover_row, hover_col = mouse_y // tile_size, mouse_x // tile_size
        hovering = state.grid.in_bounds(hover_row, hover_col)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.search()
                elif event.key == pygame.K_c:
                    state.path = []
                    state.status.note("Path cleared")
                elif event.key == pygame.K_r:
                    state.reload()
                elif event.key == pygame.K_h:
                    state.cycle_heuristic()
                elif event.key == pygame.K_s and hovering:
                    state.grid.set_start(hover_row, hover_col)
                    state.path = []
                elif event.key == pygame.K_t and hovering:
                    state.grid.set_target(hover_row, hover_col)
                    state.path = []

            elif event.type == pygame.MOUSEBUTTONDOWN and hovering:
                if event.button == 1:  # Left click
                    state.toggle_barrier(hover_row, hover_col)
                elif event.button == 3:  # Right click
                    state.cycle_hazard(hover_row, hover_col)

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_grid(screen, state.grid, tile_size)
        draw_path(screen, state.path, tile_size)
        draw_endpoints(screen, state.grid, tile_size)
        if hovering:
            draw_hover(screen, hover_row, hover_col, tile_size)
        state.status.draw(screen, layout["grid_h"], layout["screen_w"])

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
