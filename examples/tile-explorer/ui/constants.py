"""Layout, color, and rendering constants."""
from __future__ import annotations

# Grid defaults (overridden by CLI --rows / --cols / --tile-size)
DEFAULT_ROWS = 40
DEFAULT_COLS = 40
DEFAULT_TILE_SIZE = 16

# Layout
STATUS_H = 32
FPS = 30

# Cell colors
COLOR_OPEN = (235, 235, 235)
COLOR_BARRIER = (40, 40, 48)
COLOR_START = (60, 180, 75)
COLOR_TARGET = (220, 60, 60)
COLOR_PATH = (70, 130, 230)
COLOR_GRID_LINE = (0, 0, 0)
COLOR_HOVER = (255, 200, 0)

# Hazard shading: multiplier -> fill color
HAZARD_STEPS: list[float] = [1.0, 1.25, 1.5, 2.0, 3.0]
HAZARD_COLORS: dict[float, tuple[int, int, int]] = {
    1.25: (240, 220, 170),
    1.5: (230, 190, 120),
    2.0: (215, 150, 80),
    3.0: (190, 105, 50),
}

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_OK = (100, 255, 100)
COLOR_WARN = (255, 180, 80)
COLOR_ERROR = (255, 80, 80)


def compute_layout(rows: int, cols: int, tile_size: int) -> dict[str, int]:
    """Compute window dimensions from grid size."""
    grid_w = cols * tile_size
    grid_h = rows * tile_size
    return {
        "tile_size": tile_size,
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": grid_w,
        "screen_h": grid_h + STATUS_H,
    }


def hazard_color(multiplier: float) -> tuple[int, int, int]:
    """Shade for a multiplier, snapped down to the nearest hazard step."""
    color = COLOR_OPEN
    for step in HAZARD_STEPS[1:]:
        if multiplier >= step:
            color = HAZARD_COLORS[step]
    return color
