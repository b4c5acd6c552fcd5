"""Search outcome readout under the grid."""
from __future__ import annotations

import pygame

from tile_astar import Coord
from ui.constants import (
    COLOR_ERROR,
    COLOR_OK,
    COLOR_STATUS_BG,
    COLOR_TEXT,
    COLOR_WARN,
    STATUS_H,
)


class SearchStatus:
    """Formats the last search outcome and the active heuristic.

    The left side carries the latest event (path found, no path, a rejected
    search, or an edit); the right side always names the heuristic in use.
    """

    def __init__(self, heuristic: str) -> None:
        self.heuristic = heuristic
        self._message = ""
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None

    @property
    def message(self) -> str:
        return self._message

    def path_found(self, path: list[Coord], cost: float) -> None:
        start, target = path[0], path[-1]
        self._show(f"{start} -> {target}: {len(path)} cells, cost {cost:.3f}", COLOR_OK)

    def no_path(self, start: Coord | None, target: Coord | None) -> None:
        self._show(f"No path from {start} to {target}", COLOR_WARN)

    def rejected(self, reason: Exception) -> None:
        self._show(f"Cannot search: {reason}", COLOR_ERROR)

    def note(self, message: str) -> None:
        self._show(message, COLOR_TEXT)

    def _show(self, message: str, color: tuple[int, int, int]) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, top: int, width: int) -> None:
        pygame.draw.rect(surface, COLOR_STATUS_BG, pygame.Rect(0, top, width, STATUS_H))
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)

        label = self._font.render(f"[{self.heuristic}]", True, COLOR_TEXT)
        label_x = width - label.get_width() - 8
        surface.blit(label, (label_x, top + 8))
        if self._message:
            text = self._font.render(self._message, True, self._color)
            surface.blit(text, (8, top + 8), pygame.Rect(0, 0, max(0, label_x - 16), STATUS_H))
