from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from tetrus.game import SHAPE_COLORS, Score
from tetrus.game.grid import EMPTY_CELL


BACKGROUND = (10, 10, 14)
BORDER = (0, 121, 241)
TEXT = (230, 230, 230)


def _color_for_value(v: int) -> Tuple[int, int, int]:
    if v == EMPTY_CELL:
        return BACKGROUND
    return SHAPE_COLORS[v % len(SHAPE_COLORS)]


class Renderer:
    def __init__(self, cell_size: int = 30, cell_border: int = 2, panel_width: int = 320) -> None:
        self.cell_size = cell_size
        self.cell_border = cell_border
        self.panel_width = panel_width
        self._font = None

    def window_size(self, grid_shape: Tuple[int, int]) -> Tuple[int, int]:
        h, w = grid_shape
        return w * self.cell_size + self.panel_width, h * self.cell_size + self.cell_border

    def _draw_grid(self, screen: pygame.Surface, state: np.ndarray) -> None:
        h, w = state.shape
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v == EMPTY_CELL:
                    continue
                rect = pygame.Rect(
                    x * self.cell_size + self.cell_border,
                    y * self.cell_size + self.cell_border,
                    self.cell_size - self.cell_border,
                    self.cell_size - self.cell_border,
                )
                pygame.draw.rect(screen, _color_for_value(v), rect)

        width_px = w * self.cell_size
        height_px = h * self.cell_size
        pygame.draw.line(screen, BORDER, (width_px, 0), (width_px, height_px))
        pygame.draw.line(screen, BORDER, (0, height_px), (width_px, height_px))

    def _draw_score(self, screen: pygame.Surface, score: Score, grid_width: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 40)
        x = grid_width * self.cell_size + 40
        lines = [
            f"Score: {score.points}",
            f"Level: {score.level}",
            f"Lines cleared: {score.total_lines_cleared}",
        ]
        for i, txt in enumerate(lines):
            img = self._font.render(txt, True, TEXT)
            screen.blit(img, (x, 200 + i * 40))

    def draw(self, screen: pygame.Surface, state: np.ndarray, score: Score) -> None:
        screen.fill(BACKGROUND)
        self._draw_grid(screen, state)
        self._draw_score(screen, score, state.shape[1])

    def draw_game_over(self, screen: pygame.Surface) -> None:
        font = pygame.font.SysFont(None, 60)
        text = font.render("Game over", True, (255, 255, 255))
        rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(text, rect)
