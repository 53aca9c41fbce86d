"""
Grid Renderer Service

Draws a GameState onto a pygame surface:
1. Clear the surface to the background colour
2. Draw every snake cell as a filled square
3. Draw the apple while the game is still in progress

Cell positions are grid coordinates and are scaled to pixels by the
renderer's cell size.
"""

import logging
from typing import Iterable, Tuple

import pygame

from config import GameConfig
from domain.game_state import GameState
from domain.position import Position

logger = logging.getLogger(__name__)


class ColorScheme:
    """Colour configuration for the window"""

    BACKGROUND = (0, 0, 0)
    SNAKE = (0, 255, 0)
    APPLE = (255, 0, 0)


def compute_cell_size(width: int, height: int, render_width: int, render_height: int) -> int:
    """Largest square cell that fits the board inside the render area."""
    return min(render_width, render_height) // max(width, height)


class GridRenderer:
    """Render simulation snapshots to a pygame surface"""

    def __init__(self, surface: pygame.Surface, cell_size: int):
        if cell_size < 1:
            raise ValueError(f"Cell size must be at least 1 pixel, got {cell_size}")
        self.surface = surface
        self.cell_size = cell_size

    @classmethod
    def open_window(cls, width: int, height: int, config: GameConfig) -> "GridRenderer":
        """
        Initialise pygame and open a window sized to fit a `width` x
        `height` board inside the configured render area.
        """
        cell_size = compute_cell_size(width, height, config.render_width, config.render_height)
        window_size = (cell_size * width, cell_size * height)

        pygame.init()
        surface = pygame.display.set_mode(window_size)
        pygame.display.set_caption(config.title)
        logger.info(f"Opened {window_size[0]}x{window_size[1]} window with {cell_size}px cells")
        return cls(surface, cell_size)

    def cell_rect(self, cell: Tuple[int, int]) -> pygame.Rect:
        x, y = Position(*cell).scaled(self.cell_size)
        return pygame.Rect(x, y, self.cell_size, self.cell_size)

    def _draw_cells(self, cells: Iterable[Tuple[int, int]], color: Tuple[int, int, int]):
        for cell in cells:
            pygame.draw.rect(self.surface, color, self.cell_rect(cell))

    def draw(self, game_state: GameState):
        """Draw one frame. Does not flip the display."""
        self.surface.fill(ColorScheme.BACKGROUND)
        self._draw_cells(game_state.snake_body, ColorScheme.SNAKE)
        if game_state.in_progress:
            self._draw_cells([game_state.apple], ColorScheme.APPLE)
