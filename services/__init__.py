"""
Presentation services for the Snake game.
"""

from .grid_renderer import ColorScheme, GridRenderer, compute_cell_size

__all__ = [
    'ColorScheme',
    'GridRenderer',
    'compute_cell_size',
]
