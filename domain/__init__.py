"""
Domain entities for the grid Snake game.

This module contains the core simulation that is independent of
input and rendering concerns (keyboard, window, frame timing).
"""

from .constants import (
    Direction,
    GameStatus,
    DIRECTION_DELTAS,
    BANNED_TURNS,
    VALID_MOVES,
)
from .position import Position
from .random_cells import BoardFullError
from .snake import Snake
from .game_state import GameState
from .grid import GridSimulation

__all__ = [
    'Direction', 'GameStatus', 'DIRECTION_DELTAS', 'BANNED_TURNS', 'VALID_MOVES',
    'Position',
    'BoardFullError',
    'Snake',
    'GameState',
    'GridSimulation',
]
