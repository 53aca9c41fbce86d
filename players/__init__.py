"""
Player implementations for the Snake game.

This module contains the input abstractions that decide which direction
the snake is asked to take on each tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
]
