"""
Keyboard player - samples the arrow keys with pygame.
"""

from typing import Callable, Optional, Sequence

import pygame

from domain.constants import Direction
from domain.game_state import GameState
from .base import Player

# When several keys are held, the first one listed wins
KEY_PRECEDENCE = (
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_UP, Direction.UP),
    (pygame.K_RIGHT, Direction.RIGHT),
    (pygame.K_DOWN, Direction.DOWN),
)


class KeyboardPlayer(Player):
    """
    Reads the raw key state each time a move is requested. Missed presses
    are not buffered.
    """

    def __init__(self, key_state: Optional[Callable[[], Sequence[bool]]] = None):
        self.key_state = key_state or pygame.key.get_pressed

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        pressed = self.key_state()
        for key, direction in KEY_PRECEDENCE:
            if pressed[key]:
                return direction
        return None
