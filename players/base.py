"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player reports at most one direction per sample, or None when it
    has nothing to request.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return the requested direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to keep the current heading
        """
        raise NotImplementedError
