"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import BANNED_TURNS, Direction, VALID_MOVES
from domain.game_state import GameState
from domain.position import Position
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        body = game_state.snake_body
        head = Position(*body[0])
        banned = BANNED_TURNS[game_state.direction]

        # Filter out moves that:
        # 1. Reverse into the neck (the snake ignores them)
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[Direction] = []
        for move in Direction:
            if move == banned:
                continue

            target = head.step(move)
            if not target.in_bounds(game_state.width, game_state.height):
                continue

            if target in body[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES, key=lambda d: d.value))

        return self.rng.choice(valid_moves)
