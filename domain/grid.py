"""
GridSimulation - the board, the snake on it and the apple.

Each call to play_move() advances the game by exactly one tick until the
status becomes WIN or LOSS.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import (
    DEATH_SELF,
    DEATH_WALL,
    DEFAULT_START,
    Direction,
    GameStatus,
)
from .game_state import GameState
from .position import Position
from .random_cells import choose_cell, free_cells
from .snake import Snake

logger = logging.getLogger(__name__)


class GridSimulation:
    """
    Manages:
      - Board (width, height)
      - The snake
      - The apple
      - Game status
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: Tuple[int, int] = DEFAULT_START,
        rng: Optional[random.Random] = None
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        if width * height < 2:
            raise ValueError("Board needs at least two cells to place the snake and an apple.")
        start = Position(*start)
        if not start.in_bounds(width, height):
            raise ValueError(f"Start position {tuple(start)} is outside the {width}x{height} board.")

        self.width = width
        self.height = height
        self.rng = rng
        self.snake = Snake(start)
        self.status = GameStatus.IN_PROGRESS
        self.death_reason: Optional[str] = None
        self.tick = 0
        self.apple = self.spawn_apple()

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def spawn_apple(self) -> Position:
        """
        Return a random cell not occupied by the snake.

        Raises:
            BoardFullError: If the snake covers the whole board.
        """
        available = free_cells(self.width, self.height, self.snake.grid_body())
        return choose_cell(available, self.rng)

    def turn(self, requested: Optional[Direction]):
        """Steer the snake between ticks without moving it."""
        if self.is_over:
            return
        self.snake.turn(requested)

    def play_move(self, requested: Optional[Direction] = None):
        """
        Execute one tick:
          1) Move the snake (turning first if a direction is given)
          2) Lose if the head left the board
          3) Lose if the head ran into the body
          4) Grow if the apple was eaten
          5) Win if the snake fills the board
          6) Respawn the apple if it was eaten
        """
        if self.is_over:
            logger.warning(f"Game is already over ({self.status.name}). Ignoring move.")
            return

        self.snake.move(requested)
        self.tick += 1
        head = self.snake.head

        if not head.in_bounds(self.width, self.height):
            logger.info(f"Snake ran into a wall at {tuple(head)} on tick {self.tick}.")
            self._end(GameStatus.LOSS, DEATH_WALL)
            return

        if self.snake.is_self_collision():
            logger.info(f"Snake ran into itself at {tuple(head)} on tick {self.tick}.")
            self._end(GameStatus.LOSS, DEATH_SELF)
            return

        eaten = self.snake.can_eat(self.apple)
        if eaten:
            self.snake.grow_tail()
            logger.debug(f"Apple eaten at {tuple(self.apple)}, length is now {self.snake.length()}.")

        # Must run before the respawn: a full board has no free cell left
        if self.snake.length() == self.width * self.height:
            logger.info(f"Snake filled the {self.width}x{self.height} board on tick {self.tick}.")
            self._end(GameStatus.WIN)
            return

        if eaten:
            self.apple = self.spawn_apple()

    def _end(self, status: GameStatus, reason: Optional[str] = None):
        self.status = status
        self.death_reason = reason

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            snake_body=self.snake.grid_body(),
            direction=self.snake.direction,
            apple=self.apple,
            status=self.status,
            width=self.width,
            height=self.height,
            death_reason=self.death_reason
        )

    def __repr__(self):
        return (
            f"<GridSimulation {self.width}x{self.height}, status={self.status.name}, "
            f"snake={self.snake!r}, apple={tuple(self.apple)}>"
        )
