"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional

from .constants import Direction, GameStatus
from .position import Position


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of ticks played so far
        snake_body: list of (x, y), head first
        direction: the snake's heading
        apple: position of the apple
        status: GameStatus of the simulation
        width, height: board dimensions
        death_reason: 'wall', 'self' or None
    """

    def __init__(
        self,
        tick: int,
        snake_body: List[Position],
        direction: Direction,
        apple: Position,
        status: GameStatus,
        width: int,
        height: int,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake_body = snake_body
        self.direction = direction
        self.apple = apple
        self.status = status
        self.width = width
        self.height = height
        self.death_reason = death_reason

    @property
    def head(self) -> Position:
        return self.snake_body[0]

    @property
    def length(self) -> int:
        return len(self.snake_body)

    @property
    def in_progress(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple (only while the game is in progress)
        S = snake body
        H = snake head
        Row 0 is printed on top, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.in_progress:
            ax, ay = self.apple
            board[ay][ax] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake_body):
            # After a wall hit the head sits outside the board
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Add x-axis labels at the bottom
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status.name}, "
            f"apple={tuple(self.apple)}, length={self.length}>"
        )
