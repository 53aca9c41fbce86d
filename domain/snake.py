"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Deque, List, Optional, Tuple

from .constants import BANNED_TURNS, Direction
from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: position of the leading segment
        body: deque of positions after the head, neck first and tail last
        tail: the segment dropped by the last advance, kept for one tick so
              grow_tail() can put it back
        direction: current heading
    """

    def __init__(self, start: Tuple[int, int]):
        start = Position(*start)
        self._head = start
        self._body: Deque[Position] = deque()
        # Implicit cell behind the head, facing RIGHT
        self._tail = Position(start.x - 1, start.y)
        self._direction = Direction.RIGHT

    @property
    def head(self) -> Position:
        """Return the head position."""
        return self._head

    @property
    def body(self) -> Tuple[Position, ...]:
        return tuple(self._body)

    @property
    def tail(self) -> Position:
        return self._tail

    @property
    def direction(self) -> Direction:
        return self._direction

    def turn(self, requested: Optional[Direction]):
        """
        Change heading unless `requested` is None or reverses straight into
        the neck. Does not move the snake.
        """
        if requested is None:
            return
        if BANNED_TURNS[self._direction] != requested:
            self._direction = requested

    def move(self, requested: Optional[Direction] = None):
        """Turn towards `requested` (if allowed), then advance one cell."""
        self.turn(requested)
        self.advance()

    def advance(self):
        """
        Advance one cell in the current direction without growing.

        The previous head becomes the neck and the last segment is dropped,
        remembered as `tail` until the next advance.
        """
        previous_head = self._head
        self._head = previous_head.step(self._direction)
        self._body.appendleft(previous_head)
        self._tail = self._body.pop()

    def grow_tail(self):
        """
        Restore the segment dropped by the last advance.

        Calling it twice without an advance in between is a no-op, since
        the restored segment is then already the back of the snake.
        """
        if self._tail != self.back():
            self._body.append(self._tail)

    def back(self) -> Position:
        """Return the rearmost segment (the head when there is no body)."""
        if not self._body:
            return self._head
        return self._body[-1]

    def can_eat(self, target: Tuple[int, int]) -> bool:
        return self._head == target

    def grid_body(self) -> List[Position]:
        """Return all occupied cells, head first."""
        return [self._head, *self._body]

    def is_self_collision(self) -> bool:
        return self._head in self._body

    def length(self) -> int:
        return len(self._body) + 1

    def __len__(self) -> int:
        return self.length()

    def __repr__(self):
        return f"<Snake head={tuple(self._head)}, length={self.length()}, direction={self._direction.value}>"
