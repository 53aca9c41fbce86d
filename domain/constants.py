"""
Game constants for the grid Snake game.
"""

from enum import Enum, IntEnum


class Direction(Enum):
    """Movement directions, in the order the keyboard is polled."""
    LEFT = "LEFT"
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"


class GameStatus(IntEnum):
    """Outcome of a simulation. The integer value is what the CLI reports."""
    IN_PROGRESS = 0
    WIN = 1
    LOSS = 2


# Unit vectors in screen coordinates (y grows downward)
DIRECTION_DELTAS = {
    Direction.LEFT:  (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP:    (0, -1),
    Direction.DOWN:  (0, 1),
}

# Current heading -> the request that would reverse into the neck
BANNED_TURNS = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT:  Direction.RIGHT,
    Direction.UP:    Direction.DOWN,
    Direction.DOWN:  Direction.UP,
}

VALID_MOVES = set(Direction)

# Death reasons recorded on the grid
DEATH_WALL = "wall"
DEATH_SELF = "self"

# Game settings
DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 2
DEFAULT_START = (0, 0)
DEFAULT_RENDER_WIDTH = 300
DEFAULT_RENDER_HEIGHT = 300
DEFAULT_TICK_SECONDS = 0.7
DEFAULT_FPS = 144
DEFAULT_WINDOW_TITLE = "Python Snake Game"
