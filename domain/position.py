"""
Position value type - an integer cell coordinate on the grid.
"""

from typing import NamedTuple

from .constants import DIRECTION_DELTAS, Direction


class Position(NamedTuple):
    """
    An (x, y) grid cell.

    Equality and hashing are structural, so positions can be compared
    directly and stored in sets.
    """
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        """Return the neighbouring cell one unit in `direction`."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Position(self.x + dx, self.y + dy)

    def scaled(self, factor: int) -> "Position":
        """Return this cell scaled to pixel coordinates."""
        return Position(self.x * factor, self.y * factor)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height
