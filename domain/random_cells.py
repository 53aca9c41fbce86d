"""
Random placement helpers for apples.

A single process-wide random generator is created lazily on first use and
reused for every placement, each call parameterised with the current number
of free cells.
"""

import logging
import random
from typing import Iterable, List, Optional

from .position import Position

logger = logging.getLogger(__name__)


_rng: Optional[random.Random] = None


class BoardFullError(RuntimeError):
    """Raised when a free cell is requested but every cell is occupied."""


def get_rng() -> random.Random:
    """
    Get or create the shared random generator.

    The generator is seeded from OS entropy, so sequences are not
    reproducible across runs.
    """
    global _rng

    if _rng is None:
        _rng = random.Random()
        logger.debug("Created apple placement RNG")
    return _rng


def reset_rng():
    """Reset the shared generator. Mainly used by tests."""
    global _rng
    _rng = None


def free_cells(width: int, height: int, occupied: Iterable[Position]) -> List[Position]:
    """
    Return every cell of a `width` x `height` board not in `occupied`,
    in row-major order.
    """
    taken = set(occupied)
    available: List[Position] = []
    for i in range(width * height):
        cell = Position(i % width, i // width)
        if cell not in taken:
            available.append(cell)
    return available


def choose_cell(cells: List[Position], rng: Optional[random.Random] = None) -> Position:
    """
    Pick one of `cells` uniformly at random.

    Raises:
        BoardFullError: If `cells` is empty. Reaching this means a caller
            tried to place an apple on a full board.
    """
    if not cells:
        raise BoardFullError("No free cell available to place an apple")
    if rng is None:
        rng = get_rng()
    return cells[rng.randrange(len(cells))]
