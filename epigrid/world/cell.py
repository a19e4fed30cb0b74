"""Cell — health states and coordinates on the unbounded grid.

Cells carry no object of their own; a cell is just a ``Coordinate`` and
whatever the ``SparseWorld`` stores for it.  Anything not stored is
``CellState.HEALTHY``.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class CellState(Enum):
    """Health state of a single cell."""

    HEALTHY = "healthy"
    INFECTED = "infected"
    DEAD = "dead"
    RECOVERED = "recovered"

    @property
    def is_terminal(self) -> bool:
        """Return True for states that never change once reached."""
        return self in (CellState.DEAD, CellState.RECOVERED)


class Coordinate(NamedTuple):
    """An integer position on the plane.

    Python ints are unbounded, so any coordinate is valid.

    Attributes:
        x: Column position (grows rightward).
        y: Row position (grows downward).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Coordinate:
        """Return the coordinate shifted by ``(dx, dy)``."""
        return Coordinate(self.x + dx, self.y + dy)
