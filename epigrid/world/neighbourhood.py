"""Neighbourhood topologies for infection spread.

The plane has no edges, so every coordinate gets its full neighbour set
however far it sits from the origin.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from epigrid.world.cell import Coordinate

_MOORE_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

_VON_NEUMANN_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (-1, 0),
    (1, 0),
    (0, 1),
)


class Neighbourhood(Enum):
    """Adjacency rule used to find a cell's neighbours."""

    MOORE = "moore"
    VON_NEUMANN = "von_neumann"

    @property
    def offsets(self) -> tuple[tuple[int, int], ...]:
        """Return the ``(dx, dy)`` offsets that make up this neighbourhood.

        Moore is the 8 cells at Chebyshev distance 1; Von Neumann is the
        4 cells at Manhattan distance 1.
        """
        if self is Neighbourhood.MOORE:
            return _MOORE_OFFSETS
        return _VON_NEUMANN_OFFSETS

    def neighbours(self, coord: Coordinate) -> Iterator[Coordinate]:
        """Yield every neighbour of ``coord`` under this topology.

        Args:
            coord: The centre cell.

        Yields:
            Adjacent coordinates, never ``coord`` itself.
        """
        for dx, dy in self.offsets:
            yield coord.offset(dx, dy)

    @classmethod
    def from_name(cls, name: str) -> Neighbourhood:
        """Look up a neighbourhood by its config name (case-insensitive).

        Accepts ``"moore"`` and ``"von_neumann"`` (also ``"von-neumann"``
        and ``"vonneumann"``).

        Raises:
            ValueError: If the name matches no topology.
        """
        key = name.strip().lower().replace("-", "_")
        if key == "vonneumann":
            key = "von_neumann"
        for member in cls:
            if member.value == key:
                return member
        msg = f"unknown neighbourhood {name!r}; expected one of " + ", ".join(
            m.value for m in cls
        )
        raise ValueError(msg)
