"""SparseWorld — the spatial store for the simulation.

The plane is unbounded, so the world keeps only cells that differ from
the default ``HEALTHY`` state.  Memory therefore tracks the extent of the
outbreak (including its dead and recovered history), not the size of
the plane.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from epigrid.world.cell import CellState, Coordinate

if TYPE_CHECKING:
    from collections.abc import Iterator

# States that appear in a tally; HEALTHY is uncountable on an infinite plane.
COUNTED_STATES: tuple[CellState, ...] = (
    CellState.INFECTED,
    CellState.DEAD,
    CellState.RECOVERED,
)


@dataclass
class SparseWorld:
    """Non-healthy cells of an unbounded 2D grid.

    Both mappings always share the same key set, and no key ever maps
    to ``HEALTHY``.

    Attributes:
        state_of: State of every stored cell.
        timer_of: Remaining infection ticks of every stored cell.  Only
            meaningful for infected cells; terminal cells keep whatever
            value they had when they resolved.
    """

    state_of: dict[Coordinate, CellState] = field(default_factory=dict)
    timer_of: dict[Coordinate, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.state_of)

    def __contains__(self, coord: object) -> bool:
        return coord in self.state_of

    def cell_at(self, coord: Coordinate) -> CellState:
        """Return the state at ``coord`` (``HEALTHY`` if not stored)."""
        return self.state_of.get(coord, CellState.HEALTHY)

    def timer_at(self, coord: Coordinate) -> int:
        """Return the infection timer at ``coord`` (0 if not stored)."""
        return self.timer_of.get(coord, 0)

    def paint(self, coord: Coordinate, state: CellState, timer: int = 0) -> None:
        """Overwrite one cell in place.

        Painting ``HEALTHY`` restores the default by dropping the cell
        from both mappings.

        Args:
            coord: Cell to edit.
            state: New state.
            timer: New infection timer (ignored for ``HEALTHY``).
        """
        coord = Coordinate(*coord)
        if state is CellState.HEALTHY:
            self.state_of.pop(coord, None)
            self.timer_of.pop(coord, None)
            return
        self.state_of[coord] = state
        self.timer_of[coord] = timer

    def counts_by_state(self) -> dict[CellState, int]:
        """Tally stored cells by state in a single pass.

        Returns:
            Counts for ``INFECTED``, ``DEAD`` and ``RECOVERED`` (zero when
            absent).  ``HEALTHY`` is never a key: the healthy
            population of an unbounded plane has no finite count.
        """
        counts = dict.fromkeys(COUNTED_STATES, 0)
        for state in self.state_of.values():
            counts[state] += 1
        return counts

    def active_coordinates(self) -> set[Coordinate]:
        """Return the set of stored (non-healthy) coordinates."""
        return set(self.state_of)

    @property
    def is_extinct(self) -> bool:
        """Return True when no infected cell remains."""
        return CellState.INFECTED not in self.state_of.values()

    def region(
        self,
        x0: int,
        y0: int,
        cols: int,
        rows: int,
    ) -> Iterator[tuple[Coordinate, CellState]]:
        """Iterate every cell in a rectangular window, row by row.

        Used by the renderer to query the visible viewport; healthy cells
        are included.

        Args:
            x0: Leftmost column of the window.
            y0: Top row of the window.
            cols: Window width in cells.
            rows: Window height in cells.

        Yields:
            ``(coordinate, state)`` pairs.
        """
        for y in range(y0, y0 + rows):
            for x in range(x0, x0 + cols):
                coord = Coordinate(x, y)
                yield coord, self.state_of.get(coord, CellState.HEALTHY)
