"""Camera — maps window pixels onto world coordinates.

The camera offset is the world coordinate shown in the top-left cell of
the viewport.  It can move anywhere; the world has no edges to clamp to.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from epigrid.world.cell import Coordinate


@dataclass
class Camera:
    """A pannable window onto the unbounded grid.

    Attributes:
        cols: Viewport width in cells.
        rows: Viewport height in cells.
        cell_size: Pixel size of one cell.
        offset_x: World column shown at the left edge.
        offset_y: World row shown at the top edge.
    """

    cols: int
    rows: int
    cell_size: int
    offset_x: int = field(init=False)
    offset_y: int = field(init=False)
    _carry_x: int = field(init=False, default=0, repr=False)
    _carry_y: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        """Start centred on the origin."""
        self.centre_on(Coordinate(0, 0))

    @property
    def visible_origin(self) -> Coordinate:
        """Return the world coordinate of the top-left visible cell."""
        return Coordinate(self.offset_x, self.offset_y)

    def centre_on(self, coord: Coordinate) -> None:
        """Move the view so ``coord`` sits in the middle of the viewport."""
        self.offset_x = coord.x - self.cols // 2
        self.offset_y = coord.y - self.rows // 2
        self._carry_x = self._carry_y = 0

    def to_world(self, px: int, py: int) -> Coordinate:
        """Convert a pixel position inside the viewport to a world coordinate."""
        return Coordinate(
            self.offset_x + px // self.cell_size,
            self.offset_y + py // self.cell_size,
        )

    def to_screen(self, coord: Coordinate) -> tuple[int, int]:
        """Return the top-left pixel of ``coord`` (may lie off-screen)."""
        return (
            (coord.x - self.offset_x) * self.cell_size,
            (coord.y - self.offset_y) * self.cell_size,
        )

    def pan(self, dx_px: int, dy_px: int) -> None:
        """Drag the view by a pixel delta.

        Content follows the pointer, so the offset moves the opposite
        way.  Sub-cell leftovers carry over to the next drag event.

        Args:
            dx_px: Horizontal pointer movement in pixels.
            dy_px: Vertical pointer movement in pixels.
        """
        self._carry_x += dx_px
        self._carry_y += dy_px
        step_x = int(self._carry_x / self.cell_size)
        step_y = int(self._carry_y / self.cell_size)
        self._carry_x -= step_x * self.cell_size
        self._carry_y -= step_y * self.cell_size
        self.offset_x -= step_x
        self.offset_y -= step_y
