"""The six hex directions and their precomputed geometry.

Directions run clockwise starting at N. Pointy-side layout: N and S face
edges, corners sit at +-30 degrees from every direction.

    N  = (0, 1)     S  = (0, -1)
    NE = (1, 0)     SW = (-1, 0)
    SE = (1, -1)    NW = (-1, 1)

All tables below are built once at import and never mutated.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Iterator

from hexengine.models.hex import HexCoord
from hexengine.util.vector import Vector3

OUT_TO_IN_RADIUS: float = math.sqrt(3.0) / 2.0
"""Inscribed radius / circumscribed radius of a regular hexagon."""

IN_TO_OUT_RADIUS: float = 2.0 / math.sqrt(3.0)
"""Circumscribed radius / inscribed radius of a regular hexagon."""

VERTEX_FACTOR: float = 0.5 * IN_TO_OUT_RADIUS
"""Center-to-corner distance for hexes whose centers are 1 apart."""


class InvalidDirectionError(ValueError):
    """Raised when a coordinate delta is not one of the six unit deltas."""

    def __init__(self, coords: HexCoord) -> None:
        super().__init__(f"{coords!r} is not a unit hex direction")
        self.coords = coords


class HexDirection(IntEnum):
    """One of the six hex directions, clockwise from N."""

    N = 0
    NE = 1
    SE = 2
    S = 3
    SW = 4
    NW = 5

    # -- Geometry --------------------------------------------------------

    def coords(self) -> HexCoord:
        """Unit coordinate delta of this direction."""
        return _COORDS[self]

    def angle(self) -> float:
        """Angle in degrees from N, increasing clockwise."""
        return _ANGLES[self]

    def direction(self) -> Vector3:
        """Unit world vector; N is forward (0, 0, 1)."""
        return _DIRECTIONS[self]

    def left_corner_direction(self) -> Vector3:
        """Unit vector towards the left corner of the edge facing this way."""
        return _VERTEX_DIRECTIONS[self]

    def right_corner_direction(self) -> Vector3:
        """Unit vector towards the right corner of the edge facing this way."""
        return _VERTEX_DIRECTIONS[(self + 1) % 6]

    def left_corner(self) -> Vector3:
        """Offset from the hex center to the left corner of this edge."""
        return _VERTICES[self]

    def right_corner(self) -> Vector3:
        """Offset from the hex center to the right corner of this edge."""
        return _VERTICES[(self + 1) % 6]

    # -- Rotation --------------------------------------------------------

    def rotate(self, rotation: int) -> HexDirection:
        """Rotate by ``rotation`` steps, clockwise positive."""
        return HexDirection((int(self) + rotation) % 6)

    def right(self) -> HexDirection:
        return self.rotate(1)

    def left(self) -> HexDirection:
        return self.rotate(-1)

    def opposite(self) -> HexDirection:
        return self.rotate(3)

    def loop(self) -> Iterator[HexDirection]:
        """Yield all six directions clockwise, starting with this one."""
        for i in range(6):
            yield self.rotate(i)

    # -- Lookup ----------------------------------------------------------

    @classmethod
    def from_coords(cls, coords: HexCoord) -> HexDirection:
        """Return the direction whose unit delta equals ``coords``.

        Raises:
            InvalidDirectionError: ``coords`` is not a unit delta.
        """
        try:
            return _BY_COORDS[coords]
        except KeyError:
            raise InvalidDirectionError(coords) from None


_COORDS: tuple[HexCoord, ...] = (
    HexCoord(0, 1),    # N
    HexCoord(1, 0),    # NE
    HexCoord(1, -1),   # SE
    HexCoord(0, -1),   # S
    HexCoord(-1, 0),   # SW
    HexCoord(-1, 1),   # NW
)

_ANGLES: tuple[float, ...] = (0.0, 60.0, 120.0, 180.0, 240.0, 300.0)

_DIRECTIONS: tuple[Vector3, ...] = tuple(Vector3.from_angle(a) for a in _ANGLES)

_VERTEX_DIRECTIONS: tuple[Vector3, ...] = tuple(
    Vector3.from_angle(a - 30.0) for a in _ANGLES
)

_VERTICES: tuple[Vector3, ...] = tuple(v * VERTEX_FACTOR for v in _VERTEX_DIRECTIONS)

_BY_COORDS: dict[HexCoord, HexDirection] = {
    c: HexDirection(i) for i, c in enumerate(_COORDS)
}
