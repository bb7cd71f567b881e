"""Hexagonal coordinate system using axial coordinates (q, r).

Axial coordinates define position on a hex grid where:
- q axis runs along the NE direction
- r axis runs along the N direction
- s = -q - r is the implicit third cube coordinate

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Union

if TYPE_CHECKING:
    from hexengine.models.direction import HexDirection
    from hexengine.models.position import HexPosition
    from hexengine.util.vector import Vector3


@dataclass(frozen=True)
class HexCoord:
    """Immutable axial hex coordinate.

    Attributes:
        q: Coordinate along the NE axis.
        r: Coordinate along the N axis.
    """

    q: int
    r: int

    # -- Cube coordinate -------------------------------------------------

    @property
    def s(self) -> int:
        """Implicit cube coordinate: s = -q - r."""
        return -self.q - self.r

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: Union[HexCoord, HexDirection]) -> HexCoord:
        delta = _as_delta(other)
        if delta is None:
            return NotImplemented
        return HexCoord(self.q + delta.q, self.r + delta.r)

    __radd__ = __add__

    def __sub__(self, other: Union[HexCoord, HexDirection]) -> HexCoord:
        delta = _as_delta(other)
        if delta is None:
            return NotImplemented
        return HexCoord(self.q - delta.q, self.r - delta.r)

    def __mul__(self, k: int) -> HexCoord:
        from hexengine.models.direction import HexDirection

        # Directions are ints but not scalars
        if not isinstance(k, int) or isinstance(k, (bool, HexDirection)):
            return NotImplemented
        return HexCoord(self.q * k, self.r * k)

    __rmul__ = __mul__

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.q, -self.r)

    # -- Geometry --------------------------------------------------------

    def distance_to(self, other: HexCoord) -> int:
        """Hex grid distance (number of steps along hex edges)."""
        delta = self - other
        return (abs(delta.q) + abs(delta.r) + abs(delta.s)) // 2

    def magnitude(self) -> int:
        """Hex distance to the origin."""
        return self.distance_to(ZERO)

    def neighbors(self) -> Iterator[HexCoord]:
        """Yield the 6 adjacent coordinates in direction order, N first."""
        from hexengine.models.direction import HexDirection

        for direction in HexDirection:
            yield self + direction

    def to_direction(self) -> HexDirection:
        """Return the direction whose unit delta is this coordinate.

        Raises:
            InvalidDirectionError: this is not one of the six unit deltas.
        """
        from hexengine.models.direction import HexDirection

        return HexDirection.from_coords(self)

    def offset(self) -> Vector3:
        """World offset from the origin to the center of this hex."""
        from hexengine.models.direction import HexDirection

        return HexDirection.NE.direction() * self.q + HexDirection.N.direction() * self.r

    def to_position(self) -> HexPosition:
        """Exact widening to a continuous position."""
        from hexengine.models.position import HexPosition

        return HexPosition(float(self.q), float(self.r))

    def ring(self, radius: int) -> list[HexCoord]:
        """Return all hexes at exactly `radius` steps away.

        Returns empty list for radius <= 0.
        """
        from hexengine.models.direction import HexDirection

        if radius <= 0:
            return []
        results: list[HexCoord] = []
        # Start at the SW corner and walk the ring clockwise
        h = self + HexDirection.SW.coords() * radius
        for direction in HexDirection:
            for _ in range(radius):
                results.append(h)
                h = h + direction
        return results

    def disk(self, radius: int) -> set[HexCoord]:
        """Return all hexes within `radius` steps (inclusive)."""
        results: set[HexCoord] = set()
        for dq in range(-radius, radius + 1):
            for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
                results.add(HexCoord(self.q + dq, self.r + dr))
        return results

    def line_to(self, other: HexCoord) -> list[HexCoord]:
        """Return a list of hex coordinates forming a line from self to other.

        Uses linear interpolation in cube space with rounding.
        """
        from hexengine.util.hex_math import hex_linedraw

        return hex_linedraw(self, other)

    # -- Serialization ---------------------------------------------------

    def __repr__(self) -> str:
        return f"Hex({self.q},{self.r})"

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.s})"


ZERO = HexCoord(0, 0)


def _as_delta(other: object) -> HexCoord | None:
    """Coerce an arithmetic operand to a coordinate delta, or None."""
    from hexengine.models.direction import HexDirection

    if isinstance(other, HexCoord):
        return other
    if isinstance(other, HexDirection):
        return other.coords()
    return None
