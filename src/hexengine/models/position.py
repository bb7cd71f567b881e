"""Continuous axial position — the float analogue of HexCoord.

Used as an intermediate when converting world points to hexes and for
placing things inside a hex. The z = -x - y invariant holds exactly for
widened integer coordinates and only approximately after arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from hexengine.models.direction import HexDirection
from hexengine.models.hex import HexCoord

if TYPE_CHECKING:
    from hexengine.util.vector import Vector3


@dataclass(frozen=True)
class HexPosition:
    """Immutable continuous axial position.

    Attributes:
        x: Component along the NE axis.
        y: Component along the N axis.
    """

    x: float
    y: float

    @property
    def z(self) -> float:
        return -self.x - self.y

    @classmethod
    def from_coords(cls, coords: HexCoord) -> HexPosition:
        return cls(float(coords.q), float(coords.r))

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: Union[HexPosition, HexCoord, HexDirection]) -> HexPosition:
        delta = _as_position(other)
        if delta is None:
            return NotImplemented
        return HexPosition(self.x + delta.x, self.y + delta.y)

    __radd__ = __add__

    def __sub__(self, other: Union[HexPosition, HexCoord, HexDirection]) -> HexPosition:
        delta = _as_position(other)
        if delta is None:
            return NotImplemented
        return HexPosition(self.x - delta.x, self.y - delta.y)

    def __rsub__(self, other: Union[HexCoord, HexDirection]) -> HexPosition:
        base = _as_position(other)
        if base is None:
            return NotImplemented
        return HexPosition(base.x - self.x, base.y - self.y)

    # -- Geometry --------------------------------------------------------

    def offset(self) -> Vector3:
        """World offset from the origin to this position."""
        return HexDirection.NE.direction() * self.x + HexDirection.N.direction() * self.y

    def round(self) -> HexCoord:
        """Nearest hex coordinate."""
        from hexengine.util.hex_math import round_position_to_coords

        return round_position_to_coords(self)

    def isclose(self, other: Union[HexPosition, HexCoord], abs_tol: float = 1e-9) -> bool:
        other_pos = _as_position(other)
        if other_pos is None:
            return False
        return math.isclose(self.x, other_pos.x, abs_tol=abs_tol) and math.isclose(
            self.y, other_pos.y, abs_tol=abs_tol
        )

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ZERO = HexPosition(0.0, 0.0)


def _as_position(other: object) -> HexPosition | None:
    if isinstance(other, HexPosition):
        return other
    if isinstance(other, HexDirection):
        return HexPosition.from_coords(other.coords())
    if isinstance(other, HexCoord):
        return HexPosition.from_coords(other)
    return None
