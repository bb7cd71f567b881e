"""Minimal 3D vector used for world-space points and direction vectors.

World convention: y is vertical, the hex plane is x/z and "forward" (0, 0, 1)
points north.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, point: Sequence[float]) -> Vector3:
        """Build a vector from any 3-element sequence (or return it as is)."""
        if isinstance(point, Vector3):
            return point
        x, y, z = point
        return cls(float(x), float(y), float(z))

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vector3:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return Vector3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vector3:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return Vector3(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # -- Geometry --------------------------------------------------------

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def isclose(self, other: Sequence[float], abs_tol: float = 1e-9) -> bool:
        """Component-wise approximate equality."""
        return all(
            math.isclose(a, b, abs_tol=abs_tol) for a, b in zip(self, Vector3.of(other))
        )

    @staticmethod
    def from_angle(degrees: float, length: float = 1.0) -> Vector3:
        """Horizontal vector at ``degrees`` clockwise from forward (0, 0, 1)."""
        rad = math.radians(degrees)
        return Vector3(math.sin(rad) * length, 0.0, math.cos(rad) * length)

    def __repr__(self) -> str:
        return f"Vector3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"


Point = Union[Vector3, Sequence[float]]
"""Anything accepted as a world-space point."""
