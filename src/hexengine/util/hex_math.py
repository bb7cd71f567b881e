"""Hex math utilities — conversions between world space and the hex grid.

World points are 3D with y vertical; only x and z take part in the
conversion. The axial basis is formed by the NE and N unit direction
vectors, so hexes whose centers are one world unit apart have a grid scale
of 1.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math
from typing import Union

from hexengine.models.direction import HexDirection
from hexengine.models.hex import HexCoord
from hexengine.models.position import HexPosition
from hexengine.util.vector import Point, Vector3

SQRT3: float = math.sqrt(3.0)

A: float = -SQRT3 / 3.0
B: float = (2.0 * SQRT3) / 3.0


# -- World <-> axial ------------------------------------------------------


def point_to_hex_position(point: Point, grid_scale: float = 1.0) -> HexPosition:
    """Project a world point onto continuous axial coordinates.

    The vertical (y) component of ``point`` is ignored.
    """
    _check_scale(grid_scale)
    px, _, pz = point
    x = B * px
    y = A * px + pz
    return HexPosition(x / grid_scale, y / grid_scale)


def point_to_hex_coords(point: Point, grid_scale: float = 1.0) -> HexCoord:
    """Return the hex containing a world point."""
    return round_position_to_coords(point_to_hex_position(point, grid_scale))


def hex_to_point(hex_: Union[HexCoord, HexPosition], grid_scale: float = 1.0) -> Vector3:
    """World position of a hex center (or of a continuous position)."""
    _check_scale(grid_scale)
    return hex_.offset() * grid_scale


def hex_corners(coords: HexCoord, grid_scale: float = 1.0) -> list[Vector3]:
    """The six world-space corners of a hex, clockwise from N's left corner."""
    center = hex_to_point(coords, grid_scale)
    return [center + direction.left_corner() * grid_scale for direction in HexDirection]


# -- Rounding -------------------------------------------------------------


def round_position_to_coords(position: HexPosition) -> HexCoord:
    """Round a continuous axial position to the nearest hex coordinate."""
    return cube_round(position.x, position.y, position.z)


def cube_round(fx: float, fy: float, fz: float) -> HexCoord:
    """Round fractional cube coordinates to the nearest hex.

    Each component is rounded on its own, then the one with the largest
    rounding error is rebuilt from the other two. Ties go to the first match
    in x, y order; z is never stored.
    """
    x = round(fx)
    y = round(fy)
    z = round(fz)

    x_diff = abs(x - fx)
    y_diff = abs(y - fy)
    z_diff = abs(z - fz)

    if x_diff > y_diff and x_diff > z_diff:
        x = -y - z
    elif y_diff > z_diff:
        y = -x - z
    # else: z = -x - y (implicit, not stored)

    return HexCoord(x, y)


# -- Grid helpers ---------------------------------------------------------


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """Compute the hex grid distance between two coordinates."""
    return a.distance_to(b)


def hex_linedraw(a: HexCoord, b: HexCoord) -> list[HexCoord]:
    """Draw a line between two hex coordinates using linear interpolation.

    Returns a list of hex coordinates from a to b (inclusive).
    """
    n = a.distance_to(b)
    if n == 0:
        return [a]

    # Nudge off exact edge crossings so rounding stays on one side
    ax, ay = a.q + 1e-6, a.r + 2e-6
    bx, by = b.q + 1e-6, b.r + 2e-6

    results: list[HexCoord] = []
    for i in range(n + 1):
        t = i / n
        fx = ax + (bx - ax) * t
        fy = ay + (by - ay) * t
        results.append(cube_round(fx, fy, -fx - fy))
    return results


def hex_ring(center: HexCoord, radius: int) -> list[HexCoord]:
    """Return all hexes at exactly `radius` distance from center."""
    return center.ring(radius)


def hex_disk(center: HexCoord, radius: int) -> set[HexCoord]:
    """Return all hexes within `radius` distance from center (inclusive)."""
    return center.disk(radius)


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """Return the 6 neighbors of a hex coordinate."""
    return list(coord.neighbors())


def _check_scale(grid_scale: float) -> None:
    if grid_scale <= 0:
        raise ValueError(f"grid_scale must be positive, got {grid_scale}")
