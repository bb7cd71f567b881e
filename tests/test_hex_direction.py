"""Tests for HexDirection — rotation, lookup and precomputed geometry."""

import math

import pytest

from hexengine.models.direction import (
    IN_TO_OUT_RADIUS,
    OUT_TO_IN_RADIUS,
    VERTEX_FACTOR,
    HexDirection,
    InvalidDirectionError,
)
from hexengine.models.hex import HexCoord

ALL = list(HexDirection)


class TestRotation:
    @pytest.mark.parametrize("d", ALL)
    def test_full_wrap(self, d):
        assert d.rotate(6) is d
        assert d.rotate(-6) is d
        assert d.rotate(0) is d

    @pytest.mark.parametrize("d", ALL)
    def test_opposite_twice(self, d):
        assert d.opposite().opposite() is d

    @pytest.mark.parametrize("d", ALL)
    def test_right_then_left(self, d):
        assert d.right().left() is d
        assert d.left().right() is d

    def test_wraps_both_ways(self):
        assert HexDirection.N.left() is HexDirection.NW
        assert HexDirection.NW.right() is HexDirection.N
        assert HexDirection.NE.rotate(-13) is HexDirection.N
        assert HexDirection.S.rotate(8) is HexDirection.NW

    def test_opposite_pairs(self):
        assert HexDirection.N.opposite() is HexDirection.S
        assert HexDirection.NE.opposite() is HexDirection.SW
        assert HexDirection.SE.opposite() is HexDirection.NW

    def test_loop_starts_at_self(self):
        assert list(HexDirection.SE.loop()) == [
            HexDirection.SE,
            HexDirection.S,
            HexDirection.SW,
            HexDirection.NW,
            HexDirection.N,
            HexDirection.NE,
        ]

    def test_loop_restartable(self):
        assert list(HexDirection.N.loop()) == list(HexDirection.N.loop()) == ALL


class TestCoords:
    def test_unit_deltas(self):
        assert HexDirection.N.coords() == HexCoord(0, 1)
        assert HexDirection.NE.coords() == HexCoord(1, 0)
        assert HexDirection.SE.coords() == HexCoord(1, -1)
        assert HexDirection.S.coords() == HexCoord(0, -1)
        assert HexDirection.SW.coords() == HexCoord(-1, 0)
        assert HexDirection.NW.coords() == HexCoord(-1, 1)

    @pytest.mark.parametrize("d", ALL)
    def test_opposite_coords_negate(self, d):
        assert d.opposite().coords() == -d.coords()

    def test_from_coords(self):
        assert HexDirection.from_coords(HexCoord(1, 0)) is HexDirection.NE

    def test_from_coords_invalid(self):
        with pytest.raises(InvalidDirectionError) as exc_info:
            HexDirection.from_coords(HexCoord(2, 0))
        assert exc_info.value.coords == HexCoord(2, 0)
        assert isinstance(exc_info.value, ValueError)


class TestGeometry:
    def test_radius_constants(self):
        assert IN_TO_OUT_RADIUS == pytest.approx(1.154700538)
        assert OUT_TO_IN_RADIUS == pytest.approx(0.866025404)
        assert IN_TO_OUT_RADIUS * OUT_TO_IN_RADIUS == pytest.approx(1.0)

    def test_angles(self):
        assert [d.angle() for d in ALL] == [0.0, 60.0, 120.0, 180.0, 240.0, 300.0]

    def test_north_is_forward(self):
        assert HexDirection.N.direction().isclose((0.0, 0.0, 1.0))
        assert HexDirection.S.direction().isclose((0.0, 0.0, -1.0))

    def test_north_east(self):
        assert HexDirection.NE.direction().isclose((math.sqrt(3) / 2, 0.0, 0.5))

    @pytest.mark.parametrize("d", ALL)
    def test_direction_vectors_are_unit(self, d):
        assert d.direction().length() == pytest.approx(1.0)
        assert d.left_corner_direction().length() == pytest.approx(1.0)
        assert d.direction().y == 0.0

    def test_north_corner_directions(self):
        n = HexDirection.N
        assert n.left_corner_direction().isclose((-0.5, 0.0, math.sqrt(3) / 2))
        assert n.right_corner_direction().isclose((0.5, 0.0, math.sqrt(3) / 2))

    @pytest.mark.parametrize("d", ALL)
    def test_right_corner_is_next_left_corner(self, d):
        assert d.right_corner_direction() == d.right().left_corner_direction()
        assert d.right_corner() == d.right().left_corner()

    @pytest.mark.parametrize("d", ALL)
    def test_corner_offsets(self, d):
        assert d.left_corner().length() == pytest.approx(VERTEX_FACTOR)
        # The edge midpoint lies halfway to the neighbour's center
        mid = (d.left_corner() + d.right_corner()) * 0.5
        assert mid.isclose(d.direction() * 0.5)
