"""Tests for tile adjacency and pathfinding over a HexMap."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from hexengine.engine.adjacency import (
    all_neighbours,
    find_path,
    get_direction_to_neighbour,
    get_neighbour,
    path_distance,
    validate_path,
)
from hexengine.models.direction import HexDirection, InvalidDirectionError
from hexengine.models.hex import HexCoord
from hexengine.models.map import HexMap


@dataclass(eq=False)
class Tile:
    coords: HexCoord
    map: HexMap
    blocked: bool = False


def _make_map(coords) -> HexMap[Tile]:
    m: HexMap[Tile] = HexMap()
    for c in coords:
        m.place(Tile(c, m))
    return m


class TestNeighbours:
    def test_get_neighbour(self):
        m = _make_map(HexCoord(0, 0).disk(1))
        center = m[HexCoord(0, 0)]
        assert get_neighbour(center, HexDirection.N) is m[HexCoord(0, 1)]

    def test_missing_neighbour_is_none(self):
        m = _make_map([HexCoord(0, 0)])
        assert get_neighbour(m[HexCoord(0, 0)], HexDirection.S) is None

    def test_all_neighbours_full_ring_in_order(self):
        m = _make_map(HexCoord(0, 0).disk(2))
        center = m[HexCoord(0, 0)]
        found = [t.coords for t in all_neighbours(center)]
        assert found == [d.coords() for d in HexDirection]

    def test_all_neighbours_skips_missing(self):
        m = _make_map([HexCoord(0, 0), HexCoord(1, 0), HexCoord(0, -1), HexCoord(5, 5)])
        found = [t.coords for t in all_neighbours(m[HexCoord(0, 0)])]
        assert found == [HexCoord(1, 0), HexCoord(0, -1)]

    def test_all_neighbours_restartable(self):
        m = _make_map(HexCoord(0, 0).disk(1))
        center = m[HexCoord(0, 0)]
        assert list(all_neighbours(center)) == list(all_neighbours(center))

    def test_isolated_tile(self):
        m = _make_map([HexCoord(3, 3)])
        assert list(all_neighbours(m[HexCoord(3, 3)])) == []


class TestDirectionToNeighbour:
    def test_adjacent(self):
        m = _make_map([HexCoord(2, -1), HexCoord(3, -1)])
        d = get_direction_to_neighbour(m[HexCoord(2, -1)], m[HexCoord(3, -1)])
        assert d is HexDirection.NE
        assert d.coords() == HexCoord(1, 0)

    def test_reverse_is_opposite(self):
        m = _make_map([HexCoord(2, -1), HexCoord(3, -1)])
        d = get_direction_to_neighbour(m[HexCoord(3, -1)], m[HexCoord(2, -1)])
        assert d is HexDirection.SW

    def test_not_adjacent_raises(self):
        m = _make_map([HexCoord(2, -1), HexCoord(4, -1)])
        with pytest.raises(InvalidDirectionError):
            get_direction_to_neighbour(m[HexCoord(2, -1)], m[HexCoord(4, -1)])

    def test_same_tile_raises(self):
        m = _make_map([HexCoord(0, 0)])
        t = m[HexCoord(0, 0)]
        with pytest.raises(InvalidDirectionError):
            get_direction_to_neighbour(t, t)


class TestPathValidation:
    def test_empty_and_single(self):
        assert validate_path([])
        assert validate_path([HexCoord(0, 0)])

    def test_connected(self):
        assert validate_path([HexCoord(0, 0), HexCoord(1, 0), HexCoord(2, -1)])

    def test_gap(self):
        assert not validate_path([HexCoord(0, 0), HexCoord(2, 0)])

    def test_path_distance(self):
        assert path_distance([]) == 0
        assert path_distance([HexCoord(0, 0), HexCoord(1, 0)]) == 1


class TestFindPath:
    def test_straight_line(self):
        m = _make_map(HexCoord(q, 0) for q in range(5))
        path = find_path(m, HexCoord(0, 0), HexCoord(4, 0))
        assert path == [HexCoord(q, 0) for q in range(5)]

    def test_shortest_on_open_field(self):
        m = _make_map(HexCoord(0, 0).disk(4))
        path = find_path(m, HexCoord(-2, 0), HexCoord(2, -1))
        assert path is not None
        assert validate_path(path)
        assert path_distance(path) == HexCoord(-2, 0).distance_to(HexCoord(2, -1))

    def test_start_is_goal(self):
        m = _make_map([HexCoord(0, 0)])
        assert find_path(m, HexCoord(0, 0), HexCoord(0, 0)) == [HexCoord(0, 0)]

    def test_missing_tiles_block(self):
        m = _make_map([HexCoord(0, 0), HexCoord(2, 0)])
        assert find_path(m, HexCoord(0, 0), HexCoord(2, 0)) is None

    def test_goal_off_map(self):
        m = _make_map([HexCoord(0, 0)])
        assert find_path(m, HexCoord(0, 0), HexCoord(1, 0)) is None

    def test_passable_detour(self):
        m = _make_map(HexCoord(0, 0).disk(2))
        m[HexCoord(0, 0)].blocked = True
        path = find_path(m, HexCoord(-1, 0), HexCoord(1, 0), passable=lambda t: not t.blocked)
        assert path is not None
        assert HexCoord(0, 0) not in path
        assert validate_path(path)
        assert path_distance(path) > 2
