"""Tile adjacency — neighbour queries and pathfinding over a HexMap.

Every tile carries its own coordinate and a back-reference to its map, so
these helpers only need the tile itself. Missing neighbours come back as
``None`` (or are skipped), they are never an error.

Also provides:
- Path validation (connectivity, no gaps)
- Pathfinding (BFS across present tiles)
- Path distance calculation
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterator, Optional, TypeVar

from hexengine.models.direction import HexDirection
from hexengine.models.hex import HexCoord
from hexengine.models.map import HexMap, HexTile

log = logging.getLogger(__name__)

T = TypeVar("T", bound=HexTile)


def get_neighbour(tile: T, direction: HexDirection) -> Optional[T]:
    """The tile next to ``tile`` in ``direction``, or None."""
    return tile.map[tile.coords + direction]


def get_direction_to_neighbour(tile: HexTile, neighbour: HexTile) -> HexDirection:
    """Direction from ``tile`` to an adjacent ``neighbour``.

    Raises:
        InvalidDirectionError: the two tiles are not adjacent.
    """
    return (neighbour.coords - tile.coords).to_direction()


def all_neighbours(tile: T) -> Iterator[T]:
    """Yield the present neighbours of ``tile``, clockwise from N."""
    for direction in HexDirection.N.loop():
        neighbour = get_neighbour(tile, direction)
        if neighbour is not None:
            yield neighbour


def validate_path(path: list[HexCoord]) -> bool:
    """Check that each consecutive pair in the path are hex neighbors.

    Args:
        path: Ordered list of hex coordinates.

    Returns:
        True if the path is valid (all steps are between neighbors).
    """
    if len(path) < 2:
        return True
    return all(path[i].distance_to(path[i + 1]) == 1 for i in range(len(path) - 1))


def find_path(
    hex_map: HexMap[T],
    start: HexCoord,
    goal: HexCoord,
    passable: Optional[Callable[[T], bool]] = None,
) -> Optional[list[HexCoord]]:
    """Find a shortest path from start to goal using BFS.

    Only hexes holding a tile are walkable; ``passable`` can exclude more.
    Neighbours are explored in direction order, so ties resolve the same
    way every time.

    Args:
        hex_map: Map to search.
        start: First coordinate of the path.
        goal: Last coordinate of the path.
        passable: Optional predicate a tile must satisfy to be entered.

    Returns:
        List of HexCoord from start to goal, or None if no path exists.
    """

    def walkable(coords: HexCoord) -> bool:
        tile = hex_map[coords]
        if tile is None:
            return False
        return passable is None or passable(tile)

    if not walkable(start) or not walkable(goal):
        log.debug("No path %r -> %r: endpoint not walkable", start, goal)
        return None

    queue: deque[HexCoord] = deque([start])
    parent: dict[HexCoord, Optional[HexCoord]] = {start: None}

    while queue:
        current = queue.popleft()

        if current == goal:
            path: list[HexCoord] = []
            node: Optional[HexCoord] = current
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            log.debug("Path %r -> %r: %d steps", start, goal, len(path) - 1)
            return path

        for nxt in current.neighbors():
            if nxt not in parent and walkable(nxt):
                parent[nxt] = current
                queue.append(nxt)

    log.debug("No path %r -> %r (%d hexes visited)", start, goal, len(parent))
    return None


def path_distance(path: list[HexCoord]) -> int:
    """Return the number of steps in a path (len - 1)."""
    return max(0, len(path) - 1)
