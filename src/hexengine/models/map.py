"""Hexagonal map model.

A ``HexMap`` stores one tile per hex coordinate. Tiles are host-defined
objects that know their own coordinate and the map they belong to, so
neighbour queries do not need the map passed around.

Looking up an empty coordinate is not an error: the map answers ``None``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, Protocol, TypeVar, runtime_checkable

from hexengine.models.hex import HexCoord


@runtime_checkable
class HexTile(Protocol):
    """Anything stored in a HexMap.

    Attributes:
        coords: Coordinate the tile sits on.
        map: The map holding the tile (lookup only, no ownership).
    """

    coords: HexCoord
    map: HexMap


T = TypeVar("T", bound=HexTile)
U = TypeVar("U")


class BaseHexMap(ABC):
    """Type-erased view of a hex map."""

    @property
    @abstractmethod
    def all_base_tiles(self) -> list[HexTile]:
        """Snapshot of every stored tile."""

    @abstractmethod
    def has_tile(self, coords: HexCoord) -> bool:
        """True if a tile is stored at ``coords``."""

    @abstractmethod
    def get_tile(self, coords: HexCoord) -> Optional[HexTile]:
        """The tile at ``coords``, or None."""


class HexMap(BaseHexMap, Generic[T]):
    """Tiles keyed by hex coordinate.

    Not synchronised; concurrent writers must be serialised by the caller.
    """

    def __init__(self) -> None:
        self._tiles: dict[HexCoord, T] = {}

    # -- Item access -----------------------------------------------------

    def __getitem__(self, coords: HexCoord) -> Optional[T]:
        """Tile at ``coords``, or None when the hex is empty."""
        return self._tiles.get(coords)

    def __setitem__(self, coords: HexCoord, tile: Optional[T]) -> None:
        """Store ``tile`` at ``coords``; storing None empties the hex."""
        if tile is None:
            self._tiles.pop(coords, None)
        else:
            self._tiles[coords] = tile

    def __delitem__(self, coords: HexCoord) -> None:
        del self._tiles[coords]

    def __contains__(self, coords: object) -> bool:
        return coords in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(list(self._tiles))

    # -- Queries ---------------------------------------------------------

    def has_tile(self, coords: HexCoord) -> bool:
        return coords in self._tiles

    def get_tile(self, coords: HexCoord) -> Optional[T]:
        return self[coords]

    def try_get_tile(self, coords: HexCoord, tile_type: type[U]) -> tuple[bool, Optional[U]]:
        """Look up a tile and check it is a ``tile_type``.

        Returns:
            ``(True, tile)`` if a tile of that type is stored at ``coords``,
            otherwise ``(False, None)``. Never raises for a missing tile or
            a type mismatch.

        ``tile_type`` must be a class or a ``@runtime_checkable`` protocol.
        """
        tile = self._tiles.get(coords)
        if tile is None:
            return False, None
        if isinstance(tile, tile_type):
            return True, tile
        return False, None

    @property
    def all_tiles(self) -> list[T]:
        """Snapshot of every stored tile (order unspecified)."""
        return list(self._tiles.values())

    @property
    def all_base_tiles(self) -> list[HexTile]:
        return list(self._tiles.values())

    def coords(self) -> list[HexCoord]:
        """Snapshot of every occupied coordinate."""
        return list(self._tiles)

    # -- Mutation --------------------------------------------------------

    def place(self, tile: T) -> T:
        """Store a tile under its own coordinate and return it."""
        self._tiles[tile.coords] = tile
        return tile

    def remove(self, coords: HexCoord) -> Optional[T]:
        """Empty the hex at ``coords``; return what was there, if anything."""
        return self._tiles.pop(coords, None)

    def clear(self) -> None:
        self._tiles.clear()

    def __repr__(self) -> str:
        return f"HexMap({len(self._tiles)} tiles)"
