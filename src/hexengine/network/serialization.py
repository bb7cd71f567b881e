"""Serialization — plain-data encoding of coordinates, positions and maps.

Coordinates round-trip as ``{"q": int, "r": int}`` or as ``"q,r"`` string
keys, positions as ``{"x": float, "y": float}``. ``encode``/``decode`` turn
such payloads into compact JSON bytes, optionally zlib-compressed;
``dump_map``/``read_map`` do the same for whole maps.
"""

from __future__ import annotations

import json
import logging
import zlib
from typing import Any, Callable

from pydantic import ValidationError

from hexengine.models.hex import HexCoord
from hexengine.models.map import HexMap
from hexengine.models.position import HexPosition
from hexengine.network.models import HexCoordModel, HexMapModel, HexPositionModel

log = logging.getLogger(__name__)

TileEncoder = Callable[[Any], Any]
TileFactory = Callable[[HexCoord, Any, HexMap], Any]


# -- Coordinates ----------------------------------------------------------


def coord_to_dict(coords: HexCoord) -> dict[str, int]:
    return {"q": coords.q, "r": coords.r}


def coord_from_dict(raw: dict[str, Any]) -> HexCoord:
    """Parse ``{"q": .., "r": ..}``.

    Raises:
        ValueError: missing or non-integer fields.
    """
    try:
        model = HexCoordModel.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid hex coordinate payload: {raw!r}") from exc
    return HexCoord(model.q, model.r)


def coord_to_key(coords: HexCoord) -> str:
    return f"{coords.q},{coords.r}"


def coord_from_key(key: str) -> HexCoord:
    """Parse a ``"q,r"`` map key.

    Raises:
        ValueError: the key is not two comma-separated integers.
    """
    try:
        q, r = key.split(",")
        return HexCoord(int(q), int(r))
    except ValueError as exc:
        raise ValueError(f"Invalid hex key {key!r}, expected 'q,r'") from exc


# -- Positions ------------------------------------------------------------


def position_to_dict(position: HexPosition) -> dict[str, float]:
    return {"x": position.x, "y": position.y}


def position_from_dict(raw: dict[str, Any]) -> HexPosition:
    try:
        model = HexPositionModel.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid hex position payload: {raw!r}") from exc
    return HexPosition(model.x, model.y)


# -- Maps -----------------------------------------------------------------


def map_to_dict(hex_map: HexMap, tile_encoder: TileEncoder) -> dict[str, Any]:
    """Encode a map as ``{"tiles": {"q,r": encoded_tile}}``."""
    return {
        "tiles": {
            coord_to_key(coords): tile_encoder(hex_map[coords])
            for coords in hex_map
        }
    }


def map_from_dict(raw: dict[str, Any], tile_factory: TileFactory) -> HexMap:
    """Build a map from ``{"tiles": {"q,r": value}}``.

    ``tile_factory(coords, value, hex_map)`` creates each tile; returning
    None leaves the hex empty.
    """
    try:
        model = HexMapModel.model_validate(raw)
    except ValidationError as exc:
        raise ValueError("Invalid hex map payload") from exc

    hex_map: HexMap = HexMap()
    for key, value in model.tiles.items():
        coords = coord_from_key(key)
        hex_map[coords] = tile_factory(coords, value, hex_map)
    log.debug("Decoded hex map with %d tiles", len(hex_map))
    return hex_map


# -- Bytes ----------------------------------------------------------------


def encode(data: dict[str, Any], compress: bool = False) -> bytes:
    """Encode a payload dict to bytes (JSON, optionally compressed)."""
    payload = json.dumps(data, separators=(",", ":")).encode("utf-8")
    if compress:
        payload = zlib.compress(payload)
    return payload


def decode(raw: bytes, compressed: bool = False) -> dict[str, Any]:
    """Decode bytes to a payload dict."""
    if compressed:
        raw = zlib.decompress(raw)
    return json.loads(raw.decode("utf-8"))


def dump_map(hex_map: HexMap, tile_encoder: TileEncoder, compress: bool = False) -> bytes:
    """Encode a map straight to bytes; see ``map_to_dict``."""
    return encode(map_to_dict(hex_map, tile_encoder), compress)


def read_map(raw: bytes, tile_factory: TileFactory, compressed: bool = False) -> HexMap:
    """Inverse of ``dump_map``.

    Raises:
        ValueError: the bytes are not a valid map payload.
    """
    try:
        data = decode(raw, compressed)
    except (zlib.error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Could not decode hex map bytes") from exc
    if not isinstance(data, dict):
        raise ValueError("Hex map payload must be a mapping")
    return map_from_dict(data, tile_factory)
