"""Map loader — parses hex map definitions into HexMap models.

Format: ``tiles`` dict of {"q,r": value}. What a value means is up to the
host; a tile factory turns each entry into a tile object.

    tiles:
      "0,0": grass
      "1,0": water
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from hexengine.models.map import HexMap
from hexengine.network.serialization import TileFactory, map_from_dict

log = logging.getLogger(__name__)


def load_map(path: str | Path, tile_factory: TileFactory) -> HexMap:
    """Load a hex map from a YAML file.

    Args:
        path: Path to the map YAML file.
        tile_factory: Called as ``tile_factory(coords, value, hex_map)`` for
            every entry; returning None leaves the hex empty.

    Returns:
        Populated HexMap instance.
    """
    path = Path(path)
    with path.open() as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Map file {path} must contain a mapping")

    hex_map = map_from_dict({"tiles": data.get("tiles")}, tile_factory)
    log.info("Loaded map from %s (%d tiles)", path, len(hex_map))
    return hex_map
