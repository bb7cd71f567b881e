"""Grid configuration — loads grid settings from config/grid.yaml.

Provides a single ``GridConfig`` dataclass that is loaded once at startup
and then passed (or injected) wherever the grid scale is needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from hexengine.loaders.map_loader import load_map
from hexengine.models.hex import HexCoord
from hexengine.models.map import HexMap
from hexengine.models.position import HexPosition
from hexengine.network.serialization import TileFactory
from hexengine.util.hex_math import hex_to_point, point_to_hex_coords, point_to_hex_position
from hexengine.util.vector import Point, Vector3

log = logging.getLogger(__name__)

DEFAULT_GRID_CONFIG_PATH = "config/grid.yaml"


@dataclass
class GridConfig:
    """Tunable grid settings.

    Every field has a sensible default so a host can run without the file.
    """

    grid_scale: float = 1.0
    """World distance between adjacent hex centers."""

    map_file: Optional[str] = None
    """Optional YAML map to load alongside the grid."""

    float_tolerance: float = 1e-6
    """Tolerance when comparing continuous positions."""

    def __post_init__(self) -> None:
        try:
            self.grid_scale = float(self.grid_scale)
            self.float_tolerance = float(self.float_tolerance)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"grid_scale and float_tolerance must be numbers, "
                f"got {self.grid_scale!r} and {self.float_tolerance!r}"
            ) from exc
        if self.grid_scale <= 0:
            raise ValueError(f"grid_scale must be positive, got {self.grid_scale}")
        if self.float_tolerance < 0:
            raise ValueError("float_tolerance cannot be negative")

    # -- Bound conversions -----------------------------------------------

    def point_to_coords(self, point: Point) -> HexCoord:
        return point_to_hex_coords(point, self.grid_scale)

    def point_to_position(self, point: Point) -> HexPosition:
        return point_to_hex_position(point, self.grid_scale)

    def coords_to_point(self, coords: HexCoord) -> Vector3:
        return hex_to_point(coords, self.grid_scale)

    def same_position(self, a: HexPosition, b: HexPosition) -> bool:
        return a.isclose(b, abs_tol=self.float_tolerance)

    # -- Map -------------------------------------------------------------

    def load_map(
        self, tile_factory: TileFactory, base_dir: str | Path | None = None
    ) -> Optional[HexMap]:
        """Load the configured ``map_file``, or return None if there is none.

        Relative paths resolve against ``base_dir`` (default: the working
        directory).
        """
        if self.map_file is None:
            log.debug("No map_file configured")
            return None
        path = Path(self.map_file)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        return load_map(path, tile_factory)


def load_grid_config(path: str | Path = DEFAULT_GRID_CONFIG_PATH) -> GridConfig:
    """Load grid configuration from a YAML file.

    Missing keys fall back to dataclass defaults; unknown keys are ignored.
    If the file does not exist, a warning is logged and pure defaults are
    returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Grid config not found at %s, using defaults", p)
        return GridConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Grid config at {p} must be a mapping")

    unknown = sorted(k for k in raw if k not in GridConfig.__dataclass_fields__)
    if unknown:
        log.warning("Ignoring unknown grid config keys: %s", ", ".join(unknown))

    cfg = GridConfig(**{
        k: v for k, v in raw.items()
        if k in GridConfig.__dataclass_fields__
    })
    log.info("Loaded grid config from %s (grid_scale=%s)", p, cfg.grid_scale)
    return cfg
