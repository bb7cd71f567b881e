"""Pydantic payload models for hex data.

These validate untrusted dicts (JSON, YAML) before they are turned into
HexCoord / HexPosition / HexMap values.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator


class HexCoordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    q: StrictInt
    r: StrictInt


class HexPositionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


class HexMapModel(BaseModel):
    """``{"tiles": {"q,r": value}}``; tile values are host-defined."""

    tiles: Dict[str, Any] = {}

    @field_validator("tiles", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value
