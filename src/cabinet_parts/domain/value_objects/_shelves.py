"""Shelf configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShelfDepthPreset(str, Enum):
    """Shelf depth relative to the cabinet.

    Attributes:
        FULL: Cabinet depth minus the front setback.
        HALF: Half of the FULL depth.
        CUSTOM: Explicit depth in mm.
    """

    FULL = "full"
    HALF = "half"
    CUSTOM = "custom"


class ShelvesMode(str, Enum):
    """Whether shelves share one setting or are configured one by one."""

    UNIFORM = "uniform"
    MANUAL = "manual"


@dataclass(frozen=True)
class ShelfConfig:
    """Per-shelf overrides used in MANUAL mode.

    Attributes:
        depth_preset: Depth of this shelf.
        custom_depth: Depth in mm when depth_preset is CUSTOM.
        material_id: Material override for this shelf.
        position_y: Height above the zone bottom in mm.
    """

    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None
    position_y: float | None = None


@dataclass(frozen=True)
class ShelvesConfiguration:
    """Shelves placed in an interior zone."""

    mode: ShelvesMode = ShelvesMode.UNIFORM
    count: int = 1
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None
    shelves: tuple[ShelfConfig, ...] = ()

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("Shelf count must be non-negative")
