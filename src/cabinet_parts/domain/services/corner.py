"""Corner cabinet calculations.

All positions use the corner frame: origin at the front-left corner at
floor level, X right, Y up, Z back into the corner.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..validation import ValidationResult
from ..value_objects import (
    CornerConfig,
    CornerMountType,
    CornerPanelGeometry,
    WallSharingMode,
)
from .measurements import round_half_up

MIN_CORNER_W = 600.0
MAX_CORNER_W = 1500.0
MIN_CORNER_D = 600.0
MAX_CORNER_D = 1500.0
MIN_BODY_DEPTH = 300.0
MAX_BODY_DEPTH = 800.0
MIN_CORNER_HEIGHT = 200.0
MAX_CORNER_HEIGHT = 2500.0
MIN_FRONT_RAIL_WIDTH = 50.0
MAX_FRONT_RAIL_WIDTH = 200.0


@dataclass(frozen=True)
class DeadZone:
    """Inaccessible corner area in front of the two arms."""

    width: float
    depth: float


def calculate_side_height(
    height: float,
    bottom_mount: CornerMountType,
    top_mount: CornerMountType,
    thickness: float,
) -> float:
    """Height of the corner side panels.

    Overlay bottom or top panels sit on the side edges and shorten the
    sides by one thickness each.
    """
    bottom_offset = 0.0 if bottom_mount == CornerMountType.INSET else thickness
    top_offset = 0.0 if top_mount == CornerMountType.INSET else thickness
    return height - bottom_offset - top_offset


def calculate_dead_zone(config: CornerConfig) -> DeadZone:
    return DeadZone(width=config.W - config.body_depth, depth=config.D - config.body_depth)


def calculate_diagonal_width(config: CornerConfig) -> float:
    """Width of an angled front spanning the dead zone, minus door gaps."""
    dead_zone = calculate_dead_zone(config)
    raw_width = math.hypot(dead_zone.width, dead_zone.depth)
    return round_half_up(raw_width - config.door_gap * 2)


def calculate_shelf_positions(height: float, thickness: float, count: int) -> list[float]:
    """Evenly spaced shelf heights between the bottom and top panels."""
    if count <= 0:
        return []
    spacing = (height - 2 * thickness) / (count + 1)
    return [round_half_up(thickness + spacing * (i + 1)) for i in range(count)]


def should_use_l_shape(config: CornerConfig) -> bool:
    """True if the two-arm bottom and top are cut as one L polygon.

    Falls back to two rectangles when both end caps are shared, since the
    L outline can no longer be banded correctly.
    """
    if config.panel_geometry != CornerPanelGeometry.L_SHAPE:
        return False
    return config.wall_sharing_mode != WallSharingMode.SHARED_BOTH


def has_left_side(config: CornerConfig) -> bool:
    return config.wall_sharing_mode not in (
        WallSharingMode.SHARED_LEFT,
        WallSharingMode.SHARED_BOTH,
    )


def has_right_side(config: CornerConfig) -> bool:
    return config.wall_sharing_mode not in (
        WallSharingMode.SHARED_RIGHT,
        WallSharingMode.SHARED_BOTH,
    )


def validate_corner_config(
    config: CornerConfig, height: float | None = None
) -> ValidationResult:
    """Check a corner configuration against the construction limits.

    Args:
        config: Corner configuration to check.
        height: Cabinet height, checked when given.

    Returns:
        ValidationResult listing every limit that is violated.
    """
    errors: list[str] = []

    if height is not None and not MIN_CORNER_HEIGHT <= height <= MAX_CORNER_HEIGHT:
        errors.append(
            f"Height must be between {MIN_CORNER_HEIGHT:g}-{MAX_CORNER_HEIGHT:g}mm"
        )
    if not MIN_CORNER_W <= config.W <= MAX_CORNER_W:
        errors.append(f"Width W must be between {MIN_CORNER_W:g}-{MAX_CORNER_W:g}mm")
    if not MIN_CORNER_D <= config.D <= MAX_CORNER_D:
        errors.append(f"Depth D must be between {MIN_CORNER_D:g}-{MAX_CORNER_D:g}mm")
    if not MIN_BODY_DEPTH <= config.body_depth <= MAX_BODY_DEPTH:
        errors.append(
            f"Body depth must be between {MIN_BODY_DEPTH:g}-{MAX_BODY_DEPTH:g}mm"
        )
    if config.body_depth >= config.W:
        errors.append("Body depth must be less than width W")
    if config.body_depth >= config.D:
        errors.append("Body depth must be less than depth D")
    if config.front_rail and not (
        MIN_FRONT_RAIL_WIDTH <= config.front_rail_width <= MAX_FRONT_RAIL_WIDTH
    ):
        errors.append(
            f"Front rail width must be between "
            f"{MIN_FRONT_RAIL_WIDTH:g}-{MAX_FRONT_RAIL_WIDTH:g}mm"
        )

    return ValidationResult.from_messages(errors)
