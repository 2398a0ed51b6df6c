"""Leg configuration and placement calculations.

Legs raise the whole cabinet body: every generator adds the leg height
offset to its Y positions.

Example:
    config = create_legs_config(True, LegPreset.TALL)
    count = get_effective_leg_count(config, 1200)
    positions = calculate_leg_positions(1200, 560, count, config.corner_inset)
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..validation import ValidationResult
from ..value_objects import (
    LegCountMode,
    LegFinish,
    LegPosition,
    LegPreset,
    LegShape,
    LegsConfig,
    LegTypeConfig,
)

logger = logging.getLogger(__name__)

# (height, adjust_range, diameter)
LEG_PRESETS: dict[LegPreset, tuple[float, float, float]] = {
    LegPreset.SHORT: (100.0, 20.0, 30.0),
    LegPreset.STANDARD: (150.0, 20.0, 30.0),
    LegPreset.TALL: (200.0, 30.0, 40.0),
    LegPreset.CUSTOM: (150.0, 20.0, 30.0),
}

LEG_FINISH_COLORS: dict[LegFinish, str] = {
    LegFinish.BLACK_PLASTIC: "#1a1a1a",
    LegFinish.CHROME: "#c0c0c0",
    LegFinish.BRUSHED_STEEL: "#8a8d8f",
    LegFinish.WHITE_PLASTIC: "#f5f5f5",
}

MIN_LEG_HEIGHT = 50.0
MAX_LEG_HEIGHT = 300.0
MIN_LEG_DIAMETER = 20.0
MAX_LEG_DIAMETER = 60.0
MIN_LEG_INSET = 20.0
MAX_LEG_INSET = 100.0
MIN_LEG_COUNT = 4
MAX_LEG_COUNT = 12
DEFAULT_CORNER_INSET = 50.0


def create_leg_type_config(preset: LegPreset = LegPreset.STANDARD) -> LegTypeConfig:
    """Create a leg model from a preset."""
    height, adjust_range, diameter = LEG_PRESETS[preset]
    return LegTypeConfig(
        preset=preset,
        height=height,
        adjust_range=adjust_range,
        diameter=diameter,
        shape=LegShape.ROUND,
        finish=LegFinish.BLACK_PLASTIC,
    )


def create_legs_config(
    enabled: bool = False, preset: LegPreset = LegPreset.STANDARD
) -> LegsConfig:
    """Create a legs configuration with the preset's nominal height."""
    leg_type = create_leg_type_config(preset)
    return LegsConfig(
        enabled=enabled,
        leg_type=leg_type,
        count_mode=LegCountMode.AUTO,
        current_height=leg_type.height,
        corner_inset=DEFAULT_CORNER_INSET,
    )


def update_leg_height(config: LegsConfig, height: float) -> LegsConfig:
    """Set the adjusted leg height, clamped to the leg's adjust range."""
    leg_type = config.leg_type
    minimum = leg_type.height - leg_type.adjust_range
    maximum = leg_type.height + leg_type.adjust_range
    clamped = max(minimum, min(maximum, height))
    if clamped != height:
        logger.warning(
            f"Leg height {height}mm outside adjust range, clamped to {clamped}mm"
        )
    return replace(config, current_height=clamped)


def calculate_leg_height_offset(legs: LegsConfig | None) -> float:
    """Vertical offset legs add to the cabinet body.

    Returns:
        0 when legs are absent or disabled, else the adjusted leg height.
    """
    if legs is None or not legs.enabled:
        return 0.0
    return legs.current_height


def calculate_leg_count(width: float) -> int:
    """Leg count needed to support a cabinet of the given width."""
    if width < 1000:
        return 4
    if width <= 1800:
        return 6
    return 8


def get_effective_leg_count(config: LegsConfig, width: float) -> int:
    """Manual leg count when set, else the count derived from the width."""
    if config.count_mode == LegCountMode.MANUAL and config.manual_count:
        return config.manual_count
    return calculate_leg_count(width)


def calculate_leg_positions(
    width: float,
    depth: float,
    count: int,
    inset: float = DEFAULT_CORNER_INSET,
) -> list[LegPosition]:
    """Leg centres on the floor plane, relative to the body centre.

    Four corner legs are always placed. Six legs add front and back centre
    legs; eight add two more at the back quarter points.

    Args:
        width: Cabinet width.
        depth: Cabinet depth.
        count: Number of legs requested.
        inset: Distance from the cabinet edges to the leg centres.

    Returns:
        Leg positions; Z is negative toward the back.
    """
    half_width = width / 2 - inset
    half_depth = depth / 2 - inset
    positions: list[LegPosition] = []

    if count >= 4:
        positions.extend(
            [
                LegPosition(-half_width, -half_depth),
                LegPosition(half_width, -half_depth),
                LegPosition(-half_width, half_depth),
                LegPosition(half_width, half_depth),
            ]
        )
    if count >= 6:
        positions.extend([LegPosition(0.0, -half_depth), LegPosition(0.0, half_depth)])
    if count >= 8:
        quarter_width = half_width / 2
        positions.extend(
            [
                LegPosition(-quarter_width, -half_depth),
                LegPosition(quarter_width, -half_depth),
            ]
        )
    return positions


def get_leg_color(finish: LegFinish) -> str:
    return LEG_FINISH_COLORS[finish]


def validate_legs_config(config: LegsConfig) -> ValidationResult:
    """Check a legs configuration against the hardware limits."""
    errors: list[str] = []

    if not MIN_LEG_HEIGHT <= config.current_height <= MAX_LEG_HEIGHT:
        errors.append(
            f"Leg height must be between {MIN_LEG_HEIGHT:g}-{MAX_LEG_HEIGHT:g}mm"
        )
    if not MIN_LEG_DIAMETER <= config.leg_type.diameter <= MAX_LEG_DIAMETER:
        errors.append(
            f"Leg diameter must be between {MIN_LEG_DIAMETER:g}-{MAX_LEG_DIAMETER:g}mm"
        )
    if not MIN_LEG_INSET <= config.corner_inset <= MAX_LEG_INSET:
        errors.append(
            f"Corner inset must be between {MIN_LEG_INSET:g}-{MAX_LEG_INSET:g}mm"
        )
    if config.count_mode == LegCountMode.MANUAL and config.manual_count:
        if not MIN_LEG_COUNT <= config.manual_count <= MAX_LEG_COUNT:
            errors.append(
                f"Leg count must be between {MIN_LEG_COUNT}-{MAX_LEG_COUNT}"
            )

    return ValidationResult.from_messages(errors)
