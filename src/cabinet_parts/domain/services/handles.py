"""Handle catalog and handle placement on fronts.

Handle positions are (x, y) offsets of the handle centre from the centre
of the front it is mounted on.
"""

from __future__ import annotations

import logging

from ..value_objects import (
    DoorType,
    HandleCategory,
    HandleConfig,
    HandleDimensions,
    HandleFinish,
    HandleMetadata,
    HandleOrientation,
    HandlePosition,
    HandlePositionPreset,
    HandleType,
    HingeSide,
)
from .measurements import clamp

logger = logging.getLogger(__name__)

HANDLE_DIMENSIONS: dict[str, HandleDimensions] = {
    "BAR_128": HandleDimensions(length=128, height=35, hole_spacing=128),
    "BAR_160": HandleDimensions(length=160, height=35, hole_spacing=160),
    "BAR_192": HandleDimensions(length=192, height=35, hole_spacing=192),
    "BAR_256": HandleDimensions(length=256, height=35, hole_spacing=256),
    "BAR_320": HandleDimensions(length=320, height=35, hole_spacing=320),
    "BAR_480": HandleDimensions(length=480, height=35, hole_spacing=480),
    "BAR_640": HandleDimensions(length=640, height=35, hole_spacing=640),
    "STRIP_200": HandleDimensions(length=200, height=25, width=20),
    "STRIP_400": HandleDimensions(length=400, height=25, width=20),
    "STRIP_600": HandleDimensions(length=600, height=25, width=20),
    # Zero length runs the full width of the front
    "STRIP_FULL": HandleDimensions(length=0, height=25, width=20),
    "KNOB_SMALL": HandleDimensions(length=0, height=25, diameter=25),
    "KNOB_MEDIUM": HandleDimensions(length=0, height=30, diameter=32),
    "KNOB_LARGE": HandleDimensions(length=0, height=35, diameter=40),
    "MILLED_STANDARD": HandleDimensions(length=0, height=15, width=40),
    "MILLED_PARTIAL": HandleDimensions(length=300, height=15, width=40),
    "GOLA_C": HandleDimensions(length=0, height=37),
    "GOLA_L": HandleDimensions(length=0, height=65),
    "GOLA_J": HandleDimensions(length=0, height=38),
    "EDGE_MOUNTED_STANDARD": HandleDimensions(length=0, height=20),
    "TIP_ON_STANDARD": HandleDimensions(length=76, height=10),
    "PUSH_LATCH_STANDARD": HandleDimensions(length=40, height=15),
}


def _preset(
    handle_type: HandleType,
    category: HandleCategory,
    dimensions: str,
    preset: HandlePositionPreset,
    offset: float,
    orientation: HandleOrientation = HandleOrientation.HORIZONTAL,
    finish: HandleFinish | None = None,
) -> HandleConfig:
    return HandleConfig(
        type=handle_type,
        category=category,
        orientation=orientation,
        position=HandlePosition(preset=preset, offset_from_edge=offset),
        dimensions=HANDLE_DIMENSIONS[dimensions],
        finish=finish,
    )


HANDLE_PRESETS: dict[str, HandleConfig] = {
    "BAR_128_HORIZONTAL": _preset(
        HandleType.BAR, HandleCategory.TRADITIONAL, "BAR_128",
        HandlePositionPreset.MIDDLE_RIGHT, 30, finish=HandleFinish.CHROME,
    ),
    "BAR_160_HORIZONTAL": _preset(
        HandleType.BAR, HandleCategory.TRADITIONAL, "BAR_160",
        HandlePositionPreset.MIDDLE_RIGHT, 30, finish=HandleFinish.CHROME,
    ),
    "BAR_320_VERTICAL": _preset(
        HandleType.BAR, HandleCategory.TRADITIONAL, "BAR_320",
        HandlePositionPreset.MIDDLE_RIGHT, 30,
        orientation=HandleOrientation.VERTICAL, finish=HandleFinish.CHROME,
    ),
    "STRIP_EDGE": _preset(
        HandleType.STRIP, HandleCategory.TRADITIONAL, "STRIP_FULL",
        HandlePositionPreset.TOP_CENTER, 0, finish=HandleFinish.BRUSHED_NICKEL,
    ),
    "KNOB_CLASSIC": _preset(
        HandleType.KNOB, HandleCategory.TRADITIONAL, "KNOB_MEDIUM",
        HandlePositionPreset.MIDDLE_RIGHT, 40, finish=HandleFinish.CHROME,
    ),
    "MILLED_TOP_EDGE": _preset(
        HandleType.MILLED, HandleCategory.MODERN, "MILLED_STANDARD",
        HandlePositionPreset.TOP_CENTER, 0,
    ),
    "GOLA_HORIZONTAL": _preset(
        HandleType.GOLA, HandleCategory.MODERN, "GOLA_C",
        HandlePositionPreset.TOP_CENTER, 0, finish=HandleFinish.ALUMINUM,
    ),
    "GOLA_VERTICAL": _preset(
        HandleType.GOLA, HandleCategory.MODERN, "GOLA_L",
        HandlePositionPreset.MIDDLE_LEFT, 0,
        orientation=HandleOrientation.VERTICAL, finish=HandleFinish.ALUMINUM,
    ),
    "EDGE_PROFILE": _preset(
        HandleType.EDGE_MOUNTED, HandleCategory.MODERN, "EDGE_MOUNTED_STANDARD",
        HandlePositionPreset.TOP_CENTER, 0, finish=HandleFinish.BLACK_MATTE,
    ),
    "TIP_ON": _preset(
        HandleType.TIP_ON, HandleCategory.HANDLELESS, "TIP_ON_STANDARD",
        HandlePositionPreset.MIDDLE_RIGHT, 50,
    ),
    "PUSH_LATCH": _preset(
        HandleType.PUSH_LATCH, HandleCategory.HANDLELESS, "PUSH_LATCH_STANDARD",
        HandlePositionPreset.MIDDLE_RIGHT, 50,
    ),
}


def handle_length(config: HandleConfig) -> float:
    """Extent of the handle along its orientation axis.

    Knobs have no length; their diameter is used instead.
    """
    dimensions = config.dimensions
    if dimensions is None:
        return 0.0
    if dimensions.length:
        return dimensions.length
    return dimensions.diameter or 0.0


def calculate_handle_limits(
    config: HandleConfig, door_width: float, door_height: float
) -> tuple[float, float]:
    """Largest |x| and |y| a handle centre may take on a front.

    The handle's far end stays at least ``offset_from_edge`` away from
    the front edge along its orientation axis.
    """
    offset = config.position.offset_from_edge
    half_length = handle_length(config) / 2
    if config.orientation == HandleOrientation.VERTICAL:
        offset_x, offset_y = offset, offset + half_length
    else:
        offset_x, offset_y = offset + half_length, offset
    return max(door_width / 2 - offset_x, 0.0), max(door_height / 2 - offset_y, 0.0)


_PRESET_SIGNS: dict[HandlePositionPreset, tuple[int, int]] = {
    HandlePositionPreset.TOP_LEFT: (-1, 1),
    HandlePositionPreset.TOP_CENTER: (0, 1),
    HandlePositionPreset.TOP_RIGHT: (1, 1),
    HandlePositionPreset.MIDDLE_LEFT: (-1, 0),
    HandlePositionPreset.MIDDLE_RIGHT: (1, 0),
    HandlePositionPreset.BOTTOM_LEFT: (-1, -1),
    HandlePositionPreset.BOTTOM_CENTER: (0, -1),
    HandlePositionPreset.BOTTOM_RIGHT: (1, -1),
}


def calculate_handle_position(
    config: HandleConfig,
    door_width: float,
    door_height: float,
    door_type: DoorType,
    hinge_side: HingeSide | None = None,
) -> tuple[float, float]:
    """Resolve where a handle sits on a front.

    Named presets map to the edges and corners of the front. CUSTOM uses
    the explicit coordinates, clamped so the handle stays on the front.
    Without a preset the handle goes to the edge away from the hinge, or
    next to the centre gap of a double door. Fronts with no hinge side
    take the left edge.

    Args:
        config: Handle specification.
        door_width: Width of the front.
        door_height: Height of the front.
        door_type: SINGLE, DOUBLE_LEFT or DOUBLE_RIGHT.
        hinge_side: Hinge side of a single door, if any.

    Returns:
        (x, y) offset of the handle centre from the front centre.
    """
    max_x, max_y = calculate_handle_limits(config, door_width, door_height)
    preset = config.position.preset

    if preset == HandlePositionPreset.CUSTOM:
        x = config.position.x or 0.0
        y = config.position.y or 0.0
        clamped = (clamp(x, -max_x, max_x), clamp(y, -max_y, max_y))
        if clamped != (x, y):
            logger.warning(
                f"Custom handle position ({x}, {y}) clamped to {clamped} "
                f"on {door_width}x{door_height} front"
            )
        return clamped

    if preset is not None:
        sign_x, sign_y = _PRESET_SIGNS[preset]
        return sign_x * max_x, sign_y * max_y

    if door_type == DoorType.DOUBLE_LEFT:
        return max_x, 0.0
    if door_type == DoorType.DOUBLE_RIGHT:
        return -max_x, 0.0
    if hinge_side == HingeSide.LEFT:
        return max_x, 0.0
    return -max_x, 0.0


def get_default_handle_position_preset(
    door_type: DoorType, hinge_side: HingeSide | None = None
) -> HandlePositionPreset:
    """Preset matching the smart default for a door."""
    if door_type == DoorType.DOUBLE_LEFT:
        return HandlePositionPreset.MIDDLE_RIGHT
    if door_type == DoorType.DOUBLE_RIGHT:
        return HandlePositionPreset.MIDDLE_LEFT
    if hinge_side == HingeSide.LEFT:
        return HandlePositionPreset.MIDDLE_RIGHT
    return HandlePositionPreset.MIDDLE_LEFT


def generate_handle_metadata(
    config: HandleConfig,
    door_width: float,
    door_height: float,
    door_type: DoorType,
    hinge_side: HingeSide | None = None,
) -> HandleMetadata:
    position = calculate_handle_position(
        config, door_width, door_height, door_type, hinge_side
    )
    return HandleMetadata(config=config, actual_position=position)
