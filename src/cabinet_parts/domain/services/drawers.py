"""Drawer box dimension math and drawer configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import (
    DRAWER_BOTTOM_THICKNESS,
    DRAWER_BOX_HEIGHT_MIN,
    DRAWER_BOX_HEIGHT_REDUCTION,
    MAX_BOXES_PER_DRAWER_ZONE,
    MAX_DRAWER_ZONES_PER_ZONE,
    MAX_SHELVES_ABOVE_DRAWER,
    MIN_BOX_TO_FRONT_RATIO,
)
from ..validation import ValidationResult
from ..value_objects import (
    DrawerBox,
    DrawerConfiguration,
    DrawerSlideConfig,
    DrawerSlideType,
    DrawerZone,
    DrawerZoneFront,
    HandleConfig,
)

DRAWER_SLIDE_PRESETS: dict[DrawerSlideType, DrawerSlideConfig] = {
    DrawerSlideType.SIDE_MOUNT: DrawerSlideConfig(side_offset=13.0, depth_offset=50.0),
    DrawerSlideType.UNDERMOUNT: DrawerSlideConfig(side_offset=21.0, depth_offset=50.0),
    DrawerSlideType.BOTTOM_MOUNT: DrawerSlideConfig(side_offset=13.0, depth_offset=50.0),
    DrawerSlideType.CENTER_MOUNT: DrawerSlideConfig(side_offset=0.0, depth_offset=50.0),
}


@dataclass(frozen=True)
class DrawerBoxDimensions:
    """Size of a drawer box.

    Attributes:
        box_width: Outer width between the slides.
        box_depth: Outer depth; the box front is flush with the cabinet front.
        box_side_height: Height of the box sides.
        bottom_thickness: Thickness of the box bottom.
    """

    box_width: float
    box_depth: float
    box_side_height: float
    bottom_thickness: float


def get_slide_config(slide_type: DrawerSlideType) -> DrawerSlideConfig:
    return DRAWER_SLIDE_PRESETS[slide_type]


def calculate_drawer_box_dimensions(
    cabinet_width: float,
    cabinet_depth: float,
    space_height: float,
    body_thickness: float,
    slide_config: DrawerSlideConfig,
    bottom_thickness: float = DRAWER_BOTTOM_THICKNESS,
) -> DrawerBoxDimensions:
    """Size a drawer box to the space it is given.

    The box is always somewhat shorter than its allotted space and is
    centred in it vertically.

    Args:
        cabinet_width: Outer width of the cabinet (or simulated cabinet).
        cabinet_depth: Outer depth of the cabinet.
        space_height: Vertical space allotted to the box.
        body_thickness: Cabinet side thickness.
        slide_config: Clearances of the slide type.
        bottom_thickness: Box bottom thickness.

    Returns:
        DrawerBoxDimensions for the box.
    """
    box_width = cabinet_width - 2 * body_thickness - 2 * slide_config.side_offset
    box_depth = cabinet_depth - slide_config.depth_offset
    box_side_height = max(space_height - DRAWER_BOX_HEIGHT_REDUCTION, DRAWER_BOX_HEIGHT_MIN)
    return DrawerBoxDimensions(
        box_width=box_width,
        box_depth=box_depth,
        box_side_height=box_side_height,
        bottom_thickness=bottom_thickness,
    )


def distribute_by_ratio(total: float, ratios: list[float]) -> list[float]:
    """Split ``total`` proportionally to ``ratios``.

    An all-zero ratio list splits evenly.
    """
    if not ratios:
        return []
    ratio_sum = sum(ratios)
    if ratio_sum <= 0:
        return [total / len(ratios)] * len(ratios)
    return [total * ratio / ratio_sum for ratio in ratios]


def create_drawer_configuration(
    zone_count: int,
    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT,
    *,
    external_fronts: bool = True,
    height_ratios: list[float] | tuple[float, ...] | None = None,
    handle_config: HandleConfig | None = None,
    bottom_material_id: str | None = None,
) -> DrawerConfiguration:
    """Build a drawer stack of ``zone_count`` single-box zones.

    Args:
        zone_count: Number of zones, bottom to top.
        slide_type: Slide type for all boxes.
        external_fronts: When False every zone is internal (no front).
        height_ratios: Per-zone height ratios; missing entries use 1.
        handle_config: Default handle for the fronts.
        bottom_material_id: Material for box bottoms.

    Returns:
        A new DrawerConfiguration.
    """
    ratios = list(height_ratios or [])
    zones = tuple(
        DrawerZone(
            id=f"drawer-{i + 1}",
            height_ratio=ratios[i] if i < len(ratios) else 1.0,
            front=DrawerZoneFront(handle_config=handle_config) if external_fronts else None,
            boxes=(DrawerBox(),),
        )
        for i in range(zone_count)
    )
    return DrawerConfiguration(
        slide_type=slide_type,
        zones=zones,
        default_handle_config=handle_config,
        bottom_material_id=bottom_material_id,
    )


def validate_drawer_zone(zone: DrawerZone) -> ValidationResult:
    errors: list[str] = []

    if zone.height_ratio <= 0:
        errors.append("Height ratio must be positive")
    if not zone.boxes:
        errors.append("Zone must have at least one box")
    if len(zone.boxes) > MAX_BOXES_PER_DRAWER_ZONE:
        errors.append(
            f"Cannot have more than {MAX_BOXES_PER_DRAWER_ZONE} boxes per zone"
        )
    if any(box.height_ratio <= 0 for box in zone.boxes):
        errors.append("Box height ratio must be positive")
    if zone.box_to_front_ratio is not None and not (
        MIN_BOX_TO_FRONT_RATIO <= zone.box_to_front_ratio <= 1.0
    ):
        errors.append(
            f"Box-to-front ratio must be between {MIN_BOX_TO_FRONT_RATIO} and 1.0"
        )
    shelf_count = len(zone.above_box_content.shelves) if zone.above_box_content else 0
    if shelf_count > MAX_SHELVES_ABOVE_DRAWER:
        errors.append(
            f"Cannot have more than {MAX_SHELVES_ABOVE_DRAWER} shelves above drawer"
        )

    return ValidationResult.from_messages(errors)


def validate_drawer_configuration(config: DrawerConfiguration) -> ValidationResult:
    """Validate a drawer stack and each of its zones.

    Zone errors are prefixed with the 1-based zone number.
    """
    errors: list[str] = []

    if not config.zones:
        errors.append("Drawer configuration must have at least one zone")
    if len(config.zones) > MAX_DRAWER_ZONES_PER_ZONE:
        errors.append(f"Cannot have more than {MAX_DRAWER_ZONES_PER_ZONE} zones")
    for i, zone in enumerate(config.zones):
        result = validate_drawer_zone(zone)
        errors.extend(f"Zone {i + 1}: {error}" for error in result.errors)

    return ValidationResult.from_messages(errors)


def total_box_count(config: DrawerConfiguration) -> int:
    return sum(len(zone.boxes) for zone in config.zones)
