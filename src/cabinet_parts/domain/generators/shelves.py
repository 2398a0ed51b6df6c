"""Shelf generation.

Shelves lie flat, span the full width of their zone and are pushed against
the back, so a shelf shallower than the cabinet leaves its setback at the
front. Only the front edge is banded.
"""

from __future__ import annotations

import logging

from ..constants import (
    ROTATION_FLAT,
    SHELF_SETBACK,
    SINGLE_SHELF_POSITION,
    UNIFORM_SHELF_BOTTOM_OFFSET,
)
from ..services.measurements import recessed_center_z, resolve_shelf_depth
from ..value_objects import (
    GeneratedPart,
    PartRole,
    ShelfConfig,
    ShelvesConfiguration,
    ShelvesMode,
)
from ._common import SHELF_BANDING, PartFactory

logger = logging.getLogger(__name__)


def calculate_shelf_positions(
    config: ShelvesConfiguration, start_y: float, height: float
) -> list[float]:
    """Shelf centre heights within a zone, bottom to top.

    UNIFORM shelves are spread from 5% of the zone height upward; a single
    shelf sits in the middle. MANUAL shelves sit ``position_y`` mm above the zone bottom, falling
    back to even spacing.

    Args:
        config: Shelves configuration of the zone.
        start_y: Bottom of the zone.
        height: Height of the zone.

    Returns:
        One Y value per shelf.
    """
    if config.mode == ShelvesMode.MANUAL:
        n = len(config.shelves)
        positions = []
        for i, shelf in enumerate(config.shelves):
            if shelf.position_y is not None:
                positions.append(start_y + shelf.position_y)
            else:
                positions.append(start_y + (i + 1) / (n + 1) * height)
        return positions

    count = config.count
    if count <= 0:
        return []
    if count == 1:
        return [start_y + SINGLE_SHELF_POSITION * height]
    return [
        start_y
        + ((i / count) * (1 - UNIFORM_SHELF_BOTTOM_OFFSET) + UNIFORM_SHELF_BOTTOM_OFFSET)
        * height
        for i in range(count)
    ]


def calculate_effective_shelf_depth(
    shelf: ShelfConfig | None, config: ShelvesConfiguration, cabinet_depth: float
) -> float:
    """Depth of one shelf; per-shelf settings win over the zone settings."""
    if shelf is not None:
        custom = shelf.custom_depth if shelf.custom_depth is not None else config.custom_depth
        return resolve_shelf_depth(shelf.depth_preset, custom, cabinet_depth)
    return resolve_shelf_depth(config.depth_preset, config.custom_depth, cabinet_depth)


def generate_zone_shelves(
    factory: PartFactory,
    config: ShelvesConfiguration,
    *,
    start_x: float,
    start_y: float,
    width: float,
    height: float,
    cabinet_depth: float,
    thickness: float,
    body_material_id: str,
    leg_offset: float = 0.0,
) -> list[GeneratedPart]:
    """Generate the shelves of one interior zone.

    Args:
        factory: Part factory of the cabinet.
        config: Shelves configuration.
        start_x: Left edge of the zone.
        start_y: Bottom of the zone, before the leg offset.
        width: Zone width; every shelf spans it.
        height: Zone height.
        cabinet_depth: Outer cabinet depth.
        thickness: Shelf thickness.
        body_material_id: Fallback shelf material.
        leg_offset: Height added by legs.

    Returns:
        Shelf parts, bottom to top.
    """
    positions = calculate_shelf_positions(config, start_y, height)
    center_x = start_x + width / 2
    parts = []
    for i, y in enumerate(positions):
        shelf = config.shelves[i] if config.mode == ShelvesMode.MANUAL else None
        depth = calculate_effective_shelf_depth(shelf, config, cabinet_depth)
        material_id = (
            (shelf.material_id if shelf is not None else None)
            or config.material_id
            or body_material_id
        )
        parts.append(
            factory.rect(
                f"Shelf {i + 1}",
                PartRole.SHELF,
                width,
                depth,
                thickness,
                (center_x, y + leg_offset, recessed_center_z(cabinet_depth, depth)),
                material_id,
                rotation=ROTATION_FLAT,
                edge_banding=SHELF_BANDING,
                index=i,
            )
        )
    return parts


def generate_legacy_shelves(
    factory: PartFactory,
    count: int,
    *,
    cabinet_width: float,
    cabinet_height: float,
    cabinet_depth: float,
    thickness: float,
    material_id: str,
    leg_offset: float = 0.0,
) -> list[GeneratedPart]:
    """Generate evenly spaced full-width shelves between bottom and top.

    Shelves are set back SHELF_SETBACK from the front.
    """
    interior_height = max(cabinet_height - thickness * 2, 0.0)
    spacing = interior_height / (count + 1)
    shelf_width = cabinet_width - thickness * 2
    shelf_depth = cabinet_depth - SHELF_SETBACK

    parts = [
        factory.rect(
            f"Shelf {i + 1}",
            PartRole.SHELF,
            shelf_width,
            shelf_depth,
            thickness,
            (0.0, thickness + spacing * (i + 1) + leg_offset, -SHELF_SETBACK / 2),
            material_id,
            rotation=ROTATION_FLAT,
            edge_banding=SHELF_BANDING,
            index=i,
        )
        for i in range(count)
    ]
    if parts:
        logger.debug(f"Generated {len(parts)} shelves for cabinet {factory.cabinet_id}")
    return parts
