"""Leg generation.

Legs are emitted as LEG parts so that they show up in part lists, and can
also be described as hardware records via ``generate_leg_data``.
"""

from __future__ import annotations

import logging

from ..services.legs import (
    calculate_leg_positions,
    get_effective_leg_count,
    get_leg_color,
)
from ..value_objects import (
    CabinetMaterials,
    CoordinateFrame,
    GeneratedPart,
    LegAccessory,
    LegData,
    LegsConfig,
    PartRole,
)
from ._common import NO_BANDING, PartFactory

logger = logging.getLogger(__name__)


def generate_legs(
    cabinet_id: str,
    furniture_id: str,
    legs: LegsConfig,
    width: float,
    depth: float,
    materials: CabinetMaterials,
    frame_origin: tuple[float, float] = (0.0, 0.0),
    frame: CoordinateFrame = CoordinateFrame.BODY,
) -> list[GeneratedPart]:
    """Generate one LEG part per leg position.

    Args:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        legs: Legs configuration; nothing is generated when disabled.
        width: Width of the footprint the legs support.
        depth: Depth of the footprint the legs support.
        materials: Cabinet materials; legs use the body material.
        frame_origin: (x, z) of the footprint centre in the part frame.
        frame: Coordinate frame of the generated parts.

    Returns:
        Leg parts, each standing on the floor with its top at the leg height.
    """
    if not legs.enabled:
        return []

    factory = PartFactory(cabinet_id, furniture_id, frame)
    leg_type = legs.leg_type
    height = legs.current_height
    accessory = LegAccessory(
        shape=leg_type.shape,
        finish=leg_type.finish,
        color=get_leg_color(leg_type.finish),
        diameter=leg_type.diameter,
    )
    count = get_effective_leg_count(legs, width)
    origin_x, origin_z = frame_origin
    # Leg positions put the back at -Z; the corner frame points Z back
    z_sign = -1.0 if frame == CoordinateFrame.CORNER else 1.0

    parts = [
        factory.rect(
            f"Leg {i + 1}",
            PartRole.LEG,
            leg_type.diameter,
            height,
            leg_type.diameter,
            (origin_x + position.x, height / 2, origin_z + z_sign * position.z),
            materials.body_material_id,
            edge_banding=NO_BANDING,
            index=i,
            leg_index=i,
            accessory=accessory,
        )
        for i, position in enumerate(
            calculate_leg_positions(width, depth, count, legs.corner_inset)
        )
    ]
    logger.debug(f"Generated {len(parts)} legs for cabinet {cabinet_id}")
    return parts


def generate_leg_data(legs: LegsConfig, width: float, depth: float) -> list[LegData]:
    """Describe the legs of a cabinet as hardware records."""
    if not legs.enabled:
        return []

    leg_type = legs.leg_type
    count = get_effective_leg_count(legs, width)
    return [
        LegData(
            index=i,
            position=(position.x, legs.current_height / 2, position.z),
            height=legs.current_height,
            diameter=leg_type.diameter,
            shape=leg_type.shape,
            finish=leg_type.finish,
            color=get_leg_color(leg_type.finish),
        )
        for i, position in enumerate(
            calculate_leg_positions(width, depth, count, legs.corner_inset)
        )
    ]
