"""Door generation for cabinet fronts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import DOOR_GAP, FRONT_MARGIN
from ..services.handles import generate_handle_metadata
from ..value_objects import (
    DoorConfig,
    DoorLayout,
    DoorMetadata,
    DoorType,
    GeneratedPart,
    HandleConfig,
    HingeSide,
    PartRole,
)
from ._common import FULL_BANDING, PartFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DoorGenerationConfig:
    """Inputs for the doors of one cabinet.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        cabinet_width: Outer cabinet width.
        cabinet_height: Body height.
        cabinet_depth: Outer cabinet depth.
        thickness: Front material thickness.
        front_material_id: Front material.
        door_config: Door layout, hinge side and opening direction.
        handle_config: Handle on each door, if any.
        leg_offset: Height added by legs.
    """

    cabinet_id: str
    furniture_id: str
    cabinet_width: float
    cabinet_height: float
    cabinet_depth: float
    thickness: float
    front_material_id: str
    door_config: DoorConfig = DoorConfig()
    handle_config: HandleConfig | None = None
    leg_offset: float = 0.0


def generate_doors(config: DoorGenerationConfig) -> list[GeneratedPart]:
    """Generate one full-width door or a pair of doors.

    Doors are inset by FRONT_MARGIN on every edge and sit in front of the
    body. A double door splits the width with a DOOR_GAP in the middle; the
    left leaf is hinged on the left and the right leaf on the right.

    Args:
        config: Door generation inputs.

    Returns:
        The door parts, left to right.
    """
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    available_width = config.cabinet_width - FRONT_MARGIN * 2
    door_height = config.cabinet_height - FRONT_MARGIN * 2
    y = config.cabinet_height / 2 + config.leg_offset
    z = config.cabinet_depth / 2 + config.thickness / 2
    opening = config.door_config.opening_direction

    if door_height <= 0 or available_width <= 0:
        logger.debug(f"Doors omitted for cabinet {config.cabinet_id}: no front area")
        return []

    if config.door_config.layout == DoorLayout.SINGLE:
        hinge = config.door_config.hinge_side
        handle = None
        if config.handle_config is not None:
            handle = generate_handle_metadata(
                config.handle_config, available_width, door_height, DoorType.SINGLE, hinge
            )
        return [
            factory.rect(
                "Door",
                PartRole.DOOR,
                available_width,
                door_height,
                config.thickness,
                (0.0, y, z),
                config.front_material_id,
                edge_banding=FULL_BANDING,
                index=0,
                door_metadata=DoorMetadata(hinge_side=hinge, opening_direction=opening),
                handle_metadata=handle,
            )
        ]

    door_width = (available_width - DOOR_GAP) / 2
    leaves = (
        ("Left door", HingeSide.LEFT, DoorType.DOUBLE_LEFT, -1),
        ("Right door", HingeSide.RIGHT, DoorType.DOUBLE_RIGHT, 1),
    )
    parts = []
    for index, (name, hinge, door_type, side) in enumerate(leaves):
        handle = None
        if config.handle_config is not None:
            handle = generate_handle_metadata(
                config.handle_config, door_width, door_height, door_type
            )
        parts.append(
            factory.rect(
                name,
                PartRole.DOOR,
                door_width,
                door_height,
                config.thickness,
                (side * (door_width / 2 + DOOR_GAP / 2), y, z),
                config.front_material_id,
                edge_banding=FULL_BANDING,
                index=index,
                door_metadata=DoorMetadata(hinge_side=hinge, opening_direction=opening),
                handle_metadata=handle,
            )
        )
    return parts


def generate_door_row(config: DoorGenerationConfig, door_count: int) -> list[GeneratedPart]:
    """Generate ``door_count`` equal doors side by side.

    Doors are separated by DOOR_GAP. A lone door keeps the configured hinge
    side; otherwise doors alternate between left and right hinges,
    starting from the left, so each pair opens away from its centre gap.
    """
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    available_width = config.cabinet_width - FRONT_MARGIN * 2
    door_height = config.cabinet_height - FRONT_MARGIN * 2
    door_width = (available_width - (door_count - 1) * DOOR_GAP) / door_count
    y = config.cabinet_height / 2 + config.leg_offset
    z = config.cabinet_depth / 2 + config.thickness / 2

    if door_width <= 0 or door_height <= 0:
        logger.debug(f"Door row omitted for cabinet {config.cabinet_id}: no front area")
        return []

    parts = []
    for i in range(door_count):
        if door_count == 1:
            hinge = config.door_config.hinge_side
            door_type = DoorType.SINGLE
        elif i % 2 == 0:
            hinge = HingeSide.LEFT
            door_type = DoorType.DOUBLE_LEFT
        else:
            hinge = HingeSide.RIGHT
            door_type = DoorType.DOUBLE_RIGHT

        handle = None
        if config.handle_config is not None:
            handle = generate_handle_metadata(
                config.handle_config, door_width, door_height, door_type, hinge
            )
        x = -available_width / 2 + door_width / 2 + i * (door_width + DOOR_GAP)
        parts.append(
            factory.rect(
                f"Door {i + 1}",
                PartRole.DOOR,
                door_width,
                door_height,
                config.thickness,
                (x, y, z),
                config.front_material_id,
                edge_banding=FULL_BANDING,
                index=i,
                door_metadata=DoorMetadata(
                    hinge_side=hinge,
                    opening_direction=config.door_config.opening_direction,
                ),
                handle_metadata=handle,
            )
        )
    logger.debug(f"Generated {len(parts)} doors for cabinet {config.cabinet_id}")
    return parts
