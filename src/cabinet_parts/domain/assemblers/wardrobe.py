"""Wardrobe assembler."""

from __future__ import annotations

import logging
from typing import Mapping

from ..constants import MAX_WARDROBE_DOORS, MIN_WARDROBE_DOORS, WARDROBE_MAX_SHELVES
from ..generators import DoorGenerationConfig, generate_door_row
from ..value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    DoorConfig,
    GeneratedPart,
    Material,
)
from ._body import CabinetBuild, check_cabinet_type
from .normalize import legacy_shelf_count
from .registry import cabinet_generator_registry

logger = logging.getLogger(__name__)


@cabinet_generator_registry.register(CabinetType.WARDROBE)
def generate_wardrobe_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate a wardrobe with a row of 1-4 equal doors.

    Raises:
        CabinetTypeMismatchError: If ``params`` is not a wardrobe.
    """
    check_cabinet_type(params, CabinetType.WARDROBE)
    build = CabinetBuild(
        cabinet_id, furniture_id, params, materials, body_material, back_material,
        material_catalog,
    )

    door_count = max(MIN_WARDROBE_DOORS, min(params.door_count, MAX_WARDROBE_DOORS))
    if door_count != params.door_count:
        logger.warning(
            f"Wardrobe door count {params.door_count} outside "
            f"{MIN_WARDROBE_DOORS}-{MAX_WARDROBE_DOORS}, using {door_count}"
        )

    parts = build.body_panels()
    parts += build.interior(legacy_shelf_count(params, WARDROBE_MAX_SHELVES))
    parts += generate_door_row(
        DoorGenerationConfig(
            cabinet_id=cabinet_id,
            furniture_id=furniture_id,
            cabinet_width=params.width,
            cabinet_height=params.height,
            cabinet_depth=params.depth,
            thickness=build.front_thickness,
            front_material_id=materials.front_material_id,
            door_config=params.door_config or DoorConfig(),
            handle_config=params.handle_config,
            leg_offset=build.leg_offset,
        ),
        door_count,
    )
    return build.finish(parts)
