"""Kitchen base cabinet assembler."""

from __future__ import annotations

from typing import Mapping

from ..constants import KITCHEN_MAX_SHELVES
from ..generators import DoorGenerationConfig, generate_doors
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


@cabinet_generator_registry.register(CabinetType.KITCHEN)
def generate_kitchen_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate a kitchen base cabinet.

    Doors are generated only when ``has_doors`` is set, using the
    configured door layout (a double door by default).

    Raises:
        CabinetTypeMismatchError: If ``params`` is not a kitchen cabinet.
    """
    check_cabinet_type(params, CabinetType.KITCHEN)
    build = CabinetBuild(
        cabinet_id, furniture_id, params, materials, body_material, back_material,
        material_catalog,
    )

    parts = build.body_panels()
    parts += build.interior(legacy_shelf_count(params, KITCHEN_MAX_SHELVES))
    if params.has_doors:
        parts += generate_doors(
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
            )
        )
    return build.finish(parts)
