"""Wall cabinet assembler.

Wall cabinets hang on the wall: they never have legs, and their back is
cut with hanger notches unless the notches are disabled.
"""

from __future__ import annotations

from typing import Mapping

from ..constants import WALL_MAX_SHELVES
from ..generators import (
    DoorGenerationConfig,
    FoldingDoorGenerationConfig,
    generate_doors,
    generate_folding_doors,
)
from ..value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    DoorConfig,
    GeneratedPart,
    HangerCutoutConfig,
    Material,
)
from ._body import CabinetBuild, check_cabinet_type
from .normalize import legacy_shelf_count
from .registry import cabinet_generator_registry


@cabinet_generator_registry.register(CabinetType.WALL)
def generate_wall_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate a wall cabinet.

    Doors are generated when ``has_doors`` is set; a ``folding_door_config``
    turns them into lift-up folding sections.

    Raises:
        CabinetTypeMismatchError: If ``params`` is not a wall cabinet.
    """
    check_cabinet_type(params, CabinetType.WALL)
    build = CabinetBuild(
        cabinet_id, furniture_id, params, materials, body_material, back_material,
        material_catalog, legs_allowed=False,
    )

    parts = build.body_panels()
    parts += build.interior(legacy_shelf_count(params, WALL_MAX_SHELVES))
    if params.has_doors:
        door_config = params.door_config or DoorConfig()
        if params.folding_door_config is not None:
            parts += generate_folding_doors(
                FoldingDoorGenerationConfig(
                    cabinet_id=cabinet_id,
                    furniture_id=furniture_id,
                    cabinet_width=params.width,
                    cabinet_height=params.height,
                    cabinet_depth=params.depth,
                    thickness=build.front_thickness,
                    front_material_id=materials.front_material_id,
                    folding_config=params.folding_door_config,
                    door_config=door_config,
                    handle_config=params.handle_config,
                )
            )
        else:
            parts += generate_doors(
                DoorGenerationConfig(
                    cabinet_id=cabinet_id,
                    furniture_id=furniture_id,
                    cabinet_width=params.width,
                    cabinet_height=params.height,
                    cabinet_depth=params.depth,
                    thickness=build.front_thickness,
                    front_material_id=materials.front_material_id,
                    door_config=door_config,
                    handle_config=params.handle_config,
                )
            )
    return build.finish(parts, params.hanger_cutouts or HangerCutoutConfig())
