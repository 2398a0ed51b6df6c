"""Drawer cabinet assembler.

The drawer stack comes from the interior tree when it has content, else
from ``drawer_config``, else from the legacy flat drawer fields.
"""

from __future__ import annotations

from typing import Mapping

from ..value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    GeneratedPart,
    Material,
)
from ._body import CabinetBuild, check_cabinet_type
from .registry import cabinet_generator_registry


@cabinet_generator_registry.register(CabinetType.DRAWER)
def generate_drawer_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate a cabinet filled with drawers.

    Raises:
        CabinetTypeMismatchError: If ``params`` is not a drawer cabinet.
    """
    check_cabinet_type(params, CabinetType.DRAWER)
    build = CabinetBuild(
        cabinet_id, furniture_id, params, materials, body_material, back_material,
        material_catalog,
    )

    parts = build.body_panels()
    parts += build.interior()
    return build.finish(parts)
