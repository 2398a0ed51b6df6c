"""Bookshelf assembler."""

from __future__ import annotations

from typing import Mapping

from ..constants import BOOKSHELF_MAX_SHELVES, BOOKSHELF_MIN_SHELVES
from ..value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    GeneratedPart,
    Material,
)
from ._body import CabinetBuild, check_cabinet_type
from .normalize import legacy_shelf_count
from .registry import cabinet_generator_registry


@cabinet_generator_registry.register(CabinetType.BOOKSHELF)
def generate_bookshelf_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate an open bookshelf: body, shelves and back, no doors."""
    check_cabinet_type(params, CabinetType.BOOKSHELF)
    build = CabinetBuild(
        cabinet_id, furniture_id, params, materials, body_material, back_material,
        material_catalog,
    )

    parts = build.body_panels()
    parts += build.interior(
        legacy_shelf_count(params, BOOKSHELF_MAX_SHELVES, BOOKSHELF_MIN_SHELVES)
    )
    return build.finish(parts)
