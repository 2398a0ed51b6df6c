"""Side front generation.

Side fronts are decorative end panels mounted outside the cabinet sides.
They give a finished look to a cabinet at the end of a run and reach
forward past the cabinet front by their protrusion.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..constants import MIN_SIDE_FRONT_HEIGHT, ROTATION_SIDE
from ..value_objects import (
    GeneratedPart,
    Material,
    PartRole,
    SideFrontConfig,
    SideFrontsConfig,
)
from ._common import FULL_BANDING, PartFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SideFrontGenerationConfig:
    """Inputs for the side fronts of one cabinet.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        cabinet_width: Outer cabinet width.
        cabinet_height: Body height.
        cabinet_depth: Outer cabinet depth.
        front_thickness: Thickness of the cabinet front material.
        front_material_id: Default material for side fronts.
        side_fronts: Left and right side front configuration.
        materials: Materials by id, used to look up override thicknesses.
        leg_offset: Height added by legs.
    """

    cabinet_id: str
    furniture_id: str
    cabinet_width: float
    cabinet_height: float
    cabinet_depth: float
    front_thickness: float
    front_material_id: str
    side_fronts: SideFrontsConfig
    materials: Mapping[str, Material] | None = None
    leg_offset: float = 0.0


def has_side_fronts(config: SideFrontsConfig | None) -> bool:
    if config is None:
        return False
    return bool(
        (config.left is not None and config.left.enabled)
        or (config.right is not None and config.right.enabled)
    )


def _thickness(config: SideFrontGenerationConfig, material_id: str | None) -> float:
    if material_id is None or config.materials is None:
        return config.front_thickness
    material = config.materials.get(material_id)
    return material.thickness if material is not None else config.front_thickness


def _side_front(
    factory: PartFactory,
    config: SideFrontGenerationConfig,
    side_config: SideFrontConfig,
    sign: int,
) -> GeneratedPart:
    thickness = _thickness(config, side_config.material_id)
    protrusion = (
        side_config.forward_protrusion
        if side_config.forward_protrusion > 0
        else config.front_thickness
    )
    height = max(
        config.cabinet_height - side_config.bottom_offset - side_config.top_offset,
        MIN_SIDE_FRONT_HEIGHT,
    )
    width = config.cabinet_depth + protrusion
    x = sign * (config.cabinet_width / 2 + thickness / 2)
    y = side_config.bottom_offset + height / 2 + config.leg_offset

    return factory.rect(
        "Left side front" if sign < 0 else "Right side front",
        PartRole.SIDE_FRONT_LEFT if sign < 0 else PartRole.SIDE_FRONT_RIGHT,
        width,
        height,
        thickness,
        (x, y, protrusion / 2),
        side_config.material_id or config.front_material_id,
        rotation=ROTATION_SIDE,
        edge_banding=FULL_BANDING,
    )


def generate_side_fronts(config: SideFrontGenerationConfig) -> list[GeneratedPart]:
    """Generate the enabled side fronts, left first."""
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    parts = []
    for side_config, sign in ((config.side_fronts.left, -1), (config.side_fronts.right, 1)):
        if side_config is None or not side_config.enabled:
            continue
        parts.append(_side_front(factory, config, side_config, sign))
    logger.debug(f"Generated {len(parts)} side fronts for cabinet {config.cabinet_id}")
    return parts
