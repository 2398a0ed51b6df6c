"""Corner cabinet assembler and its construction strategies.

Corner cabinets are generated in the corner frame: origin at the front-left
corner at floor level, X right, Y up, Z back into the corner. The
construction model is chosen by ``CornerConfig.corner_type``:

- ``L_SHAPED``: rectangular body with a front panel and a door
- ``L_SHAPED_TWO_ARM``: two arms along both walls
"""

from __future__ import annotations

import logging
from typing import Mapping

from ...value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    CornerConfig,
    GeneratedPart,
    Material,
)
from .._body import check_cabinet_type
from ..registry import cabinet_generator_registry
from ._common import CornerBuild, resolve_hinge_side
from .rectangular import generate_rectangular_corner
from .registry import get_corner_strategy, list_corner_strategies, register_corner_strategy
from .two_arm import generate_two_arm_corner

logger = logging.getLogger(__name__)


@cabinet_generator_registry.register(CabinetType.CORNER_INTERNAL)
def generate_corner_internal_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate a corner cabinet with the strategy for its corner type.

    A missing ``corner_config`` falls back to the default configuration.

    Raises:
        CabinetTypeMismatchError: If ``params`` is not a corner cabinet.
    """
    check_cabinet_type(params, CabinetType.CORNER_INTERNAL)
    config = params.corner_config or CornerConfig()
    strategy = get_corner_strategy(config.corner_type)
    parts = strategy(
        CornerBuild(
            cabinet_id=cabinet_id,
            furniture_id=furniture_id,
            params=params,
            config=config,
            materials=materials,
            body_material=body_material,
            back_material=back_material,
        )
    )
    logger.debug(
        f"Generated {len(parts)} parts for {config.corner_type.value} "
        f"corner cabinet {cabinet_id}"
    )
    return parts


__all__ = [
    "CornerBuild",
    "generate_corner_internal_cabinet",
    "generate_rectangular_corner",
    "generate_two_arm_corner",
    "get_corner_strategy",
    "list_corner_strategies",
    "register_corner_strategy",
    "resolve_hinge_side",
]
