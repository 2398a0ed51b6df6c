"""Normalization of legacy cabinet fields.

Older cabinet parameters describe drawers with flat fields (``drawer_count``,
``drawer_heights``, ...) or a bare ``drawer_config``. These are converted
here into the interior zone tree so that the assemblers only deal with one
representation.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..services.drawers import create_drawer_configuration
from ..services.zone_tree import create_drawers_zone, has_interior_content
from ..value_objects import (
    CabinetInteriorConfig,
    CabinetParams,
    CabinetType,
    DrawerConfiguration,
)

logger = logging.getLogger(__name__)

LEGACY_DRAWERS_ZONE_ID = "legacy-drawers"


def legacy_drawer_configuration(params: CabinetParams) -> DrawerConfiguration | None:
    """Drawer stack described by the legacy drawer fields, if any.

    An explicit ``drawer_config`` with zones wins. Drawer cabinets otherwise
    build one from ``drawer_count`` and its companion fields. The legacy
    ``bottom_material_id`` fills in a missing drawer bottom material.
    """
    config = params.drawer_config
    if config is None or not config.zones:
        if params.type != CabinetType.DRAWER or params.drawer_count <= 0:
            return None
        config = create_drawer_configuration(
            params.drawer_count,
            params.drawer_slide_type,
            external_fronts=not params.has_internal_drawers,
            height_ratios=params.drawer_heights,
            handle_config=params.drawer_handle_config,
        )
    if params.bottom_material_id and config.bottom_material_id is None:
        config = replace(config, bottom_material_id=params.bottom_material_id)
    return config


def normalize_interior(params: CabinetParams) -> CabinetInteriorConfig | None:
    """Interior tree to generate for a cabinet.

    Returns the configured interior when it has content, else a single
    DRAWERS leaf holding the legacy drawer stack, else None.
    """
    if has_interior_content(params.interior_config):
        return params.interior_config

    drawers = legacy_drawer_configuration(params)
    if drawers is None:
        return None
    logger.debug(f"Legacy drawer fields normalized into {len(drawers.zones)} drawer zones")
    return CabinetInteriorConfig(root_zone=create_drawers_zone(LEGACY_DRAWERS_ZONE_ID, drawers))


def legacy_shelf_count(
    params: CabinetParams, maximum: int, minimum: int = 0
) -> int:
    """Legacy evenly spaced shelf count, clamped to the cabinet type limits.

    Returns 0 when the cabinet uses an interior tree instead.
    """
    if has_interior_content(params.interior_config):
        return 0
    count = max(minimum, min(params.shelf_count, maximum))
    if count != params.shelf_count:
        logger.warning(
            f"Shelf count {params.shelf_count} outside {minimum}-{maximum} "
            f"for {params.type.value} cabinet, using {count}"
        )
    return count
