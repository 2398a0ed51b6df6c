"""Interior generation from a zone tree.

The zone tree is laid out inside the space between the body panels, then
each leaf is filled: SHELVES leaves get shelves across their width and
DRAWERS leaves get a drawer stack sized to the leaf.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import ROTATION_SIDE
from ..services.measurements import recessed_center_z
from ..services.zone_tree import (
    ParentBounds,
    PartitionBounds,
    ZoneBounds,
    calculate_zone_layout,
)
from ..value_objects import (
    CabinetInteriorConfig,
    GeneratedPart,
    PartRole,
    ZoneContentType,
)
from ._common import SHELF_BANDING, PartFactory
from .drawers import DrawerGenerationConfig, generate_drawers
from .shelves import generate_zone_shelves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteriorGenerationConfig:
    """Inputs for the interior of one cabinet.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        cabinet_width: Outer cabinet width.
        cabinet_height: Body height.
        cabinet_depth: Outer cabinet depth.
        body_material_id: Body material.
        front_material_id: Drawer front material.
        body_thickness: Body thickness; also the shelf and partition thickness.
        front_thickness: Drawer front thickness.
        interior_config: The zone tree.
        leg_offset: Height added by legs.
        emit_partitions: Emit PARTITION parts for enabled partitions.
            Otherwise partitions only reserve their width.
    """

    cabinet_id: str
    furniture_id: str
    cabinet_width: float
    cabinet_height: float
    cabinet_depth: float
    body_material_id: str
    front_material_id: str
    body_thickness: float
    front_thickness: float
    interior_config: CabinetInteriorConfig | None
    leg_offset: float = 0.0
    emit_partitions: bool = False


def interior_bounds(config: InteriorGenerationConfig) -> ParentBounds:
    """Space between the body panels, before the leg offset."""
    t = config.body_thickness
    width = config.cabinet_width - t * 2
    return ParentBounds(
        start_x=-width / 2,
        start_y=t,
        width=width,
        height=config.cabinet_height - t * 2,
    )


def _zone_shelves(
    factory: PartFactory, config: InteriorGenerationConfig, bounds: ZoneBounds
) -> list[GeneratedPart]:
    shelves_config = bounds.zone.shelves_config
    if shelves_config is None:
        return []
    return generate_zone_shelves(
        factory,
        shelves_config,
        start_x=bounds.start_x,
        start_y=bounds.start_y,
        width=bounds.width,
        height=bounds.height,
        cabinet_depth=config.cabinet_depth,
        thickness=config.body_thickness,
        body_material_id=config.body_material_id,
        leg_offset=config.leg_offset,
    )


def _zone_drawers(
    config: InteriorGenerationConfig, bounds: ZoneBounds
) -> list[GeneratedPart]:
    """Drawer stack sized as if the leaf were a cabinet of its own."""
    drawer_config = bounds.zone.drawer_config
    if drawer_config is None or not drawer_config.zones:
        return []

    t = config.body_thickness
    parts = generate_drawers(
        DrawerGenerationConfig(
            cabinet_id=config.cabinet_id,
            furniture_id=config.furniture_id,
            cabinet_width=bounds.width + t * 2,
            cabinet_height=bounds.height + t * 2,
            cabinet_depth=config.cabinet_depth,
            body_material_id=config.body_material_id,
            front_material_id=config.front_material_id,
            body_thickness=t,
            front_thickness=config.front_thickness,
            drawer_config=drawer_config,
        )
    )
    dy = bounds.start_y - t + config.leg_offset
    return [part.translated(dx=bounds.center_x, dy=dy) for part in parts]


def _partition(
    factory: PartFactory, config: InteriorGenerationConfig, bounds: PartitionBounds
) -> GeneratedPart:
    return factory.rect(
        "Partition",
        PartRole.PARTITION,
        bounds.depth_mm,
        bounds.height,
        config.body_thickness,
        (
            bounds.x,
            bounds.start_y + bounds.height / 2 + config.leg_offset,
            recessed_center_z(config.cabinet_depth, bounds.depth_mm),
        ),
        bounds.partition.material_id or config.body_material_id,
        rotation=ROTATION_SIDE,
        edge_banding=SHELF_BANDING,
    )


def generate_interior(config: InteriorGenerationConfig) -> list[GeneratedPart]:
    """Generate the shelves, drawers and partitions of a zone tree.

    Args:
        config: Interior generation inputs.

    Returns:
        Parts of every leaf in tree order, followed by partitions when
        ``emit_partitions`` is set.
    """
    if config.interior_config is None:
        return []

    factory = PartFactory(config.cabinet_id, config.furniture_id)
    layout = calculate_zone_layout(
        config.interior_config.root_zone,
        interior_bounds(config),
        config.body_thickness,
        config.cabinet_depth,
    )

    parts: list[GeneratedPart] = []
    for bounds in layout.leaves:
        content = bounds.zone.content_type
        if content == ZoneContentType.SHELVES:
            parts.extend(_zone_shelves(factory, config, bounds))
        elif content == ZoneContentType.DRAWERS:
            parts.extend(_zone_drawers(config, bounds))

    if config.emit_partitions:
        parts.extend(_partition(factory, config, bounds) for bounds in layout.partitions)

    logger.debug(
        f"Generated {len(parts)} interior parts from {len(layout.leaves)} zones "
        f"for cabinet {config.cabinet_id}"
    )
    return parts
