"""Zone-based drawer generation.

A drawer stack is a list of zones, bottom to top. Each zone may show an
external front and holds one or more boxes. A box directly behind an
external front uses that front as its own front; every other box
(internal zones, or the upper boxes of a drawer-in-drawer zone) is closed
with a box front panel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import (
    DOOR_GAP,
    DRAWER_BOTTOM_THICKNESS,
    FRONT_MARGIN,
    ROTATION_FLAT,
    ROTATION_SIDE,
)
from ..services.drawers import (
    calculate_drawer_box_dimensions,
    distribute_by_ratio,
    get_slide_config,
)
from ..services.handles import generate_handle_metadata
from ..services.measurements import recessed_center_z, resolve_shelf_depth
from ..value_objects import (
    DoorType,
    DrawerConfiguration,
    DrawerSlideConfig,
    DrawerZone,
    GeneratedPart,
    PartRole,
)
from ._common import DRAWER_BOX_BANDING, FULL_BANDING, SHELF_BANDING, PartFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawerGenerationConfig:
    """Inputs for a drawer stack.

    The stack fills a cabinet (or a simulated cabinet around an interior
    zone) of the given outer size.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        cabinet_width: Outer width around the stack.
        cabinet_height: Outer height around the stack.
        cabinet_depth: Outer cabinet depth.
        body_material_id: Body material; default for boxes and bottoms.
        front_material_id: Drawer front material.
        body_thickness: Body and box panel thickness.
        front_thickness: Drawer front thickness.
        drawer_config: The drawer stack.
        bottom_material_id: Box bottom material, overriding the stack's.
        leg_offset: Height added by legs.
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
    drawer_config: DrawerConfiguration
    bottom_material_id: str | None = None
    leg_offset: float = 0.0


@dataclass(frozen=True)
class _BoxSlot:
    """Vertical slot given to one drawer box."""

    global_index: int
    zone_index: int
    offset_y: float
    space_height: float
    closed: bool


def _drawer_front(
    factory: PartFactory,
    config: DrawerGenerationConfig,
    zone: DrawerZone,
    zone_index: int,
    width: float,
    height: float,
    center_y: float,
) -> GeneratedPart:
    handle_config = None
    if zone.front is not None:
        handle_config = zone.front.handle_config or config.drawer_config.default_handle_config
    handle = None
    if handle_config is not None:
        handle = generate_handle_metadata(handle_config, width, height, DoorType.SINGLE)

    return factory.rect(
        f"Drawer front {zone_index + 1}",
        PartRole.DRAWER_FRONT,
        width,
        height,
        config.front_thickness,
        (0.0, center_y, config.cabinet_depth / 2 + config.front_thickness / 2),
        config.front_material_id,
        edge_banding=FULL_BANDING,
        index=zone_index,
        drawer_index=zone_index,
        handle_metadata=handle,
    )


def _drawer_box(
    factory: PartFactory,
    config: DrawerGenerationConfig,
    slide: DrawerSlideConfig,
    slot: _BoxSlot,
) -> list[GeneratedPart]:
    """Bottom, sides, back and, for closed boxes, the box front."""
    t = config.body_thickness
    dims = calculate_drawer_box_dimensions(
        config.cabinet_width,
        config.cabinet_depth,
        slot.space_height,
        t,
        slide,
        DRAWER_BOTTOM_THICKNESS,
    )
    box_material_id = config.drawer_config.box_material_id or config.body_material_id
    bottom_material_id = (
        config.bottom_material_id
        or config.drawer_config.bottom_material_id
        or box_material_id
    )

    bottom_y = slot.offset_y + (slot.space_height - dims.box_side_height) / 2 + config.leg_offset
    center_y = bottom_y + dims.box_side_height / 2
    center_z = config.cabinet_depth / 2 - dims.box_depth / 2
    inner_width = dims.box_width - 2 * t
    label = f"Drawer {slot.global_index + 1}"

    if slot.closed:
        bottom_depth = dims.box_depth - 2 * t
        bottom_z = center_z
    else:
        # The drawer front closes the box, so the bottom runs up to it
        bottom_depth = dims.box_depth - t
        bottom_z = center_z + t / 2

    def box_part(name, role, width, height, thickness, position, material_id, rotation):
        return factory.rect(
            f"{label} - {name}",
            role,
            width,
            height,
            thickness,
            position,
            material_id,
            rotation=rotation,
            edge_banding=DRAWER_BOX_BANDING,
            drawer_index=slot.global_index,
        )

    side_x = dims.box_width / 2 - t / 2
    parts = [
        box_part(
            "bottom", PartRole.DRAWER_BOTTOM, inner_width, bottom_depth,
            dims.bottom_thickness, (0.0, bottom_y + dims.bottom_thickness / 2, bottom_z),
            bottom_material_id, ROTATION_FLAT,
        ),
        box_part(
            "left side", PartRole.DRAWER_SIDE_LEFT, dims.box_depth, dims.box_side_height,
            t, (-side_x, center_y, center_z), box_material_id, ROTATION_SIDE,
        ),
        box_part(
            "right side", PartRole.DRAWER_SIDE_RIGHT, dims.box_depth, dims.box_side_height,
            t, (side_x, center_y, center_z), box_material_id, ROTATION_SIDE,
        ),
        box_part(
            "back", PartRole.DRAWER_BACK, inner_width, dims.box_side_height,
            t, (0.0, center_y, center_z - dims.box_depth / 2 + t / 2),
            box_material_id, (0.0, 0.0, 0.0),
        ),
    ]
    if slot.closed:
        parts.append(
            box_part(
                "box front", PartRole.DRAWER_BOX_FRONT, inner_width, dims.box_side_height,
                t, (0.0, center_y, center_z + dims.box_depth / 2 - t / 2),
                box_material_id, (0.0, 0.0, 0.0),
            )
        )
    return parts


def _above_box_shelves(
    factory: PartFactory,
    config: DrawerGenerationConfig,
    zone: DrawerZone,
    zone_index: int,
    start_y: float,
    space_height: float,
) -> list[GeneratedPart]:
    """Shelves filling the space a short box leaves in its zone."""
    shelves = zone.above_box_content.shelves if zone.above_box_content else ()
    count = len(shelves)
    width = config.cabinet_width - config.body_thickness * 2
    parts = []
    for i, shelf in enumerate(shelves):
        offset = 0.0 if i == 0 else (i / count) * space_height
        depth = resolve_shelf_depth(shelf.depth_preset, shelf.custom_depth, config.cabinet_depth)
        parts.append(
            factory.rect(
                f"Shelf {i + 1} above drawer {zone_index + 1}",
                PartRole.SHELF,
                width,
                depth,
                config.body_thickness,
                (
                    0.0,
                    start_y + offset + config.leg_offset,
                    recessed_center_z(config.cabinet_depth, depth),
                ),
                shelf.material_id or config.body_material_id,
                rotation=ROTATION_FLAT,
                edge_banding=SHELF_BANDING,
                index=i,
            )
        )
    return parts


def generate_drawers(config: DrawerGenerationConfig) -> list[GeneratedPart]:
    """Generate fronts, boxes and above-box shelves for a drawer stack.

    Zone heights are proportional to the zone height ratios, separately for
    the interior (between bottom and top panels) and for the fronts (inside
    the front margins). Every front but the topmost loses DOOR_GAP at its
    top edge.

    Args:
        config: Drawer generation inputs.

    Returns:
        Drawer parts, zone by zone from the bottom.
    """
    zones = config.drawer_config.zones
    if not zones:
        return []

    factory = PartFactory(config.cabinet_id, config.furniture_id)
    slide = get_slide_config(config.drawer_config.slide_type)
    t = config.body_thickness

    ratios = [zone.height_ratio for zone in zones]
    interior_heights = distribute_by_ratio(max(config.cabinet_height - 2 * t, 0.0), ratios)
    front_heights = distribute_by_ratio(config.cabinet_height - FRONT_MARGIN * 2, ratios)
    front_width = config.cabinet_width - FRONT_MARGIN * 2

    current_box_y = t
    current_front_y = FRONT_MARGIN
    global_box_index = 0
    parts: list[GeneratedPart] = []

    for zone_index, zone in enumerate(zones):
        zone_height = interior_heights[zone_index]
        zone_front_height = front_heights[zone_index]

        if zone.has_external_front:
            gap = DOOR_GAP if zone_index < len(zones) - 1 else 0.0
            front_height = zone_front_height - gap
            if front_height > 0:
                parts.append(
                    _drawer_front(
                        factory, config, zone, zone_index, front_width, front_height,
                        current_front_y + front_height / 2 + config.leg_offset,
                    )
                )
            else:
                logger.debug(
                    f"Drawer front {zone_index + 1} omitted for cabinet "
                    f"{config.cabinet_id}: height {front_height}"
                )

        box_to_front_ratio = zone.box_to_front_ratio or 1.0
        effective_height = zone_height * box_to_front_ratio
        box_heights = distribute_by_ratio(
            effective_height, [box.height_ratio for box in zone.boxes]
        )
        for box_index, box_height in enumerate(box_heights):
            slot = _BoxSlot(
                global_index=global_box_index,
                zone_index=zone_index,
                offset_y=current_box_y,
                space_height=box_height,
                closed=not zone.has_external_front or box_index > 0,
            )
            parts.extend(_drawer_box(factory, config, slide, slot))
            current_box_y += box_height
            global_box_index += 1

        if box_to_front_ratio < 1.0 and zone.above_box_content is not None:
            parts.extend(
                _above_box_shelves(
                    factory, config, zone, zone_index,
                    current_box_y, zone_height - effective_height,
                )
            )

        current_box_y += zone_height - effective_height
        current_front_y += zone_front_height

    logger.debug(
        f"Generated {len(parts)} drawer parts ({global_box_index} boxes) "
        f"for cabinet {config.cabinet_id}"
    )
    return parts
