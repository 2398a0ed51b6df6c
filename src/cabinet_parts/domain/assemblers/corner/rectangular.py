"""Rectangular-body corner cabinet.

A full W x D box standing in the corner. The internal side stands against
the wall, the external side is where the neighbouring cabinet joins. The
front opening is closed by a structural front panel and a door.

Top view (door on the right):

         W
    +-------------+
    |             | D
    +-------------+
     [panel][door]
"""

from __future__ import annotations

import logging

from ...constants import (
    FRONT_MARGIN,
    MIN_FRONT_DIMENSION,
    ROTATION_FLAT,
    ROTATION_FRONT,
    ROTATION_SIDE,
)
from ...generators._common import (
    FULL_BANDING,
    NO_BANDING,
    SHELF_BANDING,
    VISIBLE_SIDE_BANDING,
)
from ...services.handles import generate_handle_metadata
from ...value_objects import (
    CornerDoorPosition,
    CornerFrontType,
    CornerMountType,
    CornerType,
    DoorMetadata,
    DoorType,
    GeneratedPart,
    HingeSide,
    PartRole,
)
from ._common import CornerBuild, resolve_hinge_side
from .registry import register_corner_strategy

logger = logging.getLogger(__name__)


def _body(build: CornerBuild) -> list[GeneratedPart]:
    config = build.config
    t = build.thickness
    H = build.height
    W, D = config.W, config.D
    leg = build.leg_offset
    body_id = build.materials.body_material_id

    bottom_width = W - 2 * t if config.bottom_mount == CornerMountType.INSET else W
    top_width = W - 2 * t if config.top_mount == CornerMountType.INSET else W

    return [
        build.factory.rect(
            "Bottom", PartRole.CORNER_BOTTOM, bottom_width, D, t,
            (W / 2, t / 2 + leg, D / 2), body_id,
            rotation=ROTATION_FLAT, edge_banding=SHELF_BANDING,
        ),
        build.factory.rect(
            "Top", PartRole.CORNER_TOP, top_width, D, t,
            (W / 2, H - t / 2 + leg, D / 2), body_id,
            rotation=ROTATION_FLAT, edge_banding=SHELF_BANDING,
        ),
        build.factory.rect(
            "Internal side", PartRole.CORNER_SIDE_INTERNAL, D, build.side_height, t,
            (t / 2, build.side_center_y, D / 2), body_id,
            rotation=ROTATION_SIDE, edge_banding=VISIBLE_SIDE_BANDING,
        ),
        build.factory.rect(
            "External side", PartRole.CORNER_SIDE_EXTERNAL, D, build.side_height, t,
            (W - t / 2, build.side_center_y, D / 2), body_id,
            rotation=ROTATION_SIDE, edge_banding=VISIBLE_SIDE_BANDING,
        ),
    ]


def _back(build: CornerBuild) -> list[GeneratedPart]:
    back_material = build.back_material_or_none()
    if back_material is None:
        return []
    W, D, H = build.config.W, build.config.D, build.height
    bt = back_material.thickness
    # The back covers both sides and sits behind the body
    return [
        build.factory.rect(
            "Back", PartRole.CORNER_BACK, W, H, bt,
            (W / 2, H / 2 + build.leg_offset, D + bt / 2),
            build.materials.back_material_id or back_material.id,
            rotation=ROTATION_FRONT, edge_banding=NO_BANDING,
        )
    ]


def _front(build: CornerBuild) -> list[GeneratedPart]:
    config = build.config
    if config.front_type != CornerFrontType.SINGLE:
        return []

    t = build.thickness
    H = build.height
    W = config.W
    leg = build.leg_offset
    door_on_right = config.door_position == CornerDoorPosition.RIGHT
    parts: list[GeneratedPart] = []

    panel_width = (W - 2 * t) - config.door_width - config.door_gap
    panel_height = H - 2 * t
    if panel_width > MIN_FRONT_DIMENSION:
        panel_x = t + panel_width / 2 if door_on_right else W - t - panel_width / 2
        parts.append(
            build.factory.rect(
                "Front panel", PartRole.CORNER_FRONT_PANEL, panel_width, panel_height, t,
                (panel_x, t + panel_height / 2 + leg, t / 2),
                build.materials.body_material_id,
                rotation=ROTATION_FRONT, edge_banding=SHELF_BANDING,
            )
        )
    else:
        logger.debug(
            f"Corner front panel omitted for cabinet {build.cabinet_id}: "
            f"width {panel_width:g}mm"
        )

    if config.door_width > MIN_FRONT_DIMENSION:
        door_width = config.door_width
        door_height = H - FRONT_MARGIN * 2
        if door_on_right:
            door_x = W - FRONT_MARGIN - door_width / 2
        else:
            door_x = FRONT_MARGIN + door_width / 2
        hinge = resolve_hinge_side(
            config, HingeSide.RIGHT if door_on_right else HingeSide.LEFT
        )
        handle = None
        if build.params.handle_config is not None:
            handle = generate_handle_metadata(
                build.params.handle_config, door_width, door_height, DoorType.SINGLE, hinge
            )
        parts.append(
            build.factory.rect(
                "Door", PartRole.DOOR, door_width, door_height, t,
                (door_x, FRONT_MARGIN + door_height / 2 + leg, -t / 2),
                build.materials.front_material_id,
                rotation=ROTATION_FRONT, edge_banding=FULL_BANDING,
                index=0,
                door_metadata=DoorMetadata(hinge_side=hinge),
                handle_metadata=handle,
            )
        )
    else:
        logger.debug(
            f"Corner door omitted for cabinet {build.cabinet_id}: "
            f"width {config.door_width:g}mm"
        )
    return parts


def _shelves(build: CornerBuild) -> list[GeneratedPart]:
    config = build.config
    t = build.thickness
    W, D = config.W, config.D
    shelf_width = W - 2 * t
    # Shelves stop behind the front panel
    shelf_depth = D - t
    spacing = (build.height - 2 * t) / (config.shelf_count + 1)
    return [
        build.factory.rect(
            f"Shelf {i + 1}", PartRole.CORNER_SHELF, shelf_width, shelf_depth, t,
            (W / 2, y + build.leg_offset, t + shelf_depth / 2),
            build.materials.body_material_id,
            rotation=ROTATION_FLAT, edge_banding=SHELF_BANDING,
            index=i,
        )
        for i, y in enumerate(t + spacing * (n + 1) for n in range(config.shelf_count))
    ]


@register_corner_strategy(CornerType.L_SHAPED)
def generate_rectangular_corner(build: CornerBuild) -> list[GeneratedPart]:
    """Generate a rectangular-body corner cabinet in the corner frame.

    Part order: bottom, top, internal and external sides, back, front panel,
    door, shelves, legs.
    """
    config = build.config
    parts = _body(build)
    parts += _back(build)
    parts += _front(build)
    parts += _shelves(build)
    parts += build.legs([(config.W, config.D, config.W / 2, config.D / 2)])
    return parts
