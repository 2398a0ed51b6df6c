"""Two-arm corner cabinet for true two-wall corners.

Arm A runs along the back wall (Z = D) and arm B along the left wall
(X = 0), both ``body_depth`` deep. The open notch between them is the dead
zone, closed by an angled front or a straight door on arm A.

Top view, LEFT orientation:

    +--------------------------+  Z = D
    |         arm A            |
    |    +---------------------+  Z = D - body_depth
    | B  |
    |    |     dead zone
    +----+
    X = 0

The RIGHT orientation mirrors the whole layout about X = W/2.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

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
from ...services.corner import (
    calculate_dead_zone,
    calculate_diagonal_width,
    calculate_shelf_positions,
    has_left_side,
    has_right_side,
    should_use_l_shape,
)
from ...services.handles import generate_handle_metadata
from ...value_objects import (
    CornerFrontType,
    CornerMountType,
    CornerOrientation,
    CornerType,
    DoorMetadata,
    DoorType,
    EdgeBandingGeneric,
    EdgeBandingRect,
    GeneratedPart,
    HingeSide,
    PartRole,
)
from ._common import CornerBuild, resolve_hinge_side
from .registry import register_corner_strategy

logger = logging.getLogger(__name__)

# Edges of the L outline facing the dead zone
_NOTCH_EDGES = (1, 2)


@dataclass(frozen=True)
class _Layout:
    """Two-arm dimensions with the orientation mirror applied on output."""

    W: float
    D: float
    body_depth: float
    thickness: float
    mirrored: bool
    has_left: bool
    has_right: bool

    def x(self, x: float) -> float:
        return self.W - x if self.mirrored else x

    def angle(self, angle: float) -> float:
        return -angle if self.mirrored else angle

    def extent(self, inset: bool) -> tuple[float, float]:
        """Right end of arm A and front end of arm B, stopping at end caps if inset."""
        x_end = self.W - self.thickness if inset and self.has_right else self.W
        z_start = self.thickness if inset and self.has_left else 0.0
        return x_end, z_start

    def outline(self, x_end: float, z_start: float) -> list[tuple[float, float]]:
        """L-shaped footprint as (X, Z) points, before mirroring."""
        bd = self.body_depth
        return [
            (0.0, z_start),
            (bd, z_start),
            (bd, self.D - bd),
            (x_end, self.D - bd),
            (x_end, self.D),
            (0.0, self.D),
        ]

    def rects(
        self, x_end: float, z_start: float
    ) -> list[tuple[str, float, float, float, float]]:
        """Arm footprints as (label, x0, x1, z0, z1), before mirroring."""
        bd = self.body_depth
        return [
            ("arm A", 0.0, x_end, self.D - bd, self.D),
            ("arm B", 0.0, bd, z_start, self.D - bd),
        ]


def _layout(build: CornerBuild) -> _Layout:
    config = build.config
    return _Layout(
        W=config.W,
        D=config.D,
        body_depth=config.body_depth,
        thickness=build.thickness,
        mirrored=config.corner_orientation == CornerOrientation.RIGHT,
        has_left=has_left_side(config),
        has_right=has_right_side(config),
    )


def _flat_outline(
    build: CornerBuild,
    layout: _Layout,
    name: str,
    role: PartRole,
    outline: list[tuple[float, float]],
    y: float,
    **metadata: object,
) -> GeneratedPart:
    """Horizontal polygon part from a world (X, Z) outline.

    Mirroring reverses the point order to keep the winding, so the banded
    edge indices are remapped with it.
    """
    n = len(outline)
    points = [(layout.x(x), z) for x, z in outline]
    banded = set(_NOTCH_EDGES)
    if layout.mirrored:
        points.reverse()
        banded = {(n - 2 - edge) % n for edge in banded}

    xs = [x for x, _ in points]
    zs = [z for _, z in points]
    center_x = (min(xs) + max(xs)) / 2
    center_z = (min(zs) + max(zs)) / 2
    # Lying flat, local +y points toward -Z
    local = [(x - center_x, center_z - z) for x, z in points]
    return build.factory.polygon(
        name, role, local, build.thickness,
        (center_x, y, center_z), build.materials.body_material_id,
        rotation=ROTATION_FLAT,
        edge_banding=EdgeBandingGeneric(edges=frozenset(banded)),
        **metadata,
    )


def _flat_rects(
    build: CornerBuild,
    layout: _Layout,
    name: str,
    role: PartRole,
    x_end: float,
    z_start: float,
    y: float,
    index: int | None = None,
) -> list[GeneratedPart]:
    parts = []
    for i, (label, x0, x1, z0, z1) in enumerate(layout.rects(x_end, z_start)):
        if label == "arm A":
            banding = SHELF_BANDING
        else:
            # Arm B faces the dead zone with its inner long edge
            banding = EdgeBandingRect(left=layout.mirrored, right=not layout.mirrored)
        parts.append(
            build.factory.rect(
                f"{name} ({label})", role, x1 - x0, z1 - z0, build.thickness,
                (layout.x((x0 + x1) / 2), y, (z0 + z1) / 2),
                build.materials.body_material_id,
                rotation=ROTATION_FLAT, edge_banding=banding,
                index=i if index is None else index,
            )
        )
    return parts


def _horizontal_panel(
    build: CornerBuild,
    layout: _Layout,
    name: str,
    role: PartRole,
    inset: bool,
    y: float,
    index: int | None = None,
) -> list[GeneratedPart]:
    x_end, z_start = layout.extent(inset)
    if should_use_l_shape(build.config):
        metadata = {} if index is None else {"index": index}
        return [
            _flat_outline(
                build, layout, name, role, layout.outline(x_end, z_start), y, **metadata
            )
        ]
    return _flat_rects(build, layout, name, role, x_end, z_start, y, index)


def _body(build: CornerBuild, layout: _Layout) -> list[GeneratedPart]:
    config = build.config
    t = build.thickness
    leg = build.leg_offset
    bd = layout.body_depth
    body_id = build.materials.body_material_id

    parts = _horizontal_panel(
        build, layout, "Bottom", PartRole.CORNER_BOTTOM,
        config.bottom_mount == CornerMountType.INSET, t / 2 + leg,
    )
    parts += _horizontal_panel(
        build, layout, "Top", PartRole.CORNER_TOP,
        config.top_mount == CornerMountType.INSET, build.height - t / 2 + leg,
    )

    if layout.has_left:
        parts.append(
            build.factory.rect(
                "Left side", PartRole.CORNER_LEFT_SIDE, bd, build.side_height, t,
                (layout.x(bd / 2), build.side_center_y, t / 2), body_id,
                rotation=ROTATION_FRONT, edge_banding=VISIBLE_SIDE_BANDING,
            )
        )
    if layout.has_right:
        parts.append(
            build.factory.rect(
                "Right side", PartRole.CORNER_RIGHT_SIDE, bd, build.side_height, t,
                (layout.x(layout.W - t / 2), build.side_center_y, layout.D - bd / 2),
                body_id,
                rotation=ROTATION_SIDE, edge_banding=VISIBLE_SIDE_BANDING,
            )
        )
    return parts


def _front_rail(build: CornerBuild, layout: _Layout) -> list[GeneratedPart]:
    config = build.config
    if not config.front_rail:
        return []
    t = build.thickness
    x_start = layout.body_depth
    x_end, _ = layout.extent(inset=True)
    width = x_end - x_start
    if width <= 0:
        logger.debug(f"Front rail omitted for corner cabinet {build.cabinet_id}: no span")
        return []
    return [
        build.factory.rect(
            "Front rail", PartRole.CORNER_FRONT_RAIL, width, config.front_rail_width, t,
            (
                layout.x(x_start + width / 2),
                build.height - t - t / 2 + build.leg_offset,
                layout.D - layout.body_depth + config.front_rail_width / 2,
            ),
            build.materials.body_material_id,
            rotation=ROTATION_FLAT, edge_banding=SHELF_BANDING,
        )
    ]


def _backs(build: CornerBuild, layout: _Layout) -> list[GeneratedPart]:
    back_material = build.back_material_or_none()
    if back_material is None:
        return []
    bt = back_material.thickness
    H = build.height
    y = H / 2 + build.leg_offset
    material_id = build.materials.back_material_id or back_material.id
    return [
        build.factory.rect(
            "Back (arm A)", PartRole.CORNER_BACK, layout.W, H, bt,
            (layout.x(layout.W / 2), y, layout.D + bt / 2), material_id,
            rotation=ROTATION_FRONT, edge_banding=NO_BANDING, index=0,
        ),
        build.factory.rect(
            "Back (arm B)", PartRole.CORNER_BACK, layout.D, H, bt,
            (layout.x(-bt / 2), y, layout.D / 2), material_id,
            rotation=ROTATION_SIDE, edge_banding=NO_BANDING, index=1,
        ),
    ]


def _front(build: CornerBuild, layout: _Layout) -> list[GeneratedPart]:
    config = build.config
    if config.front_type == CornerFrontType.NONE:
        return []

    t = build.thickness
    dead_zone = calculate_dead_zone(config)
    height = build.height - FRONT_MARGIN * 2
    y = FRONT_MARGIN + height / 2 + build.leg_offset
    center_x = layout.x(layout.body_depth + dead_zone.width / 2)
    # Hinged on the open end of arm A unless configured
    hinge = resolve_hinge_side(
        config, HingeSide.LEFT if layout.mirrored else HingeSide.RIGHT
    )

    if config.front_type == CornerFrontType.ANGLED:
        name, role = "Diagonal front", PartRole.CORNER_DIAGONAL_FRONT
        width = calculate_diagonal_width(config)
        position = (center_x, y, dead_zone.depth / 2)
        rotation = (0.0, layout.angle(-math.atan2(dead_zone.depth, dead_zone.width)), 0.0)
    else:
        name, role = "Door", PartRole.DOOR
        width = dead_zone.width - FRONT_MARGIN * 2
        position = (center_x, y, dead_zone.depth - t / 2)
        rotation = ROTATION_FRONT

    if width <= MIN_FRONT_DIMENSION or height <= MIN_FRONT_DIMENSION:
        logger.debug(
            f"{name} omitted for corner cabinet {build.cabinet_id}: "
            f"{width:g}x{height:g}mm"
        )
        return []

    handle = None
    if build.params.handle_config is not None:
        handle = generate_handle_metadata(
            build.params.handle_config, width, height, DoorType.SINGLE, hinge
        )
    return [
        build.factory.rect(
            name, role, width, height, t, position, build.materials.front_material_id,
            rotation=rotation, edge_banding=FULL_BANDING,
            index=0,
            door_metadata=DoorMetadata(hinge_side=hinge),
            handle_metadata=handle,
        )
    ]


def _shelves(build: CornerBuild, layout: _Layout) -> list[GeneratedPart]:
    parts: list[GeneratedPart] = []
    heights = calculate_shelf_positions(
        build.height, build.thickness, build.config.shelf_count
    )
    for i, y in enumerate(heights):
        parts += _horizontal_panel(
            build, layout, f"Shelf {i + 1}", PartRole.CORNER_SHELF,
            True, y + build.leg_offset, index=i,
        )
    return parts


@register_corner_strategy(CornerType.L_SHAPED_TWO_ARM)
def generate_two_arm_corner(build: CornerBuild) -> list[GeneratedPart]:
    """Generate a two-arm corner cabinet in the corner frame.

    Part order: bottom, top, end caps, front rail, backs, front, shelves,
    legs. Legs stand under each arm separately.
    """
    layout = _layout(build)
    bd = layout.body_depth

    parts = _body(build, layout)
    parts += _front_rail(build, layout)
    parts += _backs(build, layout)
    parts += _front(build, layout)
    parts += _shelves(build, layout)
    parts += build.legs(
        [
            (layout.W, bd, layout.x(layout.W / 2), layout.D - bd / 2),
            (bd, layout.D - bd, layout.x(bd / 2), (layout.D - bd) / 2),
        ]
    )
    return parts
