"""Generated part value objects.

A ``GeneratedPart`` is the atomic output of the engine: one flat panel with
its local size, its centre and rotation in a cabinet coordinate frame, its
material and its edge banding.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from ._doors import DoorMetadata
from ._handles import HandleMetadata
from ._legs import LegAccessory


class ShapeType(str, Enum):
    RECT = "rect"
    POLYGON = "polygon"


class CoordinateFrame(str, Enum):
    """Coordinate conventions used by the generators.

    Attributes:
        BODY: Origin at the horizontal centre of the cabinet at floor level.
            X runs left to right, Y up, Z from back (-) to front (+).
        CORNER: Origin at the front-left corner at floor level.
            X points right, Y up, Z back into the corner.
    """

    BODY = "body"
    CORNER = "corner"


class PartRole(str, Enum):
    """Closed set of roles a part plays within its cabinet."""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    BACK = "back"
    SHELF = "shelf"
    PARTITION = "partition"
    DOOR = "door"
    DRAWER_FRONT = "drawer_front"
    DRAWER_BOTTOM = "drawer_bottom"
    DRAWER_SIDE_LEFT = "drawer_side_left"
    DRAWER_SIDE_RIGHT = "drawer_side_right"
    DRAWER_BACK = "drawer_back"
    DRAWER_BOX_FRONT = "drawer_box_front"
    LEG = "leg"
    SIDE_FRONT_LEFT = "side_front_left"
    SIDE_FRONT_RIGHT = "side_front_right"
    DECORATIVE_TOP = "decorative_top"
    DECORATIVE_BOTTOM = "decorative_bottom"
    CORNER_BOTTOM = "corner_bottom"
    CORNER_TOP = "corner_top"
    CORNER_SIDE_INTERNAL = "corner_side_internal"
    CORNER_SIDE_EXTERNAL = "corner_side_external"
    CORNER_LEFT_SIDE = "corner_left_side"
    CORNER_RIGHT_SIDE = "corner_right_side"
    CORNER_BACK = "corner_back"
    CORNER_FRONT_PANEL = "corner_front_panel"
    CORNER_FRONT_RAIL = "corner_front_rail"
    CORNER_DIAGONAL_FRONT = "corner_diagonal_front"
    CORNER_SHELF = "corner_shelf"

    @property
    def is_body_role(self) -> bool:
        """True for structural carcass parts, including drawer boxes."""
        return self in _BODY_ROLES


_BODY_ROLES = frozenset(
    {
        PartRole.BOTTOM,
        PartRole.TOP,
        PartRole.LEFT_SIDE,
        PartRole.RIGHT_SIDE,
        PartRole.BACK,
        PartRole.SHELF,
        PartRole.PARTITION,
        PartRole.DRAWER_BOTTOM,
        PartRole.DRAWER_SIDE_LEFT,
        PartRole.DRAWER_SIDE_RIGHT,
        PartRole.DRAWER_BACK,
        PartRole.DRAWER_BOX_FRONT,
        PartRole.CORNER_BOTTOM,
        PartRole.CORNER_TOP,
        PartRole.CORNER_SIDE_INTERNAL,
        PartRole.CORNER_SIDE_EXTERNAL,
        PartRole.CORNER_LEFT_SIDE,
        PartRole.CORNER_RIGHT_SIDE,
        PartRole.CORNER_BACK,
        PartRole.CORNER_FRONT_PANEL,
        PartRole.CORNER_FRONT_RAIL,
        PartRole.CORNER_SHELF,
    }
)


@dataclass(frozen=True)
class RectShape:
    """Rectangle in the part's local 2D plane."""

    width: float
    height: float


@dataclass(frozen=True)
class PolygonShape:
    """Closed polygon in the part's local 2D plane, centred on the origin."""

    points: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        if len(self.points) < 3:
            raise ValueError("Polygon must have at least 3 points")


ShapeParams = Union[RectShape, PolygonShape]


@dataclass(frozen=True)
class EdgeBandingRect:
    """Edge banding flags for a rectangular part.

    Which physical edge each flag refers to depends on the part's rotation.
    """

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False

    @property
    def banded_edge_count(self) -> int:
        return sum((self.top, self.bottom, self.left, self.right))


@dataclass(frozen=True)
class EdgeBandingGeneric:
    """Edge banding for polygon parts, by edge index.

    Edge ``i`` runs from point ``i`` to point ``i + 1`` (wrapping around).
    """

    edges: frozenset[int] = frozenset()

    @property
    def banded_edge_count(self) -> int:
        return len(self.edges)


EdgeBanding = Union[EdgeBandingRect, EdgeBandingGeneric]


@dataclass(frozen=True)
class CabinetPartMetadata:
    """How a part relates to its cabinet.

    Attributes:
        cabinet_id: Owning cabinet.
        role: Role of the part within the cabinet.
        index: Position among parts of the same role (shelves, doors, ...).
        drawer_index: Drawer zone or drawer box the part belongs to.
        leg_index: Leg number, for LEG parts.
        door_metadata: Hinge and opening information for fronts.
        handle_metadata: Resolved handle placement for fronts.
        accessory: Hardware details for LEG parts.
    """

    cabinet_id: str
    role: PartRole
    index: int | None = None
    drawer_index: int | None = None
    leg_index: int | None = None
    door_metadata: DoorMetadata | None = None
    handle_metadata: HandleMetadata | None = None
    accessory: LegAccessory | None = None


Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class GeneratedPart:
    """A positioned, dimensioned cabinet part.

    ``width``, ``height`` and ``depth`` are the extents of the shape in its
    own unrotated frame, with ``depth`` the material thickness. ``position``
    is always the geometric centre in ``frame`` coordinates.
    """

    name: str
    furniture_id: str
    group: str
    shape_params: ShapeParams
    width: float
    height: float
    depth: float
    position: Vector3
    rotation: Vector3
    material_id: str
    edge_banding: EdgeBanding
    cabinet_metadata: CabinetPartMetadata
    frame: CoordinateFrame = CoordinateFrame.BODY

    @property
    def shape_type(self) -> ShapeType:
        if isinstance(self.shape_params, PolygonShape):
            return ShapeType.POLYGON
        return ShapeType.RECT

    @property
    def role(self) -> PartRole:
        return self.cabinet_metadata.role

    def translated(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> GeneratedPart:
        """Return a copy of the part moved by the given offsets."""
        x, y, z = self.position
        return replace(self, position=(x + dx, y + dy, z + dz))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        if isinstance(self.shape_params, PolygonShape):
            shape: dict[str, Any] = {
                "points": [list(point) for point in self.shape_params.points]
            }
        else:
            shape = {
                "width": self.shape_params.width,
                "height": self.shape_params.height,
            }

        if isinstance(self.edge_banding, EdgeBandingGeneric):
            banding: dict[str, Any] = {
                "type": "generic",
                "edges": sorted(self.edge_banding.edges),
            }
        else:
            banding = {
                "type": "rect",
                "top": self.edge_banding.top,
                "bottom": self.edge_banding.bottom,
                "left": self.edge_banding.left,
                "right": self.edge_banding.right,
            }

        return {
            "name": self.name,
            "furniture_id": self.furniture_id,
            "group": self.group,
            "shape_type": self.shape_type.value,
            "shape_params": shape,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "material_id": self.material_id,
            "edge_banding": banding,
            "frame": self.frame.value,
            "cabinet_metadata": _metadata_to_dict(self.cabinet_metadata),
        }


def _metadata_to_dict(metadata: CabinetPartMetadata) -> dict[str, Any]:
    result: dict[str, Any] = {
        "cabinet_id": metadata.cabinet_id,
        "role": metadata.role.value,
    }
    if metadata.index is not None:
        result["index"] = metadata.index
    if metadata.drawer_index is not None:
        result["drawer_index"] = metadata.drawer_index
    if metadata.leg_index is not None:
        result["leg_index"] = metadata.leg_index
    if metadata.door_metadata is not None:
        door = metadata.door_metadata
        result["door_metadata"] = {
            "hinge_side": door.hinge_side.value if door.hinge_side else None,
            "opening_direction": door.opening_direction.value,
            "folding_section": (
                door.folding_section.value if door.folding_section else None
            ),
        }
    if metadata.handle_metadata is not None:
        handle = metadata.handle_metadata
        result["handle_metadata"] = {
            "type": handle.config.type.value,
            "orientation": handle.config.orientation.value,
            "actual_position": list(handle.actual_position),
        }
    if metadata.accessory is not None:
        accessory = metadata.accessory
        result["accessory"] = {
            "shape": accessory.shape.value,
            "finish": accessory.finish.value,
            "color": accessory.color,
            "diameter": accessory.diameter,
        }
    return result
