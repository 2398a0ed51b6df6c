"""Corner cabinet value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._doors import HingeSide


class CornerType(str, Enum):
    """Corner cabinet construction models.

    Attributes:
        L_SHAPED: Rectangular body with a structural front panel and a
            door closing the rest of the opening.
        L_SHAPED_TWO_ARM: True two-wall corner made of two arms meeting
            at the corner.
    """

    L_SHAPED = "l_shaped"
    L_SHAPED_TWO_ARM = "l_shaped_two_arm"


class CornerOrientation(str, Enum):
    """Which wall pair the corner sits in.

    LEFT keeps the second arm on the left wall; RIGHT mirrors the layout.
    """

    LEFT = "left"
    RIGHT = "right"


class CornerMountType(str, Enum):
    INSET = "inset"
    OVERLAY = "overlay"


class CornerPanelGeometry(str, Enum):
    """Shape of the two-arm bottom and top panels."""

    TWO_RECT = "two_rect"
    L_SHAPE = "l_shape"


class CornerFrontType(str, Enum):
    NONE = "none"
    SINGLE = "single"
    ANGLED = "angled"


class CornerDoorPosition(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class WallSharingMode(str, Enum):
    """Which end caps are left out because a neighbour provides them."""

    FULL_ISOLATION = "full_isolation"
    SHARED_LEFT = "shared_left"
    SHARED_RIGHT = "shared_right"
    SHARED_BOTH = "shared_both"


@dataclass(frozen=True)
class CornerConfig:
    """Corner cabinet configuration.

    Attributes:
        corner_type: Construction model.
        corner_orientation: LEFT or mirrored RIGHT layout.
        W: Extent along the back wall in mm.
        D: Extent along the side wall in mm.
        body_depth: Depth of each arm of a two-arm corner.
        bottom_mount: Inset or overlay bottom panel.
        top_mount: Inset or overlay top panel.
        panel_geometry: Two rectangles or one L polygon for bottom and top.
        front_rail: Whether a two-arm corner gets a front rail.
        front_rail_width: Depth of the front rail strip.
        front_type: Front closing the opening.
        hinge_side: Explicit door hinge side; defaults to the door's side.
        door_gap: Gap around corner doors.
        door_width: Door width for the rectangular model.
        door_position: Side of the opening the door occupies.
        wall_sharing_mode: End caps omitted in favour of neighbours.
        shelf_count: Number of evenly spaced shelves.
    """

    corner_type: CornerType = CornerType.L_SHAPED
    corner_orientation: CornerOrientation = CornerOrientation.LEFT
    W: float = 900.0
    D: float = 900.0
    body_depth: float = 560.0
    bottom_mount: CornerMountType = CornerMountType.INSET
    top_mount: CornerMountType = CornerMountType.INSET
    panel_geometry: CornerPanelGeometry = CornerPanelGeometry.TWO_RECT
    front_rail: bool = True
    front_rail_width: float = 100.0
    front_type: CornerFrontType = CornerFrontType.SINGLE
    hinge_side: HingeSide | None = None
    door_gap: float = 2.0
    door_width: float = 450.0
    door_position: CornerDoorPosition = CornerDoorPosition.RIGHT
    wall_sharing_mode: WallSharingMode = WallSharingMode.FULL_ISOLATION
    shelf_count: int = 1

    def __post_init__(self) -> None:
        if self.W <= 0 or self.D <= 0:
            raise ValueError("Corner dimensions must be positive")
        if self.body_depth <= 0:
            raise ValueError("Corner body depth must be positive")
        if self.shelf_count < 0:
            raise ValueError("Shelf count must be non-negative")
