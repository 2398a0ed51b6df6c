"""Drawer configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._handles import HandleConfig
from ._shelves import ShelfDepthPreset


class DrawerSlideType(str, Enum):
    """Drawer runner families, each with its own clearances."""

    SIDE_MOUNT = "side_mount"
    UNDERMOUNT = "undermount"
    BOTTOM_MOUNT = "bottom_mount"
    CENTER_MOUNT = "center_mount"


@dataclass(frozen=True)
class DrawerSlideConfig:
    """Clearances a slide type needs around the drawer box.

    Attributes:
        side_offset: Gap between box side and cabinet side, per side.
        depth_offset: Depth lost behind the box.
    """

    side_offset: float
    depth_offset: float


@dataclass(frozen=True)
class DrawerBox:
    """One physical drawer box within a zone."""

    height_ratio: float = 1.0

    def __post_init__(self) -> None:
        if self.height_ratio < 0:
            raise ValueError("Box height ratio must be non-negative")


@dataclass(frozen=True)
class DrawerZoneFront:
    """Visible front covering a drawer zone."""

    handle_config: HandleConfig | None = None


@dataclass(frozen=True)
class AboveBoxShelf:
    """A shelf placed in the space left above a short drawer box."""

    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None


@dataclass(frozen=True)
class AboveBoxContent:
    """Content placed above the boxes of a drawer zone."""

    shelves: tuple[AboveBoxShelf, ...] = ()


@dataclass(frozen=True)
class DrawerZone:
    """A horizontal band of a drawer stack.

    Attributes:
        id: Zone identifier.
        height_ratio: Weight of this zone among its siblings.
        front: Visible front, or None for an internal zone.
        boxes: Boxes stacked behind the front, bottom to top.
        box_to_front_ratio: Fraction of the zone height used by boxes.
            Values below 1.0 leave room for ``above_box_content``.
        above_box_content: Shelves placed above the boxes.
    """

    id: str
    height_ratio: float = 1.0
    front: DrawerZoneFront | None = field(default_factory=DrawerZoneFront)
    boxes: tuple[DrawerBox, ...] = (DrawerBox(),)
    box_to_front_ratio: float | None = None
    above_box_content: AboveBoxContent | None = None

    def __post_init__(self) -> None:
        if self.height_ratio < 0:
            raise ValueError("Zone height ratio must be non-negative")
        if self.box_to_front_ratio is not None and not (
            0 < self.box_to_front_ratio <= 1
        ):
            raise ValueError("Box to front ratio must be in (0, 1]")

    @property
    def has_external_front(self) -> bool:
        """True if the zone shows a visible front."""
        return self.front is not None


@dataclass(frozen=True)
class DrawerConfiguration:
    """Drawer stack configuration.

    Attributes:
        slide_type: Runner type, selecting box clearances.
        zones: Drawer zones listed bottom to top.
        default_handle_config: Handle used by fronts without their own.
        box_material_id: Material for box sides, backs and fronts.
        bottom_material_id: Material for box bottoms.
    """

    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    zones: tuple[DrawerZone, ...] = ()
    default_handle_config: HandleConfig | None = None
    box_material_id: str | None = None
    bottom_material_id: str | None = None
