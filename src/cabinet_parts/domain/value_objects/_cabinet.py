"""Cabinet parameter value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import (
    DEFAULT_BACK_OVERLAP_RATIO,
    DEFAULT_HANGER_CUTOUT_HEIGHT,
    DEFAULT_HANGER_CUTOUT_WIDTH,
    DEFAULT_HANGER_HORIZONTAL_INSET,
    DEFAULT_HANGER_VERTICAL_INSET,
)
from ._cabinet_types import BackMountType, CabinetType, TopBottomPlacement
from ._corner import CornerConfig
from ._decorative import DecorativePanelsConfig, SideFrontsConfig
from ._doors import DoorConfig, FoldingDoorConfig
from ._drawers import DrawerConfiguration, DrawerSlideType
from ._handles import HandleConfig
from ._interior import CabinetInteriorConfig
from ._legs import LegsConfig


@dataclass(frozen=True)
class HangerCutoutConfig:
    """Notches cut into the top corners of a wall-cabinet back.

    Attributes:
        enabled: Whether the notches are cut.
        width: Notch width in mm.
        height: Notch height in mm.
        horizontal_inset: Distance from the side edge to the notch.
        vertical_inset: Distance from the top edge to the notch.
    """

    enabled: bool = True
    width: float = DEFAULT_HANGER_CUTOUT_WIDTH
    height: float = DEFAULT_HANGER_CUTOUT_HEIGHT
    horizontal_inset: float = DEFAULT_HANGER_HORIZONTAL_INSET
    vertical_inset: float = DEFAULT_HANGER_VERTICAL_INSET


@dataclass(frozen=True)
class CabinetParams:
    """Structural parameters of one cabinet.

    ``type`` discriminates which type-specific fields apply. Fields that do
    not apply to a type are ignored by its assembler.

    Attributes:
        type: Cabinet type.
        width: Outer width in mm.
        height: Body height in mm, excluding legs.
        depth: Outer depth in mm, excluding the back panel.
        top_bottom_placement: Inset or overlay top and bottom.
        has_back: Whether a back panel is fitted.
        back_overlap_ratio: Fraction of the body thickness the back overlaps.
        back_mount_type: How the back is fixed.
        legs: Legs under the cabinet.
        interior_config: Interior zone tree; replaces the legacy fields.
        drawer_config: Legacy drawer stack.
        side_fronts: Decorative end panels.
        decorative_panels: Top and bottom trim.
        shelf_count: Legacy evenly spaced shelf count.
        has_doors: Kitchen and wall cabinets only.
        door_config: Door layout for kitchen and wall cabinets.
        handle_config: Door handles.
        door_count: Wardrobe door count.
        drawer_count: Legacy drawer cabinet zone count.
        drawer_slide_type: Legacy drawer cabinet slide type.
        has_internal_drawers: Legacy drawer cabinet without fronts.
        drawer_heights: Legacy per-drawer height ratios.
        drawer_handle_config: Legacy drawer front handle.
        bottom_material_id: Legacy drawer bottom material.
        folding_door_config: Wall cabinet folding doors.
        hanger_cutouts: Wall cabinet back notches.
        corner_config: Corner cabinet configuration.
    """

    type: CabinetType
    width: float
    height: float
    depth: float
    top_bottom_placement: TopBottomPlacement = TopBottomPlacement.INSET
    has_back: bool = True
    back_overlap_ratio: float = DEFAULT_BACK_OVERLAP_RATIO
    back_mount_type: BackMountType = BackMountType.OVERLAP
    legs: LegsConfig | None = None
    interior_config: CabinetInteriorConfig | None = None
    drawer_config: DrawerConfiguration | None = None
    side_fronts: SideFrontsConfig | None = None
    decorative_panels: DecorativePanelsConfig | None = None
    shelf_count: int = 0
    has_doors: bool = False
    door_config: DoorConfig | None = None
    handle_config: HandleConfig | None = None
    door_count: int = 2
    drawer_count: int = 0
    drawer_slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    has_internal_drawers: bool = False
    drawer_heights: tuple[float, ...] | None = None
    drawer_handle_config: HandleConfig | None = None
    bottom_material_id: str | None = None
    folding_door_config: FoldingDoorConfig | None = None
    hanger_cutouts: HangerCutoutConfig | None = None
    corner_config: CornerConfig | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All cabinet dimensions must be positive")
        if not 0 <= self.back_overlap_ratio <= 1:
            raise ValueError("Back overlap ratio must be between 0 and 1")
        if self.shelf_count < 0:
            raise ValueError("Shelf count must be non-negative")
        if self.drawer_count < 0:
            raise ValueError("Drawer count must be non-negative")
