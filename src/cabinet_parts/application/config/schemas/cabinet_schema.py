"""Cabinet parameter and corner configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cabinet_parts.domain.value_objects import (
    BackMountType,
    CabinetType,
    CornerDoorPosition,
    CornerFrontType,
    CornerMountType,
    CornerOrientation,
    CornerPanelGeometry,
    CornerType,
    DrawerSlideType,
    HingeSide,
    TopBottomPlacement,
    WallSharingMode,
)

from cabinet_parts.application.config.schemas.front_schema import (
    DecorativePanelsConfigSchema,
    DoorConfigSchema,
    FoldingDoorConfigSchema,
    HangerCutoutConfigSchema,
    SideFrontsConfigSchema,
)
from cabinet_parts.application.config.schemas.hardware_schema import (
    HandleConfigSchema,
    LegsConfigSchema,
)
from cabinet_parts.application.config.schemas.interior_schema import (
    CabinetInteriorConfigSchema,
    DrawerConfigurationSchema,
)


class CornerConfigSchema(BaseModel):
    """Corner cabinet configuration.

    Dimension limits (W, D, body depth, rail width) are checked by the
    corner validator so that all violations are reported together.

    Attributes:
        corner_type: l_shaped (rectangular body) or l_shaped_two_arm.
        corner_orientation: left or mirrored right layout.
        W: Extent along the back wall in mm.
        D: Extent along the side wall in mm.
        body_depth: Arm depth of a two-arm corner in mm.
        bottom_mount: Inset or overlay bottom.
        top_mount: Inset or overlay top.
        panel_geometry: two_rect or l_shape bottom and top.
        front_rail: Whether a two-arm corner gets a front rail.
        front_rail_width: Front rail depth in mm.
        front_type: none, single or angled.
        hinge_side: Explicit door hinge side.
        door_gap: Gap around corner doors in mm.
        door_width: Door width of the rectangular model in mm.
        door_position: Side of the opening the door occupies.
        wall_sharing_mode: End caps omitted in favour of neighbours.
        shelf_count: Evenly spaced shelves (0 to 10).
    """

    model_config = ConfigDict(extra="forbid")

    corner_type: CornerType = CornerType.L_SHAPED
    corner_orientation: CornerOrientation = CornerOrientation.LEFT
    W: float = Field(default=900.0, gt=0)
    D: float = Field(default=900.0, gt=0)
    body_depth: float = Field(default=560.0, gt=0)
    bottom_mount: CornerMountType = CornerMountType.INSET
    top_mount: CornerMountType = CornerMountType.INSET
    panel_geometry: CornerPanelGeometry = CornerPanelGeometry.TWO_RECT
    front_rail: bool = True
    front_rail_width: float = Field(default=100.0, gt=0)
    front_type: CornerFrontType = CornerFrontType.SINGLE
    hinge_side: HingeSide | None = None
    door_gap: float = Field(default=2.0, ge=0, le=20.0)
    door_width: float = Field(default=450.0, gt=0)
    door_position: CornerDoorPosition = CornerDoorPosition.RIGHT
    wall_sharing_mode: WallSharingMode = WallSharingMode.FULL_ISOLATION
    shelf_count: int = Field(default=1, ge=0, le=10)


class CabinetParamsConfig(BaseModel):
    """Structural parameters of the cabinet.

    ``type`` decides which of the type-specific fields apply; fields that do
    not apply to the type are ignored by the generator.

    Attributes:
        type: Cabinet type.
        width: Outer width in mm.
        height: Body height in mm, excluding legs.
        depth: Outer depth in mm, excluding the back.
        top_bottom_placement: inset or overlay top and bottom.
        has_back: Whether a back panel is fitted.
        back_overlap_ratio: Share of the body thickness the back overlaps.
        back_mount_type: overlap or dado.
        legs: Legs under the cabinet.
        interior_config: Interior zone tree.
        drawer_config: Legacy drawer stack.
        side_fronts: Decorative side panels.
        decorative_panels: Top and bottom trim.
        shelf_count: Legacy evenly spaced shelves (0 to 10).
        has_doors: Kitchen and wall cabinets.
        door_config: Door layout.
        handle_config: Door handles.
        door_count: Wardrobe doors (1 to 4).
        drawer_count: Legacy drawer cabinet zones (0 to 8).
        drawer_slide_type: Legacy drawer cabinet slides.
        has_internal_drawers: Legacy drawer cabinet without fronts.
        drawer_heights: Legacy per-drawer height ratios.
        drawer_handle_config: Legacy drawer front handle.
        bottom_material_id: Legacy drawer bottom material.
        folding_door_config: Wall cabinet lift-up fronts.
        hanger_cutouts: Wall cabinet back notches.
        corner_config: Corner cabinet configuration.
    """

    model_config = ConfigDict(extra="forbid")

    type: CabinetType
    width: float = Field(..., gt=0, le=5000.0)
    height: float = Field(..., gt=0, le=5000.0)
    depth: float = Field(..., gt=0, le=2000.0)
    top_bottom_placement: TopBottomPlacement = TopBottomPlacement.INSET
    has_back: bool = True
    back_overlap_ratio: float = Field(default=0.667, ge=0, le=1.0)
    back_mount_type: BackMountType = BackMountType.OVERLAP
    legs: LegsConfigSchema | None = None
    interior_config: CabinetInteriorConfigSchema | None = None
    drawer_config: DrawerConfigurationSchema | None = None
    side_fronts: SideFrontsConfigSchema | None = None
    decorative_panels: DecorativePanelsConfigSchema | None = None

    shelf_count: int = Field(default=0, ge=0, le=10)
    has_doors: bool = False
    door_config: DoorConfigSchema | None = None
    handle_config: HandleConfigSchema | None = None
    door_count: int = Field(default=2, ge=1, le=4)
    drawer_count: int = Field(default=0, ge=0, le=8)
    drawer_slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    has_internal_drawers: bool = False
    drawer_heights: list[float] | None = Field(default=None, max_length=8)
    drawer_handle_config: HandleConfigSchema | None = None
    bottom_material_id: str | None = None
    folding_door_config: FoldingDoorConfigSchema | None = None
    hanger_cutouts: HangerCutoutConfigSchema | None = None
    corner_config: CornerConfigSchema | None = None

    @model_validator(mode="after")
    def validate_drawer_heights(self) -> "CabinetParamsConfig":
        """Ensure every legacy drawer height ratio is positive."""
        if self.drawer_heights and any(ratio <= 0 for ratio in self.drawer_heights):
            raise ValueError("drawer_heights must contain only positive ratios")
        return self
