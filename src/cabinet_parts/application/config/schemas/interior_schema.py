"""Interior zone tree, shelf and drawer configuration schemas.

The interior of a cabinet is a recursive tree of zones. Leaf zones hold
shelves or drawers; nested zones split their space into rows or columns.
Structural limits that depend on the whole tree (nesting depth, minimum
sizes) are checked by the domain validators, not here.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cabinet_parts.domain.value_objects import (
    DrawerSlideType,
    PartitionDepthPreset,
    ShelfDepthPreset,
    ShelvesMode,
    ZoneContentType,
    ZoneDivisionDirection,
    ZoneHeightMode,
    ZoneWidthMode,
)

from cabinet_parts.application.config.schemas.hardware_schema import HandleConfigSchema


# =============================================================================
# Shelves
# =============================================================================


class ShelfConfigSchema(BaseModel):
    """One manually configured shelf.

    Attributes:
        depth_preset: Full or half depth, or a custom depth.
        custom_depth: Depth in mm for CUSTOM.
        material_id: Shelf material; defaults to the body material.
        position_y: Height above the zone bottom in mm.
    """

    model_config = ConfigDict(extra="forbid")

    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth: float | None = Field(default=None, gt=0)
    material_id: str | None = None
    position_y: float | None = Field(default=None, ge=0)


class ShelvesConfigurationSchema(BaseModel):
    """Shelves of a SHELVES zone."""

    model_config = ConfigDict(extra="forbid")

    mode: ShelvesMode = ShelvesMode.UNIFORM
    count: int = Field(default=1, ge=0, le=10)
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth: float | None = Field(default=None, gt=0)
    material_id: str | None = None
    shelves: list[ShelfConfigSchema] = Field(default_factory=list, max_length=10)


# =============================================================================
# Drawers
# =============================================================================


class DrawerBoxSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    height_ratio: float = Field(default=1.0, gt=0)


class DrawerZoneFrontSchema(BaseModel):
    """Front of a drawer zone; its handle overrides the stack default."""

    model_config = ConfigDict(extra="forbid")

    handle_config: HandleConfigSchema | None = None


class AboveBoxShelfSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth: float | None = Field(default=None, gt=0)
    material_id: str | None = None


class AboveBoxContentSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    shelves: list[AboveBoxShelfSchema] = Field(default_factory=list, max_length=4)


class DrawerZoneSchema(BaseModel):
    """One drawer zone: a front hiding one or more boxes.

    Attributes:
        id: Zone identifier.
        height_ratio: Share of the drawer stack height.
        front: Front of the zone; null for internal drawers.
        boxes: Boxes behind the front, bottom to top (1 to 4).
        box_to_front_ratio: Share of the zone height used by the boxes.
        above_box_content: Shelves above the boxes.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    height_ratio: float = Field(default=1.0, gt=0)
    front: DrawerZoneFrontSchema | None = Field(default_factory=DrawerZoneFrontSchema)
    boxes: list[DrawerBoxSchema] = Field(
        default_factory=lambda: [DrawerBoxSchema()], min_length=1, max_length=4
    )
    box_to_front_ratio: float | None = Field(default=None, gt=0, le=1.0)
    above_box_content: AboveBoxContentSchema | None = None


class DrawerConfigurationSchema(BaseModel):
    """Drawer stack of a DRAWERS zone or of a legacy drawer cabinet."""

    model_config = ConfigDict(extra="forbid")

    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    zones: list[DrawerZoneSchema] = Field(default_factory=list, max_length=8)
    default_handle_config: HandleConfigSchema | None = None
    box_material_id: str | None = None
    bottom_material_id: str | None = None


# =============================================================================
# Zone tree
# =============================================================================


class ZoneHeightConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: ZoneHeightMode = ZoneHeightMode.RATIO
    ratio: float = Field(default=1.0, ge=0)
    exact_mm: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_exact_height(self) -> "ZoneHeightConfigSchema":
        """Require exact_mm for EXACT mode."""
        if self.mode == ZoneHeightMode.EXACT and self.exact_mm is None:
            raise ValueError("Exact height mode requires 'exact_mm'")
        return self


class ZoneWidthConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: ZoneWidthMode = ZoneWidthMode.PROPORTIONAL
    ratio: float = Field(default=1.0, ge=0)
    fixed_mm: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_fixed_width(self) -> "ZoneWidthConfigSchema":
        """Require fixed_mm for FIXED mode."""
        if self.mode == ZoneWidthMode.FIXED and self.fixed_mm is None:
            raise ValueError("Fixed width mode requires 'fixed_mm'")
        return self


class PartitionConfigSchema(BaseModel):
    """Vertical divider between two adjacent columns."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    depth_preset: PartitionDepthPreset = PartitionDepthPreset.FULL
    custom_depth: float | None = Field(default=None, gt=0)
    material_id: str | None = None


class InteriorZoneSchema(BaseModel):
    """A node of the interior zone tree.

    Attributes:
        id: Zone identifier, unique within the tree.
        content_type: empty, shelves, drawers or nested.
        height_config: Share of the parent height.
        width_config: Share of the parent width in a vertical division.
        division_direction: Rows (horizontal) or columns (vertical).
        children: Child zones of a nested zone (at most 6).
        partitions: One entry per pair of adjacent children.
        shelves_config: Shelves of a shelves zone.
        drawer_config: Drawers of a drawers zone.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    content_type: ZoneContentType = ZoneContentType.EMPTY
    height_config: ZoneHeightConfigSchema = Field(default_factory=ZoneHeightConfigSchema)
    width_config: ZoneWidthConfigSchema | None = None
    division_direction: ZoneDivisionDirection | None = None
    children: list["InteriorZoneSchema"] = Field(default_factory=list, max_length=6)
    partitions: list[PartitionConfigSchema] = Field(default_factory=list)
    shelves_config: ShelvesConfigurationSchema | None = None
    drawer_config: DrawerConfigurationSchema | None = None

    @model_validator(mode="after")
    def validate_partitions(self) -> "InteriorZoneSchema":
        """Ensure partitions, when given, match the gaps between children."""
        if self.partitions and len(self.partitions) != max(0, len(self.children) - 1):
            raise ValueError(
                f"Zone '{self.id}' needs {max(0, len(self.children) - 1)} partitions "
                f"for {len(self.children)} children, got {len(self.partitions)}"
            )
        return self


class CabinetInteriorConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    root_zone: InteriorZoneSchema
