"""Handle and leg configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cabinet_parts.domain.value_objects import (
    HandleCategory,
    HandleFinish,
    HandleOrientation,
    HandlePositionPreset,
    HandleType,
    LegCountMode,
    LegFinish,
    LegPreset,
    LegShape,
)


class HandleDimensionsSchema(BaseModel):
    """Physical handle size in mm."""

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    width: float | None = Field(default=None, ge=0)
    hole_spacing: float | None = Field(default=None, ge=0)
    diameter: float | None = Field(default=None, ge=0)


class HandlePositionSchema(BaseModel):
    """Handle placement on a front.

    Attributes:
        preset: Named placement; omitted to use the door type default.
        x: Custom X offset from the front centre, for CUSTOM.
        y: Custom Y offset from the front centre, for CUSTOM.
        offset_from_edge: Distance kept from the front edges in mm.
    """

    model_config = ConfigDict(extra="forbid")

    preset: HandlePositionPreset | None = None
    x: float | None = None
    y: float | None = None
    offset_from_edge: float = Field(default=30.0, ge=0, le=200.0)

    @model_validator(mode="after")
    def validate_custom_coordinates(self) -> "HandlePositionSchema":
        """Require both coordinates for a custom placement."""
        if self.preset == HandlePositionPreset.CUSTOM and (self.x is None or self.y is None):
            raise ValueError("Custom handle position requires both 'x' and 'y'")
        return self


class HandleConfigSchema(BaseModel):
    """Handle fitted to doors or drawer fronts."""

    model_config = ConfigDict(extra="forbid")

    type: HandleType
    category: HandleCategory = HandleCategory.TRADITIONAL
    orientation: HandleOrientation = HandleOrientation.HORIZONTAL
    position: HandlePositionSchema = Field(default_factory=HandlePositionSchema)
    dimensions: HandleDimensionsSchema | None = None
    finish: HandleFinish | None = None


class LegTypeConfigSchema(BaseModel):
    """Leg model.

    Attributes:
        preset: Named leg model.
        height: Nominal leg height in mm (50 to 300).
        adjust_range: Height adjustment range in mm.
        diameter: Leg diameter in mm.
        shape: Round or square.
        finish: Surface finish.
    """

    model_config = ConfigDict(extra="forbid")

    preset: LegPreset = LegPreset.STANDARD
    height: float = Field(default=150.0, ge=50.0, le=300.0)
    adjust_range: float = Field(default=20.0, ge=0, le=100.0)
    diameter: float = Field(default=30.0, ge=20.0, le=60.0)
    shape: LegShape = LegShape.ROUND
    finish: LegFinish = LegFinish.BLACK_PLASTIC


class LegsConfigSchema(BaseModel):
    """Legs under the cabinet.

    Attributes:
        enabled: Whether the cabinet stands on legs.
        leg_type: Leg model.
        count_mode: AUTO picks the count from the width.
        manual_count: Leg count for MANUAL mode.
        current_height: Adjusted leg height in mm (50 to 300).
        corner_inset: Distance from the cabinet edges to the leg centres.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    leg_type: LegTypeConfigSchema = Field(default_factory=LegTypeConfigSchema)
    count_mode: LegCountMode = LegCountMode.AUTO
    manual_count: int | None = Field(default=None, ge=4, le=12)
    current_height: float = Field(default=150.0, ge=50.0, le=300.0)
    corner_inset: float = Field(default=50.0, ge=20.0, le=100.0)
