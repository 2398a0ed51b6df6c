"""Door, side front and decorative panel schemas."""

from pydantic import BaseModel, ConfigDict, Field

from cabinet_parts.domain.value_objects import (
    DecorativePanelType,
    DoorLayout,
    DoorOpeningDirection,
    HingeSide,
)


class DoorConfigSchema(BaseModel):
    """Door layout of kitchen, wardrobe and wall cabinet fronts."""

    model_config = ConfigDict(extra="forbid")

    layout: DoorLayout = DoorLayout.DOUBLE
    hinge_side: HingeSide = HingeSide.LEFT
    opening_direction: DoorOpeningDirection = DoorOpeningDirection.HORIZONTAL


class FoldingDoorConfigSchema(BaseModel):
    """Lift-up front split into a lower and an upper section.

    Attributes:
        split_ratio: Share of the front height given to the lower section.
        section_gap: Gap between the sections in mm.
    """

    model_config = ConfigDict(extra="forbid")

    split_ratio: float = Field(default=0.5, ge=0, le=1.0)
    section_gap: float = Field(default=3.0, ge=0, le=50.0)


class HangerCutoutConfigSchema(BaseModel):
    """Notches cut into the top corners of a wall-cabinet back."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    width: float = Field(default=50.0, gt=0, le=200.0)
    height: float = Field(default=40.0, gt=0, le=200.0)
    horizontal_inset: float = Field(default=50.0, ge=0, le=500.0)
    vertical_inset: float = Field(default=30.0, ge=0, le=500.0)


class SideFrontConfigSchema(BaseModel):
    """Decorative panel covering one cabinet side.

    Attributes:
        enabled: Whether the panel is fitted.
        material_id: Panel material; defaults to the front material.
        forward_protrusion: How far the panel reaches past the body front.
        bottom_offset: Gap left below the panel.
        top_offset: Gap left above the panel.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    material_id: str | None = None
    forward_protrusion: float = Field(default=0.0, ge=0, le=100.0)
    bottom_offset: float = Field(default=0.0, ge=0)
    top_offset: float = Field(default=0.0, ge=0)


class SideFrontsConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    left: SideFrontConfigSchema | None = None
    right: SideFrontConfigSchema | None = None


class DecorativePanelConfigSchema(BaseModel):
    """Horizontal trim along the top or bottom of the cabinet front.

    Attributes:
        enabled: Whether the panel is fitted.
        type: Blenda, plinth, trim strip or full panel.
        height: Panel height in mm.
        recess: Setback from the body front in mm.
        thickness: Override thickness; defaults depend on the type.
        material_id: Panel material; defaults to the front material.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    type: DecorativePanelType = DecorativePanelType.BLENDA
    height: float = Field(default=100.0, ge=0, le=1000.0)
    recess: float = Field(default=0.0, ge=0, le=200.0)
    thickness: float | None = Field(default=None, gt=0, le=50.0)
    material_id: str | None = None


class DecorativePanelsConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    top: DecorativePanelConfigSchema | None = None
    bottom: DecorativePanelConfigSchema | None = None
