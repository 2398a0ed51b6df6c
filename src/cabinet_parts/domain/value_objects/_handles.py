"""Handle configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..constants import DEFAULT_HANDLE_OFFSET


class HandleType(str, Enum):
    """Handle hardware families."""

    BAR = "bar"
    STRIP = "strip"
    KNOB = "knob"
    MILLED = "milled"
    GOLA = "gola"
    EDGE_MOUNTED = "edge_mounted"
    TIP_ON = "tip_on"
    PUSH_LATCH = "push_latch"


class HandleCategory(str, Enum):
    """How a handle is fitted to the front.

    Attributes:
        TRADITIONAL: Surface-mounted bar, strip or knob.
        MODERN: Milled into the front or running along its edge.
        HANDLELESS: Push-to-open hardware with no visible grip.
    """

    TRADITIONAL = "traditional"
    MODERN = "modern"
    HANDLELESS = "handleless"


class HandleOrientation(str, Enum):
    """Direction of a handle's long axis."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class HandlePositionPreset(str, Enum):
    """Named handle placements relative to the front."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"
    CUSTOM = "custom"


class HandleFinish(str, Enum):
    """Surface finishes for handle hardware."""

    CHROME = "chrome"
    BRUSHED_NICKEL = "brushed_nickel"
    BLACK_MATTE = "black_matte"
    GOLD = "gold"
    ALUMINUM = "aluminum"
    STAINLESS = "stainless"


@dataclass(frozen=True)
class HandleDimensions:
    """Physical size of a handle.

    Attributes:
        length: Extent along the handle's long axis.
        height: Projection from the front surface.
        width: Extent across the long axis.
        hole_spacing: Centre-to-centre screw spacing, when drilled.
        diameter: Diameter for round knobs.
    """

    length: float
    height: float
    width: float | None = None
    hole_spacing: float | None = None
    diameter: float | None = None


@dataclass(frozen=True)
class HandlePosition:
    """Where a handle sits on a front.

    A ``preset`` of None selects the smart default for the door type.
    ``x`` and ``y`` are only used with the CUSTOM preset.
    """

    preset: HandlePositionPreset | None = None
    x: float | None = None
    y: float | None = None
    offset_from_edge: float = DEFAULT_HANDLE_OFFSET


@dataclass(frozen=True)
class HandleConfig:
    """Complete handle specification for a front."""

    type: HandleType
    category: HandleCategory = HandleCategory.TRADITIONAL
    orientation: HandleOrientation = HandleOrientation.HORIZONTAL
    position: HandlePosition = field(default_factory=HandlePosition)
    dimensions: HandleDimensions | None = None
    finish: HandleFinish | None = None


@dataclass(frozen=True)
class HandleMetadata:
    """Handle resolved onto a concrete front.

    Attributes:
        config: The handle specification that was applied.
        actual_position: Handle centre as (x, y) offset from the front centre.
    """

    config: HandleConfig
    actual_position: tuple[float, float]
