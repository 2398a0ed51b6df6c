"""Leg value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LegPreset(str, Enum):
    SHORT = "short"
    STANDARD = "standard"
    TALL = "tall"
    CUSTOM = "custom"


class LegShape(str, Enum):
    ROUND = "round"
    SQUARE = "square"


class LegFinish(str, Enum):
    BLACK_PLASTIC = "black_plastic"
    CHROME = "chrome"
    BRUSHED_STEEL = "brushed_steel"
    WHITE_PLASTIC = "white_plastic"


class LegCountMode(str, Enum):
    """AUTO derives the leg count from the cabinet width."""

    AUTO = "auto"
    MANUAL = "manual"


@dataclass(frozen=True)
class LegTypeConfig:
    """Physical leg model.

    Attributes:
        preset: Preset the values came from.
        height: Nominal height in mm.
        adjust_range: Adjustment available either side of the nominal height.
        diameter: Diameter (or side length, for square legs) in mm.
        shape: Cross-section shape.
        finish: Surface finish.
    """

    preset: LegPreset = LegPreset.STANDARD
    height: float = 150.0
    adjust_range: float = 20.0
    diameter: float = 30.0
    shape: LegShape = LegShape.ROUND
    finish: LegFinish = LegFinish.BLACK_PLASTIC


@dataclass(frozen=True)
class LegsConfig:
    """Legs fitted under a cabinet.

    Attributes:
        enabled: Whether legs are fitted.
        leg_type: Leg model.
        count_mode: AUTO or MANUAL leg count.
        manual_count: Count used in MANUAL mode.
        current_height: Adjusted leg height; raises the whole body.
        corner_inset: Distance from the cabinet edges to the leg centres.
    """

    enabled: bool = False
    leg_type: LegTypeConfig = LegTypeConfig()
    count_mode: LegCountMode = LegCountMode.AUTO
    manual_count: int | None = None
    current_height: float = 150.0
    corner_inset: float = 50.0


@dataclass(frozen=True)
class LegPosition:
    """Leg centre on the floor plane, relative to the body centre."""

    x: float
    z: float


@dataclass(frozen=True)
class LegAccessory:
    """Hardware details carried by a leg part."""

    shape: LegShape
    finish: LegFinish
    color: str
    diameter: float


@dataclass(frozen=True)
class LegData:
    """A leg described as hardware rather than as a cut part."""

    index: int
    position: tuple[float, float, float]
    height: float
    diameter: float
    shape: LegShape
    finish: LegFinish
    color: str
