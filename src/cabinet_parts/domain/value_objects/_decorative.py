"""Side front and decorative panel value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DecorativePanelType(str, Enum):
    """Kinds of top and bottom trim.

    Attributes:
        BLENDA: Full-depth cover panel above the cabinet.
        PLINTH: Recessed toe-kick below the cabinet.
        TRIM_STRIP: Thin strip on the front face.
        FULL_PANEL: Front-facing panel extending the front above or below.
    """

    BLENDA = "blenda"
    PLINTH = "plinth"
    TRIM_STRIP = "trim_strip"
    FULL_PANEL = "full_panel"


class DecorativePanelPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class SideFrontConfig:
    """Decorative end panel covering one cabinet side.

    Attributes:
        enabled: Whether the panel is generated.
        material_id: Material override; the front material otherwise.
        forward_protrusion: How far the panel reaches past the cabinet
            front. Zero or less uses the front thickness.
        bottom_offset: Distance from the cabinet bottom to the panel.
        top_offset: Distance from the cabinet top to the panel.
    """

    enabled: bool = True
    material_id: str | None = None
    forward_protrusion: float = 0.0
    bottom_offset: float = 0.0
    top_offset: float = 0.0


@dataclass(frozen=True)
class SideFrontsConfig:
    left: SideFrontConfig | None = None
    right: SideFrontConfig | None = None


@dataclass(frozen=True)
class DecorativePanelConfig:
    """A top or bottom decorative panel.

    Attributes:
        enabled: Whether the panel is generated.
        type: Panel kind.
        height: Panel height in mm.
        recess: Setback from the front, for plinths.
        thickness: Strip depth, for trim strips.
        material_id: Material override; the front material otherwise.
    """

    enabled: bool = True
    type: DecorativePanelType = DecorativePanelType.BLENDA
    height: float = 100.0
    recess: float = 0.0
    thickness: float | None = None
    material_id: str | None = None

    def __post_init__(self) -> None:
        if self.height < 0:
            raise ValueError("Decorative panel height must be non-negative")
        if self.recess < 0:
            raise ValueError("Decorative panel recess must be non-negative")


@dataclass(frozen=True)
class DecorativePanelsConfig:
    top: DecorativePanelConfig | None = None
    bottom: DecorativePanelConfig | None = None
