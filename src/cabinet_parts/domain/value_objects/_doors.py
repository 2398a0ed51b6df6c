"""Door value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DoorLayout(str, Enum):
    """Number of door leaves covering a front opening."""

    SINGLE = "single"
    DOUBLE = "double"


class HingeSide(str, Enum):
    """Side a door leaf is hinged on."""

    LEFT = "left"
    RIGHT = "right"


class DoorOpeningDirection(str, Enum):
    """How a door leaf opens."""

    HORIZONTAL = "horizontal"
    LIFT_UP = "lift_up"
    FOLD_DOWN = "fold_down"


class DoorType(str, Enum):
    """Door kind used when resolving handle placement.

    DOUBLE_LEFT and DOUBLE_RIGHT are the two leaves of a double door,
    as seen from the front.
    """

    SINGLE = "single"
    DOUBLE_LEFT = "double_left"
    DOUBLE_RIGHT = "double_right"


class FoldingSection(str, Enum):
    """Section of a folding (lift-up) door."""

    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class DoorConfig:
    """Door layout for a cabinet front."""

    layout: DoorLayout = DoorLayout.DOUBLE
    hinge_side: HingeSide = HingeSide.LEFT
    opening_direction: DoorOpeningDirection = DoorOpeningDirection.HORIZONTAL


@dataclass(frozen=True)
class FoldingDoorConfig:
    """Vertical split of a wall-cabinet front into two folding sections.

    Attributes:
        split_ratio: Fraction of the available height given to the lower
            section.
        section_gap: Gap between the lower and upper sections in mm.
    """

    split_ratio: float = 0.5
    section_gap: float = 3.0

    def __post_init__(self) -> None:
        if not 0 <= self.split_ratio <= 1:
            raise ValueError("Split ratio must be between 0 and 1")
        if self.section_gap < 0:
            raise ValueError("Section gap must be non-negative")


@dataclass(frozen=True)
class DoorMetadata:
    """Hinge and opening information attached to a door part."""

    hinge_side: HingeSide | None = None
    opening_direction: DoorOpeningDirection = DoorOpeningDirection.HORIZONTAL
    folding_section: FoldingSection | None = None
