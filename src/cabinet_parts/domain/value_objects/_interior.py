"""Interior zone tree value objects.

The cabinet interior is a recursive tree of zones. Leaves hold content
(shelves, drawers or nothing); NESTED zones split their space into rows
or columns of children.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._drawers import DrawerConfiguration
from ._shelves import ShelvesConfiguration


class ZoneContentType(str, Enum):
    """What a zone contains."""

    EMPTY = "empty"
    SHELVES = "shelves"
    DRAWERS = "drawers"
    NESTED = "nested"


class ZoneDivisionDirection(str, Enum):
    """How a NESTED zone splits its space.

    Attributes:
        HORIZONTAL: Rows stacked bottom to top.
        VERTICAL: Columns left to right.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ZoneHeightMode(str, Enum):
    RATIO = "ratio"
    EXACT = "exact"


class ZoneWidthMode(str, Enum):
    PROPORTIONAL = "proportional"
    FIXED = "fixed"


class PartitionDepthPreset(str, Enum):
    """Depth of a partition between sibling columns."""

    FULL = "full"
    HALF = "half"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ZoneHeightConfig:
    """Share of the parent's height given to a zone."""

    mode: ZoneHeightMode = ZoneHeightMode.RATIO
    ratio: float = 1.0
    exact_mm: float | None = None

    def __post_init__(self) -> None:
        if self.ratio < 0:
            raise ValueError("Height ratio must be non-negative")
        if self.exact_mm is not None and self.exact_mm < 0:
            raise ValueError("Exact height must be non-negative")


@dataclass(frozen=True)
class ZoneWidthConfig:
    """Share of the parent's width given to a column."""

    mode: ZoneWidthMode = ZoneWidthMode.PROPORTIONAL
    ratio: float = 1.0
    fixed_mm: float | None = None

    def __post_init__(self) -> None:
        if self.ratio < 0:
            raise ValueError("Width ratio must be non-negative")
        if self.fixed_mm is not None and self.fixed_mm < 0:
            raise ValueError("Fixed width must be non-negative")


@dataclass(frozen=True)
class PartitionConfig:
    """Divider between two sibling zones."""

    enabled: bool = False
    depth_preset: PartitionDepthPreset = PartitionDepthPreset.FULL
    custom_depth: float | None = None
    material_id: str | None = None


@dataclass(frozen=True)
class InteriorZone:
    """A node of the interior zone tree.

    Attributes:
        id: Zone identifier, unique within a tree.
        content_type: What the zone holds.
        height_config: Share of the parent's height.
        width_config: Share of the parent's width, for VERTICAL children.
        division_direction: Split direction for NESTED zones.
        children: Child zones of a NESTED zone.
        partitions: One divider per pair of adjacent children.
        shelves_config: Shelves of a SHELVES leaf.
        drawer_config: Drawers of a DRAWERS leaf.
        depth: Nesting level, 0 for the root.
    """

    id: str
    content_type: ZoneContentType = ZoneContentType.EMPTY
    height_config: ZoneHeightConfig = ZoneHeightConfig()
    width_config: ZoneWidthConfig | None = None
    division_direction: ZoneDivisionDirection | None = None
    children: tuple[InteriorZone, ...] = ()
    partitions: tuple[PartitionConfig, ...] = ()
    shelves_config: ShelvesConfiguration | None = None
    drawer_config: DrawerConfiguration | None = None
    depth: int = 0

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("Zone depth must be non-negative")
        if self.partitions and len(self.partitions) != max(0, len(self.children) - 1):
            raise ValueError(
                "Zone must have exactly one partition per pair of adjacent children"
            )

    @property
    def is_leaf(self) -> bool:
        """True if the zone holds content rather than child zones."""
        return self.content_type != ZoneContentType.NESTED or not self.children

    def partition_at(self, index: int) -> PartitionConfig | None:
        """Partition between child ``index`` and child ``index + 1``."""
        if 0 <= index < len(self.partitions):
            return self.partitions[index]
        return None


@dataclass(frozen=True)
class CabinetInteriorConfig:
    """Interior layout of a cabinet."""

    root_zone: InteriorZone
