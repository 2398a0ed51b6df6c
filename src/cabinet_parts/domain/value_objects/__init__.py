"""Value objects for the cabinet parts domain.

This module provides immutable data types used throughout the generation
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Cabinet parameters and construction modes
from ._cabinet import CabinetParams, HangerCutoutConfig
from ._cabinet_types import BackMountType, CabinetType, TopBottomPlacement

# Corner cabinets
from ._corner import (
    CornerConfig,
    CornerDoorPosition,
    CornerFrontType,
    CornerMountType,
    CornerOrientation,
    CornerPanelGeometry,
    CornerType,
    WallSharingMode,
)

# Side fronts and trim
from ._decorative import (
    DecorativePanelConfig,
    DecorativePanelPosition,
    DecorativePanelsConfig,
    DecorativePanelType,
    SideFrontConfig,
    SideFrontsConfig,
)

# Doors
from ._doors import (
    DoorConfig,
    DoorLayout,
    DoorMetadata,
    DoorOpeningDirection,
    DoorType,
    FoldingDoorConfig,
    FoldingSection,
    HingeSide,
)

# Drawers
from ._drawers import (
    AboveBoxContent,
    AboveBoxShelf,
    DrawerBox,
    DrawerConfiguration,
    DrawerSlideConfig,
    DrawerSlideType,
    DrawerZone,
    DrawerZoneFront,
)

# Handles
from ._handles import (
    HandleCategory,
    HandleConfig,
    HandleDimensions,
    HandleFinish,
    HandleMetadata,
    HandleOrientation,
    HandlePosition,
    HandlePositionPreset,
    HandleType,
)

# Interior zone tree
from ._interior import (
    CabinetInteriorConfig,
    InteriorZone,
    PartitionConfig,
    PartitionDepthPreset,
    ZoneContentType,
    ZoneDivisionDirection,
    ZoneHeightConfig,
    ZoneHeightMode,
    ZoneWidthConfig,
    ZoneWidthMode,
)

# Legs
from ._legs import (
    LegAccessory,
    LegCountMode,
    LegData,
    LegFinish,
    LegPosition,
    LegPreset,
    LegShape,
    LegsConfig,
    LegTypeConfig,
)

# Materials
from ._materials import CabinetMaterials, Material, MaterialCategory

# Generated parts
from ._parts import (
    CabinetPartMetadata,
    CoordinateFrame,
    EdgeBanding,
    EdgeBandingGeneric,
    EdgeBandingRect,
    GeneratedPart,
    PartRole,
    PolygonShape,
    RectShape,
    ShapeParams,
    ShapeType,
)

# Shelves
from ._shelves import (
    ShelfConfig,
    ShelfDepthPreset,
    ShelvesConfiguration,
    ShelvesMode,
)

__all__ = [
    "AboveBoxContent",
    "AboveBoxShelf",
    "BackMountType",
    "CabinetInteriorConfig",
    "CabinetMaterials",
    "CabinetParams",
    "CabinetPartMetadata",
    "CabinetType",
    "CoordinateFrame",
    "CornerConfig",
    "CornerDoorPosition",
    "CornerFrontType",
    "CornerMountType",
    "CornerOrientation",
    "CornerPanelGeometry",
    "CornerType",
    "DecorativePanelConfig",
    "DecorativePanelPosition",
    "DecorativePanelType",
    "DecorativePanelsConfig",
    "DoorConfig",
    "DoorLayout",
    "DoorMetadata",
    "DoorOpeningDirection",
    "DoorType",
    "DrawerBox",
    "DrawerConfiguration",
    "DrawerSlideConfig",
    "DrawerSlideType",
    "DrawerZone",
    "DrawerZoneFront",
    "EdgeBanding",
    "EdgeBandingGeneric",
    "EdgeBandingRect",
    "FoldingDoorConfig",
    "FoldingSection",
    "GeneratedPart",
    "HandleCategory",
    "HandleConfig",
    "HandleDimensions",
    "HandleFinish",
    "HandleMetadata",
    "HandleOrientation",
    "HandlePosition",
    "HandlePositionPreset",
    "HandleType",
    "HangerCutoutConfig",
    "HingeSide",
    "InteriorZone",
    "LegAccessory",
    "LegCountMode",
    "LegData",
    "LegFinish",
    "LegPosition",
    "LegPreset",
    "LegShape",
    "LegTypeConfig",
    "LegsConfig",
    "Material",
    "MaterialCategory",
    "PartRole",
    "PartitionConfig",
    "PartitionDepthPreset",
    "PolygonShape",
    "RectShape",
    "ShapeParams",
    "ShapeType",
    "ShelfConfig",
    "ShelfDepthPreset",
    "ShelvesConfiguration",
    "ShelvesMode",
    "SideFrontConfig",
    "SideFrontsConfig",
    "TopBottomPlacement",
    "WallSharingMode",
    "ZoneContentType",
    "ZoneDivisionDirection",
    "ZoneHeightConfig",
    "ZoneHeightMode",
    "ZoneWidthConfig",
    "ZoneWidthMode",
]
