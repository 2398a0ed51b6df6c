"""Configuration schema models for cabinet part generation.

The schemas are organized into the following modules:
- base.py: Schema versions and material models
- hardware_schema.py: Handles and legs
- front_schema.py: Doors, side fronts and decorative panels
- interior_schema.py: Interior zone tree, shelves and drawers
- cabinet_schema.py: Cabinet parameters and corner configuration
- root.py: Root configuration model
"""

from cabinet_parts.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    CabinetMaterialsConfig as CabinetMaterialsConfig,
    MaterialConfig as MaterialConfig,
)
from cabinet_parts.application.config.schemas.cabinet_schema import (
    CabinetParamsConfig as CabinetParamsConfig,
    CornerConfigSchema as CornerConfigSchema,
)
from cabinet_parts.application.config.schemas.front_schema import (
    DecorativePanelConfigSchema as DecorativePanelConfigSchema,
    DecorativePanelsConfigSchema as DecorativePanelsConfigSchema,
    DoorConfigSchema as DoorConfigSchema,
    FoldingDoorConfigSchema as FoldingDoorConfigSchema,
    HangerCutoutConfigSchema as HangerCutoutConfigSchema,
    SideFrontConfigSchema as SideFrontConfigSchema,
    SideFrontsConfigSchema as SideFrontsConfigSchema,
)
from cabinet_parts.application.config.schemas.hardware_schema import (
    HandleConfigSchema as HandleConfigSchema,
    HandleDimensionsSchema as HandleDimensionsSchema,
    HandlePositionSchema as HandlePositionSchema,
    LegsConfigSchema as LegsConfigSchema,
    LegTypeConfigSchema as LegTypeConfigSchema,
)
from cabinet_parts.application.config.schemas.interior_schema import (
    AboveBoxContentSchema as AboveBoxContentSchema,
    AboveBoxShelfSchema as AboveBoxShelfSchema,
    CabinetInteriorConfigSchema as CabinetInteriorConfigSchema,
    DrawerBoxSchema as DrawerBoxSchema,
    DrawerConfigurationSchema as DrawerConfigurationSchema,
    DrawerZoneFrontSchema as DrawerZoneFrontSchema,
    DrawerZoneSchema as DrawerZoneSchema,
    InteriorZoneSchema as InteriorZoneSchema,
    PartitionConfigSchema as PartitionConfigSchema,
    ShelfConfigSchema as ShelfConfigSchema,
    ShelvesConfigurationSchema as ShelvesConfigurationSchema,
    ZoneHeightConfigSchema as ZoneHeightConfigSchema,
    ZoneWidthConfigSchema as ZoneWidthConfigSchema,
)
from cabinet_parts.application.config.schemas.root import (
    CabinetPartsConfiguration as CabinetPartsConfiguration,
)
