"""Part generators.

Each generator turns one aspect of a cabinet (back, doors, drawers,
interior, trim, legs) into positioned parts in the body frame.
"""

from .back_panel import (
    BackPanelConfig,
    calculate_back_dimensions,
    calculate_back_overlap,
    calculate_hanger_cutout_points,
    generate_back_panel,
    generate_back_panel_with_cutouts,
)
from .decorative_panels import (
    DecorativePanelGenerationConfig,
    generate_decorative_panels,
    has_decorative_panels,
)
from .doors import DoorGenerationConfig, generate_door_row, generate_doors
from .drawers import DrawerGenerationConfig, generate_drawers
from .folding_doors import (
    FoldingDoorGenerationConfig,
    FoldingSectionHeights,
    calculate_folding_sections,
    generate_folding_doors,
)
from .interior import InteriorGenerationConfig, generate_interior, interior_bounds
from .legs import generate_leg_data, generate_legs
from .shelves import (
    calculate_effective_shelf_depth,
    calculate_shelf_positions,
    generate_legacy_shelves,
    generate_zone_shelves,
)
from .side_fronts import SideFrontGenerationConfig, generate_side_fronts, has_side_fronts

__all__ = [
    "BackPanelConfig",
    "DecorativePanelGenerationConfig",
    "DoorGenerationConfig",
    "DrawerGenerationConfig",
    "FoldingDoorGenerationConfig",
    "FoldingSectionHeights",
    "InteriorGenerationConfig",
    "SideFrontGenerationConfig",
    "calculate_back_dimensions",
    "calculate_back_overlap",
    "calculate_effective_shelf_depth",
    "calculate_folding_sections",
    "calculate_hanger_cutout_points",
    "calculate_shelf_positions",
    "generate_back_panel",
    "generate_back_panel_with_cutouts",
    "generate_decorative_panels",
    "generate_door_row",
    "generate_doors",
    "generate_drawers",
    "generate_folding_doors",
    "generate_interior",
    "generate_leg_data",
    "generate_legacy_shelves",
    "generate_legs",
    "generate_side_fronts",
    "generate_zone_shelves",
    "has_decorative_panels",
    "has_side_fronts",
    "interior_bounds",
]
