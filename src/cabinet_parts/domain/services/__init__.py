"""Domain services: dimension math, validation and zone tree operations.

This package provides the pure calculations the part generators build on:
- Shared measurements (rounding, shelf and partition depths)
- Handle catalog and handle placement
- Leg configuration and placement
- Drawer box sizing and drawer stack helpers
- Corner cabinet geometry helpers
- Interior zone tree layout, validation and updaters
"""

from .corner import (
    DeadZone,
    calculate_dead_zone,
    calculate_diagonal_width,
    calculate_shelf_positions,
    calculate_side_height,
    has_left_side,
    has_right_side,
    should_use_l_shape,
    validate_corner_config,
)
from .drawers import (
    DRAWER_SLIDE_PRESETS,
    DrawerBoxDimensions,
    calculate_drawer_box_dimensions,
    create_drawer_configuration,
    distribute_by_ratio,
    get_slide_config,
    total_box_count,
    validate_drawer_configuration,
    validate_drawer_zone,
)
from .handles import (
    HANDLE_DIMENSIONS,
    HANDLE_PRESETS,
    calculate_handle_limits,
    calculate_handle_position,
    generate_handle_metadata,
    get_default_handle_position_preset,
)
from .legs import (
    LEG_FINISH_COLORS,
    LEG_PRESETS,
    calculate_leg_count,
    calculate_leg_height_offset,
    calculate_leg_positions,
    create_leg_type_config,
    create_legs_config,
    get_effective_leg_count,
    get_leg_color,
    update_leg_height,
    validate_legs_config,
)
from .measurements import (
    clamp,
    max_shelf_depth,
    recessed_center_z,
    resolve_partition_depth,
    resolve_shelf_depth,
    round_half_up,
)
from .zone_tree import (
    ParentBounds,
    PartitionBounds,
    ZoneBounds,
    ZoneTreeLayout,
    add_child,
    calculate_zone_bounds,
    calculate_zone_layout,
    count_leaves,
    create_drawers_zone,
    create_nested_zone,
    create_shelves_zone,
    distribute_heights,
    distribute_widths,
    find_zone,
    has_interior_content,
    max_depth,
    remove_child,
    replace_zone,
    set_division,
    validate_zone_tree,
)

__all__ = [
    "DRAWER_SLIDE_PRESETS",
    "DeadZone",
    "DrawerBoxDimensions",
    "HANDLE_DIMENSIONS",
    "HANDLE_PRESETS",
    "LEG_FINISH_COLORS",
    "LEG_PRESETS",
    "ParentBounds",
    "PartitionBounds",
    "ZoneBounds",
    "ZoneTreeLayout",
    "add_child",
    "calculate_dead_zone",
    "calculate_diagonal_width",
    "calculate_drawer_box_dimensions",
    "calculate_handle_limits",
    "calculate_handle_position",
    "calculate_leg_count",
    "calculate_leg_height_offset",
    "calculate_leg_positions",
    "calculate_shelf_positions",
    "calculate_side_height",
    "calculate_zone_bounds",
    "calculate_zone_layout",
    "clamp",
    "count_leaves",
    "create_drawer_configuration",
    "create_drawers_zone",
    "create_leg_type_config",
    "create_legs_config",
    "create_nested_zone",
    "create_shelves_zone",
    "distribute_by_ratio",
    "distribute_heights",
    "distribute_widths",
    "find_zone",
    "generate_handle_metadata",
    "get_default_handle_position_preset",
    "get_effective_leg_count",
    "get_leg_color",
    "get_slide_config",
    "has_interior_content",
    "has_left_side",
    "has_right_side",
    "max_depth",
    "max_shelf_depth",
    "recessed_center_z",
    "remove_child",
    "replace_zone",
    "resolve_partition_depth",
    "resolve_shelf_depth",
    "round_half_up",
    "set_division",
    "should_use_l_shape",
    "total_box_count",
    "update_leg_height",
    "validate_corner_config",
    "validate_drawer_configuration",
    "validate_drawer_zone",
    "validate_legs_config",
    "validate_zone_tree",
]
