"""Construction constants shared by the part generators.

All values are in millimetres unless noted otherwise.
"""

from __future__ import annotations

import math

# Fronts and doors
FRONT_MARGIN = 2.0
DOOR_GAP = 3.0
MIN_FRONT_DIMENSION = 50.0
DEFAULT_HANDLE_OFFSET = 30.0

# Back panel
MIN_BACK_OVERLAP = 4.0
MIN_BACK_WIDTH = 50.0
MIN_BACK_HEIGHT = 50.0
DEFAULT_BACK_OVERLAP_RATIO = 0.667

# Shelves
SHELF_SETBACK = 10.0
UNIFORM_SHELF_BOTTOM_OFFSET = 0.05
SINGLE_SHELF_POSITION = 0.5

# Drawer boxes
DRAWER_BOX_HEIGHT_REDUCTION = 30.0
DRAWER_BOX_HEIGHT_MIN = 50.0
DRAWER_BOTTOM_THICKNESS = 3.0

# Interior zone tree limits
MAX_ZONE_DEPTH = 4
MIN_ZONE_HEIGHT_MM = 50.0
MIN_ZONE_WIDTH_MM = 100.0
MAX_CHILDREN_PER_ZONE = 6
MAX_SHELVES_PER_ZONE = 10
MAX_DRAWER_ZONES_PER_ZONE = 8
MAX_SHELVES_ABOVE_DRAWER = 4
CUSTOM_SHELF_DEPTH_MIN = 100.0
PARTITION_DEPTH_MIN = 100.0

# Decorative parts
DEFAULT_TRIM_STRIP_THICKNESS = 10.0
MIN_SIDE_FRONT_HEIGHT = 50.0

# Hanger cutouts on wall-cabinet backs
DEFAULT_HANGER_CUTOUT_WIDTH = 50.0
DEFAULT_HANGER_CUTOUT_HEIGHT = 40.0
DEFAULT_HANGER_HORIZONTAL_INSET = 50.0
DEFAULT_HANGER_VERTICAL_INSET = 30.0

# Legacy shelf-count limits per cabinet type
KITCHEN_MAX_SHELVES = 5
WARDROBE_MAX_SHELVES = 10
BOOKSHELF_MIN_SHELVES = 1
BOOKSHELF_MAX_SHELVES = 10
WALL_MAX_SHELVES = 5
MIN_WARDROBE_DOORS = 1
MAX_WARDROBE_DOORS = 4

# Canonical panel orientations (Euler radians)
ROTATION_FLAT = (-math.pi / 2, 0.0, 0.0)
ROTATION_SIDE = (0.0, math.pi / 2, 0.0)
ROTATION_FRONT = (0.0, 0.0, 0.0)

# Drawer zone limits
MAX_BOXES_PER_DRAWER_ZONE = 4
MIN_BOX_TO_FRONT_RATIO = 0.1
