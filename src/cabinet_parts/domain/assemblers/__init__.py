"""Cabinet assemblers.

Each assembler composes body panels and the part generators into the full
part list of one cabinet type. Importing this package registers every
assembler with ``cabinet_generator_registry``.
"""

from .bookshelf import generate_bookshelf_cabinet
from .corner import generate_corner_internal_cabinet
from .drawer_cabinet import generate_drawer_cabinet
from .kitchen import generate_kitchen_cabinet
from .normalize import legacy_drawer_configuration, legacy_shelf_count, normalize_interior
from .registry import (
    CabinetGenerator,
    CabinetGeneratorRegistry,
    cabinet_generator_registry,
    generate_cabinet,
    get_generator_for_type,
)
from .wall import generate_wall_cabinet
from .wardrobe import generate_wardrobe_cabinet

__all__ = [
    "CabinetGenerator",
    "CabinetGeneratorRegistry",
    "cabinet_generator_registry",
    "generate_bookshelf_cabinet",
    "generate_cabinet",
    "generate_corner_internal_cabinet",
    "generate_drawer_cabinet",
    "generate_kitchen_cabinet",
    "generate_wall_cabinet",
    "generate_wardrobe_cabinet",
    "get_generator_for_type",
    "legacy_drawer_configuration",
    "legacy_shelf_count",
    "normalize_interior",
]
