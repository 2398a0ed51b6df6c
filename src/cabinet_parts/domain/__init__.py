"""Domain layer: value objects, calculations, part generators and assemblers."""

from .assemblers import (
    cabinet_generator_registry,
    generate_cabinet,
    get_generator_for_type,
)
from .exceptions import (
    CabinetGenerationError,
    CabinetTypeMismatchError,
    UnknownCabinetTypeError,
)
from .validation import ValidationResult
from .value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    CoordinateFrame,
    GeneratedPart,
    Material,
    PartRole,
)

__all__ = [
    "CabinetGenerationError",
    "CabinetMaterials",
    "CabinetParams",
    "CabinetType",
    "CabinetTypeMismatchError",
    "CoordinateFrame",
    "GeneratedPart",
    "Material",
    "PartRole",
    "UnknownCabinetTypeError",
    "ValidationResult",
    "cabinet_generator_registry",
    "generate_cabinet",
    "get_generator_for_type",
]
