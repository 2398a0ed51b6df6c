"""Versioning and material schemas shared by the configuration models.

Enums are imported from the domain layer, which defines them as
``(str, Enum)`` so they validate directly from JSON strings.
"""

from pydantic import BaseModel, ConfigDict, Field

from cabinet_parts.domain.value_objects import MaterialCategory

# Supported schema versions for configuration files
# Version 1.0: Initial schema with cabinet parameters and materials
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class MaterialConfig(BaseModel):
    """A sheet material available to the cabinet.

    Attributes:
        id: Identifier referenced by the cabinet material assignment.
        thickness: Board thickness in mm (1 to 50).
        category: Kind of board.
        color: Display color as a hex string.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    thickness: float = Field(..., gt=0, le=50.0)
    category: MaterialCategory = MaterialCategory.BOARD
    color: str = Field(default="#ffffff", pattern=r"^#[0-9a-fA-F]{6}$")


class CabinetMaterialsConfig(BaseModel):
    """Material assignment of the cabinet, by material id."""

    model_config = ConfigDict(extra="forbid")

    body_material_id: str = Field(..., min_length=1)
    front_material_id: str = Field(..., min_length=1)
    back_material_id: str | None = None
