"""Material value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialCategory(str, Enum):
    """Categories of sheet material.

    Attributes:
        BOARD: Carcass board used for bodies, shelves and drawer boxes.
        FRONT: Decorative board used for doors, drawer fronts and trim.
        BACK: Thin board (HDF, plywood) used for back panels.
    """

    BOARD = "board"
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class Material:
    """A sheet material referenced by parts.

    Attributes:
        id: Identifier referenced by ``GeneratedPart.material_id``.
        thickness: Board thickness in millimetres.
        category: Kind of board.
        color: Display color as a hex string.
    """

    id: str
    thickness: float
    category: MaterialCategory = MaterialCategory.BOARD
    color: str = "#ffffff"

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Material id must not be empty")
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")


@dataclass(frozen=True)
class CabinetMaterials:
    """Material assignments for a cabinet, by id."""

    body_material_id: str
    front_material_id: str
    back_material_id: str | None = None
