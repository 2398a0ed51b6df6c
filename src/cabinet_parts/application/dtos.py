"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinet_parts.domain import (
    CabinetMaterials,
    CabinetParams,
    GeneratedPart,
    Material,
    PartRole,
)


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to generate the parts of one cabinet.

    Attributes:
        cabinet_id: Identifier stamped on every part.
        furniture_id: Furniture the cabinet belongs to.
        params: Structural cabinet parameters.
        materials: Material assignment.
        body_material: Resolved body material.
        back_material: Resolved back material, if the cabinet has one.
        material_catalog: All known materials by id.
    """

    cabinet_id: str
    furniture_id: str
    params: CabinetParams
    materials: CabinetMaterials
    body_material: Material
    back_material: Material | None = None
    material_catalog: dict[str, Material] = field(default_factory=dict)


@dataclass
class GenerationOutput:
    """Output DTO containing the generated parts."""

    request: GenerationRequest
    parts: list[GeneratedPart] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def part_count(self) -> int:
        return len(self.parts)

    def material_usage(self) -> dict[str, float]:
        """Total part face area per material id in square metres, legs excluded."""
        usage: dict[str, float] = {}
        for part in self.parts:
            if part.role == PartRole.LEG:
                continue
            area = part.width * part.height / 1_000_000
            usage[part.material_id] = usage.get(part.material_id, 0.0) + area
        return usage
