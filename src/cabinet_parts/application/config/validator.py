"""Validation structures and construction advisory checks.

Pydantic enforces the per-field limits. This module runs the checks that
need the whole configuration: material references, the interior zone tree,
drawer stacks, legs and corner geometry. It also adds warnings for settings
the generator will ignore or clamp.
"""

from dataclasses import dataclass, field
from typing import Any

from cabinet_parts.application.config.adapter import (
    config_to_corner,
    config_to_drawers,
    config_to_interior,
    config_to_legs,
)
from cabinet_parts.application.config.schemas import CabinetPartsConfiguration
from cabinet_parts.domain.constants import (
    BOOKSHELF_MIN_SHELVES,
    KITCHEN_MAX_SHELVES,
    WALL_MAX_SHELVES,
)
from cabinet_parts.domain.services import (
    validate_corner_config,
    validate_drawer_configuration,
    validate_legs_config,
    validate_zone_tree,
)
from cabinet_parts.domain.value_objects import CabinetType, CornerConfig


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "params.corner_config")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_material_references(config: CabinetPartsConfiguration) -> ValidationResult:
    """Check that every material id used by the cabinet is defined."""
    result = ValidationResult()
    known = {material.id for material in config.materials}
    assignment = config.cabinet_materials
    references = [
        ("cabinet_materials.body_material_id", assignment.body_material_id),
        ("cabinet_materials.front_material_id", assignment.front_material_id),
        ("cabinet_materials.back_material_id", assignment.back_material_id),
        ("params.bottom_material_id", config.params.bottom_material_id),
    ]
    for path, material_id in references:
        if material_id is not None and material_id not in known:
            result.add_error(path, f"Material '{material_id}' is not defined", material_id)

    side_fronts = config.params.side_fronts
    if side_fronts is not None:
        for side in ("left", "right"):
            side_front = getattr(side_fronts, side)
            if side_front is not None and side_front.material_id not in (None, *known):
                result.add_warning(
                    f"params.side_fronts.{side}.material_id",
                    f"Material '{side_front.material_id}' is not defined",
                    "The front material thickness will be used",
                )
    return result


def check_structure(config: CabinetPartsConfiguration) -> ValidationResult:
    """Run the domain validators on the interior, drawers, legs and corner."""
    result = ValidationResult()
    params = config.params

    interior = config_to_interior(params.interior_config)
    if interior is not None:
        tree = validate_zone_tree(interior.root_zone)
        for message in tree.errors:
            result.add_error("params.interior_config", message)
        for message in tree.warnings:
            result.add_warning("params.interior_config", message)

    drawers = config_to_drawers(params.drawer_config)
    if drawers is not None and drawers.zones:
        for message in validate_drawer_configuration(drawers).errors:
            result.add_error("params.drawer_config", message)

    legs = config_to_legs(params.legs)
    if legs is not None and legs.enabled:
        for message in validate_legs_config(legs).errors:
            result.add_error("params.legs", message)

    if params.type == CabinetType.CORNER_INTERNAL:
        corner = config_to_corner(params.corner_config) or CornerConfig()
        for message in validate_corner_config(corner, params.height).errors:
            result.add_error("params.corner_config", message)
    return result


def check_advisories(config: CabinetPartsConfiguration) -> ValidationResult:
    """Warn about settings the generator ignores or clamps."""
    result = ValidationResult()
    params = config.params
    cabinet_type = params.type

    if params.has_back and config.cabinet_materials.back_material_id is None:
        result.add_warning(
            "params.has_back",
            "No back material assigned, the back panel will be omitted",
            "Set cabinet_materials.back_material_id",
        )

    if params.interior_config is not None and params.shelf_count > 0:
        result.add_warning(
            "params.shelf_count",
            "Legacy shelf_count is ignored when interior_config is set",
        )

    shelf_limits = {
        CabinetType.KITCHEN: KITCHEN_MAX_SHELVES,
        CabinetType.WALL: WALL_MAX_SHELVES,
    }
    limit = shelf_limits.get(cabinet_type)
    if limit is not None and params.shelf_count > limit:
        result.add_warning(
            "params.shelf_count",
            f"{cabinet_type.value} cabinets hold at most {limit} shelves, "
            f"{params.shelf_count} will be clamped",
        )
    if (
        cabinet_type == CabinetType.BOOKSHELF
        and params.interior_config is None
        and params.shelf_count < BOOKSHELF_MIN_SHELVES
    ):
        result.add_warning(
            "params.shelf_count",
            f"Bookshelves have at least {BOOKSHELF_MIN_SHELVES} shelf, "
            f"{params.shelf_count} will be raised",
        )

    if params.has_doors and cabinet_type not in (CabinetType.KITCHEN, CabinetType.WALL):
        result.add_warning(
            "params.has_doors",
            f"has_doors is ignored for {cabinet_type.value} cabinets",
        )
    if params.folding_door_config is not None and (
        cabinet_type != CabinetType.WALL or not params.has_doors
    ):
        result.add_warning(
            "params.folding_door_config",
            "Folding doors only apply to wall cabinets with has_doors set",
        )
    if cabinet_type == CabinetType.WALL and params.legs is not None and params.legs.enabled:
        result.add_warning(
            "params.legs",
            "Wall cabinets never stand on legs, the legs are ignored",
        )
    if cabinet_type == CabinetType.CORNER_INTERNAL and params.corner_config is None:
        result.add_warning(
            "params.corner_config",
            "No corner configuration, defaults are used",
        )
    return result


def validate_config(config: CabinetPartsConfiguration) -> ValidationResult:
    """Perform full validation of a cabinet configuration.

    Args:
        config: A CabinetPartsConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_material_references(config))
    result.merge(check_structure(config))
    result.merge(check_advisories(config))
    return result
