"""Unit tests for whole-configuration validation.

These tests verify:
- Undefined material references are errors
- Zone tree, drawer and corner limits are reported with their config path
- Ignored or clamped settings produce warnings, not errors
- exit_code distinguishes valid, invalid and valid-with-warnings
"""

from typing import Any

import pytest

from cabinet_parts.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)
from cabinet_parts.application.config.validator import (
    check_advisories,
    check_material_references,
    check_structure,
)


def _load(data: dict[str, Any]):
    return load_config_from_dict(data)


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("params.legs", "ignored")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_wins_over_warning(self) -> None:
        result = ValidationResult().add_warning("a", "w").add_error("b", "e", 3)
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == 3

    def test_merge(self) -> None:
        merged = ValidationResult().add_error("a", "e").merge(
            ValidationResult().add_warning("b", "w")
        )
        assert (len(merged.errors), len(merged.warnings)) == (1, 1)


class TestMaterialReferences:
    """Tests for check_material_references."""

    def test_all_defined(self, config_data: dict[str, Any]) -> None:
        assert check_material_references(_load(config_data)).exit_code == 0

    def test_undefined_bottom_material(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["bottom_material_id"] = "plywood"
        result = check_material_references(_load(config_data))

        (error,) = result.errors
        assert error.path == "params.bottom_material_id"
        assert error.value == "plywood"

    def test_undefined_side_front_material_warns(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["side_fronts"] = {"left": {"material_id": "oak"}}
        result = check_material_references(_load(config_data))

        assert result.is_valid
        (warning,) = result.warnings
        assert warning.path == "params.side_fronts.left.material_id"
        assert warning.suggestion is not None


class TestStructure:
    """Tests for check_structure."""

    def test_fixed_width_too_small(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["interior_config"] = {
            "root_zone": {
                "id": "root",
                "content_type": "nested",
                "division_direction": "vertical",
                "children": [
                    {"id": "narrow", "width_config": {"mode": "fixed", "fixed_mm": 50}},
                    {"id": "rest"},
                ],
            }
        }
        result = check_structure(_load(config_data))

        (error,) = result.errors
        assert error.path == "params.interior_config"
        assert "narrow" in error.message

    def test_zone_tree_too_deep(self, config_data: dict[str, Any]) -> None:
        zone: dict[str, Any] = {"id": "leaf", "content_type": "shelves"}
        for level in range(4, 0, -1):
            zone = {
                "id": f"level-{level}",
                "content_type": "nested",
                "division_direction": "horizontal",
                "children": [zone],
            }
        config_data["params"]["interior_config"] = {"root_zone": zone}
        result = check_structure(_load(config_data))

        assert not result.is_valid
        assert any("'leaf' depth 4" in error.message for error in result.errors)

    def test_drawer_ratio_below_minimum(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(
            type="drawer",
            drawer_config={"zones": [{"id": "d1", "box_to_front_ratio": 0.05}]},
        )
        result = check_structure(_load(config_data))

        (error,) = result.errors
        assert error.path == "params.drawer_config"
        assert error.message.startswith("Zone 1:")

    def test_corner_limits(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(
            type="corner_internal",
            corner_config={"W": 400, "D": 900, "body_depth": 560},
        )
        result = check_structure(_load(config_data))

        messages = [error.message for error in result.errors]
        assert "Width W must be between 600-1500mm" in messages
        assert "Body depth must be less than width W" in messages
        assert all(error.path == "params.corner_config" for error in result.errors)

    def test_valid_structure(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["legs"] = {"enabled": True}
        assert check_structure(_load(config_data)).is_valid


class TestAdvisories:
    """Tests for check_advisories."""

    def _paths(self, data: dict[str, Any]) -> list[str]:
        return [warning.path for warning in check_advisories(_load(data)).warnings]

    def test_clean_kitchen(self, config_data: dict[str, Any]) -> None:
        assert self._paths(config_data) == []

    def test_back_without_material(self, config_data: dict[str, Any]) -> None:
        del config_data["cabinet_materials"]["back_material_id"]
        assert self._paths(config_data) == ["params.has_back"]

    def test_kitchen_shelf_clamp(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["shelf_count"] = 7
        assert self._paths(config_data) == ["params.shelf_count"]

    def test_shelf_count_with_interior(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["interior_config"] = {
            "root_zone": {"id": "root", "content_type": "shelves"}
        }
        assert self._paths(config_data) == ["params.shelf_count"]

    def test_bookshelf_minimum(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(type="bookshelf", shelf_count=0, has_doors=False)
        assert self._paths(config_data) == ["params.shelf_count"]

    def test_doors_ignored_on_wardrobe(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["type"] = "wardrobe"
        assert self._paths(config_data) == ["params.has_doors"]

    def test_folding_doors_outside_wall(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["folding_door_config"] = {"split_ratio": 0.6}
        assert self._paths(config_data) == ["params.folding_door_config"]

    def test_wall_cabinet_legs(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(type="wall", legs={"enabled": True})
        assert self._paths(config_data) == ["params.legs"]

    def test_corner_without_config(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(type="corner_internal", shelf_count=0, has_doors=False)
        assert self._paths(config_data) == ["params.corner_config"]


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid(self, config_data: dict[str, Any]) -> None:
        assert validate_config(_load(config_data)).exit_code == 0

    @pytest.mark.parametrize(
        "updates, exit_code",
        [
            ({"type": "wardrobe"}, 2),
            ({"bottom_material_id": "missing"}, 1),
        ],
    )
    def test_exit_codes(
        self, config_data: dict[str, Any], updates: dict[str, Any], exit_code: int
    ) -> None:
        config_data["params"].update(updates)
        assert validate_config(_load(config_data)).exit_code == exit_code
