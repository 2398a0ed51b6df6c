"""Unit tests for the configuration schema models and loader.

These tests verify:
- MaterialConfig thickness and color limits
- CabinetParamsConfig dimension limits and unknown field rejection
- Schema version format and forward-compatible minor versions
- Cross-field rules on zones, handles and materials
- load_config turns file, JSON and schema problems into ConfigError
"""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from cabinet_parts.application.config import (
    CabinetParamsConfig,
    CabinetPartsConfiguration,
    ConfigError,
    MaterialConfig,
    load_config,
    load_config_from_dict,
)
from cabinet_parts.application.config.schemas import (
    HandlePositionSchema,
    InteriorZoneSchema,
    LegsConfigSchema,
    ZoneHeightConfigSchema,
    ZoneWidthConfigSchema,
)
from cabinet_parts.domain.value_objects import (
    CabinetType,
    HandlePositionPreset,
    MaterialCategory,
    ZoneContentType,
)


class TestMaterialConfig:
    """Tests for MaterialConfig."""

    def test_defaults(self) -> None:
        material = MaterialConfig(id="board", thickness=18)
        assert material.category == MaterialCategory.BOARD
        assert material.color == "#ffffff"

    @pytest.mark.parametrize("thickness", [0, -1, 50.5])
    def test_thickness_out_of_range(self, thickness: float) -> None:
        with pytest.raises(PydanticValidationError):
            MaterialConfig(id="board", thickness=thickness)

    def test_maximum_thickness(self) -> None:
        assert MaterialConfig(id="slab", thickness=50).thickness == 50

    @pytest.mark.parametrize("color", ["white", "#fff", "#12345g"])
    def test_invalid_color(self, color: str) -> None:
        with pytest.raises(PydanticValidationError):
            MaterialConfig(id="board", thickness=18, color=color)

    def test_category_from_string(self) -> None:
        material = MaterialConfig.model_validate({"id": "hdf", "thickness": 3, "category": "back"})
        assert material.category == MaterialCategory.BACK


class TestCabinetParamsConfig:
    """Tests for CabinetParamsConfig."""

    def test_minimal(self) -> None:
        params = CabinetParamsConfig(type=CabinetType.WARDROBE, width=1000, height=2000, depth=600)
        assert params.door_count == 2
        assert params.shelf_count == 0
        assert params.has_back

    @pytest.mark.parametrize(
        "field, value",
        [
            ("width", 0),
            ("width", 5001),
            ("height", 5001),
            ("depth", 2001),
            ("shelf_count", 11),
            ("door_count", 0),
            ("door_count", 5),
            ("drawer_count", 9),
        ],
    )
    def test_out_of_range(self, field: str, value: float) -> None:
        data: dict[str, Any] = {"type": "kitchen", "width": 600, "height": 720, "depth": 560}
        data[field] = value
        with pytest.raises(PydanticValidationError):
            CabinetParamsConfig.model_validate(data)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CabinetParamsConfig.model_validate(
                {"type": "kitchen", "width": 600, "height": 720, "depth": 560, "colour": "red"}
            )
        assert "colour" in str(exc_info.value)

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            CabinetParamsConfig.model_validate(
                {"type": "sideboard", "width": 600, "height": 720, "depth": 560}
            )

    def test_drawer_heights_must_be_positive(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CabinetParamsConfig(
                type=CabinetType.DRAWER,
                width=600,
                height=720,
                depth=560,
                drawer_heights=[1.0, 0.0],
            )
        assert "positive ratios" in str(exc_info.value)


class TestRootConfiguration:
    """Tests for CabinetPartsConfiguration."""

    def test_valid(self, config_data: dict[str, Any]) -> None:
        config = CabinetPartsConfiguration.model_validate(config_data)
        assert config.cabinet_id == "cab-1"
        assert [material.id for material in config.materials] == ["board", "front", "hdf"]
        assert config.params.type == CabinetType.KITCHEN

    @pytest.mark.parametrize("version", ["1.0", "1.5"])
    def test_supported_versions(self, config_data: dict[str, Any], version: str) -> None:
        config_data["schema_version"] = version
        assert CabinetPartsConfiguration.model_validate(config_data).schema_version == version

    def test_unsupported_major_version(self, config_data: dict[str, Any]) -> None:
        config_data["schema_version"] = "2.0"
        with pytest.raises(PydanticValidationError) as exc_info:
            CabinetPartsConfiguration.model_validate(config_data)
        assert "Unsupported schema version" in str(exc_info.value)

    @pytest.mark.parametrize("version", ["1", "v1.0", "1.0.0"])
    def test_malformed_version(self, config_data: dict[str, Any], version: str) -> None:
        config_data["schema_version"] = version
        with pytest.raises(PydanticValidationError):
            CabinetPartsConfiguration.model_validate(config_data)

    def test_materials_required(self, config_data: dict[str, Any]) -> None:
        config_data["materials"] = []
        with pytest.raises(PydanticValidationError):
            CabinetPartsConfiguration.model_validate(config_data)

    def test_duplicate_material_ids(self, config_data: dict[str, Any]) -> None:
        config_data["materials"].append({"id": "board", "thickness": 16})
        with pytest.raises(PydanticValidationError) as exc_info:
            CabinetPartsConfiguration.model_validate(config_data)
        assert "Duplicate material id 'board'" in str(exc_info.value)

    def test_unknown_top_level_field(self, config_data: dict[str, Any]) -> None:
        config_data["room"] = "kitchen"
        with pytest.raises(PydanticValidationError):
            CabinetPartsConfiguration.model_validate(config_data)


class TestCrossFieldRules:
    """Tests for model validators on nested schemas."""

    def test_partition_count_must_match_children(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            InteriorZoneSchema.model_validate(
                {
                    "id": "root",
                    "content_type": "nested",
                    "division_direction": "vertical",
                    "children": [{"id": "a"}, {"id": "b"}, {"id": "c"}],
                    "partitions": [{"enabled": True}],
                }
            )
        assert "Zone 'root' needs 2 partitions" in str(exc_info.value)

    def test_partitions_may_be_omitted(self) -> None:
        zone = InteriorZoneSchema.model_validate(
            {
                "id": "root",
                "content_type": "nested",
                "division_direction": "vertical",
                "children": [{"id": "a", "content_type": "shelves"}, {"id": "b"}],
            }
        )
        assert zone.partitions == []
        assert zone.children[0].content_type == ZoneContentType.SHELVES

    def test_too_many_children(self) -> None:
        with pytest.raises(PydanticValidationError):
            InteriorZoneSchema.model_validate(
                {"id": "root", "children": [{"id": f"z{i}"} for i in range(7)]}
            )

    def test_exact_height_requires_value(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            ZoneHeightConfigSchema(mode="exact")
        assert "exact_mm" in str(exc_info.value)
        assert ZoneHeightConfigSchema(mode="exact", exact_mm=200).exact_mm == 200

    def test_fixed_width_requires_value(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            ZoneWidthConfigSchema(mode="fixed")
        assert "fixed_mm" in str(exc_info.value)

    def test_custom_handle_needs_coordinates(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            HandlePositionSchema(preset=HandlePositionPreset.CUSTOM, x=10.0)
        assert "both 'x' and 'y'" in str(exc_info.value)
        position = HandlePositionSchema(preset=HandlePositionPreset.CUSTOM, x=10.0, y=-20.0)
        assert (position.x, position.y) == (10.0, -20.0)

    @pytest.mark.parametrize(
        "data",
        [{"manual_count": 3}, {"current_height": 40}, {"corner_inset": 150}],
    )
    def test_leg_limits(self, data: dict[str, Any]) -> None:
        with pytest.raises(PydanticValidationError):
            LegsConfigSchema.model_validate(data)


class TestLoadConfig:
    """Tests for load_config and load_config_from_dict."""

    def test_load_valid_file(self, config_data: dict[str, Any], write_config) -> None:
        config = load_config(write_config(config_data))
        assert config.params.width == 600
        assert config.params.has_doors

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path
        assert "Config file not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{\n  "schema_version": "1.0",\n  "materials": [\n}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert "Invalid JSON" in error.message
        assert error.details[0]["line"] == 4

    def test_validation_error_details(self, config_data: dict[str, Any], write_config) -> None:
        config_data["params"]["width"] = -600
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(config_data))

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.message.startswith("Configuration validation failed:")
        assert "  - params.width:" in error.message
        detail = error.details[0]
        assert detail["path"] == "params.width"
        assert detail["value"] == -600

    def test_array_index_in_path(self, config_data: dict[str, Any]) -> None:
        config_data["materials"][1]["thickness"] = 0
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(config_data)
        assert exc_info.value.details[0]["path"] == "materials[1].thickness"

    def test_from_dict_error_keeps_cause(self, config_data: dict[str, Any]) -> None:
        """Dictionary errors carry no file path and chain the schema error."""
        config_data["params"]["width"] = -600
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(config_data)

        error = exc_info.value
        assert error.path is None
        assert isinstance(error.__cause__, PydanticValidationError)
        assert set(error.details[0]) == {"path", "message", "value", "error_type"}

    def test_from_dict(self, config_data: dict[str, Any]) -> None:
        config = load_config_from_dict(config_data)
        assert config.cabinet_materials.back_material_id == "hdf"
