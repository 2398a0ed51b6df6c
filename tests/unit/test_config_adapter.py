"""Unit tests for the configuration to domain adapter.

These tests verify:
- Cabinet parameters are rebuilt as domain value objects with tuples
- Interior zones are numbered by nesting depth
- Materials are resolved from the catalog into the generation request
- Unknown material ids raise ConfigError with error_type material_not_found
"""

from typing import Any

import pytest

from cabinet_parts.application.config import (
    ConfigError,
    config_to_params,
    config_to_request,
    load_config_from_dict,
)
from cabinet_parts.domain.value_objects import (
    CabinetType,
    CornerType,
    HandlePositionPreset,
    HandleType,
    InteriorZone,
    Material,
    MaterialCategory,
    ZoneContentType,
)


def _nested_interior() -> dict[str, Any]:
    return {
        "root_zone": {
            "id": "root",
            "content_type": "nested",
            "division_direction": "horizontal",
            "children": [
                {
                    "id": "drawers",
                    "content_type": "drawers",
                    "drawer_config": {"zones": [{"id": "d1", "boxes": [{}, {}]}]},
                },
                {
                    "id": "columns",
                    "content_type": "nested",
                    "division_direction": "vertical",
                    "children": [
                        {"id": "left", "content_type": "shelves", "shelves_config": {"count": 2}},
                        {"id": "right", "content_type": "empty"},
                    ],
                    "partitions": [{"enabled": True}],
                },
            ],
        }
    }


class TestConfigToParams:
    """Tests for config_to_params."""

    def test_basic_fields(self, config_data: dict[str, Any]) -> None:
        params = config_to_params(load_config_from_dict(config_data).params)

        assert params.type == CabinetType.KITCHEN
        assert (params.width, params.height, params.depth) == (600, 720, 560)
        assert params.shelf_count == 1
        assert params.has_doors
        assert params.interior_config is None

    def test_interior_depths(self, config_data: dict[str, Any]) -> None:
        """Zones are numbered by nesting depth starting from the root."""
        config_data["params"]["interior_config"] = _nested_interior()
        params = config_to_params(load_config_from_dict(config_data).params)

        root = params.interior_config.root_zone
        assert isinstance(root, InteriorZone)
        assert root.depth == 0
        drawers, columns = root.children
        assert (drawers.depth, columns.depth) == (1, 1)
        assert [child.depth for child in columns.children] == [2, 2]
        assert columns.partitions[0].enabled
        assert isinstance(root.children, tuple)

    def test_drawer_zone_contents(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["interior_config"] = _nested_interior()
        params = config_to_params(load_config_from_dict(config_data).params)

        drawers = params.interior_config.root_zone.children[0]
        assert drawers.content_type == ZoneContentType.DRAWERS
        (zone,) = drawers.drawer_config.zones
        assert zone.id == "d1"
        assert len(zone.boxes) == 2
        assert zone.front is not None

    def test_handle_config(self, config_data: dict[str, Any]) -> None:
        config_data["params"]["handle_config"] = {
            "type": "knob",
            "position": {"preset": "custom", "x": 10, "y": -50},
            "dimensions": {"length": 30, "height": 30, "diameter": 30},
        }
        params = config_to_params(load_config_from_dict(config_data).params)

        handle = params.handle_config
        assert handle.type == HandleType.KNOB
        assert handle.position.preset == HandlePositionPreset.CUSTOM
        assert (handle.position.x, handle.position.y) == (10, -50)
        assert handle.dimensions.diameter == 30

    def test_legacy_drawer_heights_become_tuple(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(type="drawer", drawer_count=2, drawer_heights=[1, 2])
        params = config_to_params(load_config_from_dict(config_data).params)
        assert params.drawer_heights == (1, 2)

    def test_corner_config(self, config_data: dict[str, Any]) -> None:
        config_data["params"].update(
            type="corner_internal",
            corner_config={"corner_type": "l_shaped_two_arm", "W": 1000, "D": 800},
        )
        params = config_to_params(load_config_from_dict(config_data).params)

        assert params.corner_config.corner_type == CornerType.L_SHAPED_TWO_ARM
        assert (params.corner_config.W, params.corner_config.D) == (1000, 800)
        assert params.corner_config.body_depth == 560


class TestConfigToRequest:
    """Tests for config_to_request."""

    def test_materials_resolved(self, config_data: dict[str, Any]) -> None:
        request = config_to_request(load_config_from_dict(config_data))

        assert request.cabinet_id == "cab-1"
        assert request.furniture_id == "kitchen"
        assert request.body_material == Material(id="board", thickness=18)
        assert request.back_material.thickness == 3
        assert request.back_material.category == MaterialCategory.BACK
        assert set(request.material_catalog) == {"board", "front", "hdf"}
        assert request.materials.front_material_id == "front"

    def test_no_back_material(self, config_data: dict[str, Any]) -> None:
        del config_data["cabinet_materials"]["back_material_id"]
        request = config_to_request(load_config_from_dict(config_data))

        assert request.back_material is None
        assert request.materials.back_material_id is None

    @pytest.mark.parametrize("field", ["body_material_id", "front_material_id", "back_material_id"])
    def test_unknown_material(self, config_data: dict[str, Any], field: str) -> None:
        config_data["cabinet_materials"][field] = "walnut"
        config = load_config_from_dict(config_data)

        with pytest.raises(ConfigError) as exc_info:
            config_to_request(config)

        error = exc_info.value
        assert error.error_type == "material_not_found"
        assert "walnut" in error.message
        assert error.details[0]["path"] == f"cabinet_materials.{field}"
