"""Pytest configuration and shared fixtures for cabinet part tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from cabinet_parts.domain.value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    Material,
    MaterialCategory,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Materials
# =============================================================================


@pytest.fixture
def board() -> Material:
    """18mm carcass board."""
    return Material(id="board", thickness=18.0)


@pytest.fixture
def front_board() -> Material:
    return Material(id="front", thickness=18.0, category=MaterialCategory.FRONT)


@pytest.fixture
def hdf() -> Material:
    """3mm back panel board."""
    return Material(id="hdf", thickness=3.0, category=MaterialCategory.BACK)


@pytest.fixture
def cabinet_materials() -> CabinetMaterials:
    return CabinetMaterials(
        body_material_id="board",
        front_material_id="front",
        back_material_id="hdf",
    )


# =============================================================================
# Cabinet parameters
# =============================================================================


@pytest.fixture
def make_params() -> Callable[..., CabinetParams]:
    """Factory for CabinetParams with a 600x720x560 default body."""

    def _make(cabinet_type: CabinetType = CabinetType.KITCHEN, **overrides: Any) -> CabinetParams:
        values: dict[str, Any] = {"width": 600.0, "height": 720.0, "depth": 560.0}
        values.update(overrides)
        return CabinetParams(type=cabinet_type, **values)

    return _make


# =============================================================================
# Configuration files
# =============================================================================


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A minimal valid kitchen configuration as a dictionary."""
    return {
        "schema_version": "1.0",
        "cabinet_id": "cab-1",
        "furniture_id": "kitchen",
        "materials": [
            {"id": "board", "thickness": 18},
            {"id": "front", "thickness": 18, "category": "front"},
            {"id": "hdf", "thickness": 3, "category": "back"},
        ],
        "cabinet_materials": {
            "body_material_id": "board",
            "front_material_id": "front",
            "back_material_id": "hdf",
        },
        "params": {
            "type": "kitchen",
            "width": 600,
            "height": 720,
            "depth": 560,
            "shelf_count": 1,
            "has_doors": True,
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a configuration dictionary to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write
