"""End-to-end tests from configuration file to generated parts.

These tests verify, for each example configuration:
- The file loads, validates and converts to a generation request
- Every part has positive dimensions and a material from the catalog
- Every part is stamped with the cabinet id
- Type specific features appear in the generated parts
"""

from collections import Counter
from pathlib import Path

import pytest

from cabinet_parts.application import GeneratePartsCommand, GenerationOutput
from cabinet_parts.application.config import (
    config_to_request,
    load_config,
    validate_config,
)
from cabinet_parts.domain.value_objects import (
    CoordinateFrame,
    PartRole,
    ShapeType,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

EXAMPLES = [
    "kitchen_base.json",
    "wall_folding.json",
    "corner_two_arm.json",
    "drawer_zones.json",
    "wardrobe_interior.json",
]


def _generate(name: str) -> GenerationOutput:
    config = load_config(FIXTURES_PATH / name)
    assert validate_config(config).is_valid
    output = GeneratePartsCommand().execute(config_to_request(config))
    assert output.is_valid, output.errors
    return output


def _role_counts(output: GenerationOutput) -> Counter:
    return Counter(part.role for part in output.parts)


class TestPipelineInvariants:
    """Checks that hold for every example configuration."""

    @pytest.mark.parametrize("name", EXAMPLES)
    def test_parts_are_well_formed(self, name: str) -> None:
        output = _generate(name)
        catalog = output.request.material_catalog

        assert output.part_count > 0
        for part in output.parts:
            assert part.width > 0 and part.height > 0 and part.depth > 0, part.name
            assert part.material_id in catalog, part.name
            assert part.cabinet_metadata.cabinet_id == output.request.cabinet_id
            assert part.furniture_id == output.request.furniture_id

    @pytest.mark.parametrize("name", EXAMPLES)
    def test_generation_is_deterministic(self, name: str) -> None:
        first = [part.to_dict() for part in _generate(name).parts]
        second = [part.to_dict() for part in _generate(name).parts]
        assert first == second


class TestExampleCabinets:
    """Feature checks for the individual example configurations."""

    def test_kitchen_base(self) -> None:
        output = _generate("kitchen_base.json")
        roles = _role_counts(output)

        assert roles[PartRole.DOOR] == 2
        assert roles[PartRole.LEG] == 4
        assert roles[PartRole.DECORATIVE_BOTTOM] == 1
        assert roles[PartRole.BACK] == 1
        doors = [part for part in output.parts if part.role == PartRole.DOOR]
        assert all(door.cabinet_metadata.handle_metadata is not None for door in doors)
        bottom = output.parts[0]
        assert bottom.role == PartRole.BOTTOM
        assert bottom.position[1] > 150.0

    def test_wall_folding(self) -> None:
        output = _generate("wall_folding.json")
        roles = _role_counts(output)

        assert roles[PartRole.DOOR] == 2
        assert roles[PartRole.SHELF] == 2
        assert roles[PartRole.LEG] == 0
        (back,) = [part for part in output.parts if part.role == PartRole.BACK]
        assert back.shape_type == ShapeType.POLYGON

    def test_corner_two_arm(self) -> None:
        output = _generate("corner_two_arm.json")
        roles = _role_counts(output)

        assert roles[PartRole.CORNER_FRONT_RAIL] == 1
        assert roles[PartRole.LEG] > 0
        assert all(part.frame == CoordinateFrame.CORNER for part in output.parts)
        assert output.request.back_material is not None
        assert roles[PartRole.CORNER_BACK] == 2

    def test_drawer_zones(self) -> None:
        output = _generate("drawer_zones.json")
        roles = _role_counts(output)

        assert roles[PartRole.DRAWER_FRONT] == 3
        bottoms = [part for part in output.parts if part.role == PartRole.DRAWER_BOTTOM]
        assert len(bottoms) == 4
        assert {part.material_id for part in bottoms} == {"ply"}

    def test_wardrobe_interior(self) -> None:
        output = _generate("wardrobe_interior.json")
        roles = _role_counts(output)

        assert roles[PartRole.DOOR] == 3
        assert roles[PartRole.DRAWER_FRONT] == 2
        assert roles[PartRole.SHELF] == 6
        assert roles[PartRole.SIDE_FRONT_LEFT] == 1
        assert roles[PartRole.SIDE_FRONT_RIGHT] == 1
        assert roles[PartRole.PARTITION] == 0
