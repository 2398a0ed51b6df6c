"""Unit tests for GeneratePartsCommand and the generation DTOs.

These tests verify:
- The command dispatches to the assembler registered for the cabinet type
- A cabinet too narrow for its panels is reported without parts
- Generation errors are returned in the output instead of raised
- Material usage sums part areas per material and skips legs
"""

from typing import Any, Callable

import pytest

from cabinet_parts.application import (
    GeneratePartsCommand,
    GenerationOutput,
    GenerationRequest,
)
from cabinet_parts.application.config import config_to_request, load_config_from_dict
from cabinet_parts.domain import CabinetTypeMismatchError
from cabinet_parts.domain.services import create_legs_config
from cabinet_parts.domain.value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    Material,
    PartRole,
)


@pytest.fixture
def request_for(
    cabinet_materials: CabinetMaterials, board: Material, hdf: Material
) -> Callable[[CabinetParams], GenerationRequest]:
    def _request(params: CabinetParams) -> GenerationRequest:
        return GenerationRequest(
            cabinet_id="cab-1",
            furniture_id="f-1",
            params=params,
            materials=cabinet_materials,
            body_material=board,
            back_material=hdf,
        )

    return _request


class _StubRegistry:
    """Registry returning one fixed generator for every type."""

    def __init__(self, generator: Callable[..., Any]) -> None:
        self.generator = generator

    def get(self, cabinet_type: CabinetType) -> Callable[..., Any]:
        return self.generator


class TestGeneratePartsCommand:
    """Tests for GeneratePartsCommand.execute."""

    def test_kitchen_from_config(self, config_data: dict[str, Any]) -> None:
        request = config_to_request(load_config_from_dict(config_data))
        output = GeneratePartsCommand().execute(request)

        assert output.is_valid
        assert [part.name for part in output.parts] == [
            "Bottom",
            "Left side",
            "Right side",
            "Top",
            "Shelf 1",
            "Left door",
            "Right door",
            "Back",
        ]
        assert output.part_count == 8
        assert all(part.cabinet_metadata.cabinet_id == "cab-1" for part in output.parts)

    @pytest.mark.parametrize("cabinet_type", list(CabinetType))
    def test_every_type_generates(
        self, make_params, request_for, cabinet_type: CabinetType
    ) -> None:
        params = make_params(cabinet_type, width=1000.0, height=900.0)
        output = GeneratePartsCommand().execute(request_for(params))

        assert output.is_valid, output.errors
        assert output.part_count > 0

    def test_width_leaves_no_interior(self, make_params, request_for) -> None:
        output = GeneratePartsCommand().execute(request_for(make_params(width=30.0)))

        assert not output.is_valid
        assert output.parts == []
        assert "leaves no interior" in output.errors[0]

    def test_generation_error_is_reported(self, make_params, request_for) -> None:
        def failing(*args: Any, **kwargs: Any) -> list:
            raise CabinetTypeMismatchError("wall", "kitchen")

        command = GeneratePartsCommand(registry=_StubRegistry(failing))  # type: ignore[arg-type]
        output = command.execute(request_for(make_params()))

        assert not output.is_valid
        assert output.parts == []
        assert len(output.errors) == 1

    def test_catalog_passed_to_generator(self, make_params, request_for) -> None:
        received: dict[str, Any] = {}

        def recording(*args: Any, **kwargs: Any) -> list:
            received.update(kwargs)
            return []

        command = GeneratePartsCommand(registry=_StubRegistry(recording))  # type: ignore[arg-type]
        command.execute(request_for(make_params()))
        assert received == {"material_catalog": {}}


class TestGenerationOutput:
    """Tests for GenerationOutput."""

    def test_material_usage(self, make_params, request_for) -> None:
        params = make_params(has_back=True, legs=create_legs_config(True))
        output = GeneratePartsCommand().execute(request_for(params))

        usage = output.material_usage()
        assert set(usage) == {"board", "hdf"}
        expected = sum(
            part.width * part.height
            for part in output.parts
            if part.material_id == "board" and part.role != PartRole.LEG
        )
        assert usage["board"] == pytest.approx(expected / 1_000_000)

    def test_empty_output(self, make_params, request_for) -> None:
        output = GenerationOutput(request=request_for(make_params()))
        assert output.is_valid
        assert output.part_count == 0
        assert output.material_usage() == {}
