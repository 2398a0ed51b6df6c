"""Unit tests for the cabinet generator registry.

These tests verify:
- Every cabinet type has an assembler registered on import
- Registering a type twice is rejected
- Unknown types raise UnknownCabinetTypeError
- generate_cabinet dispatches on the cabinet type
"""

import pytest

from cabinet_parts.domain import (
    UnknownCabinetTypeError,
    cabinet_generator_registry,
    generate_cabinet,
)
from cabinet_parts.domain.assemblers import generate_wall_cabinet
from cabinet_parts.domain.assemblers.registry import CabinetGeneratorRegistry
from cabinet_parts.domain.services import create_legs_config
from cabinet_parts.domain.value_objects import CabinetType, PartRole


class TestCabinetGeneratorRegistry:
    """Tests for CabinetGeneratorRegistry."""

    def test_all_types_registered(self) -> None:
        assert cabinet_generator_registry.list() == list(CabinetType)

    def test_singleton(self) -> None:
        assert CabinetGeneratorRegistry() is cabinet_generator_registry

    def test_lookup(self) -> None:
        assert cabinet_generator_registry.get(CabinetType.WALL) is generate_wall_cabinet

    def test_duplicate_registration(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            cabinet_generator_registry.register(CabinetType.KITCHEN)(generate_wall_cabinet)

    def test_unknown_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delitem(cabinet_generator_registry._generators, CabinetType.BOOKSHELF)

        with pytest.raises(UnknownCabinetTypeError) as exc_info:
            cabinet_generator_registry.get(CabinetType.BOOKSHELF)
        assert exc_info.value.cabinet_type == "bookshelf"
        assert CabinetType.BOOKSHELF not in cabinet_generator_registry.list()


class TestGenerateCabinet:
    """Tests for generate_cabinet."""

    def test_dispatches_on_type(self, make_params, cabinet_materials, board, hdf) -> None:
        """A wall cabinet never gets legs, even when configured."""
        params = make_params(CabinetType.WALL, legs=create_legs_config(True))
        parts = generate_cabinet("cab-1", "f-1", params, cabinet_materials, board, hdf)

        assert parts
        assert PartRole.LEG not in {part.role for part in parts}
        assert PartRole.BACK in {part.role for part in parts}
