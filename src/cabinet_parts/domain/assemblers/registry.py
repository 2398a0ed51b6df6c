"""Registry of cabinet assemblers by cabinet type."""

from __future__ import annotations

from typing import Callable, Mapping, Protocol, TypeVar

from ..exceptions import UnknownCabinetTypeError
from ..value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    GeneratedPart,
    Material,
)


class CabinetGenerator(Protocol):
    """Signature shared by every cabinet assembler."""

    def __call__(
        self,
        cabinet_id: str,
        furniture_id: str,
        params: CabinetParams,
        materials: CabinetMaterials,
        body_material: Material,
        back_material: Material | None = None,
        *,
        material_catalog: Mapping[str, Material] | None = None,
    ) -> list[GeneratedPart]: ...


G = TypeVar("G", bound=CabinetGenerator)


class CabinetGeneratorRegistry:
    """Singleton registry mapping cabinet types to their assemblers.

    Example:
        @cabinet_generator_registry.register(CabinetType.KITCHEN)
        def generate_kitchen_cabinet(cabinet_id, furniture_id, params, ...):
            ...

        generator = cabinet_generator_registry.get(CabinetType.KITCHEN)
    """

    _instance: CabinetGeneratorRegistry | None = None
    _generators: dict[CabinetType, CabinetGenerator]

    def __new__(cls) -> CabinetGeneratorRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._generators = {}
        return cls._instance

    def register(self, cabinet_type: CabinetType) -> Callable[[G], G]:
        """Decorator to register the assembler for a cabinet type.

        Raises:
            ValueError: If the cabinet type already has an assembler.
        """

        def decorator(generator: G) -> G:
            if cabinet_type in self._generators:
                raise ValueError(
                    f"Generator for cabinet type '{cabinet_type.value}' already registered"
                )
            self._generators[cabinet_type] = generator
            return generator

        return decorator

    def get(self, cabinet_type: CabinetType) -> CabinetGenerator:
        """Get the assembler for a cabinet type.

        Raises:
            UnknownCabinetTypeError: If no assembler is registered for the type.
        """
        if cabinet_type not in self._generators:
            raise UnknownCabinetTypeError(str(getattr(cabinet_type, "value", cabinet_type)))
        return self._generators[cabinet_type]

    def list(self) -> list[CabinetType]:
        """List registered cabinet types in declaration order."""
        return [t for t in CabinetType if t in self._generators]

    def clear(self) -> None:
        """Remove all registrations.

        Intended for tests only.
        """
        self._generators = {}


cabinet_generator_registry = CabinetGeneratorRegistry()


def get_generator_for_type(cabinet_type: CabinetType) -> CabinetGenerator:
    return cabinet_generator_registry.get(cabinet_type)


def generate_cabinet(
    cabinet_id: str,
    furniture_id: str,
    params: CabinetParams,
    materials: CabinetMaterials,
    body_material: Material,
    back_material: Material | None = None,
    *,
    material_catalog: Mapping[str, Material] | None = None,
) -> list[GeneratedPart]:
    """Generate all parts of a cabinet with the assembler for its type."""
    generator = get_generator_for_type(params.type)
    return generator(
        cabinet_id,
        furniture_id,
        params,
        materials,
        body_material,
        back_material,
        material_catalog=material_catalog,
    )
