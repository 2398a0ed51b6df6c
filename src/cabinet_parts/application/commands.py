"""Application commands (use cases) for cabinet part generation."""

from __future__ import annotations

import logging

from cabinet_parts.domain import (
    CabinetGenerationError,
    CabinetType,
    cabinet_generator_registry,
)
from cabinet_parts.domain.assemblers.registry import CabinetGeneratorRegistry

from .dtos import GenerationOutput, GenerationRequest

logger = logging.getLogger(__name__)


class GeneratePartsCommand:
    """Command to generate the parts of one cabinet.

    The assembler is looked up by cabinet type in the generator registry.
    Generation failures are reported in the output instead of raised, the
    same way input problems are.
    """

    def __init__(self, registry: CabinetGeneratorRegistry | None = None) -> None:
        self.registry = registry or cabinet_generator_registry

    def execute(self, request: GenerationRequest) -> GenerationOutput:
        """Execute the part generation command.

        Args:
            request: Parameters, materials and identifiers of the cabinet.

        Returns:
            GenerationOutput with the generated parts, or with errors and no
            parts when the cabinet could not be generated.
        """
        errors = self._validate_request(request)
        if errors:
            return GenerationOutput(request=request, errors=errors)

        try:
            generator = self.registry.get(request.params.type)
            parts = generator(
                request.cabinet_id,
                request.furniture_id,
                request.params,
                request.materials,
                request.body_material,
                request.back_material,
                material_catalog=request.material_catalog,
            )
        except CabinetGenerationError as e:
            logger.warning(f"Generation failed for cabinet {request.cabinet_id}: {e}")
            return GenerationOutput(request=request, errors=[str(e)])

        logger.info(
            f"Generated {len(parts)} parts for {request.params.type.value} "
            f"cabinet {request.cabinet_id}"
        )
        return GenerationOutput(request=request, parts=parts)

    def _validate_request(self, request: GenerationRequest) -> list[str]:
        errors: list[str] = []
        params = request.params
        inner_width = params.width - 2 * request.body_material.thickness
        if params.type != CabinetType.CORNER_INTERNAL and inner_width <= 0:
            errors.append(
                f"Cabinet width {params.width:g}mm leaves no interior "
                f"for {request.body_material.thickness:g}mm panels"
            )
        return errors
