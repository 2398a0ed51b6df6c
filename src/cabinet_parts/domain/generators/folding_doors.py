"""Folding (lift-up) door generation for wall cabinets.

A folding front is split into a lower and an upper section. The upper
section is hinged to the cabinet top and the lower section to the upper
one, so only the lower section carries a handle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import DOOR_GAP, FRONT_MARGIN
from ..services.handles import generate_handle_metadata
from ..value_objects import (
    DoorConfig,
    DoorLayout,
    DoorMetadata,
    DoorOpeningDirection,
    DoorType,
    FoldingDoorConfig,
    FoldingSection,
    GeneratedPart,
    HandleConfig,
    HingeSide,
    PartRole,
)
from ._common import FULL_BANDING, PartFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoldingDoorGenerationConfig:
    cabinet_id: str
    furniture_id: str
    cabinet_width: float
    cabinet_height: float
    cabinet_depth: float
    thickness: float
    front_material_id: str
    folding_config: FoldingDoorConfig = FoldingDoorConfig()
    door_config: DoorConfig = DoorConfig()
    handle_config: HandleConfig | None = None
    leg_offset: float = 0.0


@dataclass(frozen=True)
class FoldingSectionHeights:
    """Heights and centres of the two sections of a folding front."""

    lower_height: float
    upper_height: float
    lower_center_y: float
    upper_center_y: float


def calculate_folding_sections(
    cabinet_height: float, folding_config: FoldingDoorConfig, leg_offset: float = 0.0
) -> FoldingSectionHeights:
    """Split the front height between the lower and upper sections.

    The two sections plus the gap between them always add up to the full
    front height, ``cabinet_height - 2 * FRONT_MARGIN``.
    """
    total_height = cabinet_height - FRONT_MARGIN * 2
    available = total_height - folding_config.section_gap
    lower = available * folding_config.split_ratio
    upper = available * (1 - folding_config.split_ratio)
    return FoldingSectionHeights(
        lower_height=lower,
        upper_height=upper,
        lower_center_y=FRONT_MARGIN + lower / 2 + leg_offset,
        upper_center_y=FRONT_MARGIN + lower + folding_config.section_gap + upper / 2 + leg_offset,
    )


def _column(
    factory: PartFactory,
    config: FoldingDoorGenerationConfig,
    sections: FoldingSectionHeights,
    *,
    label: str,
    x: float,
    width: float,
    first_index: int,
    hinge: HingeSide | None,
    door_type: DoorType,
) -> list[GeneratedPart]:
    z = config.cabinet_depth / 2 + config.thickness / 2
    handle = None
    if config.handle_config is not None:
        handle = generate_handle_metadata(
            config.handle_config, width, sections.lower_height, door_type, hinge
        )

    lower = factory.rect(
        f"{label} lower front" if label else "Lower front",
        PartRole.DOOR,
        width,
        sections.lower_height,
        config.thickness,
        (x, sections.lower_center_y, z),
        config.front_material_id,
        edge_banding=FULL_BANDING,
        index=first_index,
        door_metadata=DoorMetadata(
            hinge_side=hinge,
            opening_direction=DoorOpeningDirection.LIFT_UP,
            folding_section=FoldingSection.LOWER,
        ),
        handle_metadata=handle,
    )
    upper = factory.rect(
        f"{label} upper front" if label else "Upper front",
        PartRole.DOOR,
        width,
        sections.upper_height,
        config.thickness,
        (x, sections.upper_center_y, z),
        config.front_material_id,
        edge_banding=FULL_BANDING,
        index=first_index + 1,
        door_metadata=DoorMetadata(
            hinge_side=hinge,
            opening_direction=DoorOpeningDirection.LIFT_UP,
            folding_section=FoldingSection.UPPER,
        ),
    )
    return [lower, upper]


def generate_folding_doors(config: FoldingDoorGenerationConfig) -> list[GeneratedPart]:
    """Generate the sections of a folding front.

    A SINGLE layout yields a lower and an upper section spanning the full
    width. A DOUBLE layout yields two columns of two sections each, indexed
    0-1 on the left and 2-3 on the right.

    Args:
        config: Folding door generation inputs.

    Returns:
        Door parts, lower section first within each column.
    """
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    sections = calculate_folding_sections(
        config.cabinet_height, config.folding_config, config.leg_offset
    )
    available_width = config.cabinet_width - FRONT_MARGIN * 2

    if config.door_config.layout == DoorLayout.SINGLE:
        parts = _column(
            factory, config, sections,
            label="", x=0.0, width=available_width, first_index=0,
            hinge=None, door_type=DoorType.SINGLE,
        )
    else:
        door_width = (available_width - DOOR_GAP) / 2
        offset = door_width / 2 + DOOR_GAP / 2
        parts = _column(
            factory, config, sections,
            label="Left", x=-offset, width=door_width, first_index=0,
            hinge=HingeSide.LEFT, door_type=DoorType.DOUBLE_LEFT,
        )
        parts += _column(
            factory, config, sections,
            label="Right", x=offset, width=door_width, first_index=2,
            hinge=HingeSide.RIGHT, door_type=DoorType.DOUBLE_RIGHT,
        )

    logger.debug(f"Generated {len(parts)} folding door sections for cabinet {config.cabinet_id}")
    return parts
