"""State shared by the corner cabinet strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from ...generators import generate_legs
from ...generators._common import PartFactory
from ...services.corner import calculate_side_height
from ...services.legs import calculate_leg_height_offset
from ...value_objects import (
    CabinetMaterials,
    CabinetParams,
    CoordinateFrame,
    CornerConfig,
    CornerMountType,
    GeneratedPart,
    HingeSide,
    Material,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CornerBuild:
    """Inputs of one corner cabinet, resolved for the corner frame.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        params: Cabinet parameters; ``height`` is the corner height.
        config: Corner configuration.
        materials: Material assignment of the cabinet.
        body_material: Body material; its thickness is the panel thickness.
        back_material: Back material; no backs are generated without it.
    """

    cabinet_id: str
    furniture_id: str
    params: CabinetParams
    config: CornerConfig
    materials: CabinetMaterials
    body_material: Material
    back_material: Material | None = None
    factory: PartFactory = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "factory",
            PartFactory(self.cabinet_id, self.furniture_id, CoordinateFrame.CORNER),
        )

    @property
    def thickness(self) -> float:
        return self.body_material.thickness

    @property
    def height(self) -> float:
        return self.params.height

    @property
    def leg_offset(self) -> float:
        return calculate_leg_height_offset(self.params.legs)

    @property
    def side_height(self) -> float:
        return calculate_side_height(
            self.height, self.config.bottom_mount, self.config.top_mount, self.thickness
        )

    @property
    def side_center_y(self) -> float:
        bottom_offset = 0.0 if self.config.bottom_mount == CornerMountType.INSET else self.thickness
        return bottom_offset + self.side_height / 2 + self.leg_offset

    def back_material_or_none(self) -> Material | None:
        """Back material, or None when the cabinet gets no back."""
        if not self.params.has_back:
            return None
        if self.back_material is None:
            logger.debug(f"Back omitted for corner cabinet {self.cabinet_id}: no back material")
        return self.back_material

    def legs(
        self, footprints: list[tuple[float, float, float, float]]
    ) -> list[GeneratedPart]:
        """Legs under one or more rectangular footprints, numbered in order.

        Args:
            footprints: ``(width, depth, centre_x, centre_z)`` per footprint.
        """
        legs = self.params.legs
        if legs is None or not legs.enabled:
            return []

        parts: list[GeneratedPart] = []
        for width, depth, center_x, center_z in footprints:
            parts += generate_legs(
                self.cabinet_id,
                self.furniture_id,
                legs,
                width,
                depth,
                self.materials,
                frame_origin=(center_x, center_z),
                frame=CoordinateFrame.CORNER,
            )
        if len(footprints) == 1:
            return parts
        return [
            replace(
                part,
                name=f"Leg {i + 1}",
                cabinet_metadata=replace(part.cabinet_metadata, index=i, leg_index=i),
            )
            for i, part in enumerate(parts)
        ]


def resolve_hinge_side(config: CornerConfig, default: HingeSide) -> HingeSide:
    """Explicit hinge side if configured, else ``default``."""
    return config.hinge_side if config.hinge_side is not None else default
