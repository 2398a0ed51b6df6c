"""Building blocks shared by the body-frame cabinet assemblers.

A body cabinet is a box of four panels (bottom, top, two sides) with an
optional back, an interior, fronts, trim and legs. ``CabinetBuild`` holds
what every step needs and exposes one method per step; each assembler
calls them in the standard order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from ..constants import ROTATION_FLAT, ROTATION_SIDE
from ..exceptions import CabinetTypeMismatchError
from ..generators import (
    BackPanelConfig,
    DecorativePanelGenerationConfig,
    InteriorGenerationConfig,
    SideFrontGenerationConfig,
    generate_back_panel,
    generate_back_panel_with_cutouts,
    generate_decorative_panels,
    generate_interior,
    generate_legacy_shelves,
    generate_legs,
    generate_side_fronts,
    has_decorative_panels,
    has_side_fronts,
)
from ..generators._common import FULL_BANDING, PartFactory
from ..services.legs import calculate_leg_height_offset
from ..value_objects import (
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    GeneratedPart,
    HangerCutoutConfig,
    Material,
    PartRole,
    TopBottomPlacement,
)
from .normalize import normalize_interior

logger = logging.getLogger(__name__)


def check_cabinet_type(params: CabinetParams, expected: CabinetType) -> None:
    """Raise CabinetTypeMismatchError unless ``params`` is of the expected type."""
    if params.type != expected:
        raise CabinetTypeMismatchError(expected.value, params.type.value)


@dataclass(frozen=True)
class CabinetBuild:
    """Shared state for assembling one body-frame cabinet.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        params: Cabinet parameters.
        materials: Material assignment of the cabinet.
        body_material: Body material; its thickness is the panel thickness.
        back_material: Back material; no back is generated without it.
        material_catalog: Materials by id, for override thicknesses.
        legs_allowed: False for cabinets that never stand on legs.
    """

    cabinet_id: str
    furniture_id: str
    params: CabinetParams
    materials: CabinetMaterials
    body_material: Material
    back_material: Material | None = None
    material_catalog: Mapping[str, Material] | None = None
    legs_allowed: bool = True
    factory: PartFactory = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "factory", PartFactory(self.cabinet_id, self.furniture_id))

    @property
    def thickness(self) -> float:
        return self.body_material.thickness

    @property
    def front_thickness(self) -> float:
        # Fronts are cut from a board of the body thickness
        return self.body_material.thickness

    @property
    def leg_offset(self) -> float:
        if not self.legs_allowed:
            return 0.0
        return calculate_leg_height_offset(self.params.legs)

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def body_panels(self) -> list[GeneratedPart]:
        """Bottom, left side, right side and top.

        Inset tops and bottoms sit between the sides; overlay ones cover the
        side edges and shorten the sides instead.
        """
        p = self.params
        t = self.thickness
        leg = self.leg_offset
        inset = p.top_bottom_placement == TopBottomPlacement.INSET
        panel_width = p.width - 2 * t if inset else p.width
        side_height = p.height if inset else max(p.height - 2 * t, 0.0)
        side_x = p.width / 2 - t / 2
        body_id = self.materials.body_material_id

        return [
            self.factory.rect(
                "Bottom", PartRole.BOTTOM, panel_width, p.depth, t,
                (0.0, t / 2 + leg, 0.0), body_id,
                rotation=ROTATION_FLAT, edge_banding=FULL_BANDING,
            ),
            self.factory.rect(
                "Left side", PartRole.LEFT_SIDE, p.depth, side_height, t,
                (-side_x, p.height / 2 + leg, 0.0), body_id,
                rotation=ROTATION_SIDE, edge_banding=FULL_BANDING,
            ),
            self.factory.rect(
                "Right side", PartRole.RIGHT_SIDE, p.depth, side_height, t,
                (side_x, p.height / 2 + leg, 0.0), body_id,
                rotation=ROTATION_SIDE, edge_banding=FULL_BANDING,
            ),
            self.factory.rect(
                "Top", PartRole.TOP, panel_width, p.depth, t,
                (0.0, p.height - t / 2 + leg, 0.0), body_id,
                rotation=ROTATION_FLAT, edge_banding=FULL_BANDING,
            ),
        ]

    # ------------------------------------------------------------------
    # Interior
    # ------------------------------------------------------------------

    def interior(self, legacy_shelf_count: int = 0) -> list[GeneratedPart]:
        """Interior tree parts plus legacy evenly spaced shelves.

        Args:
            legacy_shelf_count: Shelves to add when the cabinet has no
                interior tree content.
        """
        p = self.params
        parts = generate_legacy_shelves(
            self.factory,
            legacy_shelf_count,
            cabinet_width=p.width,
            cabinet_height=p.height,
            cabinet_depth=p.depth,
            thickness=self.thickness,
            material_id=self.materials.body_material_id,
            leg_offset=self.leg_offset,
        )

        interior = normalize_interior(p)
        if interior is not None:
            parts += generate_interior(
                InteriorGenerationConfig(
                    cabinet_id=self.cabinet_id,
                    furniture_id=self.furniture_id,
                    cabinet_width=p.width,
                    cabinet_height=p.height,
                    cabinet_depth=p.depth,
                    body_material_id=self.materials.body_material_id,
                    front_material_id=self.materials.front_material_id,
                    body_thickness=self.thickness,
                    front_thickness=self.front_thickness,
                    interior_config=interior,
                    leg_offset=self.leg_offset,
                )
            )
        return parts

    # ------------------------------------------------------------------
    # Back, trim and legs
    # ------------------------------------------------------------------

    def back_panel_config(self) -> BackPanelConfig | None:
        p = self.params
        if not p.has_back:
            return None
        if self.back_material is None:
            logger.debug(f"Back omitted for cabinet {self.cabinet_id}: no back material")
            return None
        return BackPanelConfig(
            cabinet_id=self.cabinet_id,
            furniture_id=self.furniture_id,
            cabinet_width=p.width,
            cabinet_height=p.height,
            cabinet_depth=p.depth,
            body_thickness=self.thickness,
            back_material_id=self.materials.back_material_id or self.back_material.id,
            back_thickness=self.back_material.thickness,
            overlap_ratio=p.back_overlap_ratio,
            leg_offset=self.leg_offset,
        )

    def back(self, hanger_cutouts: HangerCutoutConfig | None = None) -> list[GeneratedPart]:
        """The back panel, with hanger notches when ``hanger_cutouts`` is given."""
        config = self.back_panel_config()
        if config is None:
            return []
        if hanger_cutouts is not None:
            return [generate_back_panel_with_cutouts(config, hanger_cutouts)]
        return [generate_back_panel(config)]

    def side_fronts(self) -> list[GeneratedPart]:
        p = self.params
        if not has_side_fronts(p.side_fronts) or p.side_fronts is None:
            return []
        return generate_side_fronts(
            SideFrontGenerationConfig(
                cabinet_id=self.cabinet_id,
                furniture_id=self.furniture_id,
                cabinet_width=p.width,
                cabinet_height=p.height,
                cabinet_depth=p.depth,
                front_thickness=self.front_thickness,
                front_material_id=self.materials.front_material_id,
                side_fronts=p.side_fronts,
                materials=self.material_catalog,
                leg_offset=self.leg_offset,
            )
        )

    def decorative_panels(self) -> list[GeneratedPart]:
        p = self.params
        if not has_decorative_panels(p.decorative_panels) or p.decorative_panels is None:
            return []
        return generate_decorative_panels(
            DecorativePanelGenerationConfig(
                cabinet_id=self.cabinet_id,
                furniture_id=self.furniture_id,
                cabinet_width=p.width,
                cabinet_height=p.height,
                cabinet_depth=p.depth,
                front_thickness=self.front_thickness,
                front_material_id=self.materials.front_material_id,
                decorative_panels=p.decorative_panels,
                leg_offset=self.leg_offset,
            )
        )

    def legs(self) -> list[GeneratedPart]:
        legs = self.params.legs
        if not self.legs_allowed or legs is None or not legs.enabled:
            return []
        return generate_legs(
            self.cabinet_id,
            self.furniture_id,
            legs,
            self.params.width,
            self.params.depth,
            self.materials,
        )

    def finish(
        self,
        parts: list[GeneratedPart],
        hanger_cutouts: HangerCutoutConfig | None = None,
    ) -> list[GeneratedPart]:
        """Append back, side fronts, decorative panels and legs, in that order."""
        parts = parts + self.back(hanger_cutouts)
        parts += self.side_fronts()
        parts += self.decorative_panels()
        parts += self.legs()
        logger.debug(
            f"Generated {len(parts)} parts for {self.params.type.value} "
            f"cabinet {self.cabinet_id}"
        )
        return parts
