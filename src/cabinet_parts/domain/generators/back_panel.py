"""Back panel generation.

The back is mounted outside the body and overlaps the rear edges of the
body panels. With an 18mm body and a 0.667 overlap ratio the back covers
12mm of each edge, so it is 6mm smaller than the cabinet on every side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import MIN_BACK_HEIGHT, MIN_BACK_OVERLAP, MIN_BACK_WIDTH
from ..value_objects import (
    EdgeBandingGeneric,
    GeneratedPart,
    HangerCutoutConfig,
    PartRole,
)
from ._common import NO_BANDING, PartFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackPanelConfig:
    """Inputs for a back panel.

    Attributes:
        cabinet_id: Owning cabinet.
        furniture_id: Owning furniture.
        cabinet_width: Outer cabinet width.
        cabinet_height: Body height.
        cabinet_depth: Outer cabinet depth.
        body_thickness: Thickness of the body panels.
        back_material_id: Material of the back.
        back_thickness: Thickness of the back material.
        overlap_ratio: Fraction of the body thickness the back overlaps.
        leg_offset: Height added by legs.
    """

    cabinet_id: str
    furniture_id: str
    cabinet_width: float
    cabinet_height: float
    cabinet_depth: float
    body_thickness: float
    back_material_id: str
    back_thickness: float
    overlap_ratio: float = 0.667
    leg_offset: float = 0.0


def calculate_back_overlap(body_thickness: float, overlap_ratio: float) -> tuple[float, float]:
    """Overlap depth and edge inset of a back panel.

    Returns:
        (overlap_depth, edge_inset) where overlap_depth is never below
        MIN_BACK_OVERLAP and edge_inset is the body thickness left uncovered.
    """
    overlap_depth = max(body_thickness * overlap_ratio, MIN_BACK_OVERLAP)
    return overlap_depth, body_thickness - overlap_depth


def calculate_back_dimensions(config: BackPanelConfig) -> tuple[float, float]:
    """Back panel width and height, clamped to the minimum back size."""
    _, edge_inset = calculate_back_overlap(config.body_thickness, config.overlap_ratio)
    width = max(config.cabinet_width - 2 * edge_inset, MIN_BACK_WIDTH)
    height = max(config.cabinet_height - 2 * edge_inset, MIN_BACK_HEIGHT)
    return width, height


def _back_position(config: BackPanelConfig) -> tuple[float, float, float]:
    return (
        0.0,
        config.cabinet_height / 2 + config.leg_offset,
        -config.cabinet_depth / 2 - config.back_thickness / 2,
    )


def generate_back_panel(config: BackPanelConfig) -> GeneratedPart:
    """Generate a rectangular back panel behind the body."""
    width, height = calculate_back_dimensions(config)
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    logger.debug(f"Back panel {width}x{height} for cabinet {config.cabinet_id}")
    return factory.rect(
        "Back",
        PartRole.BACK,
        width,
        height,
        config.back_thickness,
        _back_position(config),
        config.back_material_id,
        edge_banding=NO_BANDING,
    )


def calculate_hanger_cutout_points(
    width: float, height: float, cutouts: HangerCutoutConfig
) -> list[tuple[float, float]]:
    """Outline of a back panel with hanger notches at both top corners.

    The outline has 12 points, centred on the panel centre, starting at the
    bottom-left corner.
    """
    half_w = width / 2
    half_h = height / 2
    cut_w = cutouts.width
    cut_h = cutouts.height
    h_inset = cutouts.horizontal_inset
    v_inset = cutouts.vertical_inset

    return [
        (-half_w, -half_h),
        (half_w, -half_h),
        # Right notch
        (half_w, half_h - v_inset - cut_h),
        (half_w - h_inset, half_h - v_inset - cut_h),
        (half_w - h_inset, half_h - v_inset),
        (half_w - h_inset - cut_w, half_h - v_inset),
        (half_w - h_inset - cut_w, half_h),
        # Left notch
        (-half_w + h_inset + cut_w, half_h),
        (-half_w + h_inset + cut_w, half_h - v_inset),
        (-half_w + h_inset, half_h - v_inset),
        (-half_w + h_inset, half_h - v_inset - cut_h),
        (-half_w, half_h - v_inset - cut_h),
    ]


def generate_back_panel_with_cutouts(
    config: BackPanelConfig, cutouts: HangerCutoutConfig
) -> GeneratedPart:
    """Generate a back panel with hanger notches for wall mounting.

    Falls back to the plain rectangular back when cutouts are disabled.
    """
    if not cutouts.enabled:
        return generate_back_panel(config)

    width, height = calculate_back_dimensions(config)
    points = calculate_hanger_cutout_points(width, height, cutouts)
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    logger.debug(
        f"Back panel {width}x{height} with hanger cutouts for cabinet {config.cabinet_id}"
    )
    return factory.polygon(
        "Back",
        PartRole.BACK,
        points,
        config.back_thickness,
        _back_position(config),
        config.back_material_id,
        edge_banding=EdgeBandingGeneric(),
    )
