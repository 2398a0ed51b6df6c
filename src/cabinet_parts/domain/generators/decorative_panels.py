"""Top and bottom decorative panel generation.

Supported panel kinds:

- BLENDA: cover panel on top of the cabinet, full depth.
- PLINTH: toe-kick under the cabinet, optionally recessed.
- TRIM_STRIP: thin strip on the front face at the top or bottom edge.
- FULL_PANEL: front-thickness panel extending the front above or below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import DEFAULT_TRIM_STRIP_THICKNESS
from ..value_objects import (
    DecorativePanelConfig,
    DecorativePanelPosition,
    DecorativePanelsConfig,
    DecorativePanelType,
    EdgeBandingRect,
    GeneratedPart,
    PartRole,
)
from ._common import PartFactory

logger = logging.getLogger(__name__)

PANEL_TYPE_NAMES: dict[DecorativePanelType, str] = {
    DecorativePanelType.BLENDA: "Blenda",
    DecorativePanelType.PLINTH: "Plinth",
    DecorativePanelType.TRIM_STRIP: "Trim strip",
    DecorativePanelType.FULL_PANEL: "Decorative panel",
}


@dataclass(frozen=True)
class DecorativePanelGenerationConfig:
    cabinet_id: str
    furniture_id: str
    cabinet_width: float
    cabinet_height: float
    cabinet_depth: float
    front_thickness: float
    front_material_id: str
    decorative_panels: DecorativePanelsConfig
    leg_offset: float = 0.0


def has_decorative_panels(config: DecorativePanelsConfig | None) -> bool:
    if config is None:
        return False
    return bool(
        (config.top is not None and config.top.enabled)
        or (config.bottom is not None and config.bottom.enabled)
    )


def _panel_depth_and_position(
    config: DecorativePanelGenerationConfig,
    panel: DecorativePanelConfig,
    position: DecorativePanelPosition,
) -> tuple[float, float, float]:
    """Depth, centre Y and centre Z of a panel before the leg offset."""
    height = panel.height
    is_top = position == DecorativePanelPosition.TOP
    front_z = config.cabinet_depth / 2

    if panel.type == DecorativePanelType.BLENDA:
        return config.cabinet_depth, config.cabinet_height + height / 2, 0.0
    if panel.type == DecorativePanelType.PLINTH:
        return config.cabinet_depth - panel.recess, -height / 2, -panel.recess / 2
    if panel.type == DecorativePanelType.TRIM_STRIP:
        depth = panel.thickness if panel.thickness is not None else DEFAULT_TRIM_STRIP_THICKNESS
        y = config.cabinet_height - height / 2 if is_top else height / 2
        return depth, y, front_z + depth / 2

    depth = config.front_thickness
    y = config.cabinet_height + height / 2 if is_top else -height / 2
    return depth, y, front_z + depth / 2


def _generate_panel(
    factory: PartFactory,
    config: DecorativePanelGenerationConfig,
    panel: DecorativePanelConfig,
    position: DecorativePanelPosition,
) -> GeneratedPart:
    is_top = position == DecorativePanelPosition.TOP
    depth, y, z = _panel_depth_and_position(config, panel, position)
    return factory.rect(
        f"{PANEL_TYPE_NAMES[panel.type]} ({position.value})",
        PartRole.DECORATIVE_TOP if is_top else PartRole.DECORATIVE_BOTTOM,
        config.cabinet_width,
        panel.height,
        depth,
        (0.0, y + config.leg_offset, z),
        panel.material_id or config.front_material_id,
        edge_banding=EdgeBandingRect(top=is_top, bottom=not is_top, left=True, right=True),
    )


def generate_decorative_panels(
    config: DecorativePanelGenerationConfig,
) -> list[GeneratedPart]:
    """Generate the enabled top and bottom panels, top first.

    Panels with no height are skipped.
    """
    factory = PartFactory(config.cabinet_id, config.furniture_id)
    parts = []
    panels = (
        (config.decorative_panels.top, DecorativePanelPosition.TOP),
        (config.decorative_panels.bottom, DecorativePanelPosition.BOTTOM),
    )
    for panel, position in panels:
        if panel is None or not panel.enabled:
            continue
        if panel.height <= 0:
            logger.debug(
                f"Decorative {position.value} panel omitted for cabinet "
                f"{config.cabinet_id}: zero height"
            )
            continue
        parts.append(_generate_panel(factory, config, panel, position))
    logger.debug(f"Generated {len(parts)} decorative panels for cabinet {config.cabinet_id}")
    return parts
