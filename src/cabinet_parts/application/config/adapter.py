"""Adapter converting CabinetPartsConfiguration into domain value objects.

The schema models mirror the domain value objects field for field; this
module rebuilds them as frozen dataclasses, turning lists into tuples and
numbering interior zones by nesting depth.
"""

from cabinet_parts.application.config.loader import ConfigError
from cabinet_parts.application.config.schemas import (
    CabinetInteriorConfigSchema,
    CabinetPartsConfiguration,
    CabinetParamsConfig,
    CornerConfigSchema,
    DecorativePanelConfigSchema,
    DecorativePanelsConfigSchema,
    DrawerConfigurationSchema,
    DrawerZoneSchema,
    HandleConfigSchema,
    InteriorZoneSchema,
    LegsConfigSchema,
    MaterialConfig,
    ShelvesConfigurationSchema,
    SideFrontConfigSchema,
    SideFrontsConfigSchema,
)
from cabinet_parts.application.dtos import GenerationRequest
from cabinet_parts.domain.value_objects import (
    AboveBoxContent,
    AboveBoxShelf,
    CabinetInteriorConfig,
    CabinetMaterials,
    CabinetParams,
    CornerConfig,
    DecorativePanelConfig,
    DecorativePanelsConfig,
    DoorConfig,
    DrawerBox,
    DrawerConfiguration,
    DrawerZone,
    DrawerZoneFront,
    FoldingDoorConfig,
    HandleConfig,
    HandleDimensions,
    HandlePosition,
    HangerCutoutConfig,
    InteriorZone,
    LegsConfig,
    LegTypeConfig,
    Material,
    PartitionConfig,
    ShelfConfig,
    ShelvesConfiguration,
    SideFrontConfig,
    SideFrontsConfig,
    ZoneHeightConfig,
    ZoneWidthConfig,
)


def config_to_material(config: MaterialConfig) -> Material:
    return Material(
        id=config.id,
        thickness=config.thickness,
        category=config.category,
        color=config.color,
    )


def config_to_handle(config: HandleConfigSchema | None) -> HandleConfig | None:
    if config is None:
        return None
    dimensions = None
    if config.dimensions is not None:
        dimensions = HandleDimensions(**config.dimensions.model_dump())
    return HandleConfig(
        type=config.type,
        category=config.category,
        orientation=config.orientation,
        position=HandlePosition(**config.position.model_dump()),
        dimensions=dimensions,
        finish=config.finish,
    )


def config_to_legs(config: LegsConfigSchema | None) -> LegsConfig | None:
    if config is None:
        return None
    return LegsConfig(
        enabled=config.enabled,
        leg_type=LegTypeConfig(**config.leg_type.model_dump()),
        count_mode=config.count_mode,
        manual_count=config.manual_count,
        current_height=config.current_height,
        corner_inset=config.corner_inset,
    )


def config_to_shelves(
    config: ShelvesConfigurationSchema | None,
) -> ShelvesConfiguration | None:
    if config is None:
        return None
    return ShelvesConfiguration(
        mode=config.mode,
        count=config.count,
        depth_preset=config.depth_preset,
        custom_depth=config.custom_depth,
        material_id=config.material_id,
        shelves=tuple(ShelfConfig(**shelf.model_dump()) for shelf in config.shelves),
    )


def _config_to_drawer_zone(config: DrawerZoneSchema) -> DrawerZone:
    front = None
    if config.front is not None:
        front = DrawerZoneFront(handle_config=config_to_handle(config.front.handle_config))
    above = None
    if config.above_box_content is not None:
        above = AboveBoxContent(
            shelves=tuple(
                AboveBoxShelf(**shelf.model_dump())
                for shelf in config.above_box_content.shelves
            )
        )
    return DrawerZone(
        id=config.id,
        height_ratio=config.height_ratio,
        front=front,
        boxes=tuple(DrawerBox(height_ratio=box.height_ratio) for box in config.boxes),
        box_to_front_ratio=config.box_to_front_ratio,
        above_box_content=above,
    )


def config_to_drawers(
    config: DrawerConfigurationSchema | None,
) -> DrawerConfiguration | None:
    if config is None:
        return None
    return DrawerConfiguration(
        slide_type=config.slide_type,
        zones=tuple(_config_to_drawer_zone(zone) for zone in config.zones),
        default_handle_config=config_to_handle(config.default_handle_config),
        box_material_id=config.box_material_id,
        bottom_material_id=config.bottom_material_id,
    )


def config_to_zone(config: InteriorZoneSchema, depth: int = 0) -> InteriorZone:
    """Convert a zone and its descendants, numbering nesting depth from ``depth``."""
    width_config = None
    if config.width_config is not None:
        width_config = ZoneWidthConfig(**config.width_config.model_dump())
    return InteriorZone(
        id=config.id,
        content_type=config.content_type,
        height_config=ZoneHeightConfig(**config.height_config.model_dump()),
        width_config=width_config,
        division_direction=config.division_direction,
        children=tuple(config_to_zone(child, depth + 1) for child in config.children),
        partitions=tuple(
            PartitionConfig(**partition.model_dump()) for partition in config.partitions
        ),
        shelves_config=config_to_shelves(config.shelves_config),
        drawer_config=config_to_drawers(config.drawer_config),
        depth=depth,
    )


def config_to_interior(
    config: CabinetInteriorConfigSchema | None,
) -> CabinetInteriorConfig | None:
    if config is None:
        return None
    return CabinetInteriorConfig(root_zone=config_to_zone(config.root_zone))


def _config_to_side_front(config: SideFrontConfigSchema | None) -> SideFrontConfig | None:
    if config is None:
        return None
    return SideFrontConfig(**config.model_dump())


def config_to_side_fronts(
    config: SideFrontsConfigSchema | None,
) -> SideFrontsConfig | None:
    if config is None:
        return None
    return SideFrontsConfig(
        left=_config_to_side_front(config.left),
        right=_config_to_side_front(config.right),
    )


def _config_to_decorative_panel(
    config: DecorativePanelConfigSchema | None,
) -> DecorativePanelConfig | None:
    if config is None:
        return None
    return DecorativePanelConfig(**config.model_dump())


def config_to_decorative_panels(
    config: DecorativePanelsConfigSchema | None,
) -> DecorativePanelsConfig | None:
    if config is None:
        return None
    return DecorativePanelsConfig(
        top=_config_to_decorative_panel(config.top),
        bottom=_config_to_decorative_panel(config.bottom),
    )


def config_to_corner(config: CornerConfigSchema | None) -> CornerConfig | None:
    if config is None:
        return None
    return CornerConfig(**config.model_dump())


def config_to_params(config: CabinetParamsConfig) -> CabinetParams:
    """Convert the cabinet parameters section into CabinetParams."""
    return CabinetParams(
        type=config.type,
        width=config.width,
        height=config.height,
        depth=config.depth,
        top_bottom_placement=config.top_bottom_placement,
        has_back=config.has_back,
        back_overlap_ratio=config.back_overlap_ratio,
        back_mount_type=config.back_mount_type,
        legs=config_to_legs(config.legs),
        interior_config=config_to_interior(config.interior_config),
        drawer_config=config_to_drawers(config.drawer_config),
        side_fronts=config_to_side_fronts(config.side_fronts),
        decorative_panels=config_to_decorative_panels(config.decorative_panels),
        shelf_count=config.shelf_count,
        has_doors=config.has_doors,
        door_config=(
            DoorConfig(**config.door_config.model_dump()) if config.door_config else None
        ),
        handle_config=config_to_handle(config.handle_config),
        door_count=config.door_count,
        drawer_count=config.drawer_count,
        drawer_slide_type=config.drawer_slide_type,
        has_internal_drawers=config.has_internal_drawers,
        drawer_heights=tuple(config.drawer_heights) if config.drawer_heights else None,
        drawer_handle_config=config_to_handle(config.drawer_handle_config),
        bottom_material_id=config.bottom_material_id,
        folding_door_config=(
            FoldingDoorConfig(**config.folding_door_config.model_dump())
            if config.folding_door_config
            else None
        ),
        hanger_cutouts=(
            HangerCutoutConfig(**config.hanger_cutouts.model_dump())
            if config.hanger_cutouts
            else None
        ),
        corner_config=config_to_corner(config.corner_config),
    )


def _lookup_material(
    catalog: dict[str, Material], material_id: str, field: str
) -> Material:
    if material_id not in catalog:
        raise ConfigError(
            message=(
                f"Material '{material_id}' referenced by cabinet_materials.{field} "
                f"is not defined. Available: {sorted(catalog)}"
            ),
            error_type="material_not_found",
            details=[
                {
                    "path": f"cabinet_materials.{field}",
                    "message": "Material not found",
                    "value": material_id,
                }
            ],
        )
    return catalog[material_id]


def config_to_request(config: CabinetPartsConfiguration) -> GenerationRequest:
    """Convert a validated configuration into a GenerationRequest.

    Args:
        config: A validated CabinetPartsConfiguration instance

    Returns:
        A GenerationRequest with materials resolved from the catalog

    Raises:
        ConfigError: With error_type "material_not_found" if the body, front
            or back material id is not in ``materials``.

    Example:
        >>> config = load_config(Path("base-cabinet.json"))
        >>> request = config_to_request(config)
        >>> parts = GeneratePartsCommand().execute(request).parts
    """
    catalog = {material.id: config_to_material(material) for material in config.materials}
    assignment = config.cabinet_materials

    body_material = _lookup_material(catalog, assignment.body_material_id, "body_material_id")
    _lookup_material(catalog, assignment.front_material_id, "front_material_id")
    back_material = None
    if assignment.back_material_id is not None:
        back_material = _lookup_material(
            catalog, assignment.back_material_id, "back_material_id"
        )

    return GenerationRequest(
        cabinet_id=config.cabinet_id,
        furniture_id=config.furniture_id,
        params=config_to_params(config.params),
        materials=CabinetMaterials(
            body_material_id=assignment.body_material_id,
            front_material_id=assignment.front_material_id,
            back_material_id=assignment.back_material_id,
        ),
        body_material=body_material,
        back_material=back_material,
        material_catalog=catalog,
    )
