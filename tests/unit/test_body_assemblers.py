"""Unit tests for the body-frame cabinet assemblers.

These tests verify:
- A kitchen base cabinet produces its parts in the standard order
- Body panels are placed symmetrically for inset and overlay tops
- Legs raise every part of the body
- Type-specific rules (wall hanger back, wardrobe door row, bookshelf minimum)
- Legacy drawer fields are turned into a drawer stack
- Assemblers reject parameters of another cabinet type
"""

import logging
from typing import Callable

import pytest

from cabinet_parts.domain.assemblers import (
    generate_bookshelf_cabinet,
    generate_drawer_cabinet,
    generate_kitchen_cabinet,
    generate_wall_cabinet,
    generate_wardrobe_cabinet,
    legacy_drawer_configuration,
    legacy_shelf_count,
    normalize_interior,
)
from cabinet_parts.domain.exceptions import CabinetTypeMismatchError
from cabinet_parts.domain.services import (
    create_drawer_configuration,
    create_legs_config,
    create_shelves_zone,
)
from cabinet_parts.domain.value_objects import (
    CabinetInteriorConfig,
    CabinetMaterials,
    CabinetParams,
    CabinetType,
    DecorativePanelConfig,
    DecorativePanelsConfig,
    DecorativePanelType,
    DoorConfig,
    DoorLayout,
    FoldingDoorConfig,
    GeneratedPart,
    HangerCutoutConfig,
    Material,
    PartRole,
    ShapeType,
    SideFrontConfig,
    SideFrontsConfig,
    TopBottomPlacement,
)

MakeParams = Callable[..., CabinetParams]

BODY_ROLES = {PartRole.BOTTOM, PartRole.TOP, PartRole.LEFT_SIDE, PartRole.RIGHT_SIDE}

ASSEMBLERS = {
    CabinetType.KITCHEN: generate_kitchen_cabinet,
    CabinetType.WARDROBE: generate_wardrobe_cabinet,
    CabinetType.BOOKSHELF: generate_bookshelf_cabinet,
    CabinetType.DRAWER: generate_drawer_cabinet,
    CabinetType.WALL: generate_wall_cabinet,
}


def _roles(parts: list[GeneratedPart]) -> list[PartRole]:
    return [part.role for part in parts]


def _by_role(parts: list[GeneratedPart], role: PartRole) -> list[GeneratedPart]:
    return [part for part in parts if part.role == role]


class TestKitchenCabinet:
    """Tests for generate_kitchen_cabinet."""

    def test_base_cabinet_parts(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        """Body, one centred shelf and a double door, no back."""
        params = make_params(
            width=800.0, depth=580.0, shelf_count=1, has_doors=True, has_back=False
        )
        parts = generate_kitchen_cabinet("cab-1", "f-1", params, cabinet_materials, board)

        assert [part.name for part in parts] == [
            "Bottom",
            "Left side",
            "Right side",
            "Top",
            "Shelf 1",
            "Left door",
            "Right door",
        ]
        shelf = parts[4]
        assert shelf.position[1] == pytest.approx(360.0)
        assert all(door.width == pytest.approx(396.5) for door in parts[5:])

    def test_body_panel_sizes(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        parts = generate_kitchen_cabinet(
            "cab-1", "f-1", make_params(width=800.0), cabinet_materials, board
        )
        bottom, left, right, top = parts[:4]

        assert (bottom.width, bottom.height, bottom.depth) == (764.0, 560.0, 18.0)
        assert (left.width, left.height) == (560.0, 720.0)
        assert bottom.position == (0.0, 9.0, 0.0)
        assert top.position == (0.0, 711.0, 0.0)
        assert all(part.edge_banding.top and part.edge_banding.left for part in parts[:4])

    def test_back_appended_after_fronts(
        self,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
        hdf: Material,
    ) -> None:
        """The back follows doors; trim and legs follow the back."""
        params = make_params(
            has_doors=True,
            side_fronts=SideFrontsConfig(left=SideFrontConfig()),
            decorative_panels=DecorativePanelsConfig(
                bottom=DecorativePanelConfig(type=DecorativePanelType.PLINTH, height=80.0)
            ),
            legs=create_legs_config(True),
        )
        parts = generate_kitchen_cabinet("cab-1", "f-1", params, cabinet_materials, board, hdf)

        assert _roles(parts)[6:] == [
            PartRole.BACK,
            PartRole.SIDE_FRONT_LEFT,
            PartRole.DECORATIVE_BOTTOM,
            PartRole.LEG,
            PartRole.LEG,
            PartRole.LEG,
            PartRole.LEG,
        ]
        assert parts[6].material_id == "hdf"

    def test_no_back_without_material(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        parts = generate_kitchen_cabinet("cab-1", "f-1", make_params(), cabinet_materials, board)
        assert PartRole.BACK not in _roles(parts)

    def test_no_doors_by_default(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        parts = generate_kitchen_cabinet("cab-1", "f-1", make_params(), cabinet_materials, board)
        assert PartRole.DOOR not in _roles(parts)

    def test_single_door_layout(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(has_doors=True, door_config=DoorConfig(layout=DoorLayout.SINGLE))
        parts = generate_kitchen_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert len(_by_role(parts, PartRole.DOOR)) == 1

    def test_shelf_count_clamped(
        self,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Kitchen cabinets hold at most five legacy shelves."""
        with caplog.at_level(logging.WARNING):
            parts = generate_kitchen_cabinet(
                "cab-1", "f-1", make_params(shelf_count=8), cabinet_materials, board
            )
        assert len(_by_role(parts, PartRole.SHELF)) == 5
        assert "Shelf count 8" in caplog.text

    def test_interior_replaces_legacy_shelves(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        """An interior tree with content wins over shelf_count."""
        interior = CabinetInteriorConfig(root_zone=create_shelves_zone("root", count=3))
        params = make_params(shelf_count=2, interior_config=interior)
        parts = generate_kitchen_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert len(_by_role(parts, PartRole.SHELF)) == 3

    def test_type_mismatch(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        """Wall parameters are rejected before any part is made."""
        params = make_params(CabinetType.WALL)
        with pytest.raises(CabinetTypeMismatchError) as exc_info:
            generate_kitchen_cabinet("cab-1", "f-1", params, cabinet_materials, board)

        assert str(exc_info.value) == "Invalid cabinet type: expected 'kitchen', got 'wall'"
        assert exc_info.value.expected == "kitchen"


class TestBodyPlacement:
    """Body panels are symmetric and close the box for every body type."""

    @pytest.fixture(params=list(ASSEMBLERS))
    def cabinet_type(self, request: pytest.FixtureRequest) -> CabinetType:
        return request.param

    @pytest.mark.parametrize("placement", list(TopBottomPlacement))
    def test_sides_mirror_each_other(
        self,
        cabinet_type: CabinetType,
        placement: TopBottomPlacement,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
    ) -> None:
        params = make_params(cabinet_type, top_bottom_placement=placement, drawer_count=2)
        parts = ASSEMBLERS[cabinet_type]("cab-1", "f-1", params, cabinet_materials, board)
        (left,) = _by_role(parts, PartRole.LEFT_SIDE)
        (right,) = _by_role(parts, PartRole.RIGHT_SIDE)

        assert left.position[0] == -right.position[0] == -291.0
        assert left.position[1:] == right.position[1:]
        flat = _by_role(parts, PartRole.TOP) + _by_role(parts, PartRole.BOTTOM)
        assert all(part.position[0] == 0.0 for part in flat)

    @pytest.mark.parametrize("placement", list(TopBottomPlacement))
    def test_body_fills_outer_size(
        self,
        cabinet_type: CabinetType,
        placement: TopBottomPlacement,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
    ) -> None:
        """Panels span exactly the outer width and height."""
        params = make_params(cabinet_type, top_bottom_placement=placement, drawer_count=2)
        parts = ASSEMBLERS[cabinet_type]("cab-1", "f-1", params, cabinet_materials, board)
        body = {part.role: part for part in parts if part.role in BODY_ROLES}

        top, bottom = body[PartRole.TOP], body[PartRole.BOTTOM]
        left, right = body[PartRole.LEFT_SIDE], body[PartRole.RIGHT_SIDE]
        if placement == TopBottomPlacement.INSET:
            assert top.width + left.depth + right.depth == pytest.approx(600.0)
            assert left.height == pytest.approx(720.0)
        else:
            assert top.width == pytest.approx(600.0)
            assert left.height + top.depth + bottom.depth == pytest.approx(720.0)
        assert top.position[1] + top.depth / 2 == pytest.approx(720.0)
        assert bottom.position[1] - bottom.depth / 2 == pytest.approx(0.0)

    def test_legs_raise_all_parts(
        self,
        cabinet_type: CabinetType,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
        hdf: Material,
    ) -> None:
        """Every non-leg part is shifted up by the leg height."""
        if cabinet_type == CabinetType.WALL:
            pytest.skip("wall cabinets never stand on legs")
        plain = make_params(cabinet_type, drawer_count=2, shelf_count=2, has_doors=True)
        raised = make_params(
            cabinet_type,
            drawer_count=2,
            shelf_count=2,
            has_doors=True,
            legs=create_legs_config(True),
        )
        assembler = ASSEMBLERS[cabinet_type]
        plain_parts = assembler("cab-1", "f-1", plain, cabinet_materials, board, hdf)
        raised_parts = [
            part
            for part in assembler("cab-1", "f-1", raised, cabinet_materials, board, hdf)
            if part.role != PartRole.LEG
        ]

        assert len(plain_parts) == len(raised_parts)
        for before, after in zip(plain_parts, raised_parts):
            assert after.name == before.name
            assert after.position[1] - before.position[1] == pytest.approx(150.0)


class TestWallCabinet:
    """Tests for generate_wall_cabinet."""

    def test_hanger_back_by_default(
        self,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
        hdf: Material,
    ) -> None:
        """Wall backs are notched for hangers unless disabled."""
        parts = generate_wall_cabinet(
            "cab-1", "f-1", make_params(CabinetType.WALL, depth=320.0), cabinet_materials,
            board, hdf,
        )
        (back,) = _by_role(parts, PartRole.BACK)
        assert back.shape_type == ShapeType.POLYGON

    def test_hanger_cutouts_disabled(
        self,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
        hdf: Material,
    ) -> None:
        params = make_params(
            CabinetType.WALL, hanger_cutouts=HangerCutoutConfig(enabled=False)
        )
        parts = generate_wall_cabinet("cab-1", "f-1", params, cabinet_materials, board, hdf)
        (back,) = _by_role(parts, PartRole.BACK)
        assert back.shape_type == ShapeType.RECT

    def test_legs_ignored(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        """Legs are neither generated nor applied to a wall cabinet."""
        params = make_params(CabinetType.WALL, legs=create_legs_config(True))
        parts = generate_wall_cabinet("cab-1", "f-1", params, cabinet_materials, board)

        assert PartRole.LEG not in _roles(parts)
        assert parts[0].position[1] == 9.0

    def test_folding_doors(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        """A folding door config turns the doors into lift-up sections."""
        params = make_params(
            CabinetType.WALL,
            depth=320.0,
            has_doors=True,
            door_config=DoorConfig(layout=DoorLayout.SINGLE),
            folding_door_config=FoldingDoorConfig(split_ratio=0.5, section_gap=3.0),
        )
        parts = generate_wall_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        doors = _by_role(parts, PartRole.DOOR)

        assert [door.name for door in doors] == ["Lower front", "Upper front"]
        assert all(door.height == pytest.approx(356.5) for door in doors)

    def test_folding_config_needs_doors(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(CabinetType.WALL, folding_door_config=FoldingDoorConfig())
        parts = generate_wall_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert PartRole.DOOR not in _roles(parts)


class TestWardrobeAndBookshelf:
    """Tests for the wardrobe and bookshelf assemblers."""

    def test_wardrobe_door_row(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(CabinetType.WARDROBE, width=1200.0, height=2100.0, door_count=3)
        parts = generate_wardrobe_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert [door.name for door in _by_role(parts, PartRole.DOOR)] == [
            "Door 1",
            "Door 2",
            "Door 3",
        ]

    def test_wardrobe_door_count_clamped(
        self,
        make_params: MakeParams,
        cabinet_materials: CabinetMaterials,
        board: Material,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        params = make_params(CabinetType.WARDROBE, width=2000.0, door_count=6)
        with caplog.at_level(logging.WARNING):
            parts = generate_wardrobe_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert len(_by_role(parts, PartRole.DOOR)) == 4
        assert "door count 6" in caplog.text

    def test_bookshelf_has_at_least_one_shelf(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(CabinetType.BOOKSHELF, shelf_count=0)
        parts = generate_bookshelf_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert len(_by_role(parts, PartRole.SHELF)) == 1
        assert PartRole.DOOR not in _roles(parts)

    def test_bookshelf_ignores_has_doors(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(CabinetType.BOOKSHELF, shelf_count=3, has_doors=True)
        parts = generate_bookshelf_cabinet("cab-1", "f-1", params, cabinet_materials, board)
        assert PartRole.DOOR not in _roles(parts)
        assert len(_by_role(parts, PartRole.SHELF)) == 3


class TestDrawerCabinet:
    """Tests for generate_drawer_cabinet and legacy drawer fields."""

    def test_legacy_drawer_count(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(CabinetType.DRAWER, drawer_count=3)
        parts = generate_drawer_cabinet("cab-1", "f-1", params, cabinet_materials, board)

        fronts = _by_role(parts, PartRole.DRAWER_FRONT)
        assert [front.name for front in fronts] == [
            "Drawer front 1",
            "Drawer front 2",
            "Drawer front 3",
        ]
        assert len(_by_role(parts, PartRole.DRAWER_BOTTOM)) == 3

    def test_internal_drawers_have_no_fronts(
        self, make_params: MakeParams, cabinet_materials: CabinetMaterials, board: Material
    ) -> None:
        params = make_params(CabinetType.DRAWER, drawer_count=2, has_internal_drawers=True)
        parts = generate_drawer_cabinet("cab-1", "f-1", params, cabinet_materials, board)

        assert PartRole.DRAWER_FRONT not in _roles(parts)
        assert len(_by_role(parts, PartRole.DRAWER_BOX_FRONT)) == 2

    def test_drawer_config_wins_over_count(self, make_params: MakeParams) -> None:
        params = make_params(
            CabinetType.DRAWER,
            drawer_count=5,
            drawer_config=create_drawer_configuration(2),
        )
        config = legacy_drawer_configuration(params)
        assert config is not None
        assert len(config.zones) == 2

    def test_legacy_bottom_material(self, make_params: MakeParams) -> None:
        params = make_params(CabinetType.DRAWER, drawer_count=2, bottom_material_id="hdf")
        config = legacy_drawer_configuration(params)
        assert config is not None
        assert config.bottom_material_id == "hdf"

    def test_normalized_into_drawers_leaf(self, make_params: MakeParams) -> None:
        interior = normalize_interior(make_params(CabinetType.DRAWER, drawer_count=2))
        assert interior is not None
        assert interior.root_zone.id == "legacy-drawers"

    def test_no_drawers_without_fields(self, make_params: MakeParams) -> None:
        assert normalize_interior(make_params(CabinetType.KITCHEN, drawer_count=2)) is None

    def test_legacy_shelf_count_with_interior(self, make_params: MakeParams) -> None:
        interior = CabinetInteriorConfig(root_zone=create_shelves_zone("root"))
        params = make_params(shelf_count=3, interior_config=interior)
        assert legacy_shelf_count(params, 5) == 0
