"""Unit tests for shelf and interior generation.

These tests verify:
- Legacy shelves are evenly spaced between bottom and top
- Zone shelves follow the UNIFORM and MANUAL position rules
- Shelf depth presets push shallow shelves against the back
- Drawer zones are stacked inside their leaf
- Partitions are emitted only when requested but always reserve width
"""

import pytest

from cabinet_parts.domain.constants import FRONT_MARGIN
from cabinet_parts.domain.generators import (
    InteriorGenerationConfig,
    calculate_shelf_positions,
    generate_interior,
    generate_legacy_shelves,
    interior_bounds,
)
from cabinet_parts.domain.generators._common import PartFactory
from cabinet_parts.domain.services import (
    create_drawer_configuration,
    create_drawers_zone,
    create_nested_zone,
    create_shelves_zone,
)
from cabinet_parts.domain.value_objects import (
    CabinetInteriorConfig,
    InteriorZone,
    PartitionConfig,
    PartRole,
    ShelfConfig,
    ShelfDepthPreset,
    ShelvesConfiguration,
    ShelvesMode,
    ZoneDivisionDirection,
)


def _interior(root: InteriorZone, **overrides: object) -> InteriorGenerationConfig:
    values: dict[str, object] = {
        "cabinet_id": "cab-1",
        "furniture_id": "f-1",
        "cabinet_width": 600.0,
        "cabinet_height": 720.0,
        "cabinet_depth": 560.0,
        "body_material_id": "board",
        "front_material_id": "front",
        "body_thickness": 18.0,
        "front_thickness": 18.0,
        "interior_config": CabinetInteriorConfig(root_zone=root),
    }
    values.update(overrides)
    return InteriorGenerationConfig(**values)  # type: ignore[arg-type]


def _two_columns(emit: bool = False) -> InteriorGenerationConfig:
    root = create_nested_zone(
        "root",
        ZoneDivisionDirection.VERTICAL,
        [create_shelves_zone("left", count=2), create_shelves_zone("right", count=3)],
        partitions=[PartitionConfig(enabled=True)],
    )
    return _interior(root, emit_partitions=emit)


class TestLegacyShelves:
    """Tests for generate_legacy_shelves."""

    def _shelves(self, count: int, **kwargs: float) -> list:
        return generate_legacy_shelves(
            PartFactory("cab-1", "f-1"),
            count,
            cabinet_width=kwargs.get("width", 800.0),
            cabinet_height=720.0,
            cabinet_depth=580.0,
            thickness=18.0,
            material_id="board",
            leg_offset=kwargs.get("leg_offset", 0.0),
        )

    def test_single_shelf_in_the_middle(self) -> None:
        """One shelf in a 720mm cabinet sits at half height."""
        (shelf,) = self._shelves(1)

        assert shelf.name == "Shelf 1"
        assert shelf.role == PartRole.SHELF
        assert shelf.position == pytest.approx((0.0, 360.0, -5.0))
        assert shelf.width == 764.0
        assert shelf.height == 570.0

    def test_even_spacing(self) -> None:
        """Shelves split the interior into equal gaps."""
        shelves = self._shelves(3)
        ys = [18.0] + [shelf.position[1] for shelf in shelves] + [702.0]
        gaps = [upper - lower for lower, upper in zip(ys, ys[1:])]
        assert gaps == pytest.approx([171.0] * 4)

    def test_leg_offset(self) -> None:
        (shelf,) = self._shelves(1, leg_offset=100.0)
        assert shelf.position[1] == pytest.approx(460.0)

    def test_no_shelves(self) -> None:
        assert self._shelves(0) == []

    def test_front_edge_banded(self) -> None:
        (shelf,) = self._shelves(1)
        assert shelf.edge_banding.top
        assert not (shelf.edge_banding.bottom or shelf.edge_banding.left)


class TestShelfPositions:
    """Tests for calculate_shelf_positions."""

    def test_uniform_single_shelf_centred(self) -> None:
        positions = calculate_shelf_positions(ShelvesConfiguration(count=1), 100.0, 400.0)
        assert positions == [300.0]

    def test_uniform_spread(self) -> None:
        """Uniform shelves start at 5% of the zone height."""
        positions = calculate_shelf_positions(ShelvesConfiguration(count=2), 0.0, 1000.0)
        assert positions == pytest.approx([50.0, 525.0])

    def test_uniform_zero(self) -> None:
        assert calculate_shelf_positions(ShelvesConfiguration(count=0), 0.0, 1000.0) == []

    def test_manual_positions_in_mm(self) -> None:
        """Manual positions are millimetres above the zone bottom."""
        config = ShelvesConfiguration(
            mode=ShelvesMode.MANUAL,
            shelves=(ShelfConfig(position_y=100.0), ShelfConfig(position_y=300.0)),
        )
        positions = calculate_shelf_positions(config, 18.0, 684.0)
        assert positions == pytest.approx([118.0, 318.0])

    def test_manual_without_position(self) -> None:
        """Shelves without a position are spread evenly."""
        config = ShelvesConfiguration(
            mode=ShelvesMode.MANUAL,
            shelves=(ShelfConfig(position_y=100.0), ShelfConfig()),
        )
        positions = calculate_shelf_positions(config, 18.0, 684.0)
        assert positions == pytest.approx([118.0, 18.0 + 684.0 * 2 / 3])


class TestGenerateInterior:
    """Tests for generate_interior."""

    def test_no_interior(self) -> None:
        config = _interior(create_shelves_zone("root"), interior_config=None)
        assert generate_interior(config) == []

    def test_bounds_between_body_panels(self) -> None:
        bounds = interior_bounds(_interior(create_shelves_zone("root")))
        assert (bounds.start_x, bounds.start_y) == (-282.0, 18.0)
        assert (bounds.width, bounds.height) == (564.0, 684.0)

    def test_uniform_shelves(self) -> None:
        """Shelves span the interior and sit against the back."""
        parts = generate_interior(_interior(create_shelves_zone("root", count=2)))

        assert [part.name for part in parts] == ["Shelf 1", "Shelf 2"]
        assert [part.position[1] for part in parts] == pytest.approx([52.2, 377.1])
        assert all(part.width == 564.0 for part in parts)
        assert all(part.height == 550.0 for part in parts)
        assert all(part.position[2] == pytest.approx(-5.0) for part in parts)

    def test_half_depth_shelves_recessed(self) -> None:
        """A half-depth shelf keeps its back edge on the cabinet back."""
        zone = create_shelves_zone("root", count=1, depth_preset=ShelfDepthPreset.HALF)
        (shelf,) = generate_interior(_interior(zone))

        assert shelf.height == 275.0
        assert shelf.position[2] == pytest.approx(-142.5)
        assert shelf.position[2] - shelf.height / 2 == pytest.approx(-280.0)

    def test_custom_depth_is_clamped(self) -> None:
        zone = create_shelves_zone(
            "root", count=1, depth_preset=ShelfDepthPreset.CUSTOM, custom_depth=40.0
        )
        (shelf,) = generate_interior(_interior(zone))
        assert shelf.height == 100.0

    def test_shelf_material_override(self) -> None:
        zone = create_shelves_zone("root", count=1, material_id="glass")
        (shelf,) = generate_interior(_interior(zone))
        assert shelf.material_id == "glass"

    def test_leg_offset(self) -> None:
        plain = generate_interior(_interior(create_shelves_zone("root", count=1)))
        raised = generate_interior(
            _interior(create_shelves_zone("root", count=1), leg_offset=120.0)
        )
        assert raised[0].position[1] - plain[0].position[1] == pytest.approx(120.0)

    def test_drawers_in_bottom_row(self) -> None:
        """Drawers in a row are sized to that row and sit inside it."""
        root = create_nested_zone(
            "root",
            ZoneDivisionDirection.HORIZONTAL,
            [
                create_drawers_zone("drawers", create_drawer_configuration(2)),
                create_shelves_zone("shelves", count=1),
            ],
        )
        parts = generate_interior(_interior(root))

        fronts = [part for part in parts if part.role == PartRole.DRAWER_FRONT]
        assert len(fronts) == 2
        front_width = 564.0 + 36.0 - 2 * FRONT_MARGIN
        assert all(front.width == pytest.approx(front_width) for front in fronts)
        assert all(front.position[0] == pytest.approx(0.0) for front in fronts)
        assert all(front.position[1] < 18.0 + 342.0 for front in fronts)

        shelves = [part for part in parts if part.role == PartRole.SHELF]
        assert shelves[0].position[1] == pytest.approx(18.0 + 342.0 + 171.0)

    def test_drawers_in_column_are_centred_on_it(self) -> None:
        """A drawer stack in a column is shifted to the column centre."""
        root = create_nested_zone(
            "root",
            ZoneDivisionDirection.VERTICAL,
            [
                create_drawers_zone("drawers", create_drawer_configuration(1)),
                create_shelves_zone("shelves", count=1),
            ],
        )
        parts = generate_interior(_interior(root))

        (front,) = [part for part in parts if part.role == PartRole.DRAWER_FRONT]
        assert front.position[0] == pytest.approx(-282.0 + 141.0)
        assert front.width == pytest.approx(282.0 + 36.0 - 2 * FRONT_MARGIN)


class TestPartitions:
    """Tests for partitions between columns."""

    def test_partition_reserves_width_without_part(self) -> None:
        """Without emit_partitions no part is made but the gap stays."""
        parts = generate_interior(_two_columns(emit=False))

        assert all(part.role != PartRole.PARTITION for part in parts)
        assert all(part.width == pytest.approx(273.0) for part in parts)

    def test_partition_part(self) -> None:
        """An emitted partition stands between the columns."""
        parts = generate_interior(_two_columns(emit=True))

        partitions = [part for part in parts if part.role == PartRole.PARTITION]
        assert len(partitions) == 1
        partition = partitions[0]
        assert partition.name == "Partition"
        assert partition.position == pytest.approx((0.0, 360.0, -5.0))
        assert (partition.width, partition.height, partition.depth) == (550.0, 684.0, 18.0)
        assert parts[-1] is partition

    def test_columns_do_not_overlap_partition(self) -> None:
        """Shelves end exactly at the partition faces."""
        parts = generate_interior(_two_columns(emit=True))
        left = next(part for part in parts if part.role == PartRole.SHELF)
        right = [part for part in parts if part.role == PartRole.SHELF][-1]

        assert left.position[0] + left.width / 2 == pytest.approx(-9.0)
        assert right.position[0] - right.width / 2 == pytest.approx(9.0)

    def test_disabled_partition_reserves_nothing(self) -> None:
        root = create_nested_zone(
            "root",
            ZoneDivisionDirection.VERTICAL,
            [create_shelves_zone("left", count=1), create_shelves_zone("right", count=1)],
        )
        parts = generate_interior(_interior(root, emit_partitions=True))

        assert all(part.width == pytest.approx(282.0) for part in parts)
        assert all(part.role != PartRole.PARTITION for part in parts)
