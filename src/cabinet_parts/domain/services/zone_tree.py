"""Interior zone tree layout, queries and pure updaters.

The layout algorithm works like a simple flex box: each NESTED zone hands
out its span to its children, first to children with an exact size, then
to the rest by ratio. Enabled partitions between columns reserve one body
thickness of width.

Updaters never modify a zone; they return a rebuilt tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterator

from ..constants import (
    MAX_CHILDREN_PER_ZONE,
    MAX_SHELVES_PER_ZONE,
    MAX_ZONE_DEPTH,
    MIN_ZONE_HEIGHT_MM,
    MIN_ZONE_WIDTH_MM,
)
from ..validation import ValidationResult
from ..value_objects import (
    CabinetInteriorConfig,
    DrawerConfiguration,
    InteriorZone,
    PartitionConfig,
    ShelvesConfiguration,
    ZoneContentType,
    ZoneDivisionDirection,
    ZoneHeightMode,
    ZoneWidthMode,
)
from .drawers import validate_drawer_configuration
from .measurements import resolve_partition_depth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParentBounds:
    """Span handed to a zone by its parent."""

    start_x: float
    start_y: float
    width: float
    height: float


@dataclass(frozen=True)
class ZoneBounds:
    """Placement of a leaf zone inside the cabinet interior.

    Attributes:
        zone: The leaf zone.
        start_x: Left edge in body coordinates.
        start_y: Bottom edge in body coordinates, before the leg offset.
        width: Width of the leaf.
        height: Height of the leaf.
    """

    zone: InteriorZone
    start_x: float
    start_y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.start_x + self.width / 2


@dataclass(frozen=True)
class PartitionBounds:
    """Placement of an enabled partition between two columns.

    Attributes:
        partition: The partition configuration.
        x: Centre of the partition along X.
        start_y: Bottom edge of the partition.
        height: Height of the partition.
        depth_mm: Resolved partition depth.
    """

    partition: PartitionConfig
    x: float
    start_y: float
    height: float
    depth_mm: float


@dataclass(frozen=True)
class ZoneTreeLayout:
    """Leaf and partition placements of a whole zone tree."""

    leaves: tuple[ZoneBounds, ...]
    partitions: tuple[PartitionBounds, ...]


# ============================================================================
# Distribution
# ============================================================================


def _distribute(
    total: float,
    exact: list[float | None],
    ratios: list[float],
) -> list[float]:
    """Share ``total`` between children with exact sizes and ratios.

    Exact sizes are granted in order, each limited to what is left. The rest
    is split by ratio among the other children, evenly when their ratios
    sum to zero. If every child has an exact size, any space they leave is
    added to the last child so the span is always fully covered.
    """
    if not exact:
        return []

    sizes: list[float | None] = []
    remaining = max(total, 0.0)
    for size in exact:
        if size is None:
            sizes.append(None)
            continue
        granted = min(size, remaining)
        sizes.append(granted)
        remaining -= granted

    flexible = [i for i, size in enumerate(sizes) if size is None]
    if not flexible:
        result = [size or 0.0 for size in sizes]
        result[-1] += remaining
        return result

    total_ratio = sum(ratios[i] for i in flexible)
    for i in flexible:
        if total_ratio > 0:
            sizes[i] = ratios[i] / total_ratio * remaining
        else:
            sizes[i] = remaining / len(flexible)
    return [size or 0.0 for size in sizes]


def distribute_heights(
    children: tuple[InteriorZone, ...] | list[InteriorZone], total_height: float
) -> list[float]:
    """Heights of stacked rows, bottom to top.

    EXACT children get their height first; RATIO children share the rest.
    """
    exact: list[float | None] = []
    ratios: list[float] = []
    for child in children:
        config = child.height_config
        if config.mode == ZoneHeightMode.EXACT and config.exact_mm:
            exact.append(config.exact_mm)
        else:
            exact.append(None)
        ratios.append(config.ratio)
    return _distribute(total_height, exact, ratios)


def reserved_partition_width(zone: InteriorZone, body_thickness: float) -> float:
    """Width taken by the enabled partitions between a zone's columns."""
    enabled = sum(1 for p in zone.partitions[: max(0, len(zone.children) - 1)] if p.enabled)
    return enabled * body_thickness


def distribute_widths(
    zone: InteriorZone, total_width: float, body_thickness: float
) -> list[float]:
    """Widths of side-by-side columns, left to right.

    Enabled partitions are subtracted first. FIXED children then get their
    width; PROPORTIONAL children share the rest.
    """
    available = total_width - reserved_partition_width(zone, body_thickness)
    exact: list[float | None] = []
    ratios: list[float] = []
    for child in zone.children:
        config = child.width_config
        if config is not None and config.mode == ZoneWidthMode.FIXED and config.fixed_mm:
            exact.append(config.fixed_mm)
        else:
            exact.append(None)
        ratios.append(config.ratio if config is not None else 1.0)
    return _distribute(available, exact, ratios)


# ============================================================================
# Layout
# ============================================================================


def calculate_zone_layout(
    zone: InteriorZone,
    bounds: ParentBounds,
    body_thickness: float,
    cabinet_depth: float,
) -> ZoneTreeLayout:
    """Lay out a zone tree inside the given bounds.

    Args:
        zone: Root of the tree.
        bounds: Span available to the root.
        body_thickness: Partition thickness.
        cabinet_depth: Cabinet depth, for resolving partition depths.

    Returns:
        ZoneTreeLayout with one ZoneBounds per leaf, in tree order, and one
        PartitionBounds per enabled partition.
    """
    leaves: list[ZoneBounds] = []
    partitions: list[PartitionBounds] = []

    def visit(node: InteriorZone, span: ParentBounds) -> None:
        if node.is_leaf:
            leaves.append(
                ZoneBounds(node, span.start_x, span.start_y, span.width, span.height)
            )
            return

        if node.division_direction == ZoneDivisionDirection.VERTICAL:
            widths = distribute_widths(node, span.width, body_thickness)
            current_x = span.start_x
            for i, child in enumerate(node.children):
                visit(child, ParentBounds(current_x, span.start_y, widths[i], span.height))
                current_x += widths[i]
                partition = node.partition_at(i)
                if partition is not None and partition.enabled:
                    partitions.append(
                        PartitionBounds(
                            partition=partition,
                            x=current_x + body_thickness / 2,
                            start_y=span.start_y,
                            height=span.height,
                            depth_mm=resolve_partition_depth(partition, cabinet_depth),
                        )
                    )
                    current_x += body_thickness
        else:
            heights = distribute_heights(node.children, span.height)
            current_y = span.start_y
            for i, child in enumerate(node.children):
                visit(child, ParentBounds(span.start_x, current_y, span.width, heights[i]))
                current_y += heights[i]

    visit(zone, bounds)
    return ZoneTreeLayout(leaves=tuple(leaves), partitions=tuple(partitions))


def calculate_zone_bounds(
    zone: InteriorZone,
    bounds: ParentBounds,
    body_thickness: float,
    cabinet_depth: float = 0.0,
) -> list[ZoneBounds]:
    """Bounds of every leaf zone, in tree order."""
    return list(calculate_zone_layout(zone, bounds, body_thickness, cabinet_depth).leaves)


# ============================================================================
# Queries
# ============================================================================


def has_interior_content(config: CabinetInteriorConfig | None) -> bool:
    """True if an interior tree holds anything that produces parts."""
    if config is None:
        return False
    return _has_content(config.root_zone)


def _has_content(zone: InteriorZone) -> bool:
    if zone.content_type == ZoneContentType.SHELVES:
        return zone.shelves_config is not None and zone.shelves_config.count > 0
    if zone.content_type == ZoneContentType.DRAWERS:
        return zone.drawer_config is not None and len(zone.drawer_config.zones) > 0
    if zone.content_type == ZoneContentType.NESTED:
        return any(_has_content(child) for child in zone.children)
    return False


def find_zone(zone: InteriorZone, zone_id: str) -> InteriorZone | None:
    if zone.id == zone_id:
        return zone
    for child in zone.children:
        found = find_zone(child, zone_id)
        if found is not None:
            return found
    return None


def iter_zones(zone: InteriorZone) -> Iterator[InteriorZone]:
    """Yield every zone of the tree, depth first."""
    yield zone
    for child in zone.children:
        yield from iter_zones(child)


def count_leaves(zone: InteriorZone) -> int:
    return sum(1 for node in iter_zones(zone) if node.is_leaf)


def max_depth(zone: InteriorZone) -> int:
    return max(node.depth for node in iter_zones(zone))


# ============================================================================
# Validation
# ============================================================================


def validate_zone(zone: InteriorZone) -> ValidationResult:
    """Validate a single zone, not its children."""
    errors: list[str] = []
    warnings: list[str] = []

    if zone.depth >= MAX_ZONE_DEPTH:
        errors.append(
            f"Zone '{zone.id}' depth {zone.depth} exceeds maximum {MAX_ZONE_DEPTH - 1}"
        )

    height = zone.height_config
    if height.mode == ZoneHeightMode.RATIO and height.ratio <= 0:
        errors.append(f"Zone '{zone.id}': height ratio must be positive")
    if height.mode == ZoneHeightMode.EXACT and (height.exact_mm or 0) < MIN_ZONE_HEIGHT_MM:
        errors.append(
            f"Zone '{zone.id}': exact height must be at least {MIN_ZONE_HEIGHT_MM:g}mm"
        )

    width = zone.width_config
    if (
        width is not None
        and width.mode == ZoneWidthMode.FIXED
        and (width.fixed_mm or 0) < MIN_ZONE_WIDTH_MM
    ):
        errors.append(
            f"Zone '{zone.id}': fixed width must be at least {MIN_ZONE_WIDTH_MM:g}mm"
        )

    if zone.content_type == ZoneContentType.NESTED:
        if not zone.children:
            errors.append(f"Zone '{zone.id}': nested zone must have at least one child")
        if len(zone.children) > MAX_CHILDREN_PER_ZONE:
            errors.append(
                f"Zone '{zone.id}' has {len(zone.children)} children, "
                f"max is {MAX_CHILDREN_PER_ZONE}"
            )
        if zone.division_direction is None:
            warnings.append(
                f"Zone '{zone.id}': no division direction, rows are assumed"
            )
        if zone.division_direction != ZoneDivisionDirection.VERTICAL and any(
            p.enabled for p in zone.partitions
        ):
            warnings.append(
                f"Zone '{zone.id}': partitions only apply to vertical divisions"
            )
        for child in zone.children:
            if child.depth != zone.depth + 1:
                errors.append(
                    f"Zone '{child.id}' depth {child.depth} does not follow "
                    f"parent depth {zone.depth}"
                )
    elif zone.children:
        warnings.append(f"Zone '{zone.id}': children of a leaf zone are ignored")

    if zone.content_type == ZoneContentType.SHELVES:
        if zone.shelves_config is None:
            warnings.append(f"Zone '{zone.id}': shelves zone has no shelf configuration")
        elif zone.shelves_config.count > MAX_SHELVES_PER_ZONE:
            errors.append(
                f"Zone '{zone.id}': cannot have more than {MAX_SHELVES_PER_ZONE} shelves"
            )

    if zone.content_type == ZoneContentType.DRAWERS:
        if zone.drawer_config is None:
            warnings.append(f"Zone '{zone.id}': drawers zone has no drawer configuration")
        else:
            drawers = validate_drawer_configuration(zone.drawer_config)
            errors.extend(f"Zone '{zone.id}': {error}" for error in drawers.errors)

    return ValidationResult.from_messages(errors, warnings)


def validate_zone_tree(zone: InteriorZone) -> ValidationResult:
    """Validate a zone and all of its descendants."""
    result = validate_zone(zone)
    for child in zone.children:
        result = result.merge(validate_zone_tree(child))
    return result


# ============================================================================
# Creators and pure updaters
# ============================================================================


def create_shelves_zone(
    zone_id: str, count: int = 2, depth: int = 0, **shelves: object
) -> InteriorZone:
    """Create a SHELVES leaf."""
    return InteriorZone(
        id=zone_id,
        content_type=ZoneContentType.SHELVES,
        shelves_config=ShelvesConfiguration(count=count, **shelves),  # type: ignore[arg-type]
        depth=depth,
    )


def create_drawers_zone(
    zone_id: str, drawer_config: DrawerConfiguration, depth: int = 0
) -> InteriorZone:
    """Create a DRAWERS leaf."""
    return InteriorZone(
        id=zone_id,
        content_type=ZoneContentType.DRAWERS,
        drawer_config=drawer_config,
        depth=depth,
    )


def create_nested_zone(
    zone_id: str,
    direction: ZoneDivisionDirection,
    children: list[InteriorZone] | tuple[InteriorZone, ...],
    depth: int = 0,
    partitions: list[PartitionConfig] | tuple[PartitionConfig, ...] | None = None,
) -> InteriorZone:
    """Create a NESTED zone, re-levelling the children below it.

    Missing partitions are filled with disabled ones.
    """
    leveled = tuple(with_depth(child, depth + 1) for child in children)
    return InteriorZone(
        id=zone_id,
        content_type=ZoneContentType.NESTED,
        division_direction=direction,
        children=leveled,
        partitions=_fit_partitions(tuple(partitions or ()), len(leveled)),
        depth=depth,
    )


def with_depth(zone: InteriorZone, depth: int) -> InteriorZone:
    """Return ``zone`` with ``depth`` set, and its children re-levelled."""
    children = tuple(with_depth(child, depth + 1) for child in zone.children)
    return replace(zone, depth=depth, children=children)


def _fit_partitions(
    partitions: tuple[PartitionConfig, ...], child_count: int
) -> tuple[PartitionConfig, ...]:
    wanted = max(0, child_count - 1)
    if len(partitions) >= wanted:
        return partitions[:wanted]
    return partitions + tuple(PartitionConfig() for _ in range(wanted - len(partitions)))


def update_zone(
    root: InteriorZone,
    zone_id: str,
    updater: Callable[[InteriorZone], InteriorZone],
) -> InteriorZone:
    """Rebuild the tree with the zone ``zone_id`` replaced by ``updater(zone)``.

    Returns ``root`` itself when no zone has that id.
    """
    if root.id == zone_id:
        return updater(root)
    if not root.children:
        return root
    children = tuple(update_zone(child, zone_id, updater) for child in root.children)
    if all(new is old for new, old in zip(children, root.children)):
        return root
    return replace(root, children=children)


def replace_zone(root: InteriorZone, zone: InteriorZone) -> InteriorZone:
    """Rebuild the tree with the zone of the same id swapped for ``zone``."""

    def swap(old: InteriorZone) -> InteriorZone:
        return with_depth(zone, old.depth)

    return update_zone(root, zone.id, swap)


def add_child(zone: InteriorZone, child: InteriorZone | None = None) -> InteriorZone:
    """Append a child to a NESTED zone.

    A disabled partition is added alongside, keeping one partition per pair
    of adjacent children. Zones that are not NESTED, or already hold the
    maximum number of children, are returned unchanged.
    """
    if zone.content_type != ZoneContentType.NESTED:
        return zone
    if len(zone.children) >= MAX_CHILDREN_PER_ZONE:
        logger.warning(
            f"Zone '{zone.id}' already has {MAX_CHILDREN_PER_ZONE} children"
        )
        return zone

    new_child = child or InteriorZone(id=f"{zone.id}-{len(zone.children) + 1}")
    children = zone.children + (with_depth(new_child, zone.depth + 1),)
    return replace(
        zone,
        children=children,
        partitions=_fit_partitions(zone.partitions, len(children)),
    )


def remove_child(zone: InteriorZone, child_id: str) -> InteriorZone:
    """Remove a child from a NESTED zone, keeping at least one child.

    The partition that separated the removed child from its neighbour goes
    with it.
    """
    if zone.content_type != ZoneContentType.NESTED or len(zone.children) <= 1:
        return zone
    index = next((i for i, c in enumerate(zone.children) if c.id == child_id), None)
    if index is None:
        return zone

    children = zone.children[:index] + zone.children[index + 1 :]
    partitions = _fit_partitions(zone.partitions, len(zone.children))
    drop = index if index < len(partitions) else index - 1
    partitions = partitions[:drop] + partitions[drop + 1 :]
    return replace(zone, children=children, partitions=partitions)


def set_division(zone: InteriorZone, direction: ZoneDivisionDirection) -> InteriorZone:
    """Change how a NESTED zone splits its space."""
    if zone.content_type != ZoneContentType.NESTED:
        return zone
    return replace(
        zone,
        division_direction=direction,
        partitions=_fit_partitions(zone.partitions, len(zone.children)),
    )
