"""Shared dimension helpers."""

from __future__ import annotations

import math

from ..constants import CUSTOM_SHELF_DEPTH_MIN, PARTITION_DEPTH_MIN, SHELF_SETBACK
from ..value_objects import PartitionConfig, PartitionDepthPreset, ShelfDepthPreset


def round_half_up(value: float) -> float:
    """Round to the nearest whole millimetre, halves rounding up.

    Python's ``round`` rounds halves to even; dimension math expects
    ``2.5`` to become ``3``.
    """
    return float(math.floor(value + 0.5))


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``.

    When the range is empty the minimum wins.
    """
    return max(minimum, min(value, maximum))


def max_shelf_depth(cabinet_depth: float) -> float:
    """Depth of a FULL shelf: the cabinet depth minus the front setback."""
    return cabinet_depth - SHELF_SETBACK


def resolve_shelf_depth(
    preset: ShelfDepthPreset,
    custom_depth: float | None,
    cabinet_depth: float,
) -> float:
    """Resolve a shelf depth preset to millimetres.

    Args:
        preset: FULL, HALF or CUSTOM.
        custom_depth: Depth for CUSTOM; half depth when missing.
        cabinet_depth: Outer depth of the cabinet.

    Returns:
        Shelf depth in mm. CUSTOM depths are clamped between
        CUSTOM_SHELF_DEPTH_MIN and the FULL depth.
    """
    base = max_shelf_depth(cabinet_depth)
    if preset == ShelfDepthPreset.HALF:
        return round_half_up(base / 2)
    if preset == ShelfDepthPreset.CUSTOM:
        depth = custom_depth if custom_depth is not None else round_half_up(base / 2)
        return clamp(depth, CUSTOM_SHELF_DEPTH_MIN, base)
    return base


def resolve_partition_depth(partition: PartitionConfig, cabinet_depth: float) -> float:
    """Resolve a partition depth preset to millimetres."""
    base = max_shelf_depth(cabinet_depth)
    if partition.depth_preset == PartitionDepthPreset.HALF:
        return round_half_up(base / 2)
    if partition.depth_preset == PartitionDepthPreset.CUSTOM:
        depth = (
            partition.custom_depth if partition.custom_depth is not None else base / 2
        )
        return clamp(depth, PARTITION_DEPTH_MIN, base)
    return base


def recessed_center_z(cabinet_depth: float, part_depth: float) -> float:
    """Z centre of an interior part whose back edge meets the cabinet back.

    Shelves and partitions shallower than the cabinet leave their setback
    at the front.
    """
    return -(cabinet_depth - part_depth) / 2
