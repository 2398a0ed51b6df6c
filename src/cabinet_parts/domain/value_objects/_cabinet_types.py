"""Cabinet type and body construction enums."""

from __future__ import annotations

from enum import Enum


class CabinetType(str, Enum):
    KITCHEN = "kitchen"
    WARDROBE = "wardrobe"
    BOOKSHELF = "bookshelf"
    DRAWER = "drawer"
    WALL = "wall"
    CORNER_INTERNAL = "corner_internal"


class TopBottomPlacement(str, Enum):
    """How top and bottom panels meet the sides.

    Attributes:
        INSET: Top and bottom fit between the sides.
        OVERLAY: Top and bottom sit over the side edges.
    """

    INSET = "inset"
    OVERLAY = "overlay"


class BackMountType(str, Enum):
    OVERLAP = "overlap"
    DADO = "dado"
