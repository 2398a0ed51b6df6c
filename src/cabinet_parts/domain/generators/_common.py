"""Shared building blocks for part generators."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import ROTATION_FRONT
from ..value_objects import (
    CabinetPartMetadata,
    CoordinateFrame,
    EdgeBanding,
    EdgeBandingRect,
    GeneratedPart,
    PartRole,
    PolygonShape,
    RectShape,
)
from ..value_objects._parts import Vector3

FULL_BANDING = EdgeBandingRect(top=True, bottom=True, left=True, right=True)
NO_BANDING = EdgeBandingRect()
SHELF_BANDING = EdgeBandingRect(top=True)
DRAWER_BOX_BANDING = EdgeBandingRect(top=True)
VISIBLE_SIDE_BANDING = EdgeBandingRect(top=True, left=True, right=True)


@dataclass(frozen=True)
class PartFactory:
    """Stamps cabinet identity and coordinate frame onto new parts.

    Attributes:
        cabinet_id: Owning cabinet; also used as the part group.
        furniture_id: Furniture the cabinet belongs to.
        frame: Coordinate frame the generator works in.
    """

    cabinet_id: str
    furniture_id: str
    frame: CoordinateFrame = CoordinateFrame.BODY

    def rect(
        self,
        name: str,
        role: PartRole,
        width: float,
        height: float,
        thickness: float,
        position: Vector3,
        material_id: str,
        *,
        rotation: Vector3 = ROTATION_FRONT,
        edge_banding: EdgeBanding = NO_BANDING,
        **metadata: object,
    ) -> GeneratedPart:
        """Create a rectangular part.

        Args:
            name: Human-readable label.
            role: Role within the cabinet.
            width: Local width of the rectangle.
            height: Local height of the rectangle.
            thickness: Material thickness along the local normal.
            position: Centre of the part.
            material_id: Material of the part.
            rotation: Euler rotation placing the panel in its plane.
            edge_banding: Banded edges.
            **metadata: Extra CabinetPartMetadata fields (index, ...).

        Returns:
            The new part.
        """
        return GeneratedPart(
            name=name,
            furniture_id=self.furniture_id,
            group=self.cabinet_id,
            shape_params=RectShape(width=width, height=height),
            width=width,
            height=height,
            depth=thickness,
            position=position,
            rotation=rotation,
            material_id=material_id,
            edge_banding=edge_banding,
            cabinet_metadata=CabinetPartMetadata(
                cabinet_id=self.cabinet_id, role=role, **metadata  # type: ignore[arg-type]
            ),
            frame=self.frame,
        )

    def polygon(
        self,
        name: str,
        role: PartRole,
        points: list[tuple[float, float]],
        thickness: float,
        position: Vector3,
        material_id: str,
        *,
        rotation: Vector3 = ROTATION_FRONT,
        edge_banding: EdgeBanding = NO_BANDING,
        **metadata: object,
    ) -> GeneratedPart:
        """Create a polygon part; width and height are the point extents."""
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return GeneratedPart(
            name=name,
            furniture_id=self.furniture_id,
            group=self.cabinet_id,
            shape_params=PolygonShape(points=tuple(points)),
            width=max(xs) - min(xs),
            height=max(ys) - min(ys),
            depth=thickness,
            position=position,
            rotation=rotation,
            material_id=material_id,
            edge_banding=edge_banding,
            cabinet_metadata=CabinetPartMetadata(
                cabinet_id=self.cabinet_id, role=role, **metadata  # type: ignore[arg-type]
            ),
            frame=self.frame,
        )
