"""Output formatters and exporters for generated cabinet parts."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from cabinet_parts.application.dtos import GenerationOutput
from cabinet_parts.domain import GeneratedPart


def _banding_label(part: GeneratedPart) -> str:
    """Short description of the banded edges of a part."""
    banding = part.edge_banding
    edges = getattr(banding, "edges", None)
    if edges is not None:
        return ",".join(f"e{edge}" for edge in sorted(edges)) or "-"
    flags = [
        ("T", banding.top),
        ("B", banding.bottom),
        ("L", banding.left),
        ("R", banding.right),
    ]
    return "".join(label for label, banded in flags if banded) or "-"


class PartListFormatter:
    """Formats the generated parts as a text table."""

    def format(self, output: GenerationOutput) -> str:
        """Format parts as a table followed by a material summary."""
        if not output.parts:
            return "No parts generated."

        request = output.request
        lines = [
            f"PARTS: {request.params.type.value} cabinet '{request.cabinet_id}' "
            f"({request.params.width:g} x {request.params.height:g} x "
            f"{request.params.depth:g} mm)",
            "=" * 96,
            f"{'Part':<24} {'Role':<22} {'W':>8} {'H':>8} {'T':>6} "
            f"{'Material':<12} {'Edges':<6}",
            "-" * 96,
        ]
        for part in output.parts:
            lines.append(
                f"{part.name:<24} {part.role.value:<22} {part.width:>8.1f} "
                f"{part.height:>8.1f} {part.depth:>6.1f} {part.material_id:<12} "
                f"{_banding_label(part):<6}"
            )
        lines.append("-" * 96)
        lines.append(f"{output.part_count} parts")
        lines.append("")
        lines.append(MaterialUsageFormatter().format(output))
        return "\n".join(lines)


class MaterialUsageFormatter:
    """Formats the panel area used per material."""

    def format(self, output: GenerationOutput) -> str:
        usage = output.material_usage()
        lines = ["MATERIAL USAGE", "=" * 40]
        for material_id, area in sorted(usage.items()):
            lines.append(f"  {material_id:<20} {area:>10.3f} m2")
        lines.append("-" * 40)
        lines.append(f"  {'TOTAL':<20} {sum(usage.values()):>10.3f} m2")
        return "\n".join(lines)


class CsvCutListExporter:
    """Exports the parts as a CSV cut list, one row per part."""

    HEADER = [
        "Name",
        "Role",
        "Shape",
        "Width",
        "Height",
        "Thickness",
        "Material",
        "Edge Banding",
        "X",
        "Y",
        "Z",
    ]

    def export(self, output: GenerationOutput) -> str:
        """Format parts as CSV.

        Args:
            output: Generation output to export.

        Returns:
            CSV formatted string.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(self.HEADER)
        for part in output.parts:
            x, y, z = part.position
            writer.writerow(
                [
                    part.name,
                    part.role.value,
                    part.shape_type.value,
                    f"{part.width:.1f}",
                    f"{part.height:.1f}",
                    f"{part.depth:.1f}",
                    part.material_id,
                    _banding_label(part),
                    f"{x:.1f}",
                    f"{y:.1f}",
                    f"{z:.1f}",
                ]
            )
        return buffer.getvalue()


class JsonExporter:
    """Exports the generated parts as JSON."""

    def export(self, output: GenerationOutput) -> str:
        """Export generation output as a JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)

        request = output.request
        data: dict[str, Any] = {
            "cabinet": {
                "cabinet_id": request.cabinet_id,
                "furniture_id": request.furniture_id,
                "type": request.params.type.value,
                "width": request.params.width,
                "height": request.params.height,
                "depth": request.params.depth,
                "body_thickness": request.body_material.thickness,
            },
            "parts": [part.to_dict() for part in output.parts],
            "material_usage_m2": {
                material_id: round(area, 4)
                for material_id, area in sorted(output.material_usage().items())
            },
        }
        return json.dumps(data, indent=2)
