"""Infrastructure layer - output formatters."""

from .formatters import (
    CsvCutListExporter,
    JsonExporter,
    MaterialUsageFormatter,
    PartListFormatter,
)

__all__ = [
    "CsvCutListExporter",
    "JsonExporter",
    "MaterialUsageFormatter",
    "PartListFormatter",
]
