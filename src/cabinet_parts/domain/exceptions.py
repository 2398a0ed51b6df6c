"""Exceptions raised by the part generation engine."""

from __future__ import annotations


class CabinetGenerationError(Exception):
    """Base class for errors raised while generating cabinet parts."""


class CabinetTypeMismatchError(CabinetGenerationError):
    """Raised when an assembler receives parameters for another cabinet type.

    This signals a caller bug rather than a recoverable condition, so the
    assembler fails before producing any parts.

    Attributes:
        expected: The cabinet type the assembler handles.
        actual: The cabinet type carried by the parameters.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid cabinet type: expected '{expected}', got '{actual}'"
        )


class UnknownCabinetTypeError(CabinetGenerationError):
    """Raised when no assembler is registered for a cabinet type."""

    def __init__(self, cabinet_type: str) -> None:
        self.cabinet_type = cabinet_type
        super().__init__(f"No generator registered for cabinet type '{cabinet_type}'")
