"""Validation result shared by domain validators."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a domain configuration.

    A configuration is considered valid if there are no errors, even if
    there are warnings.

    Attributes:
        errors: Tuple of error messages (validation failures).
        warnings: Tuple of warning messages (non-fatal issues).
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        """Create a successful validation result."""
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a failed validation result.

        Args:
            errors: List of error messages.
            warnings: Optional list of warning messages.

        Returns:
            A ValidationResult with the provided errors and warnings.
        """
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))

    @classmethod
    def from_messages(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a result that is valid exactly when ``errors`` is empty."""
        if errors:
            return cls.fail(errors, warnings)
        return cls.ok(warnings)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results, keeping the messages of both."""
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )
