"""Validation result types for message table linting.

Tables reject structural errors while they are built, so linting only ever
reports warnings.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from table validation.

    Attributes:
        code: Warning code (e.g., "plural-no-zero-case")
        message: Human-readable warning message
        context: Additional context (e.g., the offending message id)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as a single human-readable line."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of linting a message table.

    Example:
        >>> result = ValidationResult.clean()
        >>> result.is_clean
        True
        >>> result.warning_count
        0
    """

    warnings: tuple[ValidationWarning, ...]

    @property
    def is_clean(self) -> bool:
        """True if no warnings were found."""
        return len(self.warnings) == 0

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def clean() -> "ValidationResult":
        """Create a result with no warnings."""
        return ValidationResult(warnings=())

    def codes(self) -> tuple[str, ...]:
        """Warning codes in report order."""
        return tuple(warning.code for warning in self.warnings)

    def format(self) -> str:
        """Format validation result as human-readable string."""
        if not self.warnings:
            return "Validation passed: no warnings"
        lines = [f"Warnings ({len(self.warnings)}):"]
        lines.extend(f"  {warning.format()}" for warning in self.warnings)
        return "\n".join(lines)
