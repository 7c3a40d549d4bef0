"""Translation exception hierarchy with structured diagnostics.

All exceptions store a Diagnostic so callers can inspect the failure kind,
the offending message identifier and, for missing arguments, the
placeholder key without parsing the exception text.

Hierarchy:
    TranslationError
    ├─ UnknownMessageError
    ├─ InvalidArgumentsError
    ├─ MissingArgumentError
    ├─ DuplicateArgumentError
    └─ InvalidConfigurationError
       ├─ DuplicateIdentifierError
       └─ FrozenTableError

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "DuplicateArgumentError",
    "DuplicateIdentifierError",
    "FrozenTableError",
    "InvalidArgumentsError",
    "InvalidConfigurationError",
    "MissingArgumentError",
    "TranslationError",
    "UnknownMessageError",
]


class TranslationError(Exception):
    """Base exception for all tr8n errors.

    Failures are deterministic: retrying with the same table and arguments
    reproduces the same error.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        message_id: Message identifier involved ("" when not applicable)
    """

    category: ClassVar[ErrorCategory]

    def __init__(self, message: str | Diagnostic, *, message_id: str = "") -> None:
        """Initialize TranslationError.

        Args:
            message: Error message string OR Diagnostic object
            message_id: Message identifier; defaults to the diagnostic's
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
            self.message_id = message_id or message.message_id or ""
        else:
            self.diagnostic = None
            super().__init__(message)
            self.message_id = message_id


class UnknownMessageError(TranslationError):
    """Message identifier is not configured in the table."""

    category = ErrorCategory.UNKNOWN_MESSAGE


class InvalidArgumentsError(TranslationError):
    """Call mode disagrees with the message's configuration.

    Examples:
    - Plain or argument-only call against a plural message
    - Plural call against a simple message
    - Plural count below every configured threshold
    """

    category = ErrorCategory.INVALID_ARGUMENTS


class MissingArgumentError(TranslationError):
    """Template requires a placeholder key absent from the argument set.

    Attributes:
        argument_key: The first unmatched placeholder key, scanning left to right
    """

    category = ErrorCategory.MISSING_ARGUMENT

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        message_id: str = "",
        argument_key: str = "",
    ) -> None:
        """Initialize MissingArgumentError.

        Args:
            message: Error message string OR Diagnostic object
            message_id: Message identifier being resolved
            argument_key: Placeholder key that had no argument
        """
        super().__init__(message, message_id=message_id)
        if not argument_key and self.diagnostic is not None:
            argument_key = self.diagnostic.argument_name or ""
        self.argument_key = argument_key


class DuplicateArgumentError(TranslationError):
    """Argument key supplied twice to one ArgumentSet."""

    category = ErrorCategory.INVALID_ARGUMENTS


class InvalidConfigurationError(TranslationError):
    """Message table construction failure.

    Raised only while the table is being built, never during resolution.
    """

    category = ErrorCategory.INVALID_CONFIGURATION


class DuplicateIdentifierError(InvalidConfigurationError):
    """Message identifier registered twice in one table."""


class FrozenTableError(InvalidConfigurationError):
    """Registration attempted on a table that is already frozen."""
