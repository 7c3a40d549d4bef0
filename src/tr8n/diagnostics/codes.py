"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Failure kind carried by every TranslationError.

    Inherits from ``StrEnum`` so that log aggregation and JSON output
    receive plain strings (``"unknown-message"``) rather than the
    ``"ErrorCategory.X"`` repr of a plain ``Enum``.

    Categories:
        UNKNOWN_MESSAGE: Identifier absent from the message table
        INVALID_ARGUMENTS: Call mode disagrees with the message shape, a
            plural count matched no configured case, or the argument set
            itself was malformed
        MISSING_ARGUMENT: Template placeholder with no supplied argument
        INVALID_CONFIGURATION: Table construction failure
    """

    UNKNOWN_MESSAGE = "unknown-message"
    INVALID_ARGUMENTS = "invalid-arguments"
    MISSING_ARGUMENT = "missing-argument"
    INVALID_CONFIGURATION = "invalid-configuration"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (unknown messages)
        2000-2999: Argument errors (call-site disagreements)
        3000-3999: Configuration errors (table construction)
    """

    # Reference errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001

    # Argument errors (2000-2999)
    PLURAL_MODE_MISMATCH = 2001
    PLURAL_CASE_NOT_FOUND = 2002
    ARGUMENT_NOT_PROVIDED = 2003
    DUPLICATE_ARGUMENT = 2004

    # Configuration errors (3000-3999)
    NO_PLURAL_CASES = 3001
    DUPLICATE_MESSAGE_ID = 3002
    THRESHOLD_NOT_ASCENDING = 3003
    INVALID_THRESHOLD = 3004
    INVALID_TEMPLATE = 3005
    INVALID_MESSAGE_ID = 3006
    TABLE_FROZEN = 3007
    INVALID_CASE = 3008


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything a caller
    needs to report a failure without parsing the exception text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        message_id: Message identifier being resolved or registered
        argument_name: Placeholder key involved (missing/duplicate arguments)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    message_id: str | None = None
    argument_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[ARGUMENT_NOT_PROVIDED]: Argument 'name' not provided for message 'greeting'
              --> message: greeting
              = argument: name
              = help: Pass 'name' in the argument set

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
