"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls and DEL, except tab. Escaped so a crafted message id or
# argument key cannot forge extra log lines.
_CONTROL_CHARS = {code: f"\\x{code:02x}" for code in (*range(0x09), *range(0x0A, 0x20), 0x7F)}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.message_not_found("hello")
        >>> print(formatter.format(diagnostic))
        error[MESSAGE_NOT_FOUND]: Message 'hello' not found
          --> message: hello
          = help: Check that the message is added to the message table

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MESSAGE_NOT_FOUND: Message 'hello' not found
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with a summary line and every warning.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_clean:
            return "Validation passed"

        parts = [f"Validation found {result.warning_count} warning(s)", "\nWarnings:"]
        parts.extend(f"  {self._clean(warning.format())}" for warning in result.warnings)
        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[PLURAL_CASE_NOT_FOUND]: No plural case of message 'items' matches count 0
              --> message: items
              = help: Add a plural case with a threshold at or below this count (usually 0)
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"]

        if diagnostic.message_id:
            parts.append(f"  --> message: {self._clean(diagnostic.message_id)}")

        if diagnostic.argument_name is not None:
            parts.append(f"  = argument: {self._clean(diagnostic.argument_name)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MESSAGE_NOT_FOUND: Message 'hello' not found
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MESSAGE_NOT_FOUND", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.message_id:
            data["message_id"] = diagnostic.message_id

        if diagnostic.argument_name is not None:
            data["argument_name"] = diagnostic.argument_name

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then apply optional truncation."""
        return self._maybe_sanitize(text.translate(_CONTROL_CHARS))

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
