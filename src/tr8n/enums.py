"""Enumerations for tr8n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["ErrorMode"]


class ErrorMode(StrEnum):
    """How a translator surfaces resolution failures from translate*().

    Selected once at construction and fixed for the translator's lifetime.
    resolve() is unaffected: it always returns a structured Resolution.

    StrEnum provides automatic string conversion: str(ErrorMode.STRICT) == "strict"
    """

    STRICT = "strict"
    """Raise the TranslationError describing the failure."""

    EMPTY = "empty"
    """Return an empty string and log the failure at WARNING level."""
