"""Diagnostic system for translation errors.

Provides structured error diagnostics with codes, categories and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DuplicateArgumentError,
    DuplicateIdentifierError,
    FrozenTableError,
    InvalidArgumentsError,
    InvalidConfigurationError,
    MissingArgumentError,
    TranslationError,
    UnknownMessageError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateArgumentError",
    "DuplicateIdentifierError",
    "ErrorCategory",
    "ErrorTemplate",
    "FrozenTableError",
    "InvalidArgumentsError",
    "InvalidConfigurationError",
    "MissingArgumentError",
    "OutputFormat",
    "TranslationError",
    "UnknownMessageError",
    "ValidationResult",
    "ValidationWarning",
]
