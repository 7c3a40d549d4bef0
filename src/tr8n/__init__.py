"""tr8n - localized message templating with plural case selection.

Resolves opaque message identifiers to locale-specific text: looks up the
configured template, selects a plural case by minimum count threshold where
the message has them, and substitutes %{key} placeholders from the call's
arguments.

Public API:
    MessageTable - Message configurations for one locale
    ArgumentSet - Per-call arguments and optional plural count
    SimpleTranslator - Translator bound to one MessageTable
    FallbackTranslator - Ordered chain of translators (locale fallback)
    Translator - Protocol every translator implements
    Resolution - Value-or-error result of resolve()
    ErrorMode - STRICT (raise) or EMPTY (return "") for translate*()
    validate_table - Lint a table for suspicious templates

Exceptions:
    TranslationError - Base exception class
    UnknownMessageError - Identifier not configured
    InvalidArgumentsError - Call mode disagrees with message configuration
    MissingArgumentError - Placeholder key absent from arguments
    InvalidConfigurationError - Table construction failure

Submodules:
    tr8n.runtime - Configuration model, interpolation and translators
    tr8n.diagnostics - Error types, diagnostic codes and formatting
    tr8n.introspection - Placeholder extraction and message metadata
    tr8n.localization - Fallback chains and type aliases
    tr8n.validation - Table linting
"""

from .diagnostics import (
    DuplicateArgumentError,
    DuplicateIdentifierError,
    FrozenTableError,
    InvalidArgumentsError,
    InvalidConfigurationError,
    MissingArgumentError,
    TranslationError,
    UnknownMessageError,
)
from .enums import ErrorMode
from .localization import FallbackInfo, FallbackTranslator
from .runtime import (
    ArgumentSet,
    MessageConfig,
    MessageTable,
    PluralCase,
    Resolution,
    SimpleTranslator,
    Translator,
)
from .validation import validate_table

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tr8n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentSet",
    "DuplicateArgumentError",
    "DuplicateIdentifierError",
    "ErrorMode",
    "FallbackInfo",
    "FallbackTranslator",
    "FrozenTableError",
    "InvalidArgumentsError",
    "InvalidConfigurationError",
    "MessageConfig",
    "MessageTable",
    "MissingArgumentError",
    "PluralCase",
    "Resolution",
    "SimpleTranslator",
    "TranslationError",
    "Translator",
    "UnknownMessageError",
    "__version__",
    "validate_table",
]
