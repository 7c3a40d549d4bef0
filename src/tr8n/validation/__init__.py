"""Message table validation.

Python 3.13+.
"""

from .table import (
    WARNING_PLURAL_NO_ZERO_CASE,
    WARNING_PLURAL_PLACEHOLDER_MISMATCH,
    WARNING_UNCLOSED_PLACEHOLDER,
    validate_table,
)

__all__ = [
    "WARNING_PLURAL_NO_ZERO_CASE",
    "WARNING_PLURAL_PLACEHOLDER_MISMATCH",
    "WARNING_UNCLOSED_PLACEHOLDER",
    "validate_table",
]
