"""Shared constants for tr8n.

Single source of truth for values used across the runtime, introspection
and validation packages. Kept in a leaf module to avoid circular imports.

Python 3.13+. Zero external dependencies.
"""

import re

__all__ = [
    "FALLBACK_EMPTY",
    "LOG_TRUNCATE_DEBUG",
    "LOG_TRUNCATE_WARNING",
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_PATTERN",
]

# ============================================================================
# PLACEHOLDER SYNTAX
# ============================================================================

PLACEHOLDER_OPEN: str = "%{"

# Non-greedy: "%{a}%{b}" yields two keys, never "a}%{b".
# "." excludes newlines, so a placeholder never spans lines.
PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"%\{(.*?)\}")

# ============================================================================
# FALLBACKS
# ============================================================================

# Value returned by translate*() in ErrorMode.EMPTY when resolution fails.
FALLBACK_EMPTY: str = ""

# ============================================================================
# LOGGING
# ============================================================================

LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50
