"""Locale utilities for BCP-47 to POSIX conversion and CLDR validation.

Centralizes locale normalization so that every table records its locale in
one canonical form.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "validate_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is preserved; Babel parsing is case-insensitive.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def validate_locale(locale_code: str) -> str:
    """Normalize a locale code and check it against CLDR data.

    Args:
        locale_code: Locale code in BCP-47 or POSIX form

    Returns:
        Canonical POSIX code as Babel renders it, e.g. "pt-br" -> "pt_BR"

    Raises:
        ValueError: If the code is empty, malformed, or unknown to CLDR
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not isinstance(locale_code, str) or not locale_code.strip():
        msg = "Locale code cannot be empty"
        raise ValueError(msg)

    normalized = normalize_locale(locale_code)
    if not normalized.replace("_", "").isalnum():
        msg = f"Invalid locale code format: '{locale_code}'"
        raise ValueError(msg)

    try:
        babel_locale = get_babel_locale(normalized)
    except UnknownLocaleError as e:
        msg = f"Unknown locale: '{locale_code}'"
        raise ValueError(msg) from e

    return str(babel_locale)
