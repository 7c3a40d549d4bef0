"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user
code when annotating translator call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleCode",
    "MessageId",
]

type MessageId = str
"""Identifier for a message (e.g., 'welcome', 'error.not_found')."""

type LocaleCode = str
"""Locale code (e.g., 'en', 'lv_LV', 'zh-Hans-CN')."""
