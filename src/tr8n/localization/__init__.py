"""Multi-locale orchestration and localization type aliases.

Exports:
    FallbackTranslator: ordered chain of translators behind one Translator
    FallbackInfo: details passed to the on_fallback callback
    MessageId, LocaleCode: semantic type aliases

Python 3.13+.
"""

from .fallback import FallbackInfo, FallbackTranslator
from .types import LocaleCode, MessageId

__all__ = [
    "FallbackInfo",
    "FallbackTranslator",
    "LocaleCode",
    "MessageId",
]
