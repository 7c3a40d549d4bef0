"""Runtime: message configuration, argument sets and resolution.

Exports:
    PluralCase, MessageConfig: per-message template sets
    MessageTable: identifier -> MessageConfig mapping for one locale
    ArgumentSet: per-call substitution values and plural count
    Translator: protocol implemented by every translator backend
    SimpleTranslator: translator bound to one MessageTable
    Resolution: value-or-error result of one resolution call

Python 3.13+.
"""

from .arguments import ArgumentSet
from .cases import MessageConfig, PluralCase
from .interpolation import interpolate
from .table import MessageTable
from .translator import Arguments, Resolution, SimpleTranslator, Translator

__all__ = [
    "ArgumentSet",
    "Arguments",
    "MessageConfig",
    "MessageTable",
    "PluralCase",
    "Resolution",
    "SimpleTranslator",
    "Translator",
    "interpolate",
]
