"""Hypothesis strategies for tr8n property-based testing.

Usage:
    from tests.strategies import message_ids, placeholder_keys, plain_text

Python 3.13+.
"""

from .messages import (
    argument_sets,
    ascending_thresholds,
    message_ids,
    placeholder_keys,
    plain_text,
    plural_case_lists,
    templates_with_keys,
)

__all__ = [
    "argument_sets",
    "ascending_thresholds",
    "message_ids",
    "placeholder_keys",
    "plain_text",
    "plural_case_lists",
    "templates_with_keys",
]
