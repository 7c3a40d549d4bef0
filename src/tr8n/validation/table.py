"""Message table validation.

Lints a MessageTable for templates that are legal but likely wrong.
Never raises for content problems; every finding is a warning in the
returned ValidationResult. Structural errors (empty plural case lists,
out-of-order thresholds, duplicates) are already rejected by the table
at construction time.

Python 3.13+.
"""

import logging

from tr8n.constants import PLACEHOLDER_OPEN, PLACEHOLDER_PATTERN
from tr8n.diagnostics import ValidationResult, ValidationWarning
from tr8n.introspection import extract_placeholders
from tr8n.runtime.table import MessageTable

__all__ = [
    "WARNING_PLURAL_NO_ZERO_CASE",
    "WARNING_PLURAL_PLACEHOLDER_MISMATCH",
    "WARNING_UNCLOSED_PLACEHOLDER",
    "validate_table",
]

logger = logging.getLogger(__name__)

WARNING_UNCLOSED_PLACEHOLDER = "unclosed-placeholder"
WARNING_PLURAL_NO_ZERO_CASE = "plural-no-zero-case"
WARNING_PLURAL_PLACEHOLDER_MISMATCH = "plural-placeholder-mismatch"


def _has_unclosed_placeholder(template: str) -> bool:
    # Whatever remains after removing well-formed placeholders must not open one.
    return PLACEHOLDER_OPEN in PLACEHOLDER_PATTERN.sub("", template)


def validate_table(table: MessageTable) -> ValidationResult:
    """Check every message of a table for suspicious templates.

    Warnings:
        unclosed-placeholder: "%{" with no closing "}" on the same line;
            the text is emitted literally instead of being substituted
        plural-no-zero-case: lowest threshold is above 0, so small counts
            fail with InvalidArgumentsError
        plural-placeholder-mismatch: plural cases reference different keys

    Args:
        table: Table to validate (frozen or not)

    Returns:
        ValidationResult with zero or more warnings

    Example:
        >>> table = MessageTable().add("items", [(1, "one item"), (2, "%{n} items")])
        >>> [w.code for w in validate_table(table).warnings]
        ['plural-no-zero-case', 'plural-placeholder-mismatch']
    """
    warnings: list[ValidationWarning] = []

    for message_id in table:
        config = table.lookup(message_id)

        for template in config.templates:
            if _has_unclosed_placeholder(template):
                warnings.append(
                    ValidationWarning(
                        code=WARNING_UNCLOSED_PLACEHOLDER,
                        message="Template contains an unclosed placeholder",
                        context=message_id,
                    )
                )
                break

        if not config.is_plural:
            continue

        lowest = config.thresholds[0]
        if lowest > 0:
            warnings.append(
                ValidationWarning(
                    code=WARNING_PLURAL_NO_ZERO_CASE,
                    message=f"Counts below {lowest} match no plural case",
                    context=message_id,
                )
            )

        key_sets = {frozenset(extract_placeholders(t)) for t in config.templates}
        if len(key_sets) > 1:
            warnings.append(
                ValidationWarning(
                    code=WARNING_PLURAL_PLACEHOLDER_MISMATCH,
                    message="Plural cases reference different placeholders",
                    context=message_id,
                )
            )

    logger.debug("Validated %d messages: %d warning(s)", len(table), len(warnings))
    return ValidationResult(warnings=tuple(warnings))
