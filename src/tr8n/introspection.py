"""Placeholder introspection for configured messages.

Lets callers discover which argument keys a message needs before calling
it, e.g. to build forms or to check a catalog against call sites.

Python 3.13+.
"""

from dataclasses import dataclass

from .constants import PLACEHOLDER_PATTERN
from .runtime.cases import MessageConfig

__all__ = [
    "MessageIntrospection",
    "extract_placeholders",
    "introspect_message",
]


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Immutable metadata about one configured message."""

    message_id: str
    """Message identifier."""

    is_plural: bool
    """True if the message is selected by plural count."""

    thresholds: tuple[int, ...]
    """Plural thresholds in configured order (empty for simple messages)."""

    placeholders: frozenset[str]
    """Union of placeholder keys across every template of the message."""

    @property
    def requires_arguments(self) -> bool:
        """True if some template cannot be resolved without arguments."""
        return bool(self.placeholders)

    def requires_argument(self, key: str) -> bool:
        """Check if any template of the message references key."""
        return key in self.placeholders


def extract_placeholders(template: str) -> tuple[str, ...]:
    """Return placeholder keys in order of first appearance, without repeats.

    Example:
        >>> extract_placeholders("%{user} sent %{n} files to %{user}")
        ('user', 'n')
    """
    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def introspect_message(message_id: str, config: MessageConfig) -> MessageIntrospection:
    """Collect metadata for one message configuration."""
    placeholders: set[str] = set()
    for template in config.templates:
        placeholders.update(extract_placeholders(template))

    return MessageIntrospection(
        message_id=message_id,
        is_plural=config.is_plural,
        thresholds=config.thresholds,
        placeholders=frozenset(placeholders),
    )
