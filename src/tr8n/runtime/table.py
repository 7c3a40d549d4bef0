"""MessageTable - message identifier to MessageConfig mapping for one locale.

Built once by the caller, then frozen and shared read-only for the rest of
the program (single writer, then many readers).

Python 3.13+. External dependency: Babel (locale validation only).
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from tr8n.diagnostics import (
    DuplicateIdentifierError,
    ErrorTemplate,
    FrozenTableError,
    InvalidConfigurationError,
    UnknownMessageError,
)
from tr8n.locale_utils import validate_locale

from .cases import CaseSpec, MessageConfig

if TYPE_CHECKING:
    from tr8n.introspection import MessageIntrospection

__all__ = ["MessageTable"]

logger = logging.getLogger(__name__)

type TableEntry = str | Mapping[int, str] | Iterable[CaseSpec]
"""A simple template, a {threshold: template} mapping, or plural case pairs."""


class MessageTable:
    """All translated message configurations for one locale.

    Duplicate identifiers are rejected rather than overwritten so that
    configuration mistakes surface while the table is built.

    Thread Safety:
        add() is NOT thread-safe. Build the table on one thread, then
        freeze() it (binding to a SimpleTranslator does this) before sharing.

    Example:
        >>> table = (
        ...     MessageTable(locale="en-US")
        ...     .add("hello", "Hello, %{name}!")
        ...     .add("files", [(0, "No files"), (1, "One file"), (2, "%{n} files")])
        ... )
        >>> table.locale
        'en_US'
        >>> table.lookup("files").is_plural
        True
    """

    __slots__ = ("_configs", "_frozen", "_locale")

    def __init__(self, *, locale: str | None = None) -> None:
        """Initialize an empty table.

        Args:
            locale: Locale code of the templates (BCP-47 or POSIX). Validated
                against CLDR and stored in canonical POSIX form.

        Raises:
            ValueError: If locale is given but empty, malformed or unknown
        """
        self._locale = validate_locale(locale) if locale is not None else None
        self._configs: dict[str, MessageConfig] = {}
        self._frozen = False

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, TableEntry], *, locale: str | None = None
    ) -> "MessageTable":
        """Build a table from an in-memory mapping.

        Values may be a str (simple message), a mapping of threshold to
        template, or a sequence of (threshold, template) pairs. Mapping
        order is kept as case order.

        Example:
            >>> table = MessageTable.from_mapping({
            ...     "title": "Inbox",
            ...     "unread": {0: "No new mail", 1: "One new message", 2: "%{n} new messages"},
            ... })
            >>> len(table)
            2
        """
        table = cls(locale=locale)
        for message_id, entry in data.items():
            table.add(message_id, entry)
        return table

    @property
    def locale(self) -> str | None:
        """Canonical locale code of this table, or None if unspecified."""
        return self._locale

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def freeze(self) -> "MessageTable":
        """Make the table read-only. Idempotent."""
        if not self._frozen:
            self._frozen = True
            logger.info(
                "MessageTable frozen (locale=%s, messages=%d)", self._locale, len(self._configs)
            )
        return self

    def add(self, message_id: str, entry: TableEntry) -> "MessageTable":
        """Register one message.

        Args:
            message_id: Non-empty message identifier
            entry: Template str for a simple message; a {threshold: template}
                mapping or an iterable of PluralCase / (threshold, template)
                pairs for a plural message

        Returns:
            self, for chaining

        Raises:
            FrozenTableError: If the table is frozen
            DuplicateIdentifierError: If message_id is already registered
            InvalidConfigurationError: If the identifier is empty, a plural
                entry has no cases, or cases are malformed or out of order
        """
        if not isinstance(message_id, str) or not message_id:
            raise InvalidConfigurationError(ErrorTemplate.invalid_message_id(message_id))
        if self._frozen:
            raise FrozenTableError(ErrorTemplate.table_frozen(message_id))
        if message_id in self._configs:
            raise DuplicateIdentifierError(ErrorTemplate.duplicate_message_id(message_id))

        match entry:
            case str():
                config = MessageConfig.simple(entry)
            case Mapping() | Iterable():
                config = MessageConfig.plural(entry, message_id=message_id)
            case _:
                raise InvalidConfigurationError(ErrorTemplate.invalid_template(entry))

        self._configs[message_id] = config
        logger.debug(
            "Registered %s message: %s", "plural" if config.is_plural else "simple", message_id
        )
        return self

    def lookup(self, message_id: str) -> MessageConfig:
        """Return the configuration for message_id.

        Raises:
            UnknownMessageError: If message_id is not registered
        """
        config = self._configs.get(message_id)
        if config is None:
            raise UnknownMessageError(ErrorTemplate.message_not_found(message_id))
        return config

    def get(self, message_id: str) -> MessageConfig | None:
        """Return the configuration for message_id, or None."""
        return self._configs.get(message_id)

    def has_message(self, message_id: str) -> bool:
        """Check if message_id is registered."""
        return message_id in self._configs

    def message_ids(self) -> tuple[str, ...]:
        """Registered identifiers in insertion order."""
        return tuple(self._configs)

    def introspect(self, message_id: str) -> "MessageIntrospection":
        """Describe the placeholders and plural shape of one message.

        Raises:
            UnknownMessageError: If message_id is not registered
        """
        from tr8n.introspection import introspect_message  # noqa: PLC0415 - circular

        return introspect_message(message_id, self.lookup(message_id))

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._configs

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return (
            f"MessageTable(locale={self._locale!r}, messages={len(self._configs)}, "
            f"frozen={self._frozen})"
        )
