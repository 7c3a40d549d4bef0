"""Translator protocol and SimpleTranslator - the resolution facade.

Resolution runs through a single code path that returns a Resolution
(value or structured error). translate() and translate_plural() adapt that
result to the translator's ErrorMode: raise in STRICT mode, empty string in
EMPTY mode.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tr8n.constants import FALLBACK_EMPTY, LOG_TRUNCATE_DEBUG, LOG_TRUNCATE_WARNING
from tr8n.diagnostics import (
    ErrorTemplate,
    InvalidArgumentsError,
    MissingArgumentError,
    TranslationError,
    UnknownMessageError,
)
from tr8n.enums import ErrorMode

from .arguments import ArgumentSet
from .interpolation import find_first_placeholder, interpolate
from .table import MessageTable

if TYPE_CHECKING:
    from tr8n.introspection import MessageIntrospection

__all__ = ["Arguments", "Resolution", "SimpleTranslator", "Translator"]

logger = logging.getLogger(__name__)

type Arguments = ArgumentSet | Mapping[str, str]
"""Call-site arguments: an ArgumentSet, or a plain mapping of key -> value."""


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of one resolution call.

    Exactly one of the two states holds: ``error`` is None and ``value`` is
    the resolved text, or ``error`` is set and ``value`` is empty. A failed
    resolution never carries partially substituted text.

    Example:
        >>> resolution = translator.resolve("hello", ArgumentSet({"name": "Bob"}))
        >>> resolution.ok
        True
        >>> resolution.unwrap()
        'Hello, Bob!'
    """

    value: str
    error: TranslationError | None = None

    def __post_init__(self) -> None:
        """Reject a failed resolution that carries text.

        Raises:
            ValueError: If error is set and value is not empty
        """
        if self.error is not None and self.value != FALLBACK_EMPTY:
            msg = "A failed Resolution must have an empty value"
            raise ValueError(msg)

    @classmethod
    def success(cls, value: str) -> "Resolution":
        """Create a successful resolution."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: TranslationError) -> "Resolution":
        """Create a failed resolution with an empty value."""
        return cls(value=FALLBACK_EMPTY, error=error)

    @property
    def ok(self) -> bool:
        """True if resolution succeeded."""
        return self.error is None

    def unwrap(self) -> str:
        """Return the resolved text.

        Raises:
            TranslationError: The stored error, if resolution failed
        """
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: str) -> str:
        """Return the resolved text, or default if resolution failed."""
        return default if self.error is not None else self.value


@runtime_checkable
class Translator(Protocol):
    """Capability shared by every translator backend.

    Implementations resolve message identifiers to text. Unused arguments
    never cause an error.
    """

    def resolve(self, message_id: str, args: Arguments | None = None) -> Resolution:
        """Resolve a message without raising for translation failures.

        args None is a plain lookup; args carrying a count is a plural lookup.
        """
        ...

    def resolve_plural(
        self, message_id: str, count: int, args: Arguments | None = None
    ) -> Resolution:
        """Resolve a plural message for count without raising for translation failures."""
        ...

    def translate(self, message_id: str, args: Arguments | None = None) -> str:
        """Resolve a message, surfacing failures per the error mode."""
        ...

    def translate_plural(
        self, message_id: str, count: int, args: Arguments | None = None
    ) -> str:
        """Resolve a plural message for count, surfacing failures per the error mode."""
        ...


def coerce_arguments(args: Arguments | None) -> ArgumentSet | None:
    """Accept a plain mapping wherever an ArgumentSet is expected."""
    if args is None or isinstance(args, ArgumentSet):
        return args
    if isinstance(args, Mapping):
        return ArgumentSet(args)
    msg = f"Arguments must be ArgumentSet, Mapping or None, got {type(args).__name__}"
    raise TypeError(msg)


def with_plural_count(args: Arguments | None, count: int) -> ArgumentSet:
    """Attach count to args (or to an empty ArgumentSet)."""
    return (coerce_arguments(args) or ArgumentSet()).with_count(count)


def surface(resolution: Resolution, message_id: str, error_mode: ErrorMode) -> str:
    """Adapt a Resolution to an error mode.

    Raises:
        TranslationError: In STRICT mode, when resolution failed
    """
    if resolution.error is None:
        return resolution.value
    if error_mode is ErrorMode.STRICT:
        raise resolution.error
    logger.warning(
        "Returning empty text for '%s': [%s] %s",
        message_id,
        resolution.error.category,
        str(resolution.error)[:LOG_TRUNCATE_WARNING],
    )
    return FALLBACK_EMPTY


class SimpleTranslator:
    """Translator configured with one complete MessageTable.

    Binding freezes the table; it is read-only from then on, so concurrent
    reads from several threads are safe without locking.

    Call modes:
        translate(id)                    - plain lookup, no arguments at all
        translate(id, args)              - simple message with arguments
        translate(id, args.with_count(n)) or translate_plural(id, n, args)
                                         - plural message

    Error precedence (first match wins):
        1. Unknown identifier            -> UnknownMessageError
        2. Plural/simple call mismatch   -> InvalidArgumentsError
        3. Count below every threshold   -> InvalidArgumentsError
        4. First missing placeholder key -> MissingArgumentError

    Examples:
        >>> table = MessageTable().add("hello", "Hello, %{name}!")
        >>> translator = SimpleTranslator(table)
        >>> translator.translate("hello", {"name": "Bob"})
        'Hello, Bob!'
        >>> quiet = SimpleTranslator(table, error_mode=ErrorMode.EMPTY)
        >>> quiet.translate("hello")
        ''
    """

    __slots__ = ("_error_mode", "_table")

    def __init__(self, table: MessageTable, /, *, error_mode: ErrorMode = ErrorMode.STRICT) -> None:
        """Bind translator to a table.

        Args:
            table: Message configurations for the translator's locale [positional-only]
            error_mode: STRICT (raise) or EMPTY (return "") for translate*()

        Raises:
            TypeError: If table is not a MessageTable
            ValueError: If error_mode is not a valid ErrorMode
        """
        if not isinstance(table, MessageTable):
            msg = f"SimpleTranslator requires a MessageTable, got {type(table).__name__}"
            raise TypeError(msg)

        self._table = table.freeze()
        self._error_mode = ErrorMode(error_mode)

        logger.info(
            "SimpleTranslator initialized (locale=%s, messages=%d, error_mode=%s)",
            table.locale,
            len(table),
            self._error_mode,
        )

    @property
    def table(self) -> MessageTable:
        """The bound (frozen) message table."""
        return self._table

    @property
    def locale(self) -> str | None:
        """Locale code of the bound table, or None if unspecified."""
        return self._table.locale

    @property
    def error_mode(self) -> ErrorMode:
        """How translate*() surfaces failures (read-only)."""
        return self._error_mode

    def has_message(self, message_id: str) -> bool:
        """Check if message_id is configured."""
        return self._table.has_message(message_id)

    def introspect(self, message_id: str) -> "MessageIntrospection":
        """Describe the placeholders and plural shape of one message.

        Raises:
            UnknownMessageError: If message_id is not configured
        """
        return self._table.introspect(message_id)

    def resolve(self, message_id: str, args: Arguments | None = None) -> Resolution:
        """Resolve a message to a Resolution; never raises TranslationError.

        Args:
            message_id: Message identifier
            args: None for a plain lookup; arguments (optionally carrying a
                plural count) otherwise

        Returns:
            Resolution holding the text or the failure

        Raises:
            TypeError: If args is neither ArgumentSet, Mapping nor None
        """
        arguments = coerce_arguments(args)
        try:
            value = self._resolve_impl(message_id, arguments)
        except TranslationError as e:
            logger.debug("Resolution of '%s' failed: [%s] %s", message_id, e.category, e)
            return Resolution.failure(e)

        logger.debug("Resolved message '%s': %s", message_id, value[:LOG_TRUNCATE_DEBUG])
        return Resolution.success(value)

    def resolve_plural(
        self, message_id: str, count: int, args: Arguments | None = None
    ) -> Resolution:
        """Resolve a plural message for count; never raises TranslationError.

        Raises:
            TypeError: If count is not int
            ValueError: If count is negative
        """
        return self.resolve(message_id, with_plural_count(args, count))

    def translate(self, message_id: str, args: Arguments | None = None) -> str:
        """Translate a message.

        Args:
            message_id: Message identifier
            args: None for a plain lookup; arguments (optionally carrying a
                plural count) otherwise

        Returns:
            Resolved text ("" on failure in EMPTY mode)

        Raises:
            TranslationError: On failure in STRICT mode
        """
        return surface(self.resolve(message_id, args), message_id, self._error_mode)

    def translate_plural(self, message_id: str, count: int, args: Arguments | None = None) -> str:
        """Translate a plural message, selecting the case for count.

        Returns:
            Resolved text ("" on failure in EMPTY mode)

        Raises:
            TranslationError: On failure in STRICT mode
            TypeError: If count is not int
            ValueError: If count is negative
        """
        return surface(self.resolve_plural(message_id, count, args), message_id, self._error_mode)

    def _resolve_impl(self, message_id: str, args: ArgumentSet | None) -> str:
        """Run the resolution algorithm, raising TranslationError on failure."""
        if not isinstance(message_id, str):
            raise UnknownMessageError(ErrorTemplate.message_not_found(repr(message_id)))
        config = self._table.lookup(message_id)

        if args is None:
            if config.is_plural:
                raise InvalidArgumentsError(
                    ErrorTemplate.simple_call_on_plural(message_id), message_id=message_id
                )
            template = config.simple_template
            key = find_first_placeholder(template)
            if key is not None:
                raise MissingArgumentError(
                    ErrorTemplate.argument_not_provided(message_id, key),
                    message_id=message_id,
                    argument_key=key,
                )
            return template

        if args.count is not None:
            if not config.is_plural:
                raise InvalidArgumentsError(
                    ErrorTemplate.plural_call_on_simple(message_id), message_id=message_id
                )
            template = config.select_plural_template(args.count, message_id=message_id)
        else:
            if config.is_plural:
                raise InvalidArgumentsError(
                    ErrorTemplate.simple_call_on_plural(message_id), message_id=message_id
                )
            template = config.simple_template

        return interpolate(message_id, template, args)

    def __repr__(self) -> str:
        return f"SimpleTranslator(locale={self.locale!r}, error_mode={self._error_mode!s})"
