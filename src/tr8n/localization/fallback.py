"""Multi-locale translation with fallback chains.

FallbackTranslator wraps several translators (typically one per locale, in
priority order) behind the same Translator protocol. A message falls
through to the next translator only when the current one does not know the
identifier; every other failure is reported as-is so configuration
mistakes in the primary locale are never masked.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from tr8n.diagnostics import ErrorTemplate, UnknownMessageError
from tr8n.enums import ErrorMode
from tr8n.runtime.translator import (
    Arguments,
    Resolution,
    Translator,
    coerce_arguments,
    surface,
    with_plural_count,
)

from .types import LocaleCode, MessageId

__all__ = ["FallbackInfo", "FallbackTranslator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Details of a message answered by a non-primary translator.

    Attributes:
        message_id: The message identifier
        requested_locale: Locale of the primary translator (None if unknown)
        resolved_locale: Locale of the translator that answered (None if unknown)
        position: Index of the answering translator in the chain (>= 1)
    """

    message_id: MessageId
    requested_locale: LocaleCode | None
    resolved_locale: LocaleCode | None
    position: int


class FallbackTranslator:
    """Translator that consults an ordered chain of translators.

    Example:
        >>> lv = SimpleTranslator(MessageTable(locale="lv").add("hello", "Sveiki!"))
        >>> en = SimpleTranslator(
        ...     MessageTable(locale="en").add("hello", "Hello!").add("bye", "Goodbye!")
        ... )
        >>> chain = FallbackTranslator([lv, en])
        >>> chain.translate("hello"), chain.translate("bye")
        ('Sveiki!', 'Goodbye!')
    """

    __slots__ = ("_error_mode", "_on_fallback", "_translators")

    def __init__(
        self,
        translators: Iterable[Translator],
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        error_mode: ErrorMode = ErrorMode.STRICT,
    ) -> None:
        """Initialize fallback chain.

        Args:
            translators: Translators in priority order (primary first)
            on_fallback: Called whenever a non-primary translator answers.
                Useful for spotting messages missing from the primary locale.
            error_mode: STRICT (raise) or EMPTY (return "") for translate*()

        Raises:
            ValueError: If translators is empty or error_mode is invalid
            TypeError: If an element does not implement Translator
        """
        chain = tuple(translators)
        if not chain:
            msg = "At least one translator is required"
            raise ValueError(msg)
        for translator in chain:
            if not isinstance(translator, Translator):
                msg = f"Expected a Translator, got {type(translator).__name__}"
                raise TypeError(msg)

        self._translators = chain
        self._on_fallback = on_fallback
        self._error_mode = ErrorMode(error_mode)

    @property
    def translators(self) -> tuple[Translator, ...]:
        """The chain, primary first (read-only)."""
        return self._translators

    @property
    def locales(self) -> tuple[LocaleCode | None, ...]:
        """Locale of each translator in the chain (None where unknown)."""
        return tuple(_locale_of(t) for t in self._translators)

    @property
    def error_mode(self) -> ErrorMode:
        """How translate*() surfaces failures (read-only)."""
        return self._error_mode

    def resolve(self, message_id: MessageId, args: Arguments | None = None) -> Resolution:
        """Resolve through the chain; never raises TranslationError.

        Returns:
            The first resolution that is not an unknown-message failure, or
            an UnknownMessageError resolution if no translator knows the id
        """
        arguments = coerce_arguments(args)
        for position, translator in enumerate(self._translators):
            resolution = translator.resolve(message_id, arguments)
            if isinstance(resolution.error, UnknownMessageError):
                continue
            if position > 0:
                self._report_fallback(message_id, translator, position)
            return resolution

        logger.debug("Message '%s' not found in any of %d translators", message_id, len(self))
        return Resolution.failure(UnknownMessageError(ErrorTemplate.message_not_found(message_id)))

    def resolve_plural(
        self, message_id: MessageId, count: int, args: Arguments | None = None
    ) -> Resolution:
        """Resolve a plural message for count through the chain."""
        return self.resolve(message_id, with_plural_count(args, count))

    def translate(self, message_id: MessageId, args: Arguments | None = None) -> str:
        """Translate through the chain, surfacing failures per the error mode."""
        return surface(self.resolve(message_id, args), message_id, self._error_mode)

    def translate_plural(
        self, message_id: MessageId, count: int, args: Arguments | None = None
    ) -> str:
        """Translate a plural message through the chain."""
        return surface(self.resolve_plural(message_id, count, args), message_id, self._error_mode)

    def _report_fallback(self, message_id: MessageId, translator: Translator, position: int) -> None:
        info = FallbackInfo(
            message_id=message_id,
            requested_locale=_locale_of(self._translators[0]),
            resolved_locale=_locale_of(translator),
            position=position,
        )
        logger.warning(
            "Message '%s' resolved from fallback locale %s (requested %s)",
            message_id,
            info.resolved_locale,
            info.requested_locale,
        )
        if self._on_fallback is not None:
            self._on_fallback(info)

    def __len__(self) -> int:
        return len(self._translators)

    def __repr__(self) -> str:
        return f"FallbackTranslator(locales={self.locales!r}, error_mode={self._error_mode!s})"


def _locale_of(translator: Translator) -> LocaleCode | None:
    locale = getattr(translator, "locale", None)
    return locale if isinstance(locale, str) else None
