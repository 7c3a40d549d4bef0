"""Message configuration: simple templates and ordered plural cases.

A MessageConfig holds every template one message identifier can produce in
one locale. Plural selection is purely by minimum numeric threshold; there
are no CLDR plural categories.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from tr8n.diagnostics import ErrorTemplate, InvalidArgumentsError, InvalidConfigurationError

from .arguments import check_plural_count

__all__ = ["MessageConfig", "PluralCase"]


@dataclass(frozen=True, slots=True)
class PluralCase:
    """Template selected when the plural count is at least ``threshold``.

    Attributes:
        threshold: Minimum count for which this case applies (>= 0)
        template: Message text, possibly containing %{key} placeholders
    """

    threshold: int
    template: str

    def __post_init__(self) -> None:
        """Validate PluralCase invariants.

        Raises:
            InvalidConfigurationError: If threshold is not a non-negative int
                (bool is rejected) or template is not str.
        """
        if (
            isinstance(self.threshold, bool)
            or not isinstance(self.threshold, int)
            or self.threshold < 0
        ):
            raise InvalidConfigurationError(ErrorTemplate.invalid_threshold(self.threshold))
        if not isinstance(self.template, str):
            raise InvalidConfigurationError(ErrorTemplate.invalid_template(self.template))


type CaseSpec = PluralCase | tuple[int, str]
"""A plural case, or a (threshold, template) pair convertible to one."""


def _as_case(spec: object, message_id: str) -> PluralCase:
    if isinstance(spec, PluralCase):
        return spec
    if isinstance(spec, str | bytes):
        raise InvalidConfigurationError(ErrorTemplate.invalid_case(message_id, spec))
    try:
        threshold, template = spec  # type: ignore[misc]
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(ErrorTemplate.invalid_case(message_id, spec)) from e
    return PluralCase(threshold, template)


def _as_cases(
    cases: Iterable[CaseSpec] | Mapping[int, str], message_id: str
) -> tuple[PluralCase, ...]:
    items = cases.items() if isinstance(cases, Mapping) else cases
    return tuple(_as_case(spec, message_id) for spec in items)


@dataclass(frozen=True, slots=True)
class MessageConfig:
    """Complete translation of one message identifier in one locale.

    Either simple (``template`` set, ``cases`` empty) or plural (``template``
    None, ``cases`` non-empty with strictly ascending thresholds). Build
    through ``MessageConfig.simple()`` or ``MessageConfig.plural()``.

    Example:
        >>> config = MessageConfig.plural([(0, "no files"), (1, "one file"), (2, "%{n} files")])
        >>> config.select_plural_template(7)
        '%{n} files'
    """

    template: str | None = None
    cases: tuple[PluralCase, ...] = ()

    def __post_init__(self) -> None:
        """Validate that exactly one shape is populated.

        Raises:
            InvalidConfigurationError: If both or neither shape is given, the
                template is not str, or thresholds are not strictly ascending.
        """
        if self.template is not None:
            if self.cases:
                msg = "MessageConfig is either simple or plural, not both"
                raise InvalidConfigurationError(msg)
            if not isinstance(self.template, str):
                raise InvalidConfigurationError(ErrorTemplate.invalid_template(self.template))
            return

        cases = _as_cases(self.cases, "")
        if not cases:
            raise InvalidConfigurationError(ErrorTemplate.no_plural_cases(""))
        _check_ascending(cases, "")
        object.__setattr__(self, "cases", cases)

    @classmethod
    def simple(cls, template: str) -> "MessageConfig":
        """Configure a message with a single, count-independent template."""
        return cls(template=template)

    @classmethod
    def plural(
        cls, cases: Iterable[CaseSpec] | Mapping[int, str], *, message_id: str = ""
    ) -> "MessageConfig":
        """Configure a message with plural cases in ascending threshold order.

        Args:
            cases: PluralCase values or (threshold, template) pairs, or a
                {threshold: template} mapping (iteration order is case order)
            message_id: Identifier used in error diagnostics

        Raises:
            InvalidConfigurationError: If cases is empty, a case is malformed,
                or thresholds are not strictly ascending.
        """
        converted = _as_cases(cases, message_id)
        if not converted:
            raise InvalidConfigurationError(ErrorTemplate.no_plural_cases(message_id))
        _check_ascending(converted, message_id)
        return cls(cases=converted)

    @property
    def is_plural(self) -> bool:
        """True if this message was configured with plural cases."""
        return bool(self.cases)

    @property
    def simple_template(self) -> str:
        """The only template of a simple message.

        Raises:
            TypeError: If the message is plural (programming error)
        """
        if self.template is None:
            msg = "Plural message has no simple template; use select_plural_template()"
            raise TypeError(msg)
        return self.template

    @property
    def templates(self) -> tuple[str, ...]:
        """Every template this message can produce, in configured order."""
        if self.template is not None:
            return (self.template,)
        return tuple(case.template for case in self.cases)

    @property
    def thresholds(self) -> tuple[int, ...]:
        """Configured plural thresholds (empty for simple messages)."""
        return tuple(case.threshold for case in self.cases)

    def select_plural_template(self, count: int, *, message_id: str = "") -> str:
        """Return the template of the highest threshold at or below count.

        Cases are scanned in stored order and the best match so far is
        replaced whenever a threshold <= count is met. There is no fallback
        to the lowest or highest case when nothing matches.

        Args:
            count: Plural count (non-negative)
            message_id: Identifier used in error diagnostics

        Returns:
            The selected template

        Raises:
            TypeError: If the message is not plural (programming error) or
                count is not int
            ValueError: If count is negative
            InvalidArgumentsError: If every threshold exceeds count
        """
        if not self.cases:
            msg = "Simple message has no plural cases; use simple_template"
            raise TypeError(msg)
        check_plural_count(count)

        best: PluralCase | None = None
        for case in self.cases:
            if case.threshold <= count:
                best = case

        if best is None:
            raise InvalidArgumentsError(
                ErrorTemplate.plural_case_not_found(message_id, count), message_id=message_id
            )
        return best.template


def _check_ascending(cases: tuple[PluralCase, ...], message_id: str) -> None:
    for previous, current in zip(cases, cases[1:], strict=False):
        if current.threshold <= previous.threshold:
            raise InvalidConfigurationError(
                ErrorTemplate.threshold_not_ascending(
                    message_id, previous.threshold, current.threshold
                ),
                message_id=message_id,
            )
