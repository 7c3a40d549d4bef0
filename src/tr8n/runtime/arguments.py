"""ArgumentSet - per-call substitution values and optional plural count.

Argument lists are expected to be small (single-digit counts are typical),
so values are kept in a tuple of pairs and looked up by linear scan.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Mapping

from tr8n.diagnostics import DuplicateArgumentError, ErrorTemplate

__all__ = ["ArgumentSet", "check_plural_count"]


def check_plural_count(count: object) -> int:
    """Validate a plural count.

    Args:
        count: Candidate count

    Returns:
        The count, unchanged

    Raises:
        TypeError: If count is not an int (bool is rejected)
        ValueError: If count is negative
    """
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"Plural count must be int, got {type(count).__name__}"
        raise TypeError(msg)
    if count < 0:
        msg = f"Plural count must be non-negative, got {count}"
        raise ValueError(msg)
    return count


def _check_text(kind: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"Argument {kind} must be str, got {type(value).__name__}"
        raise TypeError(msg)
    return value


class ArgumentSet:
    """Immutable set of named arguments plus an optional plural count.

    Builder methods return new instances, so call sites chain them the same
    way they would a mutable builder:

        >>> args = ArgumentSet().add("name", "Bob").with_count(3)
        >>> args.get("name"), args.count
        ('Bob', 3)

    A missing count (None) marks a non-plural call.
    """

    __slots__ = ("_count", "_pairs")

    _pairs: tuple[tuple[str, str], ...]
    _count: int | None

    def __init__(
        self,
        args: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        /,
        *,
        count: int | None = None,
    ) -> None:
        """Initialize argument set.

        Args:
            args: Mapping of key -> value, or an iterable of (key, value) pairs
            count: Plural count (non-negative), or None for non-plural calls

        Raises:
            TypeError: If a key or value is not str, or count is not int
            ValueError: If count is negative
            DuplicateArgumentError: If a key appears twice
        """
        items = args.items() if isinstance(args, Mapping) else (args or ())
        pairs: list[tuple[str, str]] = []
        seen: set[str] = set()
        for key, value in items:
            _check_text("key", key)
            _check_text("value", value)
            if key in seen:
                raise DuplicateArgumentError(ErrorTemplate.duplicate_argument(key))
            seen.add(key)
            pairs.append((key, value))

        self._pairs = tuple(pairs)
        self._count = None if count is None else check_plural_count(count)

    @classmethod
    def _from_parts(cls, pairs: tuple[tuple[str, str], ...], count: int | None) -> "ArgumentSet":
        instance = cls.__new__(cls)
        instance._pairs = pairs
        instance._count = count
        return instance

    def has(self, key: str) -> bool:
        """Return True if an argument with the given key is present."""
        return any(k == key for k, _ in self._pairs)

    def get(self, key: str) -> str:
        """Return the value for key, or an empty string if none was set."""
        for k, value in self._pairs:
            if k == key:
                return value
        return ""

    def add(self, key: str, value: str) -> "ArgumentSet":
        """Return a new set with one more argument.

        Raises:
            DuplicateArgumentError: If key is already present
        """
        _check_text("key", key)
        _check_text("value", value)
        if self.has(key):
            raise DuplicateArgumentError(ErrorTemplate.duplicate_argument(key))
        return self._from_parts((*self._pairs, (key, value)), self._count)

    def with_count(self, count: int) -> "ArgumentSet":
        """Return a new set carrying the given plural count.

        Raises:
            TypeError: If count is not int
            ValueError: If count is negative
        """
        return self._from_parts(self._pairs, check_plural_count(count))

    @property
    def has_count(self) -> bool:
        """True if a plural count has been provided (plural call mode)."""
        return self._count is not None

    @property
    def count(self) -> int | None:
        """Plural count, or None for non-plural calls."""
        return self._count

    def keys(self) -> tuple[str, ...]:
        """Argument keys in insertion order."""
        return tuple(k for k, _ in self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentSet):
            return NotImplemented
        return self._pairs == other._pairs and self._count == other._count

    def __hash__(self) -> int:
        return hash((self._pairs, self._count))

    def __repr__(self) -> str:
        return f"ArgumentSet({dict(self._pairs)!r}, count={self._count!r})"
