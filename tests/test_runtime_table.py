"""Tests for MessageTable.

Covers chained registration, duplicate rejection, freezing, construction
from mappings, locale validation through Babel, and lookup.
"""

import logging

import pytest

from tr8n import (
    DuplicateIdentifierError,
    FrozenTableError,
    InvalidConfigurationError,
    MessageTable,
    SimpleTranslator,
    UnknownMessageError,
)
from tr8n.diagnostics import DiagnosticCode


class TestMessageTableRegistration:
    """add() registers simple and plural messages."""

    def test_add_chains(self) -> None:
        """add() returns the table itself."""
        table = MessageTable()
        assert table.add("a", "A") is table

    def test_simple_and_plural(self) -> None:
        """str entries are simple; case lists are plural."""
        table = MessageTable().add("title", "Inbox").add("files", [(0, "none"), (1, "some")])
        assert not table.lookup("title").is_plural
        assert table.lookup("files").is_plural

    def test_mapping_entry_is_plural(self) -> None:
        """A {threshold: template} mapping registers plural cases in order."""
        table = MessageTable().add("n", {0: "zero", 1: "one", 2: "many"})
        assert table.lookup("n").thresholds == (0, 1, 2)

    def test_duplicate_rejected(self) -> None:
        """Identifiers are never overwritten."""
        table = MessageTable().add("title", "Inbox")
        with pytest.raises(DuplicateIdentifierError) as exc_info:
            table.add("title", "Outbox")
        assert isinstance(exc_info.value, InvalidConfigurationError)
        assert exc_info.value.message_id == "title"
        assert table.lookup("title").simple_template == "Inbox"

    def test_empty_plural_rejected(self) -> None:
        """Plural entries need at least one case."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            MessageTable().add("items", [])
        assert exc_info.value.message_id == "items"

    def test_unsorted_plural_rejected(self) -> None:
        """Thresholds must ascend."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            MessageTable().add("items", [(5, "many"), (0, "none")])
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.THRESHOLD_NOT_ASCENDING

    @pytest.mark.parametrize("message_id", ["", None, 7])
    def test_invalid_identifier_rejected(self, message_id: object) -> None:
        """Identifiers must be non-empty text."""
        with pytest.raises(InvalidConfigurationError):
            MessageTable().add(message_id, "x")  # type: ignore[arg-type]

    def test_non_iterable_entry_rejected(self) -> None:
        """Entries that are neither text nor cases are rejected."""
        with pytest.raises(InvalidConfigurationError):
            MessageTable().add("x", 42)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "cases",
        [[1, 2], [(1,)], [(0, "a", "b")], [None], ["ab"], [(0, "none"), 5]],
    )
    def test_malformed_case_rejected(self, cases: list[object]) -> None:
        """Case entries that are not (threshold, template) pairs are configuration errors."""
        table = MessageTable()
        with pytest.raises(InvalidConfigurationError) as exc_info:
            table.add("m", cases)  # type: ignore[arg-type]
        assert exc_info.value.message_id == "m"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_CASE
        assert "m" not in table

    def test_registration_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each registration is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="tr8n.runtime.table"):
            MessageTable().add("files", [(0, "none")])
        assert "Registered plural message: files" in caplog.text


class TestMessageTableFreeze:
    """Frozen tables are read-only."""

    def test_freeze_blocks_add(self) -> None:
        """add() after freeze() fails."""
        table = MessageTable().add("a", "A").freeze()
        assert table.frozen
        with pytest.raises(FrozenTableError):
            table.add("b", "B")
        assert len(table) == 1

    def test_translator_binding_freezes(self) -> None:
        """Binding a table to a SimpleTranslator freezes it."""
        table = MessageTable().add("a", "A")
        SimpleTranslator(table)
        assert table.frozen

    def test_freeze_idempotent(self, caplog: pytest.LogCaptureFixture) -> None:
        """Freezing twice logs once."""
        table = MessageTable()
        with caplog.at_level(logging.INFO, logger="tr8n.runtime.table"):
            table.freeze()
            table.freeze()
        assert caplog.text.count("MessageTable frozen") == 1


class TestMessageTableLookup:
    """lookup(), get() and container behavior."""

    def test_lookup_unknown(self) -> None:
        """Unknown identifiers raise UnknownMessageError."""
        with pytest.raises(UnknownMessageError) as exc_info:
            MessageTable().lookup("nope")
        assert exc_info.value.message_id == "nope"

    def test_get_unknown_returns_none(self) -> None:
        """get() is the non-raising query."""
        assert MessageTable().get("nope") is None

    def test_container_protocol(self) -> None:
        """in, len and iteration follow registration order."""
        table = MessageTable().add("b", "B").add("a", "A")
        assert "a" in table
        assert "c" not in table
        assert table.has_message("b")
        assert list(table) == ["b", "a"]
        assert table.message_ids() == ("b", "a")

    def test_introspect(self) -> None:
        """introspect() describes placeholders of a registered message."""
        table = MessageTable().add("hi", "Hi %{name}")
        assert table.introspect("hi").placeholders == frozenset({"name"})


class TestMessageTableFromMapping:
    """from_mapping() builds a table from in-memory data."""

    def test_mixed_entries(self) -> None:
        """str, mapping and pair-list entries are all supported."""
        table = MessageTable.from_mapping(
            {
                "title": "Inbox",
                "unread": {0: "No new mail", 1: "One new message", 2: "%{n} new messages"},
                "seats": [(1, "One seat"), (2, "%{n} seats")],
            },
            locale="en",
        )
        assert len(table) == 3
        assert table.locale == "en"
        assert table.lookup("unread").select_plural_template(5) == "%{n} new messages"

    def test_invalid_entry_propagates(self) -> None:
        """Construction errors surface from from_mapping()."""
        with pytest.raises(InvalidConfigurationError):
            MessageTable.from_mapping({"items": []})


class TestMessageTableLocale:
    """Locale codes are normalized and validated with Babel."""

    def test_no_locale(self) -> None:
        """Locale is optional."""
        assert MessageTable().locale is None

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_US"), ("en_us", "en_US"), ("lv", "lv"), ("pt-BR", "pt_BR")],
    )
    def test_canonical_form(self, code: str, expected: str) -> None:
        """BCP-47 and POSIX spellings map to one canonical code."""
        assert MessageTable(locale=code).locale == expected

    @pytest.mark.parametrize("code", ["", "   ", "xx_INVALID", "en US!", "qq"])
    def test_invalid_locale_rejected(self, code: str) -> None:
        """Empty, malformed or unknown locales are rejected eagerly."""
        with pytest.raises(ValueError):
            MessageTable(locale=code)

    def test_repr(self) -> None:
        """repr summarizes locale, size and frozen state."""
        table = MessageTable(locale="de").add("a", "A")
        assert repr(table) == "MessageTable(locale='de', messages=1, frozen=False)"
