"""Tests for PluralCase and MessageConfig.

Covers:
- PluralCase construction invariants
- Simple vs. plural shape (is_plural, simple_template, templates)
- Threshold selection boundaries and the no-match policy
- Ascending-order validation at construction time
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import plural_case_lists
from tr8n import InvalidArgumentsError, InvalidConfigurationError, MessageConfig, PluralCase
from tr8n.diagnostics import DiagnosticCode


class TestPluralCase:
    """PluralCase validates its threshold and template."""

    def test_valid_case(self) -> None:
        """Non-negative int threshold with str template is accepted."""
        case = PluralCase(2, "%{n} items")
        assert case.threshold == 2
        assert case.template == "%{n} items"

    def test_negative_threshold_rejected(self) -> None:
        """Negative thresholds are a configuration error."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            PluralCase(-1, "never")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_THRESHOLD

    @pytest.mark.parametrize("threshold", [True, 1.0, "1", None])
    def test_non_int_threshold_rejected(self, threshold: object) -> None:
        """bool, float, str and None thresholds are rejected."""
        with pytest.raises(InvalidConfigurationError):
            PluralCase(threshold, "x")  # type: ignore[arg-type]

    def test_non_str_template_rejected(self) -> None:
        """Templates must be text."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            PluralCase(0, b"bytes")  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_TEMPLATE

    def test_frozen(self) -> None:
        """Cases are immutable after construction."""
        case = PluralCase(0, "none")
        with pytest.raises(AttributeError):
            case.threshold = 5  # type: ignore[misc]


class TestMessageConfigShape:
    """A config is simple or plural, never both."""

    def test_simple_is_not_plural(self) -> None:
        """Plain-template configs are never plural."""
        config = MessageConfig.simple("Inbox")
        assert not config.is_plural
        assert config.simple_template == "Inbox"
        assert config.templates == ("Inbox",)
        assert config.thresholds == ()

    def test_single_case_plural_is_plural(self) -> None:
        """One explicit plural case still makes a plural config."""
        config = MessageConfig.plural([(0, "any count")])
        assert config.is_plural
        assert config.thresholds == (0,)

    def test_multi_case_plural(self) -> None:
        """Tuples are converted to PluralCase in configured order."""
        config = MessageConfig.plural([(0, "A"), (1, "B"), (2, "C")])
        assert config.cases == (PluralCase(0, "A"), PluralCase(1, "B"), PluralCase(2, "C"))
        assert config.templates == ("A", "B", "C")

    def test_plural_from_mapping(self) -> None:
        """A {threshold: template} mapping is accepted in iteration order."""
        config = MessageConfig.plural({0: "none", 1: "one", 2: "many"}, message_id="n")
        assert config.cases == (PluralCase(0, "none"), PluralCase(1, "one"), PluralCase(2, "many"))

    def test_plural_rejects_bare_thresholds(self) -> None:
        """Cases must pair a threshold with a template."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            MessageConfig.plural([0, 1], message_id="n")  # type: ignore[list-item]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_CASE
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_simple_template_on_plural_is_programming_error(self) -> None:
        """simple_template on a plural config raises TypeError, not a TranslationError."""
        config = MessageConfig.plural([(0, "A")])
        with pytest.raises(TypeError):
            _ = config.simple_template

    def test_select_on_simple_is_programming_error(self) -> None:
        """select_plural_template on a simple config raises TypeError."""
        with pytest.raises(TypeError):
            MessageConfig.simple("x").select_plural_template(1)

    def test_both_shapes_rejected(self) -> None:
        """Direct construction with a template and cases is rejected."""
        with pytest.raises(InvalidConfigurationError):
            MessageConfig(template="x", cases=(PluralCase(0, "y"),))

    def test_empty_cases_rejected(self) -> None:
        """A plural config needs at least one case."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            MessageConfig.plural([], message_id="items")
        assert exc_info.value.message_id == "items"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NO_PLURAL_CASES

    def test_neither_shape_rejected(self) -> None:
        """MessageConfig() with nothing configured is rejected."""
        with pytest.raises(InvalidConfigurationError):
            MessageConfig()


class TestThresholdOrdering:
    """Thresholds must be strictly ascending."""

    def test_descending_rejected(self) -> None:
        """Out-of-order thresholds are rejected with the offending values."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            MessageConfig.plural([(2, "C"), (1, "B")], message_id="items")
        assert "threshold 1" in str(exc_info.value)
        assert exc_info.value.message_id == "items"

    def test_duplicate_threshold_rejected(self) -> None:
        """Equal thresholds would make one case unreachable."""
        with pytest.raises(InvalidConfigurationError):
            MessageConfig.plural([(1, "a"), (1, "b")])

    def test_gaps_allowed(self) -> None:
        """Thresholds need not be contiguous."""
        config = MessageConfig.plural([(0, "none"), (5, "several"), (100, "lots")])
        assert config.thresholds == (0, 5, 100)


class TestPluralSelection:
    """Highest qualifying threshold wins; no match fails."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "A"), (1, "B"), (2, "C"), (100, "C")],
    )
    def test_threshold_boundaries(self, count: int, expected: str) -> None:
        """Cases {0: A, 1: B, 2: C} select by exact boundaries with unbounded top."""
        config = MessageConfig.plural([(0, "A"), (1, "B"), (2, "C")])
        assert config.select_plural_template(count) == expected

    def test_gap_below_lowest_threshold_fails(self) -> None:
        """Cases {1: X, 2: Y} have nothing for 0."""
        config = MessageConfig.plural([(1, "X"), (2, "Y")])
        with pytest.raises(InvalidArgumentsError) as exc_info:
            config.select_plural_template(0, message_id="seats")
        assert exc_info.value.message_id == "seats"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PLURAL_CASE_NOT_FOUND

    def test_no_fallback_to_lowest_case(self) -> None:
        """Counts below every threshold never borrow the lowest case."""
        config = MessageConfig.plural([(10, "ten or more")])
        with pytest.raises(InvalidArgumentsError):
            config.select_plural_template(9)
        assert config.select_plural_template(10) == "ten or more"

    def test_negative_count_rejected(self) -> None:
        """Counts must be non-negative."""
        config = MessageConfig.plural([(0, "A")])
        with pytest.raises(ValueError, match="non-negative"):
            config.select_plural_template(-1)

    def test_bool_count_rejected(self) -> None:
        """bool is not accepted as a count."""
        config = MessageConfig.plural([(0, "A")])
        with pytest.raises(TypeError):
            config.select_plural_template(True)

    @given(cases=plural_case_lists(), count=st.integers(min_value=0, max_value=2000))
    def test_selects_greatest_threshold_not_above_count(
        self, cases: list[tuple[int, str]], count: int
    ) -> None:
        """Selection equals the template of max(threshold <= count)."""
        config = MessageConfig.plural(cases)
        qualifying = [t for t, _ in cases if t <= count]
        if not qualifying:
            with pytest.raises(InvalidArgumentsError):
                config.select_plural_template(count)
            return
        assert config.select_plural_template(count) == f"case-{max(qualifying)}"

    @given(
        cases=plural_case_lists(),
        c1=st.integers(min_value=0, max_value=2000),
        c2=st.integers(min_value=0, max_value=2000),
    )
    def test_counts_in_same_range_select_same_template(
        self, cases: list[tuple[int, str]], c1: int, c2: int
    ) -> None:
        """Two counts with the same best threshold select the same template."""
        low, high = sorted((c1, c2))
        config = MessageConfig.plural(cases)
        below_low = [t for t, _ in cases if t <= low]
        below_high = [t for t, _ in cases if t <= high]
        if not below_low or max(below_low) != max(below_high):
            return
        assert config.select_plural_template(low) == config.select_plural_template(high)
