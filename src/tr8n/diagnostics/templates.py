"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def message_not_found(message_id: str) -> Diagnostic:
        """Message identifier not configured in the table.

        Args:
            message_id: The message identifier that was not found

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{message_id}' not found"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check that the message is added to the message table",
            message_id=message_id,
        )

    @staticmethod
    def plural_call_on_simple(message_id: str) -> Diagnostic:
        """Plural count supplied for a message without plural cases.

        Args:
            message_id: The message identifier

        Returns:
            Diagnostic for PLURAL_MODE_MISMATCH
        """
        msg = f"Message '{message_id}' has no plural cases but a plural count was given"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_MODE_MISMATCH,
            message=msg,
            hint="Call translate() without a count, or configure plural cases",
            message_id=message_id,
        )

    @staticmethod
    def simple_call_on_plural(message_id: str) -> Diagnostic:
        """Message with plural cases requested without a plural count.

        Args:
            message_id: The message identifier

        Returns:
            Diagnostic for PLURAL_MODE_MISMATCH
        """
        msg = f"Message '{message_id}' has plural cases and requires a plural count"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_MODE_MISMATCH,
            message=msg,
            hint="Use translate_plural() or ArgumentSet.with_count()",
            message_id=message_id,
        )

    @staticmethod
    def plural_case_not_found(message_id: str, count: int) -> Diagnostic:
        """No plural case threshold is at or below the count.

        Args:
            message_id: The message identifier
            count: The requested plural count

        Returns:
            Diagnostic for PLURAL_CASE_NOT_FOUND
        """
        msg = f"No plural case of message '{message_id}' matches count {count}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CASE_NOT_FOUND,
            message=msg,
            hint="Add a plural case with a threshold at or below this count (usually 0)",
            message_id=message_id,
        )

    @staticmethod
    def argument_not_provided(message_id: str, argument_key: str) -> Diagnostic:
        """Placeholder key not supplied in the argument set.

        Args:
            message_id: The message identifier
            argument_key: The placeholder key (without %{ })

        Returns:
            Diagnostic for ARGUMENT_NOT_PROVIDED
        """
        msg = f"Argument '{argument_key}' not provided for message '{message_id}'"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{argument_key}' in the argument set",
            message_id=message_id,
            argument_name=argument_key,
        )

    @staticmethod
    def duplicate_argument(argument_key: str) -> Diagnostic:
        """Argument key added twice.

        Args:
            argument_key: The repeated key

        Returns:
            Diagnostic for DUPLICATE_ARGUMENT
        """
        msg = f"Argument '{argument_key}' already set"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ARGUMENT,
            message=msg,
            hint="Each argument key may appear only once per argument set",
            argument_name=argument_key,
        )

    @staticmethod
    def no_plural_cases(message_id: str) -> Diagnostic:
        """Plural message registered with an empty case list.

        Args:
            message_id: The message identifier

        Returns:
            Diagnostic for NO_PLURAL_CASES
        """
        msg = f"Plural message '{message_id}' has no cases"
        return Diagnostic(
            code=DiagnosticCode.NO_PLURAL_CASES,
            message=msg,
            hint="Provide at least one (threshold, template) case",
            message_id=message_id,
        )

    @staticmethod
    def duplicate_message_id(message_id: str) -> Diagnostic:
        """Message identifier already registered.

        Args:
            message_id: The repeated identifier

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_ID
        """
        msg = f"Message '{message_id}' is already configured"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
            message=msg,
            hint="Remove the duplicate entry; tables do not overwrite messages",
            message_id=message_id,
        )

    @staticmethod
    def threshold_not_ascending(message_id: str, previous: int, threshold: int) -> Diagnostic:
        """Plural case thresholds out of order.

        Args:
            message_id: The message identifier
            previous: Threshold of the preceding case
            threshold: Offending threshold

        Returns:
            Diagnostic for THRESHOLD_NOT_ASCENDING
        """
        msg = (
            f"Plural case threshold {threshold} of message '{message_id}' "
            f"does not follow {previous} in ascending order"
        )
        return Diagnostic(
            code=DiagnosticCode.THRESHOLD_NOT_ASCENDING,
            message=msg,
            hint="List plural cases in strictly ascending threshold order",
            message_id=message_id,
        )

    @staticmethod
    def invalid_threshold(threshold: object) -> Diagnostic:
        """Plural case threshold is not a non-negative integer.

        Args:
            threshold: The rejected value

        Returns:
            Diagnostic for INVALID_THRESHOLD
        """
        msg = f"Plural case threshold must be a non-negative integer, got {threshold!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_THRESHOLD,
            message=msg,
            hint="Use 0 for the case that covers the lowest counts",
        )

    @staticmethod
    def invalid_template(template: object) -> Diagnostic:
        """Template is not text.

        Args:
            template: The rejected value

        Returns:
            Diagnostic for INVALID_TEMPLATE
        """
        msg = f"Message template must be str, got {type(template).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TEMPLATE,
            message=msg,
        )

    @staticmethod
    def invalid_message_id(message_id: object) -> Diagnostic:
        """Message identifier is empty or not text.

        Args:
            message_id: The rejected value

        Returns:
            Diagnostic for INVALID_MESSAGE_ID
        """
        msg = f"Message identifier must be a non-empty str, got {message_id!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MESSAGE_ID,
            message=msg,
        )

    @staticmethod
    def table_frozen(message_id: str) -> Diagnostic:
        """Registration on a frozen table.

        Args:
            message_id: The identifier that was being added

        Returns:
            Diagnostic for TABLE_FROZEN
        """
        msg = f"Cannot add message '{message_id}': table is frozen"
        return Diagnostic(
            code=DiagnosticCode.TABLE_FROZEN,
            message=msg,
            hint="Finish building the table before binding it to a translator",
            message_id=message_id,
        )

    @staticmethod
    def invalid_case(message_id: str, case: object) -> Diagnostic:
        """Plural case entry is neither a PluralCase nor a (threshold, template) pair.

        Args:
            message_id: The message identifier
            case: The rejected entry

        Returns:
            Diagnostic for INVALID_CASE
        """
        msg = (
            f"Plural case of message '{message_id}' must be a (threshold, template) pair, "
            f"got {case!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_CASE,
            message=msg,
            hint="Write each case as (threshold, template), e.g. (0, 'No items')",
            message_id=message_id,
        )
