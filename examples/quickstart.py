"""Quickstart example for tr8n.

This example demonstrates the three call modes of a translator, error
handling, and table validation.

Note: Example 2 onward uses resolve() where failures are expected, so the
script keeps running. In production, translate() in STRICT mode raises.
"""

import logging

from tr8n import (
    ArgumentSet,
    ErrorMode,
    MessageTable,
    MissingArgumentError,
    SimpleTranslator,
    validate_table,
)
from tr8n.diagnostics import DiagnosticFormatter, OutputFormat

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

table = MessageTable.from_mapping(
    {
        "title": "Inbox",
        "greeting": "Hello, %{name}!",
        "transfer": "%{sender} sent %{amount} to %{recipient}",
        "unread": {0: "No new mail", 1: "One new message", 2: "%{count} new messages"},
        "seats": [(1, "Only one seat left"), (2, "%{n} seats left")],
    },
    locale="en-US",
)

# Example 1: Plain lookup
print("=" * 50)
print("Example 1: Plain Lookup")
print("=" * 50)

translator = SimpleTranslator(table)
print(translator.translate("title"))
# Output: Inbox

# Example 2: Arguments
print("\n" + "=" * 50)
print("Example 2: Placeholder Interpolation")
print("=" * 50)

print(translator.translate("greeting", {"name": "Alice"}))
# Output: Hello, Alice!

args = ArgumentSet({"sender": "Bob", "amount": "EUR 12", "recipient": "Carol"})
print(translator.translate("transfer", args))
# Output: Bob sent EUR 12 to Carol

# Example 3: Plural cases
print("\n" + "=" * 50)
print("Example 3: Plural Cases")
print("=" * 50)

for count in (0, 1, 2, 25):
    print(translator.translate_plural("unread", count, {"count": str(count)}))
# Output:
#   No new mail
#   One new message
#   2 new messages
#   25 new messages

# Example 4: Errors
print("\n" + "=" * 50)
print("Example 4: Errors")
print("=" * 50)

try:
    translator.translate("transfer", {"sender": "Bob"})
except MissingArgumentError as e:
    print(f"Missing argument: {e.argument_key}")
# Output: Missing argument: amount

resolution = translator.resolve_plural("seats", 0)
print(f"ok={resolution.ok} category={resolution.error.category if resolution.error else None}")
# Output: ok=False category=invalid-arguments

if resolution.error is not None and resolution.error.diagnostic is not None:
    print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(resolution.error.diagnostic))
# Output: PLURAL_CASE_NOT_FOUND: No plural case of message 'seats' matches count 0

# Example 5: Degraded mode
print("\n" + "=" * 50)
print("Example 5: ErrorMode.EMPTY")
print("=" * 50)

quiet = SimpleTranslator(table, error_mode=ErrorMode.EMPTY)
print(repr(quiet.translate("no-such-message")))
# Output: ''  (and a WARNING log line)

# Example 6: Validation
print("\n" + "=" * 50)
print("Example 6: Table Validation")
print("=" * 50)

print(validate_table(table).format())
# Output:
#   Warnings (3):
#     [plural-placeholder-mismatch]: Plural cases reference different placeholders (unread)
#     [plural-no-zero-case]: Counts below 1 match no plural case (seats)
#     [plural-placeholder-mismatch]: Plural cases reference different placeholders (seats)
