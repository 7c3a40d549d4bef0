"""Placeholder scanning and substitution.

A placeholder is ``%{key}``: the literal ``%{``, the shortest run of
characters up to the next ``}``, then ``}``. Substitution is a single
left-to-right pass; substituted values are never rescanned.

Python 3.13+. Zero external dependencies.
"""

from tr8n.constants import PLACEHOLDER_PATTERN
from tr8n.diagnostics import ErrorTemplate, MissingArgumentError

from .arguments import ArgumentSet

__all__ = ["find_first_placeholder", "interpolate"]


def find_first_placeholder(template: str) -> str | None:
    """Return the key of the leftmost placeholder, or None if there is none."""
    match = PLACEHOLDER_PATTERN.search(template)
    return match.group(1) if match else None


def interpolate(message_id: str, template: str, args: ArgumentSet) -> str:
    """Replace every placeholder in template with its argument value.

    Arguments that the template never references are ignored.

    Args:
        message_id: Identifier of the message being resolved (for errors)
        template: Template text
        args: Argument values

    Returns:
        The fully substituted text

    Raises:
        MissingArgumentError: For the first placeholder, scanning left to
            right, whose key is absent from args. No partial text is returned.
    """
    parts: list[str] = []
    position = 0

    for match in PLACEHOLDER_PATTERN.finditer(template):
        key = match.group(1)
        if not args.has(key):
            raise MissingArgumentError(
                ErrorTemplate.argument_not_provided(message_id, key),
                message_id=message_id,
                argument_key=key,
            )
        parts.append(template[position : match.start()])
        parts.append(args.get(key))
        position = match.end()

    parts.append(template[position:])
    return "".join(parts)
