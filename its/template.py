"""Message templates with positional placeholders."""

from __future__ import annotations

from typing import Any, List, Sequence

from its.value import is_undefined

# The template placeholder, used to split message templates.
PLACEHOLDER = "%s"


def _stringify(value: Any) -> str:
    if is_undefined(value):
        return ""
    return str(value)


def render(template: str, args: Sequence[Any] = ()) -> str:
    """Populate a template's placeholders with the given arguments.

    The template is split on ``%s`` and each literal fragment is followed by
    the argument at the same position. Placeholders without a matching
    argument render as the empty string, and arguments beyond the last
    placeholder are ignored.

    Args:
        template: A string with zero or more ``%s`` placeholders.
        args: Items to populate the template with.

    Returns:
        The resolved message.

    Example:
        render("Hello")  # "Hello"
        render("Hello, %s", ["world"])  # "Hello, world"
        render("Hello, %s. It's %s degrees outside.", ["world", 72])
    """
    fragments = template.split(PLACEHOLDER)
    result: List[str] = [fragments[0]]
    for index, fragment in enumerate(fragments[1:]):
        if index < len(args):
            result.append(_stringify(args[index]))
        result.append(fragment)
    return "".join(result)
