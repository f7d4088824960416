"""Positional placeholder substitution.

Templates use two marker kinds:

- ``%s`` binds the first argument. Only its first occurrence is replaced,
  and when present, indexed markers are left alone.
- ``%1$s``, ``%2$s``, ... bind the argument at that 1-based position.

``format_string`` produces a plain string. ``format_segments`` produces a
list of literal substrings interleaved with the raw argument values, so
non-string arguments (renderable nodes, links) keep their identity.
"""

import re
from typing import Any, List, Sequence, Union

SINGLE_MARKER = "%s"

# Segment splitting only recognizes single-digit indexes.
_MARKER_PATTERN = re.compile(r"(%(?:\d\$)?s)")

Segment = Union[str, Any]


def indexed_marker(position: int) -> str:
    """Return the indexed marker for a 1-based argument position."""
    return f"%{position}$s"


def to_text(value: Any) -> str:
    """Stringify an argument; whole-number floats render without ".0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_string(template: str, args: Sequence[Any]) -> str:
    """Substitute arguments into a template, producing a string.

    Args:
        template: Template with ``%s`` or ``%N$s`` markers.
        args: Positional argument values; each is stringified.

    Returns:
        The formatted string. Markers without a matching argument stay as
        literal text and surplus arguments are ignored.
    """
    if not args:
        return template
    if SINGLE_MARKER in template:
        return template.replace(SINGLE_MARKER, to_text(args[0]), 1)
    for position, arg in enumerate(args, start=1):
        template = template.replace(indexed_marker(position), to_text(arg), 1)
    return template


def format_segments(template: str, args: Sequence[Any]) -> List[Segment]:
    """Substitute arguments into a template, producing a segment list.

    The template is split on markers; empty literal pieces are dropped.
    The ``%s`` slot (first occurrence only) receives ``args[0]``, otherwise
    each ``%N$s`` slot receives ``args[N - 1]``. Values are inserted as-is.

    Args:
        template: Template with ``%s`` or ``%N$s`` markers.
        args: Positional argument values, not stringified.

    Returns:
        Ordered list of literal strings and argument values.
    """
    parts = [part for part in _MARKER_PATTERN.split(template) if part]
    segments: List[Segment] = list(parts)
    if not args:
        return segments
    if SINGLE_MARKER in parts:
        segments[parts.index(SINGLE_MARKER)] = args[0]
        return segments
    for position, arg in enumerate(args, start=1):
        marker = indexed_marker(position)
        if marker in parts:
            segments[parts.index(marker)] = arg
    return segments
