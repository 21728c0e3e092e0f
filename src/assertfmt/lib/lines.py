"""Logical line splitting and counting.

Whether the text after the final newline counts as a line is decided here
and nowhere else, so counting, prefixing and marking always agree on the
number of lines in a value.
"""

from __future__ import annotations

from assertfmt.lib.errors import require_str


def split_lines(text: str, keep_empty_lines: bool = False) -> list[str]:
    """Split text into logical lines.

    Every newline-terminated segment is a line, empty or not. The segment
    after the last newline is a line when it has content. With
    ``keep_empty_lines`` the trailing newline is meaningful, so an empty
    final segment is kept too once at least one line precedes it.

    >>> split_lines("a\\n\\nb")
    ['a', '', 'b']
    >>> split_lines("a\\n\\n")
    ['a', '']
    >>> split_lines("a\\n\\n", keep_empty_lines=True)
    ['a', '', '']
    >>> split_lines("", keep_empty_lines=True)
    []
    """
    require_str(text, name="text")
    lines = text.split("\n")
    tail = lines.pop()
    if tail or (keep_empty_lines and lines):
        lines.append(tail)
    return lines


def count_lines(text: str) -> int:
    """Return the number of logical lines in text.

    >>> [count_lines(t) for t in ("", "a", "a\\n", "a\\n\\n", "\\n")]
    [0, 1, 1, 2, 1]
    """
    return len(split_lines(text))


def is_single_line(*values: str) -> bool:
    """True when none of the values spans more than one line."""

    return all(count_lines(value) <= 1 for value in values)
