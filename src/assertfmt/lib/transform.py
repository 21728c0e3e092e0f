"""Line-by-line transforms applied to values before they are printed."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from assertfmt.lib.errors import require_ints, require_str
from assertfmt.lib.lines import split_lines
from assertfmt.lib.types import DEFAULT_INDENT

logger = logging.getLogger(__name__)


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def prefix_lines(
    text: str,
    prefix: str = DEFAULT_INDENT,
    keep_empty_lines: bool = False,
) -> str:
    """Prefix each line of text with the given string.

    Empty lines are prefixed like any other line. By default the output has
    exactly ``count_lines(text)`` lines. With ``keep_empty_lines`` the
    trailing newline of text is meaningful and shows up as one more, empty,
    prefixed line.

    >>> prefix_lines("a\\n\\nb", "> ")
    '> a\\n> \\n> b\\n'
    >>> prefix_lines("a\\n", "> ", keep_empty_lines=True)
    '> a\\n> \\n'
    """
    require_str(prefix, name="prefix")
    lines = split_lines(text, keep_empty_lines=keep_empty_lines)
    logger.debug(
        "Prefixing %d lines (keep_empty_lines=%s).", len(lines), keep_empty_lines
    )
    return _join(f"{prefix}{line}" for line in lines)


def mark_lines(
    text: str,
    symbol: str,
    indices: Iterable[int],
    keep_empty_lines: bool = False,
) -> str:
    """Overwrite the beginning of selected lines with symbol.

    Indices are zero-based; duplicates and ordering do not matter, and
    indices past the last line are ignored. The symbol replaces as many
    leading characters as it is long, so marking indented text keeps the
    columns aligned. A line shorter than the symbol becomes the symbol.
    ``keep_empty_lines`` works as in :func:`prefix_lines`.

    >>> mark_lines("  a\\n  b\\n", "> ", [1])
    '  a\\n> b\\n'
    """
    require_str(symbol, name="symbol")
    pending = sorted(set(require_ints(indices, name="indices")))
    lines = split_lines(text, keep_empty_lines=keep_empty_lines)
    logger.debug(
        "Marking %d indices across %d lines with %r (keep_empty_lines=%s).",
        len(pending),
        len(lines),
        symbol,
        keep_empty_lines,
    )

    marked: list[str] = []
    cursor = 0
    for idx, line in enumerate(lines):
        while cursor < len(pending) and pending[cursor] < idx:
            cursor += 1
        if cursor < len(pending) and pending[cursor] == idx:
            line = symbol + line[len(symbol):]
            cursor += 1
        marked.append(line)
    return _join(marked)
