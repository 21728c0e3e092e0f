"""Key/value rendering for failure messages.

Pairs are printed either as an aligned two-column table, when every value
fits on one line, or in a multi-line layout where each key is followed by
its line count and the indented value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from assertfmt.lib.errors import InvalidArgumentError, require_int, require_str
from assertfmt.lib.lines import count_lines, is_single_line
from assertfmt.lib.transform import prefix_lines
from assertfmt.lib.types import DEFAULT_INDENT, NO_KEY_WIDTH, KeyValuePair

logger = logging.getLogger(__name__)


def pairs_from_flat(items: Sequence[str]) -> list[KeyValuePair]:
    """Group a flat ``key, value, key, value, ...`` sequence into pairs.

    >>> pairs_from_flat(["expected", "1", "actual", "2"])
    [('expected', '1'), ('actual', '2')]
    """
    if len(items) % 2:
        raise InvalidArgumentError(
            f"Expected key/value pairs, got an odd number of items ({len(items)})."
        )
    return _coerce_pairs(zip(items[::2], items[1::2], strict=True))


def _coerce_pairs(pairs: Iterable[object]) -> list[KeyValuePair]:
    coerced: list[KeyValuePair] = []
    for i, pair in enumerate(pairs):
        if isinstance(pair, str) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise InvalidArgumentError(
                f"Invalid value for 'pairs[{i}]': expected a (key, value) pair, got {pair!r}."
            )
        key, value = pair
        coerced.append(
            (
                require_str(key, name=f"pairs[{i}].key"),
                require_str(value, name=f"pairs[{i}].value"),
            )
        )
    return coerced


def max_key_width(pairs: Iterable[KeyValuePair]) -> int:
    """Length of the longest key whose value is single-line.

    Keys with multi-line values are left out since those pairs are never
    laid out in columns. Returns -1 when no value is single-line.
    """
    width = NO_KEY_WIDTH
    for key, value in _coerce_pairs(pairs):
        if is_single_line(value):
            width = max(width, len(key))
    return width


def format_two_column(width: int, pairs: Iterable[KeyValuePair]) -> str:
    """Render pairs as ``key : value`` lines with keys padded to width.

    >>> print(format_two_column(5, [("a", "1"), ("bb", "22")]), end="")
    a     : 1
    bb    : 22
    """
    require_int(width, name="width")
    return "".join(f"{key.ljust(width)} : {value}\n" for key, value in _coerce_pairs(pairs))


def format_multi_line(pairs: Iterable[KeyValuePair]) -> str:
    """Render each pair as a ``key (N lines):`` header followed by the value."""

    return "".join(
        f"{key} ({count_lines(value)} lines):\n{value}\n" for key, value in _coerce_pairs(pairs)
    )


def _indent_value(value: str) -> str:
    indented = prefix_lines(value, DEFAULT_INDENT, keep_empty_lines=value.endswith("\n"))
    # format_multi_line terminates the value itself.
    return indented.removesuffix("\n")


def format_adaptive(width: int, pairs: Iterable[KeyValuePair]) -> str:
    """Pick the two-column or multi-line layout for a set of pairs.

    If every value is single-line, pairs are printed in two columns with the
    given key width. Otherwise all values, including single-line ones, are
    indented by two spaces and printed in the multi-line layout. A value
    ending in a newline keeps it visible as a final indented empty line.
    """
    require_int(width, name="width")
    coerced = _coerce_pairs(pairs)
    if is_single_line(*(value for _, value in coerced)):
        logger.debug("Rendering %d pairs in two-column layout.", len(coerced))
        return format_two_column(width, coerced)

    logger.debug("Rendering %d pairs in multi-line layout.", len(coerced))
    return format_multi_line([(key, _indent_value(value)) for key, value in coerced])
