"""Core assertfmt library exports."""

from assertfmt.lib.decorate import decorate, write_err
from assertfmt.lib.errors import InvalidArgumentError
from assertfmt.lib.kv import (
    format_adaptive,
    format_multi_line,
    format_two_column,
    max_key_width,
    pairs_from_flat,
)
from assertfmt.lib.lines import count_lines, is_single_line, split_lines
from assertfmt.lib.transform import mark_lines, prefix_lines
from assertfmt.lib.types import KeyValuePair, PairSequence

__all__ = [
    "InvalidArgumentError",
    "KeyValuePair",
    "PairSequence",
    "count_lines",
    "decorate",
    "format_adaptive",
    "format_multi_line",
    "format_two_column",
    "is_single_line",
    "mark_lines",
    "max_key_width",
    "pairs_from_flat",
    "prefix_lines",
    "split_lines",
    "write_err",
]
