"""Diagnostic text formatting for test failure messages."""

from assertfmt.lib import (
    InvalidArgumentError,
    count_lines,
    decorate,
    format_adaptive,
    format_multi_line,
    format_two_column,
    is_single_line,
    mark_lines,
    max_key_width,
    pairs_from_flat,
    prefix_lines,
    split_lines,
    write_err,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "__version__",
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
