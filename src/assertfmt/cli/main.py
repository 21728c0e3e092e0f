"""Cyclopts CLI entry point for assertfmt."""

from __future__ import annotations

import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from assertfmt import __version__
from assertfmt.lib.config import AssertfmtConfig, load_config
from assertfmt.lib.decorate import decorate, write_err
from assertfmt.lib.errors import InvalidArgumentError
from assertfmt.lib.kv import (
    format_adaptive,
    format_multi_line,
    format_two_column,
    max_key_width,
    pairs_from_flat,
)
from assertfmt.lib.lines import count_lines, is_single_line
from assertfmt.lib.transform import mark_lines, prefix_lines

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    config: AssertfmtConfig
    verbosity: int = 0
    json_logs: bool = False


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    return _GLOBAL_OPTIONS.get() or GlobalOptions(config=AssertfmtConfig())


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_stdin() -> str:
    return sys.stdin.read()


def _parse_indices(raw: Sequence[str]) -> list[int]:
    indices: list[int] = []
    for token in raw:
        try:
            indices.append(int(token.strip()))
        except ValueError as error:
            raise InvalidArgumentError(
                f"Invalid line index {token!r}: expected int."
            ) from error
    return indices


app = App(
    name="assertfmt",
    help="Format diagnostic output for test failure messages.",
    version=__version__,
    help_formatter="plain",
)


@app.command(name="count-lines")
def cmd_count_lines(text: str) -> None:
    """Print the number of lines in TEXT."""

    _write(f"{count_lines(text)}\n")


@app.command(name="single-line")
def cmd_single_line(*values: str) -> None:
    """Exit with status 0 if every value is single-line, 1 otherwise."""

    if not is_single_line(*values):
        raise SystemExit(1)


@app.command(name="kv-width")
def cmd_kv_width(*items: str) -> None:
    """Print the length of the longest key that has a single-line value."""

    _write(f"{max_key_width(pairs_from_flat(items))}\n")


@app.command(name="kv")
def cmd_kv(
    *items: str,
    width: Annotated[
        int | None,
        Parameter(name="--width", help="Key column width for the two-column layout."),
    ] = None,
) -> None:
    """Print KEY VALUE pairs in two-column or multi-line layout."""

    pairs = pairs_from_flat(items)
    resolved = max_key_width(pairs) if width is None else width
    logger.debug("kv layout", pairs=len(pairs), width=resolved)
    _write(format_adaptive(resolved, pairs))


@app.command(name="kv-single")
def cmd_kv_single(
    *items: str,
    width: Annotated[
        int | None,
        Parameter(name="--width", help="Key column width."),
    ] = None,
) -> None:
    """Print KEY VALUE pairs in two-column layout."""

    pairs = pairs_from_flat(items)
    resolved = max_key_width(pairs) if width is None else width
    _write(format_two_column(resolved, pairs))


@app.command(name="kv-multi")
def cmd_kv_multi(*items: str) -> None:
    """Print KEY VALUE pairs with the line count of each value."""

    _write(format_multi_line(pairs_from_flat(items)))


@app.command(name="prefix")
def cmd_prefix(
    prefix: Annotated[
        str | None,
        Parameter(name="--prefix", help="String prepended to each line."),
    ] = None,
    keep_empty_lines: Annotated[
        bool,
        Parameter(
            name="--keep-empty-lines",
            help="Treat the trailing newline of stdin as meaningful.",
            negative=(),
        ),
    ] = False,
) -> None:
    """Prefix each line read from stdin."""

    resolved = get_global_options().config.indent if prefix is None else prefix
    _write(prefix_lines(_read_stdin(), resolved, keep_empty_lines=keep_empty_lines))


@app.command(name="mark")
def cmd_mark(
    *indices: str,
    symbol: Annotated[
        str | None,
        Parameter(name="--symbol", help="String overwriting the start of marked lines."),
    ] = None,
    keep_empty_lines: Annotated[
        bool,
        Parameter(
            name="--keep-empty-lines",
            help="Treat the trailing newline of stdin as meaningful.",
            negative=(),
        ),
    ] = False,
) -> None:
    """Mark the lines read from stdin at the given zero-based indices."""

    resolved = get_global_options().config.mark_symbol if symbol is None else symbol
    _write(
        mark_lines(
            _read_stdin(),
            resolved,
            _parse_indices(indices),
            keep_empty_lines=keep_empty_lines,
        )
    )


@app.command(name="decorate")
def cmd_decorate(title: str | None = None) -> None:
    """Enclose the text read from stdin in a titled header and footer."""

    resolved = get_global_options().config.decorate_title if title is None else title
    _write(decorate(resolved, _read_stdin()))


@app.command(name="err")
def cmd_err(*message: str) -> None:
    """Print MESSAGE, or stdin when no message is given, to stderr."""

    write_err(*message)


def _extract_global_flags(argv: Sequence[str]) -> tuple[list[str], int, bool]:
    """Strip logging flags that precede the command name.

    Tokens after the command name are left alone so that values such as
    `-v` reach the command unchanged.
    """
    verbosity = 0
    json_logs = False
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in {"--verbose", "-v"}:
            verbosity += 1
        elif arg == "--log-json":
            json_logs = True
        else:
            break
        i += 1
    return list(argv[i:]), verbosity, json_logs


def _operation_error_message(exc: Exception) -> str:
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `assertfmt` and `python -m assertfmt`."""

    from assertfmt.lib.logging import configure_logging

    args, verbosity, json_logs = _extract_global_flags(
        list(sys.argv[1:] if argv is None else argv)
    )

    # Configure logging early so warnings go to stderr, not stdout.
    configure_logging(json_mode=json_logs, verbosity=verbosity)

    try:
        options = GlobalOptions(
            config=load_config(),
            verbosity=verbosity,
            json_logs=json_logs,
        )
    except (ValueError, OSError) as exc:
        print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
        raise SystemExit(1) from None
    logger.debug("resolved config", config=options.config)

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(args)
        except (ValueError, OSError) as exc:
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
