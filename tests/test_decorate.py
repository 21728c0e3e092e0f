"""Block decoration and stderr output tests."""

from __future__ import annotations

import io

import pytest

from assertfmt.lib.decorate import decorate, write_err


def test_decorate_single_line_body() -> None:
    output = decorate("TITLE", "body")
    assert output == "\n-- TITLE --\nbody\n--\n\n"
    assert output.split("\n")[:-1] == ["", "-- TITLE --", "body", "--", ""]


def test_decorate_keeps_body_verbatim() -> None:
    body = "line 1\n\nline 3\n"
    assert decorate("output", body) == f"\n-- output --\n{body}--\n\n"


def test_decorate_empty_body() -> None:
    assert decorate("empty", "") == "\n-- empty --\n--\n\n"


def test_write_err_joins_message_parts() -> None:
    stream = io.StringIO()
    write_err("assertion", "failed", stream=stream)
    assert stream.getvalue() == "assertion failed\n"


def test_write_err_copies_stdin_without_message() -> None:
    stream = io.StringIO()
    write_err(stdin=io.StringIO("from\nstdin\n"), stream=stream)
    assert stream.getvalue() == "from\nstdin\n"


def test_write_err_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    write_err("boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "boom\n"
