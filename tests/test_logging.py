"""Logging configuration tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from assertfmt.lib.logging import _level_from_verbosity, configure_logging


@pytest.mark.parametrize(
    ("verbosity", "expected"),
    ((-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG)),
)
def test_level_from_verbosity(verbosity: int, expected: int) -> None:
    assert _level_from_verbosity(verbosity) == expected


def test_configure_logging_routes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(json_mode=True, verbosity=1)
    try:
        structlog.get_logger("assertfmt.test").info("configured", answer=42)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"answer": 42' in captured.err
    finally:
        structlog.reset_defaults()
