"""Line counting and single-line classification tests."""

from __future__ import annotations

import pytest

from assertfmt.lib.errors import InvalidArgumentError
from assertfmt.lib.lines import count_lines, is_single_line, split_lines


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        ("", 0),
        ("a", 1),
        ("a\n", 1),
        ("a\nb", 2),
        ("a\nb\n", 2),
        ("a\n\n", 2),
        ("\n", 1),
        ("\n\n\n", 3),
        ("a\n\nb", 3),
    ),
)
def test_count_lines(text: str, expected: int) -> None:
    assert count_lines(text) == expected


def test_count_lines_is_zero_only_for_empty_string() -> None:
    assert count_lines("") == 0
    assert count_lines(" ") == 1
    assert count_lines("\n") == 1


def test_split_lines_keeps_embedded_and_trailing_empty_lines() -> None:
    assert split_lines("a\n\nb\n\n") == ["a", "", "b", ""]


def test_split_lines_counts_unterminated_last_line() -> None:
    assert split_lines("a\nb") == ["a", "b"]


def test_split_lines_keep_mode_keeps_empty_tail() -> None:
    assert split_lines("a\n", keep_empty_lines=True) == ["a", ""]
    assert split_lines("a\n\n", keep_empty_lines=True) == ["a", "", ""]
    assert split_lines("a", keep_empty_lines=True) == ["a"]
    assert split_lines("", keep_empty_lines=True) == []


def test_split_lines_rejects_non_string() -> None:
    with pytest.raises(InvalidArgumentError, match="expected str"):
        split_lines(3)  # type: ignore[arg-type]


def test_is_single_line() -> None:
    assert is_single_line("a", "b", "c") is True
    assert is_single_line("a", "b\nc") is False
    assert is_single_line("a\n", "") is True
    assert is_single_line("a\n\n") is False


def test_is_single_line_without_values() -> None:
    assert is_single_line() is True
