"""Argument validation errors raised by the formatting engine."""

from __future__ import annotations

from collections.abc import Iterable


class InvalidArgumentError(ValueError):
    """Raised when a formatting call receives malformed arguments."""


def require_str(value: object, *, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Invalid value for '{name}': expected str, got "
            f"{type(value).__name__} ({value!r})."
        )
    return value


def require_int(value: object, *, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Invalid value for '{name}': expected int, got "
            f"{type(value).__name__} ({value!r})."
        )
    return value


def require_ints(values: Iterable[object], *, name: str) -> list[int]:
    return [require_int(value, name=f"{name}[{i}]") for i, value in enumerate(values)]
