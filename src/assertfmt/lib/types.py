"""Shared type aliases for the formatting engine."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

KeyValuePair: TypeAlias = tuple[str, str]
PairSequence: TypeAlias = Sequence[KeyValuePair]

# Column width used when no pair has a single-line value.
NO_KEY_WIDTH = -1

DEFAULT_INDENT = "  "
