"""Formatting defaults loaded from `.assertfmt.toml` and the environment."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".assertfmt.toml"


@dataclass(frozen=True, slots=True)
class AssertfmtConfig:
    """Defaults the CLI uses when an argument is omitted."""

    indent: str = "  "
    mark_symbol: str = ">"
    decorate_title: str = "output"


_FIELD_NAMES = frozenset(field.name for field in fields(AssertfmtConfig))

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "ASSERTFMT_INDENT": "indent",
    "ASSERTFMT_MARK_SYMBOL": "mark_symbol",
    "ASSERTFMT_DECORATE_TITLE": "decorate_title",
}

# An empty indent is valid (no prefix); the other fields need content.
_ALLOW_EMPTY = frozenset({"indent"})


def _coerce_value(*, field_name: str, raw_value: object, source: str) -> str:
    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if "\n" in raw_value:
        raise ValueError(f"Invalid value for '{source}': expected a single line.")
    if not raw_value and field_name not in _ALLOW_EMPTY:
        raise ValueError(f"Invalid value for '{source}': expected non-empty string.")
    return raw_value


def _default_values() -> dict[str, str]:
    defaults = AssertfmtConfig()
    return {name: getattr(defaults, name) for name in _FIELD_NAMES}


def _apply_table(*, values: dict[str, str], table: dict[str, object], prefix: str) -> None:
    for key, raw_value in table.items():
        source = f"{prefix}{key}"
        if key not in _FIELD_NAMES:
            logger.warning("Ignoring unknown assertfmt config key '%s'.", source)
            continue
        values[key] = _coerce_value(field_name=key, raw_value=raw_value, source=source)


def _apply_toml_payload(*, values: dict[str, str], payload: dict[str, object], path: Path) -> None:
    for key, raw_value in payload.items():
        if key == "format":
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for 'format' in '{path}': expected table.")
            _apply_table(
                values=values,
                table=cast("dict[str, object]", raw_value),
                prefix="format.",
            )
            continue
        _apply_table(values=values, table={key: raw_value}, prefix="")


def _apply_env_overrides(values: dict[str, str]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_value(
            field_name=field_name,
            raw_value=raw_value,
            source=env_name,
        )


def load_config(root: Path | None = None) -> AssertfmtConfig:
    """Load `<root>/.assertfmt.toml` and apply environment overrides."""

    values = _default_values()
    path = (root or Path.cwd()) / CONFIG_FILENAME
    if path.is_file():
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        _apply_toml_payload(
            values=values,
            payload=cast("dict[str, object]", payload_obj),
            path=path,
        )
        logger.debug("Loaded assertfmt config from '%s'.", path)

    _apply_env_overrides(values)
    return AssertfmtConfig(**values)
