# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for masklint."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

DEFAULT_MASKFILE: Final[str] = "maskfile.md"
PYPROJECT_FILE: Final[str] = "pyproject.toml"
CONFIG_FILE: Final[str] = ".masklint.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "masklint"


class MasklintConfig(BaseModel):
    """Resolved settings for a single masklint invocation."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    maskfile: Path = Path(DEFAULT_MASKFILE)
    no_warnings: bool = False
    timeout: float | None = Field(default=None, gt=0)
    color: bool = True
    emoji: bool = False


def _read_toml(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _normalise_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in payload.items()}


def _pyproject_section(path: Path) -> dict[str, Any]:
    tool_section = _read_toml(path).get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return _normalise_keys(section)


def load_config(
    root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> MasklintConfig:
    """Return configuration merged from files under ``root`` and ``overrides``.

    Sources are applied in order, later ones winning: built-in defaults,
    ``[tool.masklint]`` in ``pyproject.toml``, ``.masklint.toml``, then
    ``overrides`` (normally the CLI flags that were explicitly given).

    Raises:
        ConfigError: If a file is malformed or a value fails validation.
    """

    merged: dict[str, Any] = {}
    merged.update(_pyproject_section(root / PYPROJECT_FILE))
    merged.update(_normalise_keys(_read_toml(root / CONFIG_FILE)))
    if overrides:
        merged.update(_normalise_keys(overrides))
    try:
        return MasklintConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid masklint configuration: {exc}") from exc


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_MASKFILE",
    "MasklintConfig",
    "load_config",
]
