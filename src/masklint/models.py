# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models shared by the maskfile parser, handlers, and tree walker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Script(BaseModel):
    """Script body embedded in a command along with its executor tag."""

    model_config = ConfigDict(frozen=True)

    executor: str
    source: str


class Command(BaseModel):
    """Node of the maskfile command tree."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    script: Script | None = None
    subcommands: tuple[Command, ...] = Field(default_factory=tuple)
    required_args: tuple[str, ...] = Field(default_factory=tuple)
    optional_args: tuple[str, ...] = Field(default_factory=tuple)

    def iter_scripted(self, parent_name: str = "") -> list[tuple[str, Command]]:
        """Return ``(full_name, command)`` pairs for script-bearing nodes in document order.

        Args:
            parent_name: Full name of the enclosing command, empty for roots.

        Returns:
            list[tuple[str, Command]]: Nodes carrying a script, depth first.
        """

        full_name = f"{parent_name} {self.name}" if parent_name else self.name
        pairs: list[tuple[str, Command]] = []
        if self.script is not None:
            pairs.append((full_name, self))
        for subcommand in self.subcommands:
            pairs.extend(subcommand.iter_scripted(full_name))
        return pairs


class Maskfile(BaseModel):
    """Parsed maskfile document."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    commands: tuple[Command, ...] = Field(default_factory=tuple)


class LintResultKind(str, Enum):
    """Classify analyzer output as either counted findings or advisory warnings."""

    WARNING = "warning"
    FINDINGS = "findings"


@dataclass(frozen=True, slots=True)
class LintResult:
    """Normalised analyzer output for a single materialized script."""

    message: str
    kind: LintResultKind

    @classmethod
    def warning(cls, message: str) -> LintResult:
        return cls(message=message, kind=LintResultKind.WARNING)

    @classmethod
    def findings(cls, message: str) -> LintResult:
        return cls(message=message, kind=LintResultKind.FINDINGS)

    @property
    def reportable(self) -> bool:
        """Return ``True`` when the result carries a message worth printing."""

        return bool(self.message)


@dataclass(frozen=True, slots=True)
class ProcessContext:
    """Per-run settings consulted while walking the command tree."""

    output_directory: Path
    dump_mode: bool = False
    suppress_warnings: bool = False
    timeout: float | None = None


__all__ = [
    "Command",
    "LintResult",
    "LintResultKind",
    "Maskfile",
    "ProcessContext",
    "Script",
]
