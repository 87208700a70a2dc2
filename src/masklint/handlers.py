# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language handlers that materialize scripts and normalise analyzer output.

Each handler knows three things about its language: the file extension used
when a script is written to disk, how the raw script body is turned into a
standalone file, and how to run the external analyzer and reduce its output to
a path-free :class:`~masklint.models.LintResult`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar, Final

from .models import LintResult, Script
from .process_utils import run_command

NO_LINTER_MESSAGE: Final[str] = "no linter found for target"
NU_CHECK_FAILURE_MESSAGE: Final[str] = "file could not be parsed by nu-check"


class LanguageHandler(ABC):
    """Strategy describing how one executor language is materialized and linted."""

    name: ClassVar[str]
    executable: ClassVar[str | None] = None
    extension: ClassVar[str] = ""

    def file_extension(self) -> str:
        """Return the suffix appended to materialized script file names."""

        return self.extension

    def transform_content(self, script: Script) -> str:
        """Return the file content written for ``script``."""

        return script.source

    @abstractmethod
    def execute(self, path: Path, *, timeout: float | None = None) -> LintResult:
        """Run the analyzer against ``path`` and normalise its output.

        Args:
            path: Materialized script file.
            timeout: Optional per-invocation limit in seconds.

        Returns:
            LintResult: Normalised analyzer output.

        Raises:
            MissingExecutableError: If the analyzer binary is not on ``PATH``.
        """

    def _stdout(self, *args: str, timeout: float | None) -> str:
        if self.executable is None:
            raise TypeError(f"{type(self).__name__} does not invoke an analyzer")
        completed = run_command([self.executable, *args], timeout=timeout)
        return completed.stdout or ""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Catchall(LanguageHandler):
    """Fallback for executors without a supported analyzer."""

    name = "catchall"

    def execute(self, path: Path, *, timeout: float | None = None) -> LintResult:
        del path, timeout
        return LintResult.warning(NO_LINTER_MESSAGE)


class Shellcheck(LanguageHandler):
    """Lint ``sh``/``bash`` scripts with shellcheck."""

    name = "shellcheck"
    executable = "shellcheck"
    extension = ".sh"

    def transform_content(self, script: Script) -> str:
        # shellcheck infers the dialect from the shebang
        return f"#!/bin/usr/env {script.executor}\n{script.source}"

    def execute(self, path: Path, *, timeout: float | None = None) -> LintResult:
        stdout = self._stdout(str(path), timeout=timeout)
        findings = stdout.strip().replace(f"{path} ", "")
        return LintResult.findings(findings)


class Ruff(LanguageHandler):
    """Lint Python scripts with ``ruff check``."""

    name = "ruff"
    executable = "ruff"
    extension = ".py"

    def execute(self, path: Path, *, timeout: float | None = None) -> LintResult:
        stdout = self._stdout(
            "check",
            "--output-format=full",
            "--no-cache",
            "--quiet",
            str(path),
            timeout=timeout,
        )
        valid_lines: list[str] = []
        for line in stdout.strip().splitlines():
            # summary trailer, e.g. "Found 1 error."
            if line.startswith("Found "):
                break
            valid_lines.append(line.replace(f"{path}:", "line "))
        return LintResult.findings("\n".join(valid_lines).strip())


class Rubocop(LanguageHandler):
    """Lint Ruby scripts with rubocop."""

    name = "rubocop"
    executable = "rubocop"
    extension = ".rb"

    def execute(self, path: Path, *, timeout: float | None = None) -> LintResult:
        stdout = self._stdout(
            "--format=clang",
            "--display-style-guide",
            str(path),
            timeout=timeout,
        )
        kept = [line for line in stdout.splitlines() if "1 file inspected" not in line]
        findings = "\n".join(kept).strip().replace(f"{path}:", "line ")
        return LintResult.findings(findings)


class Nushell(LanguageHandler):
    """Syntax-check nushell scripts with ``nu-check``."""

    name = "nushell"
    executable = "nu"
    extension = ".nu"

    def execute(self, path: Path, *, timeout: float | None = None) -> LintResult:
        check = f"if not (nu-check {path}) {{ print '{NU_CHECK_FAILURE_MESSAGE}' }}"
        stdout = self._stdout("-c", check, timeout=timeout)
        return LintResult.findings(stdout.strip())


CATCHALL: Final[LanguageHandler] = Catchall()

_SHELLCHECK: Final[LanguageHandler] = Shellcheck()
_RUFF: Final[LanguageHandler] = Ruff()
_RUBOCOP: Final[LanguageHandler] = Rubocop()
_NUSHELL: Final[LanguageHandler] = Nushell()

HANDLERS_BY_EXECUTOR: Final[Mapping[str, LanguageHandler]] = MappingProxyType(
    {
        "sh": _SHELLCHECK,
        "bash": _SHELLCHECK,
        "py": _RUFF,
        "python": _RUFF,
        "rb": _RUBOCOP,
        "ruby": _RUBOCOP,
        "nu": _NUSHELL,
        "nushell": _NUSHELL,
    },
)


def select_handler(executor: str) -> LanguageHandler:
    """Return the handler for ``executor``, falling back to :class:`Catchall`.

    Matching is exact and case-sensitive.
    """

    return HANDLERS_BY_EXECUTOR.get(executor, CATCHALL)


def supported_executors() -> tuple[str, ...]:
    """Return the executor tags that map to a real analyzer."""

    return tuple(HANDLERS_BY_EXECUTOR)


__all__ = [
    "CATCHALL",
    "Catchall",
    "HANDLERS_BY_EXECUTOR",
    "LanguageHandler",
    "NO_LINTER_MESSAGE",
    "NU_CHECK_FAILURE_MESSAGE",
    "Nushell",
    "Rubocop",
    "Ruff",
    "Shellcheck",
    "select_handler",
    "supported_executors",
]
