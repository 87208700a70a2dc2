# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for fatal masklint conditions."""

from __future__ import annotations

from pathlib import Path


class MasklintError(RuntimeError):
    """Base class for failures that abort a masklint run."""


class MaskfileError(MasklintError):
    """Raised when the maskfile cannot be read."""


class ConfigError(MasklintError):
    """Raised when configuration input is invalid."""


class MissingExecutableError(MasklintError, FileNotFoundError):
    """Raised when an analyzer binary cannot be located on ``PATH``."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable '{executable}' was not found on PATH")
        self.executable = executable


class AnalyzerNotFoundError(MasklintError):
    """User-facing form of :class:`MissingExecutableError` naming the handler."""

    def __init__(self, handler: str) -> None:
        super().__init__(f"executable for {handler} not found in $PATH")
        self.handler = handler


class AnalyzerTimeoutError(MasklintError):
    """Raised when an analyzer exceeds the configured per-call timeout."""

    def __init__(self, executable: str, timeout: float) -> None:
        super().__init__(f"Command '{executable}' timed out after {timeout:.1f}s")
        self.executable = executable
        self.timeout = timeout


class ScriptCollisionError(MasklintError, FileExistsError):
    """Raised when two commands resolve to the same script file."""

    def __init__(self, command_name: str, path: Path) -> None:
        super().__init__(
            f"Script for '{command_name}' collides with an existing file at {path}",
        )
        self.command_name = command_name
        self.path = path


__all__ = [
    "AnalyzerNotFoundError",
    "AnalyzerTimeoutError",
    "ConfigError",
    "MaskfileError",
    "MasklintError",
    "MissingExecutableError",
    "ScriptCollisionError",
]
