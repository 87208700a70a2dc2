# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from masklint.errors import MissingExecutableError

StdoutFactory = Callable[[Sequence[str]], str]


@dataclass(slots=True)
class FakeAnalyzers:
    """Stand-in for ``run_command`` returning canned analyzer output."""

    outputs: dict[str, str | StdoutFactory] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    calls: list[tuple[str, ...]] = field(default_factory=list)
    timeouts: list[float | None] = field(default_factory=list)

    def __call__(
        self,
        args: Sequence[str],
        *,
        timeout: float | None = None,
    ) -> subprocess.CompletedProcess[str]:
        executable = args[0]
        self.calls.append(tuple(args))
        self.timeouts.append(timeout)
        if executable in self.missing:
            raise MissingExecutableError(executable)
        output = self.outputs.get(executable, "")
        stdout = output(args) if callable(output) else output
        return subprocess.CompletedProcess(list(args), returncode=0, stdout=stdout, stderr="")

    def executables(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_analyzers(monkeypatch: pytest.MonkeyPatch) -> FakeAnalyzers:
    """Replace analyzer subprocesses with a recording fake."""

    fake = FakeAnalyzers()
    monkeypatch.setattr("masklint.handlers.run_command", fake)
    return fake


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return an empty directory for materialized scripts."""

    path = tmp_path / "out"
    path.mkdir()
    return path
