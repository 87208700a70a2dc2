# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the masklint command-line interface."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from masklint import __version__
from masklint.cli.app import app

MASKFILE = """\
# Tasks

## build

```sh
echo hi
```

### build lint

```py
print(x)
```

## compile

```rs
fn main() {}
```
"""


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "maskfile.md").write_text(MASKFILE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _ruff_finding(args) -> str:  # noqa: ANN001
    return f"{args[-1]}:1:7: F821 Undefined name `x`\nFound 1 error.\n"


def test_run_reports_findings_and_fails(project: Path, fake_analyzers) -> None:
    fake_analyzers.outputs["ruff"] = _ruff_finding
    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 1
    assert "build lint" in result.output
    assert "line 1:7: F821 Undefined name `x`" in result.output
    assert "no linter found for target" in result.output
    assert "1 file with lint failures." in result.output
    assert str(project) not in result.output


def test_run_plural_summary(project: Path, fake_analyzers) -> None:
    fake_analyzers.outputs["ruff"] = _ruff_finding
    fake_analyzers.outputs["shellcheck"] = "In line 2:\nSC2154"
    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 1
    assert "2 files with lint failures." in result.output


def test_run_clean_exits_zero(project: Path, fake_analyzers) -> None:
    result = CliRunner().invoke(app, ["--no-warnings", "run"])

    assert result.exit_code == 0
    assert "no linter found" not in result.output
    assert "compile" not in result.output
    assert result.output == ""
    assert fake_analyzers.executables() == ["shellcheck", "ruff"]


def test_run_missing_analyzer(project: Path, fake_analyzers) -> None:
    fake_analyzers.missing.add("shellcheck")
    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 1
    assert "executable for shellcheck not found in $PATH" in result.output
    assert fake_analyzers.executables() == ["shellcheck"]


def test_run_with_custom_maskfile(tmp_path: Path, fake_analyzers) -> None:
    maskfile = tmp_path / "tasks.md"
    maskfile.write_text("## hello\n\n```bash\necho hello\n```\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["--maskfile", str(maskfile), "run"])

    assert result.exit_code == 0
    assert fake_analyzers.executables() == ["shellcheck"]


def test_run_missing_maskfile(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 1
    assert "Unable to read maskfile" in result.output


def test_timeout_option_is_forwarded(project: Path, fake_analyzers) -> None:
    result = CliRunner().invoke(app, ["--timeout", "7", "--no-warnings", "run"])

    assert result.exit_code == 0
    assert set(fake_analyzers.timeouts) == {7.0}


def test_dump_writes_files(project: Path, fake_analyzers) -> None:
    target = project / "out" / "scripts"
    result = CliRunner().invoke(app, ["dump", "--output", str(target)])

    assert result.exit_code == 0
    assert fake_analyzers.calls == []
    assert sorted(path.name for path in target.iterdir()) == ["build.sh", "build_lint.py", "compile"]
    assert (target / "build.sh").read_text(encoding="utf-8") == "#!/bin/usr/env sh\necho hi\n"
    assert "3 script(s) written" in result.output


def test_dump_collision_fails(project: Path) -> None:
    target = project / "scripts"
    target.mkdir()
    (target / "build.sh").write_text("existing\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["dump", "-o", str(target)])

    assert result.exit_code == 1
    assert "collides" in result.output
    assert (target / "build.sh").read_text(encoding="utf-8") == "existing\n"


def test_dump_requires_output(project: Path) -> None:
    result = CliRunner().invoke(app, ["dump"])
    assert result.exit_code != 0


def test_config_file_is_honoured(project: Path, fake_analyzers) -> None:
    (project / ".masklint.toml").write_text("no-warnings = true\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 0
    assert "no linter found" not in result.output


def test_invalid_config_fails(project: Path) -> None:
    (project / ".masklint.toml").write_text("bogus = 1\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["run"])

    assert result.exit_code == 1
    assert "Invalid masklint configuration" in result.output


def test_version() -> None:
    result = CliRunner().invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("masklint")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_verbose_emits_debug_lines(
    project: Path,
    fake_analyzers,
    package_logger: logging.Logger,
) -> None:
    result = CliRunner().invoke(app, ["-v", "--no-warnings", "run"])

    assert result.exit_code == 0
    assert "[debug] masklint.maskfile: parsed maskfile=" in result.output
    assert "[debug] masklint.materialize: materialized command='build lint'" in result.output
    assert len(package_logger.handlers) == 1


def test_verbose_twice_replaces_handler(
    project: Path,
    fake_analyzers,
    package_logger: logging.Logger,
) -> None:
    runner = CliRunner()
    runner.invoke(app, ["-v", "--no-warnings", "run"])
    result = runner.invoke(app, ["--verbose", "--no-warnings", "run"])

    assert result.exit_code == 0
    assert "[debug] masklint." in result.output
    assert len(package_logger.handlers) == 1


def test_without_verbose_no_debug_output(project: Path, fake_analyzers) -> None:
    result = CliRunner().invoke(app, ["--no-warnings", "run"])
    assert "[debug]" not in result.output
