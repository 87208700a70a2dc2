# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run orchestration: output directory lifecycle and the lint/dump entry point."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from .config import MasklintConfig
from .maskfile import load_maskfile
from .models import ProcessContext
from .walker import Reporter, walk_maskfile

LOGGER = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "masklint-"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """Summary of a completed lint or dump run."""

    findings: int
    scripts: int
    output_directory: Path


@contextmanager
def output_directory(dump_dir: Path | None) -> Iterator[Path]:
    """Yield the directory scripts are materialized into.

    ``dump_dir`` is created when missing and left in place afterwards. Without
    it, a temporary directory is used and removed on exit, including when the
    walk raises.
    """

    if dump_dir is not None:
        dump_dir.mkdir(parents=True, exist_ok=True)
        yield dump_dir
        return
    with tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX) as tmp:
        LOGGER.debug("using temporary output directory=%s", tmp)
        yield Path(tmp)


def lint_maskfile(
    config: MasklintConfig,
    *,
    dump_dir: Path | None = None,
    reporter: Reporter | None = None,
) -> RunOutcome:
    """Materialize every script in the configured maskfile and lint it.

    Args:
        config: Resolved configuration.
        dump_dir: When given, scripts are only written to this directory and
            no analyzer runs.
        reporter: Optional callback for reportable results.

    Returns:
        RunOutcome: Findings total and the number of scripts written.
    """

    maskfile = load_maskfile(config.maskfile)
    scripts = sum(len(command.iter_scripted()) for command in maskfile.commands)
    with output_directory(dump_dir) as out_dir:
        context = ProcessContext(
            output_directory=out_dir,
            dump_mode=dump_dir is not None,
            suppress_warnings=config.no_warnings,
            timeout=config.timeout,
        )
        findings = walk_maskfile(context, maskfile, reporter=reporter)
    return RunOutcome(findings=findings, scripts=scripts, output_directory=out_dir)


def failure_summary(count: int) -> str:
    """Return the closing message for ``count`` files with findings."""

    plural = "" if count == 1 else "s"
    return f"{count} file{plural} with lint failures."


__all__ = ["RunOutcome", "failure_summary", "lint_maskfile", "output_directory"]
