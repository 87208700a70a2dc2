# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution of external analyzers."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external analyzer execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import AnalyzerTimeoutError, MissingExecutableError

if TYPE_CHECKING:
    # Bandit: type-only import of subprocess metadata is part of the safe wrapper.
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404

LOGGER = logging.getLogger(__name__)


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise MissingExecutableError(head)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    timeout: float | None = None,
) -> _CompletedProcess[str]:
    """Execute *args* and capture its output without raising on non-zero exit.

    Analyzers signal findings through their exit status, so the status is
    returned to the caller untouched.

    Args:
        args: Executable name followed by its arguments.
        timeout: Optional limit in seconds for the invocation.

    Returns:
        CompletedProcess[str]: Completed process with decoded stdout/stderr.

    Raises:
        MissingExecutableError: If the executable is not present on ``PATH``.
        AnalyzerTimeoutError: If ``timeout`` elapses before the process exits.
    """

    normalized = _normalize_args(args)
    LOGGER.debug("running command=%s", " ".join(normalized))
    try:
        # Bandit: argv is assembled by the language handlers; no shell expansion.
        completed: _CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except FileNotFoundError as exc:
        raise MissingExecutableError(args[0]) from exc
    except subprocess.TimeoutExpired as exc:
        raise AnalyzerTimeoutError(args[0], exc.timeout) from exc

    LOGGER.debug("command=%s exited returncode=%s", args[0], completed.returncode)
    return completed


__all__ = ["run_command"]
