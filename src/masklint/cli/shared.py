# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, state, error exits)."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import typer

from ..config import MasklintConfig
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn
from ..models import LintResult
from ..walker import print_result

PACKAGE_LOGGER_NAME = "masklint"


@dataclass(slots=True)
class CLILogger:
    """Adapter around project output helpers respecting CLI presentation settings."""

    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message to stderr."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message to stderr."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def report(self, full_name: str, result: LintResult) -> None:
        """Print a lint result under its full command name."""

        print_result(full_name, result, use_color=self.use_color)


def build_cli_logger(config: MasklintConfig) -> CLILogger:
    """Return a :class:`CLILogger` honouring the emoji and colour settings of ``config``."""

    return CLILogger(use_emoji=config.emoji, use_color=config.color)


@dataclass(slots=True)
class CLIState:
    """Global options captured by the root callback and shared with subcommands."""

    config: MasklintConfig
    logger: CLILogger


def get_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` stored on ``ctx`` by the root callback."""

    state = ctx.find_object(CLIState)
    if state is None:  # pragma: no cover - the root callback always runs first
        raise typer.BadParameter("masklint options were not initialised")
    return state


def configure_verbose_logging() -> None:
    """Stream debug messages from the masklint package logger to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    # replace rather than stack handlers; sys.stderr may have been swapped since
    previous = getattr(logger, "_masklint_verbose_handler", None)
    if previous is not None:
        logger.removeHandler(previous)
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_masklint_verbose_handler", handler)


__all__ = [
    "CLILogger",
    "CLIState",
    "build_cli_logger",
    "configure_verbose_logging",
    "get_state",
]
