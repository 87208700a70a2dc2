# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recursive traversal of the command tree with findings aggregation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import AnalyzerNotFoundError, MissingExecutableError
from .handlers import select_handler
from .logging import command_header, plain
from .materialize import materialize_script
from .models import Command, LintResult, LintResultKind, Maskfile, ProcessContext

LOGGER = logging.getLogger(__name__)

Reporter = Callable[[str, LintResult], None]


def print_result(full_name: str, result: LintResult, *, use_color: bool | None = None) -> None:
    """Print the command header followed by the analyzer message."""

    command_header(full_name, use_color=use_color)
    plain(result.message)


def full_command_name(parent_name: str, name: str) -> str:
    """Join ``name`` onto the space-separated ``parent_name``."""

    return f"{parent_name} {name}" if parent_name else name


def walk_command(
    context: ProcessContext,
    command: Command,
    parent_name: str = "",
    *,
    reporter: Reporter | None = None,
) -> int:
    """Materialize and lint ``command`` and its subcommands.

    Args:
        context: Run-wide settings.
        command: Node to visit.
        parent_name: Full name of the enclosing command; empty for roots.
        reporter: Callback receiving each reportable result. Defaults to
            :func:`print_result`.

    Returns:
        int: Number of commands in this subtree that produced findings.

    Raises:
        AnalyzerNotFoundError: If a handler's analyzer binary is missing.
        ScriptCollisionError: If two commands map to the same script file.
        MasklintError: For analyzer timeouts.
        OSError: For any other filesystem or process failure.
    """

    report = reporter or print_result
    full_name = full_command_name(parent_name, command.name)
    findings_count = 0

    if command.script is not None:
        handler = select_handler(command.script.executor)
        path = materialize_script(context, handler, full_name, command.script)

        if not context.dump_mode:
            try:
                result = handler.execute(path, timeout=context.timeout)
            except MissingExecutableError as exc:
                raise AnalyzerNotFoundError(str(handler)) from exc
            LOGGER.debug("command=%r handler=%s kind=%s", full_name, handler, result.kind.value)

            if result.reportable:
                if result.kind is LintResultKind.FINDINGS:
                    findings_count += 1
                    report(full_name, result)
                elif not context.suppress_warnings:
                    report(full_name, result)

    for subcommand in command.subcommands:
        findings_count += walk_command(context, subcommand, full_name, reporter=reporter)
    return findings_count


def walk_maskfile(
    context: ProcessContext,
    maskfile: Maskfile,
    *,
    reporter: Reporter | None = None,
) -> int:
    """Walk every top-level command of ``maskfile`` and return the findings total."""

    return sum(walk_command(context, command, reporter=reporter) for command in maskfile.commands)


__all__ = [
    "Reporter",
    "full_command_name",
    "print_result",
    "walk_command",
    "walk_maskfile",
]
