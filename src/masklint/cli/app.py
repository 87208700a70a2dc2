# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the ``run`` and ``dump`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from .. import __version__
from ..config import DEFAULT_MASKFILE, load_config
from ..errors import MasklintError
from ..handlers import supported_executors
from ..runner import RunOutcome, failure_summary, lint_maskfile
from .shared import CLIState, build_cli_logger, configure_verbose_logging, get_state

app = typer.Typer(
    name="masklint",
    help=(
        "Lint the scripts embedded in a maskfile. Supported executors: "
        + ", ".join(supported_executors())
        + "."
    ),
    no_args_is_help=True,
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"masklint {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def main(
    ctx: typer.Context,
    maskfile: Annotated[
        Path | None,
        typer.Option(
            "--maskfile",
            help=f"Path to a different maskfile you want to use [default: {DEFAULT_MASKFILE}].",
            dir_okay=False,
        ),
    ] = None,
    no_warnings: Annotated[
        bool,
        typer.Option("--no-warnings", help="Suppress warning messages."),
    ] = False,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Abort when a single analyzer call exceeds SECONDS.", min=0.001),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable coloured output."),
    ] = False,
    use_emoji: Annotated[
        bool,
        typer.Option("--emoji", help="Prefix status lines with emoji."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print debug output to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the masklint version and exit.",
        ),
    ] = False,
) -> None:
    """Resolve configuration shared by every subcommand."""

    del version
    if verbose:
        configure_verbose_logging()

    overrides: dict[str, Any] = {}
    if maskfile is not None:
        overrides["maskfile"] = maskfile
    if no_warnings:
        overrides["no_warnings"] = True
    if timeout is not None:
        overrides["timeout"] = timeout
    if no_color:
        overrides["color"] = False
    if use_emoji:
        overrides["emoji"] = True

    try:
        config = load_config(Path.cwd(), overrides=overrides)
    except MasklintError as exc:
        # options are not resolved yet, so fall back to plain defaults
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    ctx.obj = CLIState(config=config, logger=build_cli_logger(config))


def _execute(ctx: typer.Context, *, dump_dir: Path | None) -> RunOutcome:
    state = get_state(ctx)
    try:
        outcome = lint_maskfile(state.config, dump_dir=dump_dir, reporter=state.logger.report)
    except (MasklintError, OSError) as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if outcome.scripts == 0 and not state.config.no_warnings:
        state.logger.warn(f"no scripts found in {state.config.maskfile}")
    return outcome


@app.command("run")
def run(ctx: typer.Context) -> None:
    """Runs the linters."""

    state = get_state(ctx)
    outcome = _execute(ctx, dump_dir=None)
    if outcome.findings > 0:
        state.logger.fail(failure_summary(outcome.findings))
        raise typer.Exit(code=1)


@app.command("dump")
def dump(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Directory the extracted scripts are written to.",
            file_okay=False,
        ),
    ],
) -> None:
    """Extracts all the commands from the maskfile and dumps them as files into the defined directory."""

    state = get_state(ctx)
    outcome = _execute(ctx, dump_dir=output)
    state.logger.ok(f"{outcome.scripts} script(s) written to {outcome.output_directory}.")


__all__ = ["app"]
