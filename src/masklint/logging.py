# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing output helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.text import Text

from .console import detect_tty, get_console_manager

COMMAND_HEADER_STYLE = "bold underline cyan"


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Render ``msg`` through the shared Rich console.

    Messages are wrapped in :class:`~rich.text.Text` so analyzer output that
    happens to contain ``[brackets]`` is never parsed as console markup.
    """

    color_enabled = detect_tty(stderr=stderr) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message to stderr."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(
        f"{prefix}{msg}",
        style="yellow",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=True,
    )


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message to stderr."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(
        f"{prefix}{msg}",
        style="bold red",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=True,
    )


def command_header(name: str, *, use_color: bool | None = None) -> None:
    """Print the full command name that precedes a lint report."""

    _print_line(name, style=COMMAND_HEADER_STYLE, use_emoji=False, use_color=use_color)


def plain(msg: str) -> None:
    """Write ``msg`` to stdout byte for byte.

    Analyzer output repeats source lines with a caret underneath, so tabs must
    not be expanded the way :meth:`rich.console.Console.print` does.
    """

    console = get_console_manager().get(color=False, emoji=False)
    console.file.write(f"{msg}\n")
    console.file.flush()


__all__ = [
    "command_header",
    "emoji",
    "fail",
    "ok",
    "plain",
    "warn",
]
