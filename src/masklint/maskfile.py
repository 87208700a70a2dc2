# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse maskfile markdown into a :class:`~masklint.models.Maskfile` tree.

A maskfile is ordinary markdown. The first level-1 heading is the title,
every deeper heading declares a command nested by heading level, and the
first fenced code block under a heading is that command's script with the
fence language acting as the executor::

    # Tasks

    ## build (target)

    ```sh
    cargo build --bin "$target"
    ```

    ### build lint

    ```py
    print("linting")
    ```

Subcommand headings conventionally repeat their parent's name, so
``### build lint`` yields a node named ``lint`` under ``build``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .errors import MaskfileError
from .models import Command, Maskfile, Script

LOGGER = logging.getLogger(__name__)

OPTIONS_MARKER: Final[str] = "**OPTIONS**"

_MARKDOWN: Final[MarkdownIt] = MarkdownIt("commonmark")


@dataclass(slots=True)
class _CommandDraft:
    """Mutable command node used while the token stream is consumed."""

    level: int
    full_name: str
    name: str
    required_args: tuple[str, ...]
    optional_args: tuple[str, ...]
    description: list[str] = field(default_factory=list)
    script: Script | None = None
    subcommands: list[_CommandDraft] = field(default_factory=list)
    options_started: bool = False

    def freeze(self) -> Command:
        return Command(
            name=self.name,
            description="\n\n".join(self.description),
            script=self.script,
            subcommands=tuple(draft.freeze() for draft in self.subcommands),
            required_args=self.required_args,
            optional_args=self.optional_args,
        )


def _split_heading(text: str) -> tuple[str, tuple[str, ...], tuple[str, ...]]:
    """Split heading text into its command words and declared arguments."""

    words: list[str] = []
    required: list[str] = []
    optional: list[str] = []
    for word in text.split():
        if len(word) > 2 and word.startswith("(") and word.endswith(")"):
            required.append(word[1:-1])
        elif len(word) > 2 and word.startswith("[") and word.endswith("]"):
            optional.append(word[1:-1])
        else:
            words.append(word)
    return " ".join(words), tuple(required), tuple(optional)


def _new_draft(level: int, heading: str, parent: _CommandDraft | None) -> _CommandDraft:
    written_name, required, optional = _split_heading(heading)
    name = written_name
    if parent is not None:
        prefix = f"{parent.full_name} "
        if written_name.startswith(prefix):
            name = written_name[len(prefix) :]
        full_name = f"{parent.full_name} {name}"
    else:
        full_name = name
    return _CommandDraft(
        level=level,
        full_name=full_name,
        name=name,
        required_args=required,
        optional_args=optional,
    )


def _inline_content(tokens: list[Token], index: int) -> str:
    if index < len(tokens) and tokens[index].type == "inline":
        return tokens[index].content.strip()
    return ""


def _fence_executor(token: Token) -> str:
    info = token.info.strip()
    return info.split(maxsplit=1)[0] if info else ""


def parse_maskfile(text: str) -> Maskfile:
    """Return the command tree described by maskfile ``text``."""

    tokens = _MARKDOWN.parse(text)
    title = ""
    description: list[str] = []
    roots: list[_CommandDraft] = []
    stack: list[_CommandDraft] = []

    for index, token in enumerate(tokens):
        if token.type == "heading_open":
            level = int(token.tag[1:])
            heading = _inline_content(tokens, index + 1)
            if level == 1:
                stack.clear()
                if not title and not roots:
                    title = heading
                continue
            while stack and stack[-1].level >= level:
                stack.pop()
            parent = stack[-1] if stack else None
            draft = _new_draft(level, heading, parent)
            if parent is None:
                roots.append(draft)
            else:
                parent.subcommands.append(draft)
            stack.append(draft)
        elif token.type == "fence":
            executor = _fence_executor(token)
            if stack and stack[-1].script is None and executor:
                stack[-1].script = Script(executor=executor, source=token.content)
        elif token.type == "paragraph_open" and token.level == 0:
            content = _inline_content(tokens, index + 1)
            if not content:
                continue
            if not stack:
                if not roots:
                    description.append(content)
                continue
            current = stack[-1]
            if content.startswith(OPTIONS_MARKER):
                current.options_started = True
            elif current.script is None and not current.options_started:
                current.description.append(content)

    return Maskfile(
        title=title,
        description="\n\n".join(description),
        commands=tuple(draft.freeze() for draft in roots),
    )


def load_maskfile(path: Path) -> Maskfile:
    """Read and parse the maskfile at ``path``.

    Raises:
        MaskfileError: If the file cannot be read.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MaskfileError(f"Unable to read maskfile {path}: {exc}") from exc
    maskfile = parse_maskfile(text)
    LOGGER.debug("parsed maskfile=%s commands=%d", path, len(maskfile.commands))
    return maskfile


__all__ = ["load_maskfile", "parse_maskfile"]
