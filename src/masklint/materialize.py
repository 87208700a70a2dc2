# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write embedded scripts to standalone files in the run's output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ScriptCollisionError
from .handlers import LanguageHandler
from .models import ProcessContext, Script

LOGGER = logging.getLogger(__name__)


def script_file_name(full_name: str, handler: LanguageHandler) -> str:
    """Return the file name used for the script of ``full_name``.

    Spaces in the full command name become underscores and the handler's
    extension is appended, so ``"build lint"`` linted by ruff becomes
    ``build_lint.py``.
    """

    return full_name.replace(" ", "_") + handler.file_extension()


def materialize_script(
    context: ProcessContext,
    handler: LanguageHandler,
    full_name: str,
    script: Script,
) -> Path:
    """Create the script file for ``full_name`` and return its path.

    Args:
        context: Run context providing the output directory.
        handler: Handler selected for the script's executor.
        full_name: Space-joined command name including all ancestors.
        script: Script to materialize.

    Returns:
        Path: Location of the newly written file.

    Raises:
        ScriptCollisionError: If a file already exists at the target path.
        OSError: For any other filesystem failure.
    """

    path = context.output_directory / script_file_name(full_name, handler)
    content = handler.transform_content(script)
    try:
        with path.open("x", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise ScriptCollisionError(full_name, path) from exc
    LOGGER.debug("materialized command=%r path=%s", full_name, path)
    return path


__all__ = ["materialize_script", "script_file_name"]
