# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the bytes written for each configured hook."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pygithook.core.logging import warn

from .errors import HookReadError, HookScriptError, PathEscapeError

SHEBANG_MARKER: Final[str] = "#!"
NEWLINE: Final[str] = "\n"
DEFAULT_SHEBANG: Final[str] = "#!/bin/sh" + NEWLINE
SCRIPT_ENCODING: Final[str] = "utf-8"


def resolve_inline(hook_name: str, script: str) -> bytes:
    """Return the script bytes for an inline hook definition.

    A ``#!/bin/sh`` line is prepended unless ``script`` already declares an
    interpreter, and a trailing newline is always appended.

    Args:
        hook_name: Name of the hook being resolved.
        script: Script text supplied by configuration.

    Returns:
        bytes: UTF-8 encoded script ready to be written.

    Raises:
        HookScriptError: If ``script`` cannot be encoded as UTF-8, for example
            when a command-line argument carried undecodable bytes.
    """

    prefix = "" if script.startswith(SHEBANG_MARKER) else DEFAULT_SHEBANG
    try:
        return f"{prefix}{script}{NEWLINE}".encode(SCRIPT_ENCODING)
    except UnicodeEncodeError as exc:
        raise HookScriptError(hook_name) from exc


def ensure_within_project(hook_name: str, raw_path: str | Path, project_root: Path) -> Path:
    """Return the resolved location of an external hook script.

    Relative paths are anchored at ``project_root``. Both paths are fully
    resolved, so ``..`` segments and symlinks cannot be used to reach files
    outside the project.

    Args:
        hook_name: Name of the hook referencing the script.
        raw_path: Path declared in configuration.
        project_root: Directory the script must live under.

    Returns:
        Path: Absolute, resolved path to the script.

    Raises:
        PathEscapeError: If the resolved path lies outside ``project_root``.
        HookReadError: If ``raw_path`` cannot be expanded or resolved, such as
            an unknown ``~user`` or an embedded NUL byte.
    """

    root = project_root.resolve()
    try:
        candidate = Path(raw_path).expanduser()
        if not candidate.is_absolute():
            candidate = root / candidate
        resolved = candidate.resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise HookReadError(hook_name, Path(raw_path)) from exc
    if not resolved.is_relative_to(root):
        raise PathEscapeError(hook_name, resolved, root)
    return resolved


def resolve_resource(
    hook_name: str,
    raw_path: str | Path,
    project_root: Path,
    *,
    use_emoji: bool = True,
) -> bytes:
    """Return the script bytes for a hook backed by a project file.

    The file is read line by line and the lines are joined with ``\\n``. No
    shebang and no trailing newline are added; the source file is expected to
    declare its own interpreter.

    Args:
        hook_name: Name of the hook being resolved.
        raw_path: Path declared in configuration, relative to ``project_root``.
        project_root: Directory the script must live under.
        use_emoji: Flag indicating whether emoji output is desired.

    Returns:
        bytes: UTF-8 encoded script ready to be written.

    Raises:
        PathEscapeError: If the script lies outside ``project_root``.
        HookReadError: If the script cannot be read or decoded.
    """

    path = ensure_within_project(hook_name, raw_path, project_root)
    try:
        with path.open(encoding=SCRIPT_ENCODING) as handle:
            lines = [line.removesuffix(NEWLINE) for line in handle]
    except (OSError, ValueError) as exc:
        raise HookReadError(hook_name, path) from exc

    script = NEWLINE.join(lines)
    if not script.startswith(SHEBANG_MARKER):
        warn(f"{path} does not start with a shebang line; git may not be able to run {hook_name}", use_emoji=use_emoji)
    return script.encode(SCRIPT_ENCODING)


__all__ = [
    "DEFAULT_SHEBANG",
    "ensure_within_project",
    "resolve_inline",
    "resolve_resource",
]
