# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the git metadata directory and its hooks directory."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pygithook.core.logging import fail, info

GIT_METADATA_DIR: Final[str] = ".git"
HOOKS_DIRNAME: Final[str] = "hooks"
GITDIR_PREFIX: Final[str] = "gitdir:"


def find_git_dir(start: Path) -> Path | None:
    """Return the git metadata directory enclosing ``start``.

    ``start`` and each of its ancestors are inspected in turn. A ``.git``
    directory wins first, then a ``.git`` file pointing elsewhere (worktrees
    and submodules), then the directory itself when it is a bare repository.
    ``start`` does not need to exist.

    Args:
        start: Directory from which the upward search begins.

    Returns:
        Path | None: Absolute path to the metadata directory, or ``None`` when
        no ancestor belongs to a git repository.
    """

    current = start.expanduser().resolve()
    for candidate in (current, *current.parents):
        marker = candidate / GIT_METADATA_DIR
        if marker.is_dir():
            return marker
        if marker.is_file():
            target = _read_gitfile(marker)
            if target is not None:
                return target
        if _is_bare_repository(candidate):
            return candidate
    return None


def locate_hooks_dir(start: Path, *, create: bool = True, use_emoji: bool = True) -> Path | None:
    """Return the hooks directory of the repository enclosing ``start``.

    Args:
        start: Directory from which the repository search begins.
        create: When ``True`` create the hooks directory if it is missing.
        use_emoji: Flag indicating whether emoji output is desired.

    Returns:
        Path | None: Hooks directory path, or ``None`` when no repository was
        found or the directory could not be created.
    """

    git_dir = find_git_dir(start)
    if git_dir is None:
        return None

    hooks_dir = git_dir / HOOKS_DIRNAME
    if hooks_dir.is_dir() or not create:
        return hooks_dir
    if hooks_dir.exists():
        fail(f"{hooks_dir} exists but is not a directory", use_emoji=use_emoji)
        return None

    info(f"Creating missing hooks directory at {hooks_dir}", use_emoji=use_emoji)
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        fail(f"Could not create hooks directory {hooks_dir}: {exc}", use_emoji=use_emoji)
        return None
    return hooks_dir


def _read_gitfile(marker: Path) -> Path | None:
    """Return the directory referenced by a ``.git`` file, if it exists."""

    try:
        content = marker.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    first_line = content.splitlines()[0] if content else ""
    if not first_line.startswith(GITDIR_PREFIX):
        return None
    raw = first_line[len(GITDIR_PREFIX) :].strip()
    if not raw:
        return None
    target = Path(raw)
    if not target.is_absolute():
        target = marker.parent / target
    target = target.resolve()
    return target if target.is_dir() else None


def _is_bare_repository(candidate: Path) -> bool:
    return (
        (candidate / "HEAD").is_file()
        and (candidate / "objects").is_dir()
        and (candidate / "refs").is_dir()
    )


__all__ = ["GIT_METADATA_DIR", "HOOKS_DIRNAME", "find_git_dir", "locate_hooks_dir"]
