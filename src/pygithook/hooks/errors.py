# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while installing git hooks."""

from __future__ import annotations

from pathlib import Path


class HookInstallError(RuntimeError):
    """Base class for failures that abort a hook installation run."""


class RepositoryNotFoundError(HookInstallError):
    """Raised when no git metadata directory encloses the start path."""

    def __init__(self, start: Path) -> None:
        super().__init__(
            f"Not a git repository, could not find a .git/hooks directory anywhere in the hierarchy of {start}."
        )
        self.start = start


class PathEscapeError(HookInstallError):
    """Raised when an external hook script lives outside the project root."""

    def __init__(self, hook_name: str, path: Path, project_root: Path) -> None:
        super().__init__(
            f"Only files inside the project can be used to generate git hooks: "
            f"{hook_name} points at {path}, outside {project_root}"
        )
        self.hook_name = hook_name
        self.path = path
        self.project_root = project_root


class HookReadError(HookInstallError):
    """Raised when an external hook script cannot be read."""

    def __init__(self, hook_name: str, path: Path) -> None:
        super().__init__(f"Could not access hook resource for {hook_name}: {path}")
        self.hook_name = hook_name
        self.path = path


class HookScriptError(HookInstallError):
    """Raised when an inline hook script cannot be encoded."""

    def __init__(self, hook_name: str) -> None:
        super().__init__(f"Inline script for {hook_name} is not valid UTF-8 text")
        self.hook_name = hook_name


class HookWriteError(HookInstallError):
    """Raised when a hook script cannot be written to the hooks directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Could not write hook with name: {path.name} ({path})")
        self.hook_name = path.name
        self.path = path


class HookPermissionError(HookInstallError):
    """Raised when permissions cannot be applied to a freshly written hook.

    The hook content has already been written when this is raised; the file is
    left in place with whatever mode the filesystem assigned.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(f"Could not set permissions on created file {path}")
        self.hook_name = path.name
        self.path = path


__all__ = [
    "HookInstallError",
    "HookPermissionError",
    "HookReadError",
    "HookScriptError",
    "HookWriteError",
    "PathEscapeError",
    "RepositoryNotFoundError",
]
