# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook registration and installation services."""

from __future__ import annotations

from .errors import (
    HookInstallError,
    HookPermissionError,
    HookReadError,
    HookScriptError,
    HookWriteError,
    PathEscapeError,
    RepositoryNotFoundError,
)
from .locator import find_git_dir, locate_hooks_dir
from .models import InstallResult
from .registry import GIT_HOOK_NAMES, available_hooks, is_supported
from .runner import install_hooks
from .scripts import ensure_within_project, resolve_inline, resolve_resource
from .writer import write_hook

__all__ = [
    "GIT_HOOK_NAMES",
    "HookInstallError",
    "HookPermissionError",
    "HookReadError",
    "HookScriptError",
    "HookWriteError",
    "InstallResult",
    "PathEscapeError",
    "RepositoryNotFoundError",
    "available_hooks",
    "ensure_within_project",
    "find_git_dir",
    "install_hooks",
    "is_supported",
    "locate_hooks_dir",
    "resolve_inline",
    "resolve_resource",
    "write_hook",
]
