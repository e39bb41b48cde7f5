# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of hook names recognised by git."""

from __future__ import annotations

from typing import Final

# Order follows the githooks(5) manual page.
GIT_HOOK_NAMES: Final[tuple[str, ...]] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-receive",
    "update",
    "post-receive",
    "post-update",
    "pre-auto-gc",
    "post-rewrite",
    "pre-push",
)

_SUPPORTED: Final[frozenset[str]] = frozenset(GIT_HOOK_NAMES)


def available_hooks() -> tuple[str, ...]:
    """Return the hook names git will execute from the hooks directory.

    Returns:
        tuple[str, ...]: Supported git hook identifiers.
    """

    return GIT_HOOK_NAMES


def is_supported(name: str) -> bool:
    """Return whether ``name`` identifies a git hook.

    Matching is exact and case-sensitive; no normalisation is applied.

    Args:
        name: Hook name supplied by the caller.

    Returns:
        bool: ``True`` when the hook is recognised by the registry.
    """

    return name in _SUPPORTED


__all__ = ["GIT_HOOK_NAMES", "available_hooks", "is_supported"]
