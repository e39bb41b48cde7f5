# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution utilities for installing configured git hooks."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from pygithook.config.models import HookConfig
from pygithook.core.logging import fail, info, ok, warn

from .errors import RepositoryNotFoundError
from .locator import locate_hooks_dir
from .models import InstallResult
from .registry import is_supported
from .scripts import resolve_inline, resolve_resource
from .writer import write_hook


@dataclass(frozen=True, slots=True)
class InstallContext:
    """Describe the locations and flags shared by every hook in a run."""

    project_root: Path
    hooks_dir: Path
    dry_run: bool
    use_emoji: bool


ScriptResolver = Callable[[InstallContext, str, str], bytes]


def install_hooks(
    project_root: Path,
    config: HookConfig,
    *,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Install the inline and file-backed hooks declared in ``config``.

    Inline hooks are processed first, then file-backed hooks, each in the
    order they were declared; when a name appears in both, the file-backed
    script is written last and wins.

    Args:
        project_root: Directory anchoring relative paths and containing
            external hook scripts.
        config: Hook configuration for this run.
        dry_run: When ``True`` resolve every hook but write nothing.
        use_emoji: Flag indicating whether emoji output is desired.

    Returns:
        InstallResult: Destinations written and hook names skipped.

    Raises:
        RepositoryNotFoundError: If no git repository encloses the build directory.
        PathEscapeError: If an external script lives outside ``project_root``.
        HookReadError: If an external script cannot be read.
        HookWriteError: If a hook cannot be written.
        HookPermissionError: If a written hook cannot be made executable.
    """

    result = InstallResult()
    if config.skip:
        info("Skipping git hook installation", use_emoji=use_emoji)
        return result

    root = project_root.resolve()
    start = config.build_directory if config.build_directory.is_absolute() else root / config.build_directory
    if not start.resolve().is_relative_to(root):
        warn(f"build-directory {start} is outside the project root {root}", use_emoji=use_emoji)
    hooks_dir = locate_hooks_dir(start, create=not dry_run, use_emoji=use_emoji)
    if hooks_dir is None:
        raise RepositoryNotFoundError(start)

    context = InstallContext(project_root=root, hooks_dir=hooks_dir, dry_run=dry_run, use_emoji=use_emoji)
    _install_set("hooks", config.hooks, _resolve_inline, context=context, result=result)
    _install_set("resource-hooks", config.resource_hooks, _resolve_resource, context=context, result=result)

    if dry_run:
        ok(f"Dry run complete: would install {len(result.installed)} hooks", use_emoji=use_emoji)
    else:
        ok(f"Installed {len(result.installed)} hooks", use_emoji=use_emoji)
    return result


def _install_set(
    label: str,
    entries: Mapping[str, str],
    resolver: ScriptResolver,
    *,
    context: InstallContext,
    result: InstallResult,
) -> None:
    """Install every hook in ``entries`` in iteration order.

    Args:
        label: Configuration key the entries were read from.
        entries: Mapping of hook name to script source.
        resolver: Callable producing the script bytes for one entry.
        context: Shared installation context.
        result: Accumulator updated with installed and skipped hooks.
    """

    if not entries:
        info(f"{label} is empty, skipping", use_emoji=context.use_emoji)
        return

    for name, source in entries.items():
        if not is_supported(name):
            fail(f"`{name}` hook is not a valid git-hook name", use_emoji=context.use_emoji)
            result.skipped.append(name)
            continue

        data = resolver(context, name, source)
        destination = context.hooks_dir / name
        if not context.dry_run:
            write_hook(destination, data)
        result.installed.append(destination)


def _resolve_inline(context: InstallContext, name: str, script: str) -> bytes:
    info(f"Installing {name} hook into {context.hooks_dir}", use_emoji=context.use_emoji)
    return resolve_inline(name, script)


def _resolve_resource(context: InstallContext, name: str, raw_path: str) -> bytes:
    info(f"Installing {name} from {raw_path}", use_emoji=context.use_emoji)
    return resolve_resource(name, raw_path, context.project_root, use_emoji=context.use_emoji)


__all__ = ["InstallContext", "install_hooks"]
