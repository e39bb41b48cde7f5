# SPDX-License-Identifier: MIT
"""Data structures for the install CLI command."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any, Final

import typer

from ...core.shared import CLIError

ASSIGNMENT_SEPARATOR: Final[str] = "="

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root; external hook paths must live under it."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Read hook settings from this TOML file instead of .pygithook.toml."),
]
BUILD_DIRECTORY_OPTION = Annotated[
    Path | None,
    typer.Option("--build-directory", help="Directory from which the enclosing git repository is searched."),
]
HOOK_OPTION = Annotated[
    list[str] | None,
    typer.Option("--hook", help="Inline hook as NAME=SCRIPT. Repeatable."),
]
RESOURCE_HOOK_OPTION = Annotated[
    list[str] | None,
    typer.Option("--resource-hook", help="File-backed hook as NAME=PATH. Repeatable."),
]
SKIP_OPTION = Annotated[
    bool,
    typer.Option("--skip", help="Skip hook installation entirely."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print configuration diagnostics."),
]


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path
    config_path: Path | None
    dry_run: bool
    emoji: bool
    debug: bool
    overrides: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_cli(
        cls,
        root: Path,
        config_path: Path | None,
        build_directory: Path | None,
        hooks: list[str] | None,
        resource_hooks: list[str] | None,
        *,
        skip: bool,
        dry_run: bool,
        emoji: bool,
        debug: bool,
    ) -> InstallCLIOptions:
        """Return options parsed from CLI arguments.

        Raises:
            CLIError: If a ``NAME=VALUE`` hook override is malformed.
        """

        overrides: dict[str, Any] = {}
        if hooks:
            overrides["hooks"] = parse_assignments(hooks, option="--hook")
        if resource_hooks:
            overrides["resource-hooks"] = parse_assignments(resource_hooks, option="--resource-hook")
        if build_directory is not None:
            overrides["build-directory"] = build_directory
        if skip:
            overrides["skip"] = True
        return cls(
            root=root.resolve(),
            config_path=config_path,
            dry_run=dry_run,
            emoji=emoji,
            debug=debug,
            overrides=overrides,
        )


def parse_assignments(values: list[str], *, option: str) -> dict[str, str]:
    """Return ``NAME=VALUE`` pairs as an ordered mapping.

    Args:
        values: Raw option values in the order they were given.
        option: Option name used in error messages.

    Returns:
        dict[str, str]: Mapping of names to values; later duplicates win.

    Raises:
        CLIError: If a value lacks a name or the ``=`` separator.
    """

    parsed: dict[str, str] = {}
    for raw in values:
        name, separator, value = raw.partition(ASSIGNMENT_SEPARATOR)
        name = name.strip()
        if not separator or not name:
            raise CLIError(f"{option} expects NAME=VALUE, got {raw!r}")
        parsed[name] = value
    return parsed


__all__ = [
    "BUILD_DIRECTORY_OPTION",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "HOOK_OPTION",
    "InstallCLIOptions",
    "RESOURCE_HOOK_OPTION",
    "ROOT_OPTION",
    "SKIP_OPTION",
    "parse_assignments",
]
