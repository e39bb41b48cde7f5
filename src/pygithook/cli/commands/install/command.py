# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing configured git hooks."""

from __future__ import annotations

from pathlib import Path

import typer

from ...core.shared import CLIError, build_cli_logger
from .models import (
    BUILD_DIRECTORY_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    HOOK_OPTION,
    RESOURCE_HOOK_OPTION,
    ROOT_OPTION,
    SKIP_OPTION,
    InstallCLIOptions,
)
from .services import emit_install_summary, perform_installation


def install_command(
    root: ROOT_OPTION = Path("."),
    config_path: CONFIG_OPTION = None,
    build_directory: BUILD_DIRECTORY_OPTION = None,
    hook: HOOK_OPTION = None,
    resource_hook: RESOURCE_HOOK_OPTION = None,
    skip: SKIP_OPTION = False,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Install the git hooks declared in project configuration.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    logger = build_cli_logger(emoji=emoji, debug=debug)
    try:
        options = InstallCLIOptions.from_cli(
            root,
            config_path,
            build_directory,
            hook,
            resource_hook,
            skip=skip,
            dry_run=dry_run,
            emoji=emoji,
            debug=debug,
        )
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["install_command"]
