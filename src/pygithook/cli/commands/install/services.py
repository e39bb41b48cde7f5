# SPDX-License-Identifier: MIT
"""Helper services used by the install CLI command."""

from __future__ import annotations

from ....config import ConfigError, ConfigLoader, HookConfig
from ....hooks import HookInstallError, InstallResult, install_hooks
from ...core.shared import CLIError, CLILogger
from .models import InstallCLIOptions


def load_hook_config(options: InstallCLIOptions, *, logger: CLILogger) -> HookConfig:
    """Load the layered hook configuration for the provided options.

    Raises:
        CLIError: Raised when any configuration source is invalid.
    """

    loader = ConfigLoader.for_root(options.root, config_path=options.config_path)
    for source in loader.sources:
        logger.debug(f"source={source.describe()!r}")
    try:
        config = loader.load(options.overrides)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    logger.debug(
        f"root={options.root} build_directory={config.build_directory} "
        f"hooks={len(config.hooks)} resource_hooks={len(config.resource_hooks)} skip={config.skip}"
    )
    return config


def perform_installation(options: InstallCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks for the provided options.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when configuration is invalid or installation aborts.
    """

    config = load_hook_config(options, logger=logger)
    try:
        return install_hooks(
            options.root,
            config,
            dry_run=options.dry_run,
            use_emoji=options.emoji,
        )
    except HookInstallError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_install_summary(
    result: InstallResult,
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit summary warnings after attempting hook installation."""

    if result.skipped:
        logger.warn(f"Skipped invalid hook names: {', '.join(result.skipped)}")
    if options.dry_run and result.installed:
        planned = ", ".join(str(path) for path in result.installed)
        logger.warn(f"DRY RUN: would install {planned}")


__all__ = [
    "emit_install_summary",
    "load_hook_config",
    "perform_installation",
]
