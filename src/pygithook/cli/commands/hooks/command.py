# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing the hook names git recognises."""

from __future__ import annotations

from ....hooks import available_hooks
from ...core.shared import build_cli_logger


def hooks_command() -> None:
    """Print every hook name that may be used as a configuration key."""

    logger = build_cli_logger(emoji=False)
    for name in available_hooks():
        logger.echo(name)


__all__ = ["hooks_command"]
