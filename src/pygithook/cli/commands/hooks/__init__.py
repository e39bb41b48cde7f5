# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Hook listing CLI command."""

from __future__ import annotations

import typer

from .command import hooks_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the hook listing command on the Typer application.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="hooks")(hooks_command)
