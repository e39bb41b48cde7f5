# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Install CLI command."""

from __future__ import annotations

import typer

from .command import install_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the install command with ``app``.

    Args:
        app: Typer application receiving the install command registration.
    """

    app.command(name="install")(install_command)
