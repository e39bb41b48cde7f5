# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model describing which hooks to install."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class HookConfig(BaseModel):
    """Hook definitions and run switches loaded once before installation.

    ``hooks`` maps hook names to inline script text while ``resource_hooks``
    maps hook names to script files relative to the project root. Both keep
    the order in which entries were declared.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    hooks: dict[str, str] = Field(default_factory=dict)
    resource_hooks: dict[str, str] = Field(default_factory=dict, alias="resource-hooks")
    build_directory: Path = Field(default=Path("."), alias="build-directory")
    skip: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return the configuration keyed the way it is written in TOML."""

        return self.model_dump(by_alias=True)


__all__ = ["ConfigError", "HookConfig"]
