# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for hook installation."""

from __future__ import annotations

from .loaders import (
    PROJECT_CONFIG_FILENAME,
    SKIP_ENV_VAR,
    ConfigLoader,
    ConfigSource,
    DefaultConfigSource,
    EnvironmentConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
    load_config,
)
from .models import ConfigError, HookConfig

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "EnvironmentConfigSource",
    "HookConfig",
    "PROJECT_CONFIG_FILENAME",
    "PyProjectConfigSource",
    "SKIP_ENV_VAR",
    "TomlConfigSource",
    "load_config",
]
