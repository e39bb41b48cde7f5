# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources and the layered loader that merges them."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .models import ConfigError, HookConfig
from .utils import _deep_merge, _normalise_keys

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pygithook"
PROJECT_CONFIG_FILENAME: Final[str] = ".pygithook.toml"
SKIP_ENV_VAR: Final[str] = "PYGITHOOK_SKIP"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


class ConfigSource(Protocol):
    """Provide one layer of raw configuration data."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the raw configuration fragment provided by the source."""
        ...

    def describe(self) -> str:
        """Return a human-readable description of the source."""
        ...


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return HookConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None, required: bool = False) -> None:
        self._path = path
        self.name = name or str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        if not self._path.exists():
            if self._required:
                raise ConfigError(f"Configuration file not found: {self._path}")
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self._path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Could not read configuration at {self._path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        return _normalise_keys(data)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.pygithook]`` within ``pyproject.toml``."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, name=str(path))

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {self.name} must be a table")
        return _normalise_keys(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class EnvironmentConfigSource:
    """Read the skip switch from the process environment."""

    name = "environment"

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env

    def load(self) -> Mapping[str, Any]:
        raw = self._env.get(SKIP_ENV_VAR)
        if raw is None:
            return {}
        token = raw.strip().lower()
        if token in _TRUTHY:
            return {"skip": True}
        if token in _FALSY:
            return {"skip": False}
        raise ConfigError(f"{SKIP_ENV_VAR} must be a boolean flag, got {raw!r}")

    def describe(self) -> str:
        return f"environment (${SKIP_ENV_VAR})"


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, project_root: Path, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            project_root: Directory that anchors relative paths.
            sources: Ordered collection of configuration sources, lowest
                precedence first.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)
        self.project_root = project_root.resolve()

    @classmethod
    def for_root(
        cls,
        project_root: Path,
        *,
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ConfigLoader:
        """Build a loader that respects defaults, project files and the environment.

        Args:
            project_root: Workspace root used to discover configuration files.
            config_path: Optional explicit configuration file replacing the
                project-level ``.pygithook.toml``. It must exist.
            env: Optional environment mapping; defaults to ``os.environ``.

        Returns:
            ConfigLoader: Loader configured with default precedence ordering.
        """

        root = project_root.resolve()
        if config_path is None:
            project_source = TomlConfigSource(root / PROJECT_CONFIG_FILENAME)
        else:
            resolved = config_path if config_path.is_absolute() else root / config_path
            project_source = TomlConfigSource(resolved, required=True)
        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            PyProjectConfigSource(root / PYPROJECT_FILENAME),
            project_source,
            EnvironmentConfigSource(env),
        ]
        return cls(project_root=root, sources=sources)

    @property
    def sources(self) -> tuple[ConfigSource, ...]:
        return tuple(self._sources)

    def load(self, overrides: Mapping[str, Any] | None = None) -> HookConfig:
        """Merge every source, apply ``overrides`` last and validate the result.

        Args:
            overrides: Optional fragment applied above every source, typically
                produced from command-line options.

        Returns:
            HookConfig: Validated, immutable configuration.

        Raises:
            ConfigError: If any source is malformed or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            merged = _deep_merge(merged, source.load())
        if overrides:
            merged = _deep_merge(merged, _normalise_keys(overrides))
        try:
            return HookConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(_format_validation_error(exc)) from exc


def load_config(
    project_root: Path,
    *,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> HookConfig:
    """Load the hook configuration for ``project_root``.

    Args:
        project_root: Workspace root used to discover configuration files.
        config_path: Optional explicit configuration file.
        overrides: Optional fragment applied above every other source.
        env: Optional environment mapping; defaults to ``os.environ``.

    Returns:
        HookConfig: Validated configuration for the run.
    """

    loader = ConfigLoader.for_root(project_root, config_path=config_path, env=env)
    return loader.load(overrides)


def _format_validation_error(exc: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
    )
    return f"Invalid hook configuration: {details}"


__all__ = [
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "EnvironmentConfigSource",
    "PROJECT_CONFIG_FILENAME",
    "PyProjectConfigSource",
    "SKIP_ENV_VAR",
    "TomlConfigSource",
    "load_config",
]
