# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers shared by configuration sources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` without mutating either mapping.

    Keys already present keep their position, so hook tables retain the order
    of the source that declared them first.
    """

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``data`` with top-level ``snake_case`` keys spelt ``kebab-case``."""

    return {key.replace("_", "-"): value for key, value in data.items()}


__all__ = ["_deep_merge", "_normalise_keys"]
