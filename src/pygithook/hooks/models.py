# SPDX-License-Identifier: MIT
"""Dataclasses describing hook installation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from installing configured git hooks."""

    installed: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


__all__ = ["InstallResult"]
