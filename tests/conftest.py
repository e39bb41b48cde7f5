# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pygithook.hooks import find_git_dir


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a project root containing an empty ``.git`` directory."""

    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def outside_repository(tmp_path: Path) -> Path:
    """Return a directory that no git repository encloses."""

    if find_git_dir(tmp_path) is not None:
        pytest.skip("temporary directory lives inside a git repository")
    root = tmp_path / "plain"
    root.mkdir()
    return root
