# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the git hook name registry."""

from __future__ import annotations

import pytest

from pygithook.hooks import GIT_HOOK_NAMES, available_hooks, is_supported


def test_registry_lists_seventeen_unique_hooks() -> None:
    assert len(GIT_HOOK_NAMES) == 17
    assert len(set(GIT_HOOK_NAMES)) == 17
    assert available_hooks() == GIT_HOOK_NAMES


@pytest.mark.parametrize("name", GIT_HOOK_NAMES)
def test_every_registered_hook_is_supported(name: str) -> None:
    assert is_supported(name)


@pytest.mark.parametrize(
    "name",
    ["not-a-real-hook", "Pre-Commit", "PRE-PUSH", " pre-commit", "pre-commit ", "pre_commit", ""],
)
def test_names_outside_the_registry_are_rejected(name: str) -> None:
    assert not is_supported(name)
