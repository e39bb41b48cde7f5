# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for writing hook scripts to disk."""

from __future__ import annotations

import gc
import os
import stat
from pathlib import Path
from threading import Thread

import pytest

from pygithook.hooks import HookPermissionError, HookWriteError, write_hook
from pygithook.hooks import writer
from pygithook.hooks.writer import OWNER_RWX


def _owner_bits(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode) & OWNER_RWX


def test_write_hook_creates_executable_file(tmp_path: Path) -> None:
    destination = tmp_path / "pre-commit"

    assert write_hook(destination, b"#!/bin/sh\necho hello\n") == destination

    assert destination.read_bytes() == b"#!/bin/sh\necho hello\n"
    assert _owner_bits(destination) == OWNER_RWX
    assert os.access(destination, os.X_OK)


def test_write_hook_replaces_previous_content(tmp_path: Path) -> None:
    destination = tmp_path / "pre-push"
    write_hook(destination, b"#!/bin/sh\n" + b"x" * 4096)

    write_hook(destination, b"#!/bin/sh\ny\n")

    assert destination.read_bytes() == b"#!/bin/sh\ny\n"


def test_write_hook_adds_owner_bits_to_existing_mode(tmp_path: Path) -> None:
    destination = tmp_path / "commit-msg"
    destination.write_bytes(b"old")
    destination.chmod(0o644)

    write_hook(destination, b"#!/bin/sh\n")

    mode = stat.S_IMODE(destination.stat().st_mode)
    assert mode & OWNER_RWX == OWNER_RWX
    assert mode & stat.S_IRGRP
    assert mode & stat.S_IROTH


def test_write_hook_replaces_symlink_without_touching_target(tmp_path: Path) -> None:
    template = tmp_path / "template"
    template.write_bytes(b"#!/bin/sh\ntemplate\n")
    destination = tmp_path / "pre-commit"
    destination.symlink_to(template)

    write_hook(destination, b"#!/bin/sh\nnew\n")

    assert not destination.is_symlink()
    assert destination.read_bytes() == b"#!/bin/sh\nnew\n"
    assert template.read_bytes() == b"#!/bin/sh\ntemplate\n"


def test_write_failure_raises_write_error(tmp_path: Path) -> None:
    destination = tmp_path / "pre-commit"
    destination.mkdir()

    with pytest.raises(HookWriteError) as excinfo:
        write_hook(destination, b"#!/bin/sh\n")

    assert excinfo.value.hook_name == "pre-commit"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_permission_failure_leaves_written_content(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    destination = tmp_path / "pre-commit"

    def refuse_chmod(self: Path, mode: int, *, follow_symlinks: bool = True) -> None:
        raise PermissionError("chmod refused")

    monkeypatch.setattr(Path, "chmod", refuse_chmod)

    with pytest.raises(HookPermissionError) as excinfo:
        write_hook(destination, b"#!/bin/sh\necho hi\n")

    assert excinfo.value.path == destination
    assert destination.read_bytes() == b"#!/bin/sh\necho hi\n"


def test_concurrent_writes_to_same_path_do_not_interleave(tmp_path: Path) -> None:
    destination = tmp_path / "pre-commit"
    payloads = [f"#!/bin/sh\n{index}\n".encode("utf-8") * 2048 for index in range(8)]
    threads = [Thread(target=write_hook, args=(destination, payload)) for payload in payloads]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert destination.read_bytes() in payloads
    assert _owner_bits(destination) == OWNER_RWX


def test_path_locks_are_released_after_writing(tmp_path: Path) -> None:
    destinations = [tmp_path / name for name in ("pre-commit", "pre-push", "post-merge")]

    for destination in destinations:
        write_hook(destination, b"#!/bin/sh\n")
    gc.collect()

    assert not any(destination.absolute() in writer._PATH_LOCKS for destination in destinations)
