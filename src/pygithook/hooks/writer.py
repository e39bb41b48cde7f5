# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write hook scripts into the hooks directory."""

from __future__ import annotations

import stat
from pathlib import Path
from threading import Lock
from typing import Final
from weakref import WeakValueDictionary

from .errors import HookPermissionError, HookWriteError

OWNER_RWX: Final[int] = stat.S_IRUSR | stat.S_IWUSR | stat.S_IXUSR

# Entries disappear once no writer holds the lock for that path.
_PATH_LOCKS: WeakValueDictionary[Path, Lock] = WeakValueDictionary()
_PATH_LOCKS_GUARD = Lock()


def _lock_for(path: Path) -> Lock:
    """Return the lock serialising writes to ``path``."""

    key = path.absolute()
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(key)
        if lock is None:
            lock = Lock()
            _PATH_LOCKS[key] = lock
        return lock


def write_hook(path: Path, data: bytes) -> Path:
    """Replace the hook at ``path`` with ``data`` and mark it executable.

    Writing and applying permissions happen under a per-path lock, so two
    callers never interleave on the same destination. A symlink at ``path``
    is removed first so the link target is never modified.

    Args:
        path: Destination inside the hooks directory.
        data: Complete script content.

    Returns:
        Path: The destination that was written.

    Raises:
        HookWriteError: If the content could not be written.
        HookPermissionError: If the owner permission bits could not be set.
            The written content is left in place.
    """

    with _lock_for(path):
        try:
            if path.is_symlink():
                path.unlink()
            path.write_bytes(data)
        except OSError as exc:
            raise HookWriteError(path) from exc

        try:
            mode = path.stat().st_mode
            path.chmod(stat.S_IMODE(mode) | OWNER_RWX)
        except OSError as exc:
            raise HookPermissionError(path) from exc
    return path


__all__ = ["OWNER_RWX", "write_hook"]
