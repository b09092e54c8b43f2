"""Per-repository locks serializing working-tree mutations."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

_REPO_LOCK_GUARD = threading.Lock()
_REPO_LOCKS: dict[str, threading.RLock] = {}


def _repo_lock_key(repo_path: Path) -> str:
    try:
        return str(repo_path.resolve())
    except OSError:
        return str(repo_path)


def repo_lock(repo_path: Path) -> threading.RLock:
    """Return the process-wide lock for a repository working tree."""
    key = _repo_lock_key(repo_path)
    with _REPO_LOCK_GUARD:
        lock = _REPO_LOCKS.get(key)
        if lock is None:
            lock = threading.RLock()
            _REPO_LOCKS[key] = lock
        return lock


@contextmanager
def working_tree_lock(repo_path: Path) -> Iterator[None]:
    """Hold exclusive access to a repository's checkout state."""
    lock = repo_lock(repo_path)
    with lock:
        yield
