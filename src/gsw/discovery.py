"""Repository discovery: find git repository roots under a directory."""

from __future__ import annotations

import os
from pathlib import Path

from . import log

GIT_DIRNAME = ".git"
EXCLUDED_DIRNAMES = frozenset({"node_modules", "vendor", GIT_DIRNAME})


def _depth(root: Path, path: Path) -> int:
    relative = path.relative_to(root)
    return len(relative.parts)


def _resolved_key(path: Path) -> str:
    try:
        return str(path.resolve())
    except OSError:
        return str(path)


def _report_walk_error(exc: OSError) -> None:
    location = exc.filename or "<unknown>"
    log.debug(f"cannot access {location}: {exc.strerror or exc}")


def find_repositories(root: Path, max_depth: int) -> list[Path]:
    """Return repository roots under ``root`` in walk order.

    A repository root is a directory with a ``.git`` directory as an
    immediate child. Repository roots are not descended into, excluded
    directory names are pruned, and directories deeper than ``max_depth``
    (root is depth 0) are pruned. Unreadable directories are skipped.

    Args:
        root: Directory to scan.
        max_depth: Deepest directory level that may be reported.

    Returns:
        Deduplicated repository paths.
    """
    repos: list[Path] = []
    seen: set[str] = set()
    for dirpath, dirnames, _filenames in os.walk(
        root, topdown=True, onerror=_report_walk_error, followlinks=False
    ):
        current = Path(dirpath)
        depth = _depth(root, current)

        if GIT_DIRNAME in dirnames and (current / GIT_DIRNAME).is_dir():
            key = _resolved_key(current)
            if key not in seen:
                seen.add(key)
                repos.append(current)
                log.debug(f"Found repository: {current}")
            dirnames.clear()
            continue

        if depth + 1 > max_depth:
            dirnames.clear()
            continue
        dirnames[:] = sorted(name for name in dirnames if name not in EXCLUDED_DIRNAMES)
    return repos
