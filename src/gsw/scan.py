"""Scan orchestration across repositories."""

from __future__ import annotations

import concurrent.futures
import os
from pathlib import Path
from typing import Callable, Sequence

from . import exec as exec_util
from . import log
from .inspector import inspect_repository
from .models import RepoStatus

DEFAULT_MAX_JOBS = 8

Inspector = Callable[[Path], RepoStatus]


def default_jobs() -> int:
    """Return the default worker-pool size for parallel scans."""
    return max(1, min(DEFAULT_MAX_JOBS, os.cpu_count() or 1))


def _guarded(inspector: Inspector, repo_path: Path) -> RepoStatus:
    try:
        return inspector(repo_path)
    except Exception as exc:  # noqa: BLE001 - one repository must not abort the scan
        log.error(f"unexpected failure scanning {repo_path}: {exc}")
        return RepoStatus(path=str(repo_path), error=f"Unexpected error: {exc}")


def scan_sequential(repos: Sequence[Path], inspector: Inspector) -> list[RepoStatus]:
    """Inspect repositories one at a time; output order equals input order."""
    statuses: list[RepoStatus] = []
    for repo_path in repos:
        log.debug(f"Scanning {repo_path}")
        statuses.append(_guarded(inspector, repo_path))
    return statuses


def scan_parallel(
    repos: Sequence[Path], inspector: Inspector, *, jobs: int
) -> list[RepoStatus]:
    """Inspect repositories on a bounded worker pool.

    Results are returned in completion order.
    """
    if not repos:
        return []
    max_workers = max(1, min(jobs, len(repos)))
    log.debug(f"Scanning {len(repos)} repositories with {max_workers} workers")
    statuses: list[RepoStatus] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_guarded, inspector, repo_path) for repo_path in repos]
        for future in concurrent.futures.as_completed(futures):
            statuses.append(future.result())
    return statuses


def scan_repositories(
    repos: Sequence[Path],
    *,
    include_clean: bool = False,
    parallel: bool = False,
    jobs: int | None = None,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> list[RepoStatus]:
    """Produce one ``RepoStatus`` per repository path.

    Args:
        repos: Repository roots to inspect.
        include_clean: Report clean branches as well as dirty ones.
        parallel: Use the worker pool instead of a sequential loop.
        jobs: Worker-pool size; defaults to ``default_jobs()``.
        git_path: Optional git executable.
        runner: Optional command runner shared by all inspections.

    Returns:
        Status records, in input order when sequential and completion order
        when parallel.
    """

    def inspector(repo_path: Path) -> RepoStatus:
        return inspect_repository(
            repo_path, include_clean=include_clean, git_path=git_path, runner=runner
        )

    if parallel:
        return scan_parallel(repos, inspector, jobs=jobs or default_jobs())
    return scan_sequential(repos, inspector)
