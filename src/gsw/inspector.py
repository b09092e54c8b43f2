"""Branch status inspection for a single repository.

Inspection checks out every local branch in turn, so it mutates the
repository's working tree. The whole sequence runs under the repository's
working-tree lock and the originally checked-out branch is restored
afterwards on a best-effort basis.
"""

from __future__ import annotations

from pathlib import Path

from . import exec as exec_util
from . import git, log
from .changes import summarize_porcelain
from .locks import working_tree_lock
from .models import (
    STATUS_CHECKOUT_ERROR,
    STATUS_CLEAN,
    STATUS_STATUS_ERROR,
    BranchStatus,
    RepoStatus,
)

_GIT_ERRORS = (exec_util.CommandExecutionError, exec_util.CommandParseError)


def _first_line(exc: Exception) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else exc.__class__.__name__


def inspect_branch(
    repo_path: Path,
    branch: str,
    current_branch: str,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> BranchStatus:
    """Check out ``branch`` if needed and report its working-tree state."""
    is_current = branch == current_branch
    if not is_current:
        try:
            git.git_checkout(repo_path, branch, git_path=git_path, runner=runner)
        except _GIT_ERRORS as exc:
            log.debug(f"Warning: cannot checkout {branch} in {repo_path}: {_first_line(exc)}")
            return BranchStatus(name=branch, current=False, status=STATUS_CHECKOUT_ERROR)

    try:
        porcelain = git.git_status_porcelain(repo_path, git_path=git_path, runner=runner)
    except _GIT_ERRORS as exc:
        log.debug(f"Warning: cannot get status for {branch} in {repo_path}: {_first_line(exc)}")
        return BranchStatus(name=branch, current=is_current, status=STATUS_STATUS_ERROR)

    is_dirty = bool(porcelain.strip())
    status = summarize_porcelain(porcelain) if is_dirty else STATUS_CLEAN

    ahead = behind = 0
    try:
        ahead, behind = git.git_ahead_behind(repo_path, branch, git_path=git_path, runner=runner)
    except _GIT_ERRORS:
        # No upstream configured.
        log.trace(f"no upstream for {branch} in {repo_path}")

    return BranchStatus(
        name=branch,
        is_dirty=is_dirty,
        ahead=ahead,
        behind=behind,
        status=status,
        current=is_current,
    )


def _restore_branch(
    repo_path: Path,
    branch: str,
    *,
    git_path: str | None,
    runner: exec_util.CommandRunner | None,
) -> None:
    try:
        git.git_checkout(repo_path, branch, git_path=git_path, runner=runner)
    except _GIT_ERRORS as exc:
        log.warning(
            f"Warning: cannot return to branch {branch} in {repo_path}: {_first_line(exc)}"
        )


def inspect_repository(
    repo_path: Path,
    *,
    include_clean: bool = False,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> RepoStatus:
    """Report the status of every local branch of one repository.

    Args:
        repo_path: Repository root.
        include_clean: Report clean branches as well as dirty ones.
        git_path: Optional git executable.
        runner: Optional command runner (defaults to subprocess).

    Returns:
        A ``RepoStatus``; repository-level failures are recorded in ``error``.
    """
    path_text = str(repo_path)
    with working_tree_lock(repo_path):
        try:
            current_branch = git.git_current_branch(repo_path, git_path=git_path, runner=runner)
        except _GIT_ERRORS as exc:
            return RepoStatus(
                path=path_text,
                error=f"Error getting current branch: {_first_line(exc)}",
            )
        if current_branch == git.DETACHED_HEAD:
            return RepoStatus(
                path=path_text,
                error="Error getting current branch: HEAD is detached",
            )

        try:
            branch_names = git.git_local_branches(repo_path, git_path=git_path, runner=runner)
        except _GIT_ERRORS as exc:
            log.debug(f"Error getting branches for {repo_path}: {_first_line(exc)}")
            return RepoStatus(
                path=path_text,
                current_branch=current_branch,
                error=f"Error getting branches: {_first_line(exc)}",
            )

        branches: list[BranchStatus] = []
        for name in branch_names:
            branch_status = inspect_branch(
                repo_path, name, current_branch, git_path=git_path, runner=runner
            )
            if branch_status.is_dirty or include_clean:
                branches.append(branch_status)

        _restore_branch(repo_path, current_branch, git_path=git_path, runner=runner)

    return RepoStatus(path=path_text, current_branch=current_branch, branches=branches)
