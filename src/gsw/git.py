"""Git queries used by the branch status inspector.

Each helper wraps exactly one git invocation. Failures are raised as
``CommandExecutionError`` (non-zero exit or missing executable) or
``CommandParseError`` (unexpected output) so callers decide whether a
failure is fatal for a repository, fatal for a branch, or expected.
"""

from pathlib import Path

from . import exec as exec_util

DETACHED_HEAD = "HEAD"


def git_command(args: list[str], *, git_path: str | None = None) -> list[str]:
    """Build a git command using an optional executable path.

    Example:
        >>> git_command(["status"])
        ['git', 'status']
        >>> git_command(["status"], git_path="/usr/bin/git")
        ['/usr/bin/git', 'status']
    """
    resolved = git_path.strip() if isinstance(git_path, str) else ""
    if not resolved:
        resolved = "git"
    return [resolved, *args]


def _spec(
    repo_dir: Path,
    args: list[str],
    parser,
    *,
    context: str,
    git_path: str | None,
) -> exec_util.CommandSpec:
    argv = git_command(["-C", str(repo_dir), *args], git_path=git_path)
    return exec_util.CommandSpec(
        request=exec_util.CommandRequest(argv=tuple(argv)),
        parser=parser,
        context=context,
    )


def _parse_branch_name(result: exec_util.CommandResult) -> str:
    name = result.stdout.strip()
    if not name:
        raise ValueError("empty branch name")
    return name


def _parse_porcelain(result: exec_util.CommandResult) -> str:
    # Leading spaces are significant in porcelain status codes.
    return result.stdout.rstrip("\n")


def parse_ahead_behind(text: str) -> tuple[int, int]:
    """Parse ``git rev-list --left-right --count`` output.

    Example:
        >>> parse_ahead_behind("3\\t1\\n")
        (3, 1)
    """
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"expected two counts, got {text.strip()!r}")
    ahead, behind = (int(part) for part in parts)
    if ahead < 0 or behind < 0:
        raise ValueError(f"negative count in {text.strip()!r}")
    return ahead, behind


def git_current_branch(
    repo_dir: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Return the checked-out branch name (``HEAD`` when detached)."""
    return exec_util.run_typed(
        _spec(
            repo_dir,
            ["rev-parse", "--abbrev-ref", "HEAD"],
            _parse_branch_name,
            context="current branch",
            git_path=git_path,
        ),
        runner=runner,
    )


def git_local_branches(
    repo_dir: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> list[str]:
    """Return local branch names in ``git branch`` listing order."""
    return exec_util.run_typed(
        _spec(
            repo_dir,
            ["branch", "--format=%(refname:short)"],
            exec_util.parse_lines,
            context="local branches",
            git_path=git_path,
        ),
        runner=runner,
    )


def git_checkout(
    repo_dir: Path,
    branch: str,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Check out ``branch`` quietly in the working tree."""
    exec_util.run_typed(
        _spec(
            repo_dir,
            ["checkout", "-q", branch],
            exec_util.parse_none,
            context="checkout",
            git_path=git_path,
        ),
        runner=runner,
    )


def git_status_porcelain(
    repo_dir: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Return ``git status --porcelain`` output (empty when clean)."""
    return exec_util.run_typed(
        _spec(
            repo_dir,
            ["status", "--porcelain"],
            _parse_porcelain,
            context="working tree status",
            git_path=git_path,
        ),
        runner=runner,
    )


def git_ahead_behind(
    repo_dir: Path,
    branch: str,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> tuple[int, int]:
    """Return ``(ahead, behind)`` commit counts against the branch upstream.

    Raises ``CommandExecutionError`` when no upstream is configured.
    """
    return exec_util.run_typed(
        _spec(
            repo_dir,
            ["rev-list", "--left-right", "--count", f"{branch}...{branch}@{{upstream}}"],
            lambda result: parse_ahead_behind(result.stdout),
            context="ahead/behind",
            git_path=git_path,
        ),
        runner=runner,
    )
