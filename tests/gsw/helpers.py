from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable

import pytest

from gsw import exec as exec_util

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")

_GIT_IDENTITY = (
    "-c",
    "user.name=gsw tests",
    "-c",
    "user.email=gsw@example.invalid",
    "-c",
    "commit.gpgsign=false",
)


def git(repo: Path, *args: str) -> str:
    """Run git inside ``repo`` and return stdout; fail the test on error."""
    result = subprocess.run(
        ["git", *_GIT_IDENTITY, "-C", str(repo), *args],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise AssertionError(f"git {' '.join(args)} failed: {result.stderr}")
    return result.stdout


def init_repo(path: Path, *, branch: str = "main") -> Path:
    """Create a repository with one commit on ``branch``."""
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init", "-q")
    git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    commit_file(path, "README.md", "hello\n", message="initial")
    return path


def commit_file(repo: Path, name: str, content: str, *, message: str) -> None:
    target = repo / name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    git(repo, "add", name)
    git(repo, "commit", "-q", "-m", message)


def current_branch(repo: Path) -> str:
    return git(repo, "rev-parse", "--abbrev-ref", "HEAD").strip()


Response = exec_util.CommandResult | Callable[[tuple[str, ...]], exec_util.CommandResult]


def ok(stdout: str = "") -> exec_util.CommandResult:
    return exec_util.CommandResult(argv=(), returncode=0, stdout=stdout, stderr="")


def fail(stderr: str = "fatal: boom", returncode: int = 128) -> exec_util.CommandResult:
    return exec_util.CommandResult(argv=(), returncode=returncode, stdout="", stderr=stderr)


class FakeGitRunner:
    """Command runner answering git invocations from a lookup table.

    Keys are the git arguments after ``git -C <repo>``; prefixes are matched
    so ``("checkout", "-q")`` answers every checkout. Unmatched commands
    fail like git would.
    """

    def __init__(self, responses: dict[tuple[str, ...], Response] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        args = tuple(request.argv[3:])
        self.calls.append(args)
        for size in range(len(args), 0, -1):
            response = self.responses.get(args[:size])
            if response is None:
                continue
            if callable(response):
                return response(args)
            return response
        return fail(f"unexpected command: {' '.join(args)}")
