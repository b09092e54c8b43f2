from pathlib import Path

import pytest

import gsw.exec as exec_util
import gsw.git as git
from tests.gsw.helpers import FakeGitRunner, fail, ok

REPO = Path("/repo")


class _RecordingRunner:
    def __init__(self, result: exec_util.CommandResult) -> None:
        self.result = result
        self.requests: list[exec_util.CommandRequest] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult:
        self.requests.append(request)
        return self.result


def test_git_current_branch_runs_rev_parse_in_repo() -> None:
    runner = _RecordingRunner(ok("feature/x\n"))

    assert git.git_current_branch(REPO, runner=runner) == "feature/x"
    assert runner.requests[0].argv == ("git", "-C", "/repo", "rev-parse", "--abbrev-ref", "HEAD")


def test_git_current_branch_honours_git_path() -> None:
    runner = _RecordingRunner(ok("main\n"))

    git.git_current_branch(REPO, git_path="/opt/git/bin/git", runner=runner)

    assert runner.requests[0].argv[0] == "/opt/git/bin/git"


def test_git_current_branch_rejects_empty_output() -> None:
    runner = FakeGitRunner({("rev-parse",): ok("\n")})

    with pytest.raises(exec_util.CommandParseError):
        git.git_current_branch(REPO, runner=runner)


def test_git_local_branches_skips_blank_lines() -> None:
    runner = FakeGitRunner({("branch",): ok("main\n\nfeature/x\nwip\n")})

    assert git.git_local_branches(REPO, runner=runner) == ["main", "feature/x", "wip"]
    assert runner.calls == [("branch", "--format=%(refname:short)")]


def test_git_checkout_raises_on_failure() -> None:
    runner = FakeGitRunner({("checkout",): fail("error: pathspec 'nope' did not match")})

    with pytest.raises(exec_util.CommandExecutionError) as excinfo:
        git.git_checkout(REPO, "nope", runner=runner)

    assert "pathspec" in str(excinfo.value)
    assert runner.calls == [("checkout", "-q", "nope")]


def test_git_status_porcelain_keeps_leading_status_columns() -> None:
    runner = FakeGitRunner({("status", "--porcelain"): ok(" M a.py\n?? b.txt\n")})

    assert git.git_status_porcelain(REPO, runner=runner) == " M a.py\n?? b.txt"


def test_git_ahead_behind_compares_branch_with_its_upstream() -> None:
    runner = FakeGitRunner({("rev-list",): ok("3\t1\n")})

    assert git.git_ahead_behind(REPO, "feature", runner=runner) == (3, 1)
    assert runner.calls == [
        ("rev-list", "--left-right", "--count", "feature...feature@{upstream}")
    ]


def test_git_ahead_behind_raises_without_upstream() -> None:
    runner = FakeGitRunner(
        {("rev-list",): fail("fatal: no upstream configured for branch 'feature'")}
    )

    with pytest.raises(exec_util.CommandExecutionError):
        git.git_ahead_behind(REPO, "feature", runner=runner)


@pytest.mark.parametrize("text", ["", "3", "a\tb", "1\t2\t3"])
def test_parse_ahead_behind_rejects_malformed_output(text: str) -> None:
    with pytest.raises(ValueError):
        git.parse_ahead_behind(text)
