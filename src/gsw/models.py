"""Pydantic models for scan configuration and scan results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

STATUS_CLEAN = "Clean"
STATUS_CHECKOUT_ERROR = "Error checking out branch"
STATUS_STATUS_ERROR = "Error getting status"


class BranchStatus(BaseModel):
    """Observed state of one local branch.

    Attributes:
        name: Branch name.
        is_dirty: Whether the working tree had changes with this branch checked out.
        ahead: Commits on the branch but not its upstream.
        behind: Commits on the upstream but not the branch.
        status: ``Clean``, a change summary, or a branch-level error message.
        current: Whether this branch was checked out when the scan began.

    Example:
        >>> BranchStatus(name="main", status="Clean").to_payload()["dirty"]
        False
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    is_dirty: bool = False
    ahead: int = Field(default=0, ge=0)
    behind: int = Field(default=0, ge=0)
    status: str = STATUS_CLEAN
    current: bool = False

    @model_validator(mode="after")
    def clean_branches_report_clean(self) -> BranchStatus:
        if not self.is_dirty and self.status not in {
            STATUS_CLEAN,
            STATUS_CHECKOUT_ERROR,
            STATUS_STATUS_ERROR,
        }:
            raise ValueError(f"clean branch {self.name!r} has status {self.status!r}")
        return self

    def to_payload(self) -> dict[str, object]:
        return {
            "name": self.name,
            "current": self.current,
            "dirty": self.is_dirty,
            "ahead": self.ahead,
            "behind": self.behind,
            "status": self.status,
        }


class RepoStatus(BaseModel):
    """Aggregate scan result for one repository.

    Attributes:
        path: Absolute repository root.
        current_branch: Branch checked out before scanning began.
        branches: Reported branches in ``git branch`` listing order.
        error: Repository-level failure; ``branches`` is empty when set.

    Example:
        >>> RepoStatus(path="/r", error="boom").to_payload()
        {'path': '/r', 'current_branch': '', 'error': 'boom', 'branches': []}
    """

    path: str
    current_branch: str = ""
    branches: list[BranchStatus] = Field(default_factory=list)
    error: str | None = None

    @field_validator("error", mode="before")
    @classmethod
    def normalize_error(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @model_validator(mode="after")
    def failed_repos_have_no_branches(self) -> RepoStatus:
        if self.error and self.branches:
            raise ValueError("a repository with an error cannot report branches")
        return self

    @property
    def has_dirty(self) -> bool:
        return any(branch.is_dirty for branch in self.branches)

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "path": self.path,
            "current_branch": self.current_branch,
        }
        if self.error:
            payload["error"] = self.error
        payload["branches"] = [branch.to_payload() for branch in self.branches]
        return payload


class ScanConfig(BaseModel):
    """Validated options for one scan invocation.

    Example:
        >>> ScanConfig(root=Path("/tmp")).max_depth
        10
    """

    model_config = ConfigDict(frozen=True)

    root: Path
    show_clean: bool = False
    verbose: bool = False
    max_depth: int = Field(default=10, ge=0)
    parallel: bool = False
    jobs: int = Field(default=1, ge=1)
    json_output: bool = False
    git_path: str | None = None

    @field_validator("git_path", mode="before")
    @classmethod
    def normalize_git_path(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value
