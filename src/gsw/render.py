"""Render scan results as text or JSON."""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.text import Text

from .models import BranchStatus, RepoStatus

REPO_ICON = "📁"
DIRTY_ICON = "⚠"
CLEAN_ICON = "✓"
ALL_CLEAN_LINE = f"   {CLEAN_ICON} All branches clean"
NO_REPOS_LINE = "No git repositories found."


def pluralize(count: int, singular: str, plural: str) -> str:
    """Pick a word suffix for ``count``.

    Example:
        >>> "repositor" + pluralize(2, "y", "ies")
        'repositories'
    """
    return singular if count == 1 else plural


def format_ahead_behind(ahead: int, behind: int) -> str:
    """Format upstream divergence as ``[↑N ↓M]``.

    Example:
        >>> format_ahead_behind(3, 1)
        '[↑3 ↓1]'
        >>> format_ahead_behind(0, 2)
        '[↓2]'
        >>> format_ahead_behind(0, 0)
        ''
    """
    parts: list[str] = []
    if ahead > 0:
        parts.append(f"↑{ahead}")
    if behind > 0:
        parts.append(f"↓{behind}")
    if not parts:
        return ""
    return f"[{' '.join(parts)}]"


def format_branch_line(branch: BranchStatus) -> str:
    """Format one branch as a report line.

    Example:
        >>> format_branch_line(BranchStatus(name="main", current=True))
        '   ✓ main * - Clean'
    """
    icon = DIRTY_ICON if branch.is_dirty else CLEAN_ICON
    name = f"{branch.name} *" if branch.current else branch.name
    line = f"   {icon} {name}"
    divergence = format_ahead_behind(branch.ahead, branch.behind)
    if divergence:
        line = f"{line} {divergence}"
    return f"{line} - {branch.status}"


def repo_lines(status: RepoStatus, *, show_clean: bool) -> list[tuple[str, str]]:
    """Return ``(text, style)`` pairs for one repository block."""
    if status.error:
        return [(f"{REPO_ICON} {status.path} - ERROR: {status.error}", "red"), ("", "")]

    lines: list[tuple[str, str]] = [(f"{REPO_ICON} {status.path}", "bold")]
    if not status.branches:
        if not show_clean:
            lines.append((ALL_CLEAN_LINE, "green"))
        lines.append(("", ""))
        return lines
    if not status.has_dirty and not show_clean:
        lines.append((ALL_CLEAN_LINE, "green"))
        lines.append(("", ""))
        return lines
    for branch in status.branches:
        lines.append((format_branch_line(branch), "yellow" if branch.is_dirty else "green"))
    lines.append(("", ""))
    return lines


def render_text(
    statuses: Sequence[RepoStatus],
    *,
    show_clean: bool,
    repo_count: int,
    console: Console,
) -> None:
    """Print the human-readable report."""
    if repo_count == 0:
        console.print(Text(NO_REPOS_LINE))
        return
    console.print(
        Text(f"Found {repo_count} git repositor{pluralize(repo_count, 'y', 'ies')}:")
    )
    console.print(Text(""))
    for status in statuses:
        for text, style in repo_lines(status, show_clean=show_clean):
            console.print(Text(text, style=style))


def to_json(statuses: Sequence[RepoStatus]) -> str:
    """Serialize statuses as a JSON array.

    Example:
        >>> to_json([])
        '[]'
    """
    return json.dumps(
        [status.to_payload() for status in statuses], indent=2, ensure_ascii=False
    )
