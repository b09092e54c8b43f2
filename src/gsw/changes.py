"""Change-category counting for ``git status --porcelain`` output."""

from __future__ import annotations

from dataclasses import dataclass

from .models import STATUS_CLEAN

UNTRACKED_CODE = "??"
_CATEGORY_BY_CODE = {
    "M": "modified",
    "A": "added",
    "D": "deleted",
}


@dataclass
class ChangeCounts:
    modified: int = 0
    added: int = 0
    deleted: int = 0
    untracked: int = 0

    @property
    def total(self) -> int:
        return self.modified + self.added + self.deleted + self.untracked

    def summary(self) -> str:
        """Render the non-zero counts, or ``Clean`` when nothing was counted.

        Example:
            >>> ChangeCounts(modified=3, untracked=1).summary()
            '3 modified, 1 untracked'
            >>> ChangeCounts().summary()
            'Clean'
        """
        parts = [
            f"{count} {label}"
            for label, count in (
                ("modified", self.modified),
                ("added", self.added),
                ("deleted", self.deleted),
                ("untracked", self.untracked),
            )
            if count > 0
        ]
        if not parts:
            return STATUS_CLEAN
        return ", ".join(parts)


def classify_line(line: str) -> str | None:
    """Return the change category of one porcelain line, if counted.

    The index column wins; the work-tree column is used only when the index
    column is blank. Renames, copies, type changes and unmerged entries are
    not counted.

    Example:
        >>> classify_line(" M src/app.py")
        'modified'
        >>> classify_line("?? notes.txt")
        'untracked'
        >>> classify_line("R  old -> new") is None
        True
    """
    if len(line) < 2:
        return None
    code = line[:2]
    if code == UNTRACKED_CODE:
        return "untracked"
    if code[0] == " ":
        return _CATEGORY_BY_CODE.get(code[1])
    return _CATEGORY_BY_CODE.get(code[0])


def count_changes(output: str) -> ChangeCounts:
    counts = ChangeCounts()
    for line in output.splitlines():
        category = classify_line(line)
        if category is not None:
            setattr(counts, category, getattr(counts, category) + 1)
    return counts


def summarize_porcelain(output: str) -> str:
    """Summarize porcelain output as ``"N modified, N added, ..."``.

    Example:
        >>> summarize_porcelain(" M a.py\\nM  b.py\\n?? c.txt\\n")
        '2 modified, 1 untracked'
    """
    return count_changes(output).summary()
