"""Data models for diff traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Side(str, Enum):
    REMOVED = "removed"
    ADDED = "added"


class DiffStatus(str, Enum):
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"


@dataclass
class FileSideChange:
    """One side (old or new) of a changed file.

    ``revision`` is the commit-ish the side's content is read from; an empty
    string means the index.
    """

    side: Side
    path: Optional[str]
    status: DiffStatus
    revision: Optional[str] = None
    lines: List[int] = field(default_factory=list)

    def add_line(self, line_no: int) -> None:
        if line_no < 1:
            raise ValueError(f"line numbers are 1-based, got {line_no}")
        if line_no not in self.lines:
            self.lines.append(line_no)


@dataclass
class ChangedFileEntry:
    """Removed and added side of one file, keyed by old and new blob ids."""

    removed: FileSideChange
    added: FileSideChange
    key: Tuple[Optional[str], Optional[str]] = (None, None)

    @property
    def display_path(self) -> str:
        return self.added.path or self.removed.path or "<unknown>"
