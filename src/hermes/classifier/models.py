"""Classification result models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hermes.git.models import DiffStatus, Side


class Verdict(str, Enum):
    CODE = "code"
    COMMENT = "comment"
    NO_LINES = "no_lines"
    NO_PATH = "no_path"
    UNKNOWN_LANGUAGE = "unknown_language"
    FILTERED = "filtered"


@dataclass(frozen=True)
class SideResult:
    """Outcome of evaluating one file side."""

    path: Optional[str]
    side: Side
    status: DiffStatus
    verdict: Verdict
    language: Optional[str] = None
    line_no: Optional[int] = None  # first line classified as code
    lines_checked: int = 0

    @property
    def is_code(self) -> bool:
        return self.verdict in (Verdict.CODE, Verdict.UNKNOWN_LANGUAGE)

    @property
    def contributes(self) -> bool:
        """False when the side was left out by the language filter."""
        return self.verdict is not Verdict.FILTERED
