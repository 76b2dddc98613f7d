"""Pattern builder — ranked comment-context patterns for one changed line.

Patterns before ``PatternSet.boundary`` (class A) describe a fenced example
inside a comment; matching one of them escalates the line to code. Patterns
from the boundary onward (class B) describe plain block-comment content.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from hermes.languages.models import LanguageSyntax

FENCE = "```"

_FENCE_RE = re.escape(FENCE)
_BLANKS = r"[ \t]*"


class PatternKind(str, Enum):
    LINE_FENCE = "line_fence"
    BLOCK_FENCE = "block_fence"
    DOC_FENCE = "doc_fence"
    BLOCK = "block"


@dataclass(frozen=True)
class LinePattern:
    kind: PatternKind
    opener: str
    closer: Optional[str]
    source: str


@dataclass(frozen=True)
class PatternSet:
    line: str
    patterns: Tuple[LinePattern, ...]
    boundary: int

    def __len__(self) -> int:
        return len(self.patterns)

    def is_class_a(self, index: int) -> bool:
        return index < self.boundary


def _line_fence_source(marker: str, text: str) -> str:
    m = re.escape(marker)
    return (
        f"^{_BLANKS}{m}{_BLANKS}{_FENCE_RE}.*{text}.*\\n"
        f"{_BLANKS}{m}{_BLANKS}{_FENCE_RE}"
    )


def build_patterns(line: str, syntax: LanguageSyntax) -> PatternSet:
    """Build the class A / class B patterns for *line* under *syntax*."""
    text = re.escape(line)
    patterns: list[LinePattern] = []

    for prefix in syntax.line_comments:
        patterns.append(
            LinePattern(
                kind=PatternKind.LINE_FENCE,
                opener=prefix,
                closer=None,
                source=_line_fence_source(prefix, text),
            )
        )

    for start, end in syntax.block_comments:
        patterns.append(
            LinePattern(
                kind=PatternKind.BLOCK_FENCE,
                opener=start,
                closer=end,
                source=(
                    f"{re.escape(start)}.*{_FENCE_RE}.*{text}.*"
                    f"{_FENCE_RE}.*{re.escape(end)}"
                ),
            )
        )

    if syntax.doc_marker is not None:
        patterns.append(
            LinePattern(
                kind=PatternKind.DOC_FENCE,
                opener=syntax.doc_marker,
                closer=None,
                source=_line_fence_source(syntax.doc_marker, text),
            )
        )

    boundary = len(patterns)

    for start, end in syntax.block_comments:
        patterns.append(
            LinePattern(
                kind=PatternKind.BLOCK,
                opener=start,
                closer=end,
                source=f"{re.escape(start)}.*{text}.*{re.escape(end)}",
            )
        )

    return PatternSet(line=line, patterns=tuple(patterns), boundary=boundary)
