"""Language syntax model — the comment grammar of one language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

CommentPair = Tuple[str, str]


@dataclass(frozen=True)
class LanguageSyntax:
    """Comment grammar for a single language.

    ``doc_marker`` is set only for languages whose doc comments carry
    compiled examples between fences (Rust's ``///``).
    """

    name: str
    line_comments: Tuple[str, ...] = ()
    multi_line_comments: Tuple[CommentPair, ...] = ()
    nested_comments: Tuple[CommentPair, ...] = ()
    doc_marker: Optional[str] = None
    extensions: Tuple[str, ...] = ()
    filenames: Tuple[str, ...] = ()

    @property
    def block_comments(self) -> Tuple[CommentPair, ...]:
        """Multi-line pairs followed by nested pairs, in declaration order."""
        return self.multi_line_comments + self.nested_comments

    @property
    def has_doc_tests(self) -> bool:
        return self.doc_marker is not None

    def is_nested(self, pair: CommentPair) -> bool:
        return pair in self.nested_comments

    def starts_with_line_comment(self, line: str) -> bool:
        """Plain prefix test on the raw line; indentation is not stripped."""
        return any(line.startswith(prefix) for prefix in self.line_comments)
