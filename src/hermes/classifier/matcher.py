"""Matchers — decide which patterns of a PatternSet hold for a changed line.

``FullTextMatcher`` searches the whole file text for each pattern, so a
line whose literal text also appears inside a comment elsewhere in the
file is matched too. ``SpanMatcher`` answers the same questions from the
comment spans that actually contain the line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Union

from hermes.classifier.errors import PatternError
from hermes.classifier.patterns import LinePattern, PatternKind, PatternSet
from hermes.classifier.spans import CommentIndex
from hermes.languages.models import LanguageSyntax


@dataclass(frozen=True)
class MatchResult:
    matched: FrozenSet[int]

    @property
    def matched_any(self) -> bool:
        return bool(self.matched)

    def any_below(self, boundary: int) -> bool:
        return any(index < boundary for index in self.matched)


class FullTextMatcher:
    """Unanchored search of every pattern against the entire file text."""

    def __init__(self, text: str) -> None:
        self._text = text

    def match(self, pattern_set: PatternSet, line_no: int) -> MatchResult:
        matched = set()
        for index, pattern in enumerate(pattern_set.patterns):
            try:
                compiled = re.compile(pattern.source, re.MULTILINE)
            except re.error as exc:
                raise PatternError(
                    f"Pattern {pattern.kind.value} for {pattern.opener!r} "
                    f"does not compile: {exc}"
                ) from exc
            if compiled.search(self._text):
                matched.add(index)
        return MatchResult(frozenset(matched))


class SpanMatcher:
    """Match patterns against the comment spans containing the line."""

    def __init__(self, text: str, syntax: LanguageSyntax) -> None:
        self._index = CommentIndex(text, syntax)

    def _holds(self, pattern: LinePattern, line_no: int) -> bool:
        if pattern.kind in (PatternKind.LINE_FENCE, PatternKind.DOC_FENCE):
            return self._index.in_marker_fence(pattern.opener, line_no)
        assert pattern.closer is not None
        pair = (pattern.opener, pattern.closer)
        if pattern.kind is PatternKind.BLOCK_FENCE:
            return self._index.in_block_fence(pair, line_no)
        return self._index.in_block(pair, line_no)

    def match(self, pattern_set: PatternSet, line_no: int) -> MatchResult:
        return MatchResult(
            frozenset(
                index
                for index, pattern in enumerate(pattern_set.patterns)
                if self._holds(pattern, line_no)
            )
        )


def make_matcher(
    mode: str, text: str, syntax: LanguageSyntax
) -> Union[FullTextMatcher, SpanMatcher]:
    """Return the matcher for *mode* (``span`` or ``text``)."""
    if mode == "text":
        return FullTextMatcher(text)
    if mode == "span":
        return SpanMatcher(text, syntax)
    raise ValueError(f"Unknown match mode: {mode!r}")
