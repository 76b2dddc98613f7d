"""Comment span index — where comments and fenced examples sit in a file.

One linear scan finds every closed block-comment span. It honours nesting
for nested pairs and skips line comments and quoted string literals, so a
block opener inside either is ignored. Fenced regions are the lines strictly between two
paired fence lines: inside one block span, or between marker lines made of
a line-comment prefix (or doc marker) followed by a fence.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from hermes.classifier.patterns import FENCE
from hermes.classifier.text import line_offsets, split_lines
from hermes.languages.models import CommentPair, LanguageSyntax

LineRange = Tuple[int, int]  # inclusive 1-based line numbers

_QUOTES = ('"', "'")


@dataclass(frozen=True)
class BlockSpan:
    pair: CommentPair
    start: int
    end: int  # exclusive


def _token_regex(tokens: List[str]) -> "re.Pattern[str]":
    ordered = sorted(set(tokens), key=len, reverse=True)
    return re.compile("|".join(re.escape(t) for t in ordered))


def _string_regex(quote: str) -> "re.Pattern[str]":
    q = re.escape(quote)
    return re.compile(f"{q}(?:[^{q}\\\\\\n]|\\\\.)*{q}")


def _find_close(text: str, pos: int, pair: CommentPair, nested: bool) -> Optional[int]:
    """Offset just past the delimiter closing the block, or None if it never closes."""
    start, end = pair
    if not nested or start == end:
        idx = text.find(end, pos)
        return None if idx == -1 else idx + len(end)

    markers = _token_regex([end, start])
    depth = 1
    while depth:
        m = markers.search(text, pos)
        if m is None:
            return None
        pos = m.end()
        depth += -1 if m.group(0) == end else 1
    return pos


def scan_blocks(text: str, syntax: LanguageSyntax) -> List[BlockSpan]:
    """Return every closed block-comment span in *text*, in order.

    Single-line string literals are skipped, so ``"lib/*.js"`` opens
    nothing. A block that is never closed yields no span.
    """
    openers: Dict[str, CommentPair] = {}
    for pair in syntax.block_comments:
        openers.setdefault(pair[0], pair)
    if not openers:
        return []

    delimiters = {*openers, *syntax.line_comments}
    strings = {q: _string_regex(q) for q in _QUOTES if q not in delimiters}
    tokens = _token_regex([*delimiters, *strings])
    spans: List[BlockSpan] = []
    pos = 0
    while True:
        m = tokens.search(text, pos)
        if m is None:
            break
        token = m.group(0)
        if token in openers:
            pair = openers[token]
            end = _find_close(text, m.end(), pair, syntax.is_nested(pair))
            if end is None:
                pos = m.end()
                continue
            spans.append(BlockSpan(pair=pair, start=m.start(), end=end))
            pos = end
        elif token in strings:
            literal = strings[token].match(text, m.start())
            # An unterminated quote (an apostrophe, a lifetime) only skips itself
            pos = literal.end() if literal else m.end()
        else:
            newline = text.find("\n", m.end())
            if newline == -1:
                break
            pos = newline + 1
    return spans


def _pair_fences(fence_lines: List[int]) -> List[LineRange]:
    return [
        (opener + 1, closer - 1)
        for opener, closer in zip(fence_lines[0::2], fence_lines[1::2])
    ]


def _in_ranges(ranges: List[LineRange], line_no: int) -> bool:
    return any(lo <= line_no <= hi for lo, hi in ranges)


class CommentIndex:
    """Per-file index answering "is line N inside this comment context?"."""

    def __init__(self, text: str, syntax: LanguageSyntax) -> None:
        self._text = text
        self._lines = split_lines(text)
        self._starts = line_offsets(text)
        self._blocks = scan_blocks(text, syntax)
        self._block_fences: Optional[Dict[CommentPair, List[LineRange]]] = None
        self._marker_fences: Dict[str, List[LineRange]] = {}

    @property
    def blocks(self) -> List[BlockSpan]:
        return list(self._blocks)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def _line_of(self, offset: int) -> int:
        return bisect_right(self._starts, offset)

    def _content_extent(self, line_no: int) -> Tuple[int, int]:
        """Offsets of the first and last non-blank character of a line."""
        start = self._starts[line_no - 1]
        line = self._lines[line_no - 1]
        stripped = line.strip()
        if not stripped:
            return start, start
        first = start + (len(line) - len(line.lstrip()))
        return first, first + len(stripped) - 1

    # ---- queries ----

    def in_block(self, pair: CommentPair, line_no: int) -> bool:
        """True if the line's content lies entirely inside one block span."""
        first, last = self._content_extent(line_no)
        return any(
            span.pair == pair and span.start <= first and last < span.end
            for span in self._blocks
        )

    def in_block_fence(self, pair: CommentPair, line_no: int) -> bool:
        if self._block_fences is None:
            self._block_fences = self._index_block_fences()
        return _in_ranges(self._block_fences.get(pair, []), line_no)

    def in_marker_fence(self, marker: str, line_no: int) -> bool:
        if marker not in self._marker_fences:
            self._marker_fences[marker] = self._index_marker_fences(marker)
        return _in_ranges(self._marker_fences[marker], line_no)

    # ---- indexing ----

    def _index_block_fences(self) -> Dict[CommentPair, List[LineRange]]:
        fences: Dict[CommentPair, List[LineRange]] = {}
        for span in self._blocks:
            if span.end <= span.start:
                continue
            first = self._line_of(span.start)
            last = self._line_of(span.end - 1)
            fence_lines = [
                no for no in range(first, last + 1) if FENCE in self._lines[no - 1]
            ]
            fences.setdefault(span.pair, []).extend(_pair_fences(fence_lines))
        return fences

    def _index_marker_fences(self, marker: str) -> List[LineRange]:
        fence_lines = []
        for no, line in enumerate(self._lines, 1):
            stripped = line.lstrip()
            if stripped.startswith(marker) and stripped[len(marker):].lstrip(
                " \t"
            ).startswith(FENCE):
                fence_lines.append(no)
        return _pair_fences(fence_lines)
