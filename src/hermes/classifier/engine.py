"""Classification engine — line classifier, side evaluator and filter gate.

Exceptions (decode failures, line numbers beyond the end of the file,
patterns that do not compile, read errors) are never turned into a
verdict; they propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Collection, Optional

from hermes.classifier.errors import LineOutOfRangeError
from hermes.classifier.matcher import MatchResult, make_matcher
from hermes.classifier.models import SideResult, Verdict
from hermes.classifier.patterns import build_patterns
from hermes.classifier.readers import ContentReader
from hermes.classifier.text import decode_text, split_lines
from hermes.git.models import FileSideChange
from hermes.languages.models import LanguageSyntax

logger = logging.getLogger(__name__)


def passes_filter(
    syntax: Optional[LanguageSyntax],
    language_filter: Optional[Collection[str]],
) -> bool:
    """Return True if the side should be evaluated under *language_filter*.

    An empty or missing filter lets everything through. An unknown
    language never matches an active filter.
    """
    if not language_filter:
        return True
    if syntax is None:
        return False
    wanted = {name.lower() for name in language_filter}
    return syntax.name.lower() in wanted


def classify_line(result: MatchResult, boundary: int, starts_with_comment: bool) -> bool:
    """Return True if a line with these match results is code."""
    escalated = result.any_below(boundary) or not result.matched_any
    return escalated and not starts_with_comment


def evaluate_side(
    side: FileSideChange,
    syntax: Optional[LanguageSyntax],
    *,
    reader: ContentReader,
    language_filter: Optional[Collection[str]] = None,
    match_mode: str = "span",
) -> SideResult:
    """Classify one file side, stopping at the first line that is code."""

    def result(verdict: Verdict, **kwargs) -> SideResult:
        return SideResult(
            path=side.path,
            side=side.side,
            status=side.status,
            verdict=verdict,
            language=syntax.name if syntax is not None else None,
            **kwargs,
        )

    if not passes_filter(syntax, language_filter):
        logger.info("Filtered out %s (%s)", side.path, syntax.name if syntax else "unknown")
        return result(Verdict.FILTERED)

    if side.path is None:
        logger.debug("No %s path for this entry, skipping", side.side.value)
        return result(Verdict.NO_PATH)

    if syntax is None:
        logger.info("Unknown language for %s, treating as code", side.path)
        return result(Verdict.UNKNOWN_LANGUAGE)

    if not side.lines:
        return result(Verdict.NO_LINES)

    text = decode_text(reader.read(side), source=side.path)
    lines = split_lines(text)
    matcher = make_matcher(match_mode, text, syntax)

    for checked, line_no in enumerate(side.lines, 1):
        if line_no > len(lines):
            raise LineOutOfRangeError(
                f"{side.path}: line {line_no} requested but the {side.side.value} "
                f"side has {len(lines)} line(s)"
            )
        line = lines[line_no - 1]
        pattern_set = build_patterns(line, syntax)
        match = matcher.match(pattern_set, line_no)
        is_code = classify_line(
            match, pattern_set.boundary, syntax.starts_with_line_comment(line)
        )
        logger.debug(
            "%s:%d matched=%s boundary=%d code=%s",
            side.path, line_no, sorted(match.matched), pattern_set.boundary, is_code,
        )
        if is_code:
            return result(Verdict.CODE, line_no=line_no, lines_checked=checked)

    return result(Verdict.COMMENT, lines_checked=len(side.lines))


def evaluate(
    side: FileSideChange,
    syntax: Optional[LanguageSyntax],
    language_filter: Optional[Collection[str]] = None,
    *,
    reader: ContentReader,
    match_mode: str = "span",
) -> bool:
    """Return True if *side* contains a code change."""
    return evaluate_side(
        side,
        syntax,
        reader=reader,
        language_filter=language_filter,
        match_mode=match_mode,
    ).is_code
