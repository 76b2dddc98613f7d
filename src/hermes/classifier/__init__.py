"""Change classifier — patterns, matchers, line and side evaluation."""

from hermes.classifier.engine import classify_line, evaluate, evaluate_side, passes_filter
from hermes.classifier.errors import (
    ClassifierError,
    DecodeError,
    LineOutOfRangeError,
    PatternError,
)
from hermes.classifier.matcher import FullTextMatcher, MatchResult, SpanMatcher
from hermes.classifier.models import SideResult, Verdict
from hermes.classifier.patterns import PatternSet, build_patterns
from hermes.classifier.readers import FilesystemReader, GitContentReader

__all__ = [
    "ClassifierError",
    "DecodeError",
    "FilesystemReader",
    "FullTextMatcher",
    "GitContentReader",
    "LineOutOfRangeError",
    "MatchResult",
    "PatternError",
    "PatternSet",
    "SideResult",
    "SpanMatcher",
    "Verdict",
    "build_patterns",
    "classify_line",
    "evaluate",
    "evaluate_side",
    "passes_filter",
]
