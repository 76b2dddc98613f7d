"""Gate engine — runs the classifier over every changed file of a revision range.

Added sides are evaluated before removed sides and the verdicts are
OR-aggregated. With ``check.short_circuit`` the run stops at the first
side that contains code.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from hermes.classifier.engine import evaluate_side
from hermes.classifier.readers import ContentReader, GitContentReader
from hermes.config.schema import HermesConfig
from hermes.gate.models import CheckResult
from hermes.git.adapter import (
    EMPTY_TREE,
    GitError,
    first_parent,
    get_staged_diff,
    get_tree_diff,
    resolve_commit,
)
from hermes.git.diff_parser import DiffParser
from hermes.git.models import ChangedFileEntry, FileSideChange
from hermes.languages.registry import LanguageRegistry

logger = logging.getLogger(__name__)

INDEX_LABEL = "index"


def collect_entries(
    repo_root: Path,
    *,
    base: Optional[str] = None,
    head: str = "HEAD",
    staged: bool = False,
) -> Tuple[str, str, List[ChangedFileEntry]]:
    """Diff two revisions and return (base, head, entries).

    Without *base* the head commit is compared with its first parent, or
    with the empty tree for a root commit. With *staged* the index is
    compared with *base* (default ``HEAD``).
    """
    if staged:
        if base:
            base_rev = resolve_commit(repo_root, base)
        else:
            try:
                base_rev = resolve_commit(repo_root, "HEAD")
            except GitError:
                logger.info("No commits yet, comparing the index with the empty tree")
                base_rev = EMPTY_TREE
        diff_text = get_staged_diff(repo_root, base_rev)
        head_rev, head_label = "", INDEX_LABEL
    else:
        head_rev = head_label = resolve_commit(repo_root, head)
        if base:
            base_rev = resolve_commit(repo_root, base)
        else:
            base_rev = first_parent(repo_root, head_rev) or EMPTY_TREE
        diff_text = get_tree_diff(repo_root, base_rev, head_rev)

    logger.debug("Diffed %s..%s in %s", base_rev, head_label, repo_root)

    parser = DiffParser(diff_text, old_revision=base_rev, new_revision=head_rev)
    return base_rev, head_label, parser.entries()


def iter_sides(entries: List[ChangedFileEntry]) -> Iterator[FileSideChange]:
    """Every added side, then every removed side."""
    for entry in entries:
        yield entry.added
    for entry in entries:
        yield entry.removed


def check_entries(
    entries: List[ChangedFileEntry],
    config: HermesConfig,
    registry: LanguageRegistry,
    reader: ContentReader,
    result: CheckResult,
) -> CheckResult:
    """Evaluate the sides of *entries*, appending to *result*."""
    language_filter = config.filter.languages or None
    result.entries += len(entries)

    for side in iter_sides(entries):
        syntax = registry.lookup(side.path) if side.path is not None else None
        side_result = evaluate_side(
            side,
            syntax,
            reader=reader,
            language_filter=language_filter,
            match_mode=config.check.match_mode,
        )
        result.sides.append(side_result)
        if side_result.is_code:
            logger.info(
                "Code change in %s (%s side, line %s)",
                side.path, side.side.value, side_result.line_no or "-",
            )
            if config.check.short_circuit:
                break

    return result


def check_repository(
    repo_root: Path,
    config: HermesConfig,
    registry: LanguageRegistry,
    *,
    base: Optional[str] = None,
    head: str = "HEAD",
    staged: bool = False,
    reader: Optional[ContentReader] = None,
) -> CheckResult:
    """Decide whether the revision range in *repo_root* changed code."""
    start = time.perf_counter()

    base_rev, head_label, entries = collect_entries(
        repo_root, base=base, head=head, staged=staged
    )
    logger.info("%d changed file(s) between %s and %s", len(entries), base_rev[:12], head_label[:12])

    result = CheckResult(repo_root=repo_root, base=base_rev, head=head_label)
    check_entries(entries, config, registry, reader or GitContentReader(repo_root), result)

    result.duration_ms = round((time.perf_counter() - start) * 1000, 2)
    return result
