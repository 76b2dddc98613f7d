"""Git interface layer — adapter, diff parsing, models."""

from hermes.git.adapter import (
    EMPTY_TREE,
    GitError,
    first_parent,
    get_repo_root,
    get_staged_diff,
    get_tree_diff,
    read_blob,
    resolve_commit,
)
from hermes.git.diff_parser import DiffParser
from hermes.git.models import ChangedFileEntry, DiffStatus, FileSideChange, Side

__all__ = [
    "EMPTY_TREE",
    "ChangedFileEntry",
    "DiffParser",
    "DiffStatus",
    "FileSideChange",
    "GitError",
    "Side",
    "first_parent",
    "get_repo_root",
    "get_staged_diff",
    "get_tree_diff",
    "read_blob",
    "resolve_commit",
]
