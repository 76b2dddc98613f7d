"""Unified diff parser — turns ``git diff --unified=0`` output into entries.

Each file section becomes one ChangedFileEntry: removed-side line numbers
come from ``-`` lines counted against the old file, added-side numbers from
``+`` lines counted against the new file. Hunk line counts decide where a
hunk ends, so a removed line that itself starts with ``--`` is never taken
for a file header. Binary, mode-only and submodule sections keep an entry
with no lines.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass
from typing import Generator, List, Optional, Tuple

from hermes.git.models import ChangedFileEntry, DiffStatus, FileSideChange, Side

# --- Regex patterns for diff parsing ---

_DIFF_HEADER_RE = re.compile(r"^diff --git (.*)$")
_HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_INDEX_RE = re.compile(r"^index ([0-9a-f]+)\.\.([0-9a-f]+)")
_RENAME_FROM_RE = re.compile(r"^(?:rename|copy) from (.+)$")
_RENAME_TO_RE = re.compile(r"^(rename|copy) to (.+)$")
_DELETED_FILE_RE = re.compile(r"^deleted file mode \d+$")
_NEW_FILE_RE = re.compile(r"^new file mode \d+$")
_FILE_HEADER_OLD = re.compile(r"^--- (.+)$")
_FILE_HEADER_NEW = re.compile(r"^\+\+\+ (.+)$")
_NO_NEWLINE_RE = re.compile(r"^\\ No newline at end of file$")
_SUBPROJECT_RE = re.compile(r"^[+-]Subproject commit [0-9a-f]+$")

_DEV_NULL = "/dev/null"


def _unquote(path: str) -> str:
    """Undo git's C-style quoting of unusual path names."""
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        raw = codecs.escape_decode(path[1:-1].encode("utf-8"))[0]
        return raw.decode("utf-8", errors="replace")
    return path


def _strip_prefix(path: str, prefix: str) -> Optional[str]:
    path = _unquote(path.rstrip("\t"))
    if path == _DEV_NULL:
        return None
    return path[len(prefix):] if path.startswith(prefix) else path


def _split_header_paths(rest: str) -> Tuple[Optional[str], Optional[str]]:
    """Split the ``a/<old> b/<new>`` part of a ``diff --git`` header."""
    if rest.startswith('"'):
        m = re.match(r'^("(?:[^"\\]|\\.)*")\s+(.+)$', rest)
        if m:
            return _strip_prefix(m.group(1), "a/"), _strip_prefix(m.group(2), "b/")
    # Same name on both sides: "a/<p> b/<p>"
    half = (len(rest) - 5) // 2
    if half > 0:
        same = rest[2:2 + half]
        if rest == f"a/{same} b/{same}":
            return same, same
    m = re.match(r"^a/(.*) b/(.*)$", rest)
    if m:
        return m.group(1), m.group(2)
    return None, None


def _split_diff_lines(diff_text: str) -> List[str]:
    """Split on ``\\n`` only; form feeds and other breaks belong to the line."""
    lines = diff_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class _PendingFile:
    old_path: Optional[str]
    new_path: Optional[str]
    status: DiffStatus = DiffStatus.MODIFIED
    old_blob: Optional[str] = None
    new_blob: Optional[str] = None
    entry: Optional[ChangedFileEntry] = None


class DiffParser:
    """Parse unified diff text into ChangedFileEntry objects.

    Usage::

        parser = DiffParser(diff_text, old_revision=base, new_revision=head)
        for entry in parser.parse():
            ...
    """

    def __init__(
        self,
        diff_text: str,
        old_revision: Optional[str] = None,
        new_revision: Optional[str] = None,
    ) -> None:
        self._lines = _split_diff_lines(diff_text)
        self._old_revision = old_revision
        self._new_revision = new_revision

    def entries(self) -> List[ChangedFileEntry]:
        return list(self.parse())

    def _build(self, pending: _PendingFile) -> ChangedFileEntry:
        if pending.entry is None:
            removed_path = None if pending.status is DiffStatus.ADDED else pending.old_path
            added_path = None if pending.status is DiffStatus.DELETED else pending.new_path
            pending.entry = ChangedFileEntry(
                removed=FileSideChange(
                    side=Side.REMOVED,
                    path=removed_path,
                    status=pending.status,
                    revision=self._old_revision,
                ),
                added=FileSideChange(
                    side=Side.ADDED,
                    path=added_path,
                    status=pending.status,
                    revision=self._new_revision,
                ),
                key=(pending.old_blob, pending.new_blob),
            )
        return pending.entry

    def parse(self) -> Generator[ChangedFileEntry, None, None]:
        """Yield one ChangedFileEntry per file section, in diff order."""
        pending: Optional[_PendingFile] = None
        old_no = new_no = 0
        old_left = new_left = 0  # lines remaining in the current hunk

        for raw_line in self._lines:
            # --- content lines of the current hunk ---
            if pending is not None and (old_left or new_left):
                entry = self._build(pending)
                if _SUBPROJECT_RE.match(raw_line):
                    # Submodule pointer: no text to classify on either side
                    if raw_line.startswith("-"):
                        old_left = max(old_left - 1, 0)
                    else:
                        new_left = max(new_left - 1, 0)
                    continue
                if raw_line.startswith("-") and old_left:
                    entry.removed.add_line(old_no)
                    old_no += 1
                    old_left -= 1
                    continue
                if raw_line.startswith("+") and new_left:
                    entry.added.add_line(new_no)
                    new_no += 1
                    new_left -= 1
                    continue
                if raw_line.startswith(" "):
                    old_no += 1
                    new_no += 1
                    old_left = max(old_left - 1, 0)
                    new_left = max(new_left - 1, 0)
                    continue
                if _NO_NEWLINE_RE.match(raw_line):
                    continue
                # Counts were off; fall through to header handling
                old_left = new_left = 0

            # --- diff --git header → new file section ---
            m = _DIFF_HEADER_RE.match(raw_line)
            if m:
                if pending is not None:
                    yield self._build(pending)
                old_path, new_path = _split_header_paths(m.group(1))
                pending = _PendingFile(old_path=old_path, new_path=new_path)
                continue

            if pending is None:
                continue

            if _NO_NEWLINE_RE.match(raw_line):
                continue

            hm = _HUNK_HEADER_RE.match(raw_line)
            if hm:
                self._build(pending)
                old_no = int(hm.group(1))
                old_left = int(hm.group(2)) if hm.group(2) is not None else 1
                new_no = int(hm.group(3))
                new_left = int(hm.group(4)) if hm.group(4) is not None else 1
                continue

            if pending.entry is not None:
                continue  # sub-headers only precede the first hunk

            if _NEW_FILE_RE.match(raw_line):
                pending.status = DiffStatus.ADDED
            elif _DELETED_FILE_RE.match(raw_line):
                pending.status = DiffStatus.DELETED
            elif (im := _INDEX_RE.match(raw_line)):
                pending.old_blob, pending.new_blob = im.group(1), im.group(2)
            elif (rm := _RENAME_FROM_RE.match(raw_line)):
                pending.old_path = _unquote(rm.group(1))
            elif (rt := _RENAME_TO_RE.match(raw_line)):
                pending.new_path = _unquote(rt.group(2))
                pending.status = (
                    DiffStatus.RENAMED if rt.group(1) == "rename" else DiffStatus.COPIED
                )
            elif (fo := _FILE_HEADER_OLD.match(raw_line)):
                old_path = _strip_prefix(fo.group(1), "a/")
                if old_path is not None:
                    pending.old_path = old_path
            elif (fn := _FILE_HEADER_NEW.match(raw_line)):
                new_path = _strip_prefix(fn.group(1), "b/")
                if new_path is not None:
                    pending.new_path = new_path

        if pending is not None:
            yield self._build(pending)
