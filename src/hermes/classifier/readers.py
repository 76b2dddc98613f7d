"""Content readers — fetch the bytes of one file side."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from hermes.git.models import FileSideChange


class ContentReader(Protocol):
    def read(self, side: FileSideChange) -> bytes:
        ...


class FilesystemReader:
    """Read the side's file as currently materialised under *root*."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def read(self, side: FileSideChange) -> bytes:
        assert side.path is not None
        return (self._root / side.path).read_bytes()


class GitContentReader:
    """Read the side's content by identity from the object store.

    No checkout is involved, so the working tree is never touched.
    """

    def __init__(self, repo_root: Path) -> None:
        self._repo_root = repo_root

    def read(self, side: FileSideChange) -> bytes:
        from hermes.git.adapter import read_blob

        assert side.path is not None
        return read_blob(self._repo_root, side.revision or "", side.path)
