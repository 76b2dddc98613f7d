"""Git subprocess wrapper — revisions, tree diffs, blob reads."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

# The well-known id of git's empty tree, used as the base of a root commit.
EMPTY_TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

_DIFF_ARGS = [
    "--unified=0",
    "--no-color",
    "--no-ext-diff",
    "--find-renames",
]


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git_bytes(args: list[str], cwd: Path, timeout: int = 30) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            ["git", "-c", "core.quotepath=false", *args],
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except NotADirectoryError:
        raise GitError(f"Not a directory: {cwd}")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    result = _run_git_bytes(args, cwd, timeout)
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise GitError(f"git error: {stderr or f'git {args[0]} exited {result.returncode}'}")
    return result.stdout.decode("utf-8", errors="replace")


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    if not cwd.is_dir():
        raise GitError(f"Not a directory: {cwd}")
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def resolve_commit(repo_root: Path, ref: str) -> str:
    """Return the full commit id *ref* points at."""
    out = _run_git(["rev-parse", "--verify", f"{ref}^{{commit}}"], cwd=repo_root)
    return out.strip()


def first_parent(repo_root: Path, commit: str) -> Optional[str]:
    """Return the first parent of *commit*, or None for a root commit."""
    result = _run_git_bytes(["rev-parse", "--verify", "--quiet", f"{commit}^1"], cwd=repo_root)
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8").strip() or None


def get_tree_diff(repo_root: Path, base: str, head: str) -> str:
    """Return the zero-context diff between two trees."""
    return _run_git(["diff", *_DIFF_ARGS, base, head, "--"], cwd=repo_root)


def get_staged_diff(repo_root: Path, base: str) -> str:
    """Return the zero-context diff between *base* and the index."""
    return _run_git(["diff", "--cached", *_DIFF_ARGS, base, "--"], cwd=repo_root)


def read_blob(repo_root: Path, revision: str, path: str) -> bytes:
    """Return the raw content of *path* at *revision* (``""`` = the index)."""
    result = _run_git_bytes(["cat-file", "blob", f"{revision}:{path}"], cwd=repo_root)
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise GitError(f"Cannot read {path} at {revision or 'index'}: {stderr}")
    return result.stdout
