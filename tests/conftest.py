"""Shared test fixtures — syntax tables, sample diffs, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import pytest

from hermes.git.models import DiffStatus, FileSideChange, Side
from hermes.languages.builtin import C, PYTHON, RUST, TEXT


@pytest.fixture
def rust():
    return RUST


@pytest.fixture
def c_lang():
    return C


@pytest.fixture
def python_lang():
    return PYTHON


@pytest.fixture
def text_lang():
    return TEXT


def make_side(
    path: Optional[str],
    lines: list[int],
    side: Side = Side.ADDED,
    status: DiffStatus = DiffStatus.MODIFIED,
) -> FileSideChange:
    change = FileSideChange(side=side, path=path, status=status)
    for n in lines:
        change.add_line(n)
    return change


@pytest.fixture
def sample_diff_modified() -> str:
    """A diff with two hunks touching both sides."""
    return textwrap.dedent("""\
        diff --git a/lib.rs b/lib.rs
        index 1234567..89abcde 100644
        --- a/lib.rs
        +++ b/lib.rs
        @@ -2,0 +3,2 @@
        +let a = 1;
        +let b = 2;
        @@ -5 +7 @@
        -old();
        +new();
    """)


@pytest.fixture
def sample_diff_new_file() -> str:
    return textwrap.dedent("""\
        diff --git a/hello.py b/hello.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/hello.py
        @@ -0,0 +1,3 @@
        +def greet(name):
        +    return f"Hello, {name}!"
        +
    """)


@pytest.fixture
def sample_diff_deleted_file() -> str:
    return textwrap.dedent("""\
        diff --git a/old.py b/old.py
        deleted file mode 100644
        index abc1234..0000000
        --- a/old.py
        +++ /dev/null
        @@ -1,2 +0,0 @@
        -line one
        -line two
    """)


@pytest.fixture
def sample_diff_rename() -> str:
    return textwrap.dedent("""\
        diff --git a/old_name.py b/new_name.py
        similarity index 97%
        rename from old_name.py
        rename to new_name.py
        index abc1234..def5678 100644
        --- a/old_name.py
        +++ b/new_name.py
        @@ -1,0 +2,1 @@
        +# New line added after rename
    """)


@pytest.fixture
def sample_diff_binary() -> str:
    return textwrap.dedent("""\
        diff --git a/image.png b/image.png
        new file mode 100644
        index 0000000..abc1234
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def sample_diff_mode_only() -> str:
    return textwrap.dedent("""\
        diff --git a/script.sh b/script.sh
        old mode 100644
        new mode 100755
    """)


@pytest.fixture
def sample_diff_submodule() -> str:
    return textwrap.dedent("""\
        diff --git a/vendor/lib b/vendor/lib
        index abc1234..def5678 160000
        --- a/vendor/lib
        +++ b/vendor/lib
        @@ -1 +1 @@
        -Subproject commit abc1234567890abcdef1234567890abcdef123456
        +Subproject commit def4567890abcdef1234567890abcdef123456ab
    """)


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    git(tmp_path, "config", "user.email", "test@test.com")
    git(tmp_path, "config", "user.name", "Test")
    git(tmp_path, "config", "commit.gpgsign", "false")
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    git(tmp_path, "add", ".")
    git(tmp_path, "commit", "-m", "init")
    return tmp_path


FileMap = Dict[str, Union[str, bytes, None]]


@pytest.fixture
def commit(tmp_git_repo: Path) -> Callable[..., str]:
    """Write (or delete, with None) files and commit them. Returns the commit id."""

    def _commit(files: FileMap, message: str = "change", repo: Path = tmp_git_repo) -> str:
        for name, content in files.items():
            path = repo / name
            if content is None:
                path.unlink()
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_bytes(content.encode("utf-8"))
        git(repo, "add", "-A")
        git(repo, "commit", "-m", message)
        return git(repo, "rev-parse", "HEAD").strip()

    return _commit


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep HERMES_* settings from the calling shell out of the tests."""
    for name in ("HERMES_FILTER", "HERMES_FORMAT", "HERMES_MATCH_MODE", "HERMES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
