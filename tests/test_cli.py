"""Tests for the CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from hermes import __version__
from hermes.cli import EXIT_CHANGED, EXIT_ERROR, EXIT_UNCHANGED, app
from hermes.output.terminal import CHANGED_MESSAGE, UNCHANGED_MESSAGE

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"hermes {__version__}" in result.output


class TestInit:
    def test_creates_config(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_git_repo / ".hermes.toml").exists()

    def test_refuses_overwrite(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / ".hermes.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1
        assert (tmp_git_repo / ".hermes.toml").read_text() == "existing"


class TestCheck:
    def test_code_change(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        result = runner.invoke(app, ["check", str(tmp_git_repo)])
        assert result.exit_code == EXIT_CHANGED
        assert CHANGED_MESSAGE in result.output

    def test_comment_change(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        commit({"lib.rs": "// hi\nfn main() {}\n"})
        result = runner.invoke(app, ["check", str(tmp_git_repo)])
        assert result.exit_code == EXIT_UNCHANGED
        assert UNCHANGED_MESSAGE in result.output

    def test_defaults_to_current_directory(self, tmp_git_repo: Path, commit, monkeypatch):
        commit({"lib.rs": "fn main() {}\n"})
        monkeypatch.chdir(tmp_git_repo)
        assert runner.invoke(app, ["check"]).exit_code == EXIT_CHANGED

    def test_filter(self, tmp_git_repo: Path, commit):
        commit({"app.py": "import os\n"})
        result = runner.invoke(app, ["check", "-f", "Rust,C", str(tmp_git_repo)])
        assert result.exit_code == EXIT_UNCHANGED

    def test_filter_from_env(self, tmp_git_repo: Path, commit, monkeypatch):
        commit({"app.py": "import os\n"})
        monkeypatch.setenv("HERMES_FILTER", "Rust")
        assert runner.invoke(app, ["check", str(tmp_git_repo)]).exit_code == EXIT_UNCHANGED

    def test_quiet_prints_nothing(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        result = runner.invoke(app, ["check", "-q", str(tmp_git_repo)])
        assert result.exit_code == EXIT_CHANGED
        assert CHANGED_MESSAGE not in result.output

    def test_quiet_and_verbose_conflict(self, tmp_git_repo: Path):
        result = runner.invoke(app, ["check", "-q", "-v", str(tmp_git_repo)])
        assert result.exit_code == EXIT_ERROR

    def test_verbose_shows_table(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        result = runner.invoke(app, ["check", "-vv", str(tmp_git_repo)])
        assert result.exit_code == EXIT_CHANGED
        assert "lib.rs" in result.output

    def test_json_output(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        result = runner.invoke(app, ["check", "--format", "json", "-q", str(tmp_git_repo)])
        assert result.exit_code == EXIT_CHANGED
        assert result.output == ""

        result = runner.invoke(app, ["check", "--format", "json", str(tmp_git_repo)])
        data = json.loads(result.output)
        assert data["changed"] is True
        assert data["repositories"][0]["sides"][0]["file"] == "lib.rs"

    def test_invalid_format(self, tmp_git_repo: Path):
        result = runner.invoke(app, ["check", "--format", "xml", str(tmp_git_repo)])
        assert result.exit_code == EXIT_ERROR

    def test_invalid_match_mode(self, tmp_git_repo: Path):
        result = runner.invoke(app, ["check", "--match-mode", "regex", str(tmp_git_repo)])
        assert result.exit_code == EXIT_ERROR

    def test_not_a_repository(self, tmp_path: Path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing")])
        assert result.exit_code == EXIT_ERROR

    def test_bad_revision(self, tmp_git_repo: Path):
        result = runner.invoke(app, ["check", "--to", "no-such-ref", str(tmp_git_repo)])
        assert result.exit_code == EXIT_ERROR

    def test_staged(self, tmp_git_repo: Path, commit):
        from conftest import git

        commit({"lib.rs": "fn main() {}\n"})
        (tmp_git_repo / "lib.rs").write_text("// doc\nfn main() {}\n")
        git(tmp_git_repo, "add", "lib.rs")
        result = runner.invoke(app, ["check", "--staged", str(tmp_git_repo)])
        assert result.exit_code == EXIT_UNCHANGED

    def test_multiple_repositories(self, tmp_git_repo: Path, commit, tmp_path_factory):
        commit({"lib.rs": "fn main() {}\n"})
        commit({"lib.rs": "// doc\nfn main() {}\n"})
        other = tmp_path_factory.mktemp("other")
        from conftest import git

        git(other, "init")
        git(other, "config", "user.email", "test@test.com")
        git(other, "config", "user.name", "Test")
        (other / "main.c").write_text("int main(void) { return 0; }\n")
        git(other, "add", ".")
        git(other, "commit", "-m", "init")

        assert runner.invoke(app, ["check", str(tmp_git_repo)]).exit_code == EXIT_UNCHANGED
        result = runner.invoke(app, ["check", str(tmp_git_repo), str(other)])
        assert result.exit_code == EXIT_CHANGED


class TestCommand:
    def test_runs_command_when_changed(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        marker = tmp_git_repo / "ran.txt"
        result = runner.invoke(
            app, ["check", "-q", "-c", f"echo yes > '{marker}'", str(tmp_git_repo)]
        )
        assert result.exit_code == EXIT_CHANGED
        assert marker.exists()

    def test_failing_command_is_an_error(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        for status in ("exit 1", "exit 7"):
            result = runner.invoke(app, ["check", "-q", "-c", status, str(tmp_git_repo)])
            assert result.exit_code == EXIT_ERROR
            assert "Command failed" in result.output

    def test_successful_command_reports_changed(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        result = runner.invoke(app, ["check", "-q", "-c", "exit 0", str(tmp_git_repo)])
        assert result.exit_code == EXIT_CHANGED

    def test_command_skipped_when_unchanged(self, tmp_git_repo: Path, commit):
        commit({"lib.rs": "fn main() {}\n"})
        commit({"lib.rs": "// doc\nfn main() {}\n"})
        result = runner.invoke(app, ["check", "-q", "-c", "exit 7", str(tmp_git_repo)])
        assert result.exit_code == EXIT_UNCHANGED


class TestLanguages:
    def test_lists_builtins(self):
        result = runner.invoke(app, ["languages"])
        assert result.exit_code == 0
        assert "Rust" in result.output

    def test_includes_custom(self, tmp_git_repo: Path):
        custom = tmp_git_repo / ".hermes-languages"
        custom.mkdir()
        (custom / "zig.yaml").write_text("name: Zig\nline_comments: ['//']\nextensions: [zig]\n")
        result = runner.invoke(app, ["languages", str(tmp_git_repo)])
        assert result.exit_code == 0
        assert "Zig" in result.output
