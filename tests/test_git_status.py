"""Tests for commitx.git.status and commitx.git.runner."""

import subprocess

from commitx.git.commit import stage_files
from commitx.git.runner import run_git, run_git_fields, run_git_lines
from commitx.git.status import (
    get_commit_count,
    get_current_branch,
    get_git_dir_path,
    get_root_path,
    get_staged_files,
    get_tags,
    get_unstaged_files,
    get_untracked_files,
    is_git_installed,
    is_inside_repository,
)
from commitx.models.core import ChangeEntry


def _ok(stdout):
    return subprocess.CompletedProcess([], 0, stdout=stdout, stderr="")


def _fail():
    return subprocess.CompletedProcess([], 128, stdout="", stderr="fatal: not a git repository")


class TestRunGit:
    def test_returns_trimmed_stdout(self, mock_subprocess):
        mock_subprocess.return_value = _ok("  hello\n")
        assert run_git(["status"]) == "hello"

    def test_nonzero_is_none(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert run_git(["status"]) is None

    def test_missing_executable_is_none(self, mock_subprocess):
        mock_subprocess.side_effect = FileNotFoundError("git")
        assert run_git(["--version"]) is None

    def test_subprocess_error_is_none(self, mock_subprocess):
        mock_subprocess.side_effect = subprocess.SubprocessError("boom")
        assert run_git(["--version"]) is None

    def test_passes_input(self, mock_subprocess):
        run_git(["commit", "-F", "-"], input="msg")
        assert mock_subprocess.call_args[1]["input"] == "msg"

    def test_lines_skip_blanks(self, mock_subprocess):
        mock_subprocess.return_value = _ok("a\n\n  \nb\n")
        assert run_git_lines(["ls-files"]) == ["a", "b"]

    def test_lines_unavailable(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert run_git_lines(["ls-files"]) == []


class TestEnvironmentChecks:
    def test_installed(self, mock_subprocess):
        mock_subprocess.return_value = _ok("git version 2.45.0")
        assert is_git_installed() is True
        assert mock_subprocess.call_args[0][0] == ["git", "--version"]

    def test_not_installed(self, mock_subprocess):
        mock_subprocess.side_effect = FileNotFoundError("git")
        assert is_git_installed() is False

    def test_inside_repository(self, mock_subprocess):
        mock_subprocess.return_value = _ok("true\n")
        assert is_inside_repository() is True

    def test_inside_git_dir_counts_as_repository(self, mock_subprocess):
        mock_subprocess.return_value = _ok("false\n")
        assert is_inside_repository() is True

    def test_outside_repository(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert is_inside_repository() is False


class TestGetCurrentBranch:
    def test_branch(self, mock_subprocess):
        mock_subprocess.return_value = _ok("feature/login\n")
        assert get_current_branch() == "feature/login"

    def test_detached_head(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert get_current_branch() is None


class TestFileLists:
    def test_untracked(self, mock_subprocess):
        mock_subprocess.return_value = _ok("new.py\0docs/guide.md\0")
        assert get_untracked_files() == [
            ChangeEntry("new.py", "?"),
            ChangeEntry("docs/guide.md", "?"),
        ]
        assert mock_subprocess.call_args[0][0] == [
            "git",
            "ls-files",
            "-z",
            "--others",
            "--exclude-standard",
        ]

    def test_unstaged(self, mock_subprocess):
        mock_subprocess.return_value = _ok("M\0src/app.py\0D\0old.txt\0")
        assert get_unstaged_files() == [
            ChangeEntry("src/app.py", "M"),
            ChangeEntry("old.txt", "D"),
        ]
        args = mock_subprocess.call_args[0][0]
        assert "-z" in args
        assert "--cached" not in args

    def test_staged_uses_cached(self, mock_subprocess):
        mock_subprocess.return_value = _ok("A\0README.md\0")
        assert get_staged_files() == [ChangeEntry("README.md", "A")]
        assert mock_subprocess.call_args[0][0] == [
            "git",
            "diff",
            "--no-ext-diff",
            "--name-status",
            "-z",
            "--cached",
        ]

    def test_rename_keeps_letter_and_new_path(self, mock_subprocess):
        mock_subprocess.return_value = _ok("R100\0old_name.py\0new_name.py\0M\0b.py\0")
        assert get_staged_files() == [
            ChangeEntry("new_name.py", "R"),
            ChangeEntry("b.py", "M"),
        ]

    def test_non_ascii_and_spaced_paths_verbatim(self, mock_subprocess):
        mock_subprocess.return_value = _ok("café.txt\0 notes .md\0")
        assert [e.path for e in get_untracked_files()] == ["café.txt", " notes .md"]

    def test_non_ascii_path_can_be_staged(self, mock_subprocess):
        mock_subprocess.return_value = _ok("A\0docs/naïve résumé.md\0")
        entry = get_staged_files()[0]
        assert entry.path == "docs/naïve résumé.md"
        stage_files([entry.path])
        assert mock_subprocess.call_args[0][0] == ["git", "add", "--", "docs/naïve résumé.md"]

    def test_unavailable_is_empty(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert get_staged_files() == []
        assert get_unstaged_files() == []
        assert get_untracked_files() == []


class TestRunGitFields:
    def test_splits_on_nul(self, mock_subprocess):
        mock_subprocess.return_value = _ok("a b\0c\0")
        assert run_git_fields(["ls-files", "-z"]) == ["a b", "c"]

    def test_unavailable(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert run_git_fields(["ls-files", "-z"]) == []


class TestRunGitDebugLog:
    def test_unwritable_log_does_not_raise(self, tmp_path, monkeypatch, mock_subprocess, capsys):
        import commitx.utils.debug as debug_mod
        from commitx.utils.debug import set_debug

        blocker = tmp_path / "cache"
        blocker.write_text("not a directory")
        monkeypatch.setattr(debug_mod, "DEBUG_LOG", blocker / "debug.log")
        set_debug(True)
        mock_subprocess.return_value = _ok("main\n")

        assert run_git(["symbolic-ref", "--short", "HEAD"]) == "main"
        assert "debug log disabled" in capsys.readouterr().out


class TestRepositoryInfo:
    def test_commit_count(self, mock_subprocess):
        mock_subprocess.return_value = _ok("42\n")
        assert get_commit_count() == 42

    def test_commit_count_no_commits(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert get_commit_count() == 0

    def test_commit_count_unparsable(self, mock_subprocess):
        mock_subprocess.return_value = _ok("lots")
        assert get_commit_count() == 0

    def test_tags(self, mock_subprocess):
        mock_subprocess.return_value = _ok("v0.1.0\nv0.2.0\n")
        assert get_tags() == ["v0.1.0", "v0.2.0"]

    def test_no_tags(self, mock_subprocess):
        assert get_tags() == []

    def test_root_and_git_dir(self, mock_subprocess):
        mock_subprocess.side_effect = [_ok("/work/repo\n"), _ok("/work/repo/.git\n")]
        assert get_root_path() == "/work/repo"
        assert get_git_dir_path() == "/work/repo/.git"

    def test_paths_unavailable(self, mock_subprocess):
        mock_subprocess.return_value = _fail()
        assert get_root_path() is None
        assert get_git_dir_path() is None
