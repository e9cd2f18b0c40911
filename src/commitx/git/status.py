"""Repository queries. Each returns a value or an "unavailable" default."""

from typing import Optional

from commitx.git.runner import run_git, run_git_fields, run_git_lines
from commitx.models.core import ChangeEntry


def is_git_installed() -> bool:
    return run_git(["--version"]) is not None


def is_inside_repository() -> bool:
    """True when git resolves a repository here, including inside `.git` or a bare repo."""
    return run_git(["rev-parse", "--is-inside-work-tree"]) is not None


def get_current_branch() -> Optional[str]:
    """Current branch name, None when detached or unavailable."""
    return run_git(["symbolic-ref", "--short", "HEAD"]) or None


def get_untracked_files() -> list[ChangeEntry]:
    """Untracked paths, honouring .gitignore and friends."""
    return [
        ChangeEntry(path=path, status="?")
        for path in run_git_fields(["ls-files", "-z", "--others", "--exclude-standard"])
    ]


def get_unstaged_files() -> list[ChangeEntry]:
    """Tracked files changed in the work tree but not in the index."""
    return ChangeEntry.parse_name_status(
        run_git_fields(["diff", "--no-ext-diff", "--name-status", "-z"])
    )


def get_staged_files() -> list[ChangeEntry]:
    """Files changed in the index relative to HEAD."""
    return ChangeEntry.parse_name_status(
        run_git_fields(["diff", "--no-ext-diff", "--name-status", "-z", "--cached"])
    )


def get_commit_count() -> int:
    output = run_git(["rev-list", "--count", "HEAD"])
    try:
        return int(output) if output else 0
    except ValueError:
        return 0


def get_tags() -> list[str]:
    return run_git_lines(["rev-parse", "--symbolic", "--tags"])


def get_root_path() -> Optional[str]:
    return run_git(["rev-parse", "--show-toplevel"]) or None


def get_git_dir_path() -> Optional[str]:
    return run_git(["rev-parse", "--absolute-git-dir"]) or None
