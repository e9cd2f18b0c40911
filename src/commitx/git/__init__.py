"""Git operations: repository queries, staging and committing."""

from commitx.git.commit import build_commit_message, commit, initialize_repository, stage_files
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

__all__ = [
    # Runner
    "run_git",
    "run_git_lines",
    "run_git_fields",
    # Queries
    "is_git_installed",
    "is_inside_repository",
    "get_current_branch",
    "get_untracked_files",
    "get_unstaged_files",
    "get_staged_files",
    "get_commit_count",
    "get_tags",
    "get_root_path",
    "get_git_dir_path",
    # Mutations
    "initialize_repository",
    "stage_files",
    "commit",
    "build_commit_message",
]
