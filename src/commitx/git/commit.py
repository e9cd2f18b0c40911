"""Commit message assembly and the mutating git operations."""

from typing import Literal, Union

from commitx.git.runner import run_git
from commitx.models.core import CommitIntent


def build_commit_message(intent: CommitIntent) -> str:
    """Render a conventional commit message.

    Header is `type(scope)!: subject`; body ("|" becomes a newline),
    BREAKING CHANGE footer and closed-issue footer follow, each after a
    blank line and only when present.
    """
    msg = intent.type
    if intent.scope:
        msg += f"({intent.scope})"
    if intent.is_breaking:
        msg += "!"
    msg += f": {intent.subject}"

    if intent.body:
        msg += "\n\n" + intent.body.replace("|", "\n")
    if intent.breaking:
        msg += f"\n\nBREAKING CHANGE: {intent.breaking}"
    if intent.closed_issue:
        msg += f"\n\nclosed: {intent.closed_issue}"
    return msg


def initialize_repository(branch_name: str) -> bool:
    """`git init` with the given initial branch."""
    return run_git(["init", "-b", branch_name]) is not None


def stage_files(paths: Union[list[str], Literal["all"]] = "all") -> bool:
    """Add paths (or every change) to the index. Nothing to stage is a success."""
    if paths == "all":
        return run_git(["add", "-A"]) is not None
    if not paths:
        return True
    return run_git(["add", "--", *paths]) is not None


def commit(message: str) -> bool:
    """Commit the index, feeding the message through stdin.

    Success is decided by git's exit status alone.
    """
    return run_git(["commit", "-F", "-"], input=message) is not None
