"""Session phases: the commit question flow and the session state machine."""

from commitx.phases.commit import (
    ask_gated,
    prompt_commit_intent,
    require_value,
    type_options,
    validate_subject,
)
from commitx.phases.session import (
    handle_commit_prompt,
    handle_confirm,
    handle_discover_changes,
    handle_execute,
    handle_init_repo,
    handle_repo_check,
    handle_select_unstaged,
    handle_tool_check,
    run_session,
)

__all__ = [
    # Commit questions
    "require_value",
    "validate_subject",
    "ask_gated",
    "type_options",
    "prompt_commit_intent",
    # Session
    "handle_tool_check",
    "handle_repo_check",
    "handle_init_repo",
    "handle_discover_changes",
    "handle_select_unstaged",
    "handle_commit_prompt",
    "handle_confirm",
    "handle_execute",
    "run_session",
]
