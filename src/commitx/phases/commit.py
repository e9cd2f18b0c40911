"""Commit details question flow."""

from typing import Any, Optional

from commitx.models.core import COMMIT_TYPES, MAX_SUBJECT_LENGTH, CommitIntent
from commitx.models.results import CANCEL, is_cancel
from commitx.ui.output import dim
from commitx.ui.picker import Option
from commitx.ui.prompts import Prompter, Validator

BODY_HINT = 'Use "|" to break new line'
ISSUE_HINT = "For example: #31, #34"


def require_value(value: str) -> Optional[str]:
    return "Value is required!" if len(value) == 0 else None


def validate_subject(value: str) -> Optional[str]:
    if len(value) == 0:
        return "Value is required"
    if len(value) > MAX_SUBJECT_LENGTH:
        return (
            f"Please make sure it does not exceed {MAX_SUBJECT_LENGTH} characters, "
            f"currently {len(value)} characters"
        )
    return None


def ask_gated(
    prompter: Prompter, gate: str, detail: str, validate: Validator = require_value
) -> Any:
    """Ask a yes/no gate, then the detail question only on yes.

    Returns the detail answer, "" when the gate is declined, or CANCEL.
    """
    should_continue = prompter.confirm(gate, default=False)
    if is_cancel(should_continue):
        return CANCEL
    if not should_continue:
        return ""
    return prompter.text(detail, validate=validate)


def type_options() -> list[Option]:
    return [Option(value=name, hint=hint) for name, hint in COMMIT_TYPES.items()]


def prompt_commit_intent(prompter: Prompter) -> Any:
    """Run the whole commit question flow. Returns CommitIntent or CANCEL.

    Order: type, scope, subject, body, breaking change, closed issues.
    The first cancelled question ends the flow.
    """
    commit_type = prompter.select("Select the type of change:", type_options())
    if is_cancel(commit_type):
        return CANCEL

    scope = ask_gated(
        prompter,
        "Do you need to fill out the scope of change?",
        "Fill in the scope of change:",
    )
    if is_cancel(scope):
        return CANCEL

    subject = prompter.text(
        "Fill in the description subject of change:", validate=validate_subject
    )
    if is_cancel(subject):
        return CANCEL

    body = ask_gated(
        prompter,
        "Do you need to fill out the description body of change?",
        f"Fill in the description body of change: {dim(BODY_HINT)}",
    )
    if is_cancel(body):
        return CANCEL

    breaking = ask_gated(
        prompter,
        "Does this commit introduce any breaking changes?",
        "Fill in the breaking changes:",
    )
    if is_cancel(breaking):
        return CANCEL

    closed_issue = ask_gated(
        prompter,
        "Does this commit address any issues that need to be closed?",
        f"Fill in #ISSUE: {dim(ISSUE_HINT)}",
    )
    if is_cancel(closed_issue):
        return CANCEL

    return CommitIntent(
        type=commit_type,
        scope=scope,
        subject=subject,
        body=body,
        breaking=breaking,
        closed_issue=closed_issue,
    )
