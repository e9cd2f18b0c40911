"""Commit session state machine."""

from typing import Callable, Optional

from commitx.git.commit import build_commit_message, commit, initialize_repository, stage_files
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
from commitx.models.results import Termination, is_cancel
from commitx.models.state import SessionContext, SessionStep
from commitx.phases.commit import prompt_commit_intent
from commitx.ui.output import GREEN, NC, RED, YELLOW, log, message, outro, section, success, warn
from commitx.ui.picker import Option
from commitx.utils.debug import debug_log
from commitx.utils.formatting import format_files

GIT_DOWNLOAD_URL = "https://git-scm.com"


def handle_tool_check(ctx: SessionContext) -> SessionStep:
    if not is_git_installed():
        return ctx.terminate(
            "Git is not installed, Please download and install it before trying again",
            f"You can download it from here: {GIT_DOWNLOAD_URL}",
        )
    return SessionStep.REPO_CHECK


def handle_repo_check(ctx: SessionContext) -> SessionStep:
    if is_inside_repository():
        return SessionStep.DISCOVER_CHANGES
    warn(
        f"{YELLOW}There is no Git repository in the current directory "
        f"(or any of the parent directories){NC}"
    )
    return SessionStep.INIT_REPO


def handle_init_repo(ctx: SessionContext) -> SessionStep:
    should_init = ctx.prompter.confirm("Do you want to initialize a Git repository?")
    if is_cancel(should_init):
        return ctx.cancel()
    if not should_init:
        return ctx.terminate()

    options = [Option(value=name) for name in ctx.config.branches]
    branch_name = ctx.prompter.select("Pick a branch name:", options)
    if is_cancel(branch_name):
        return ctx.cancel()

    if not initialize_repository(branch_name):
        return ctx.terminate(f'Failed to initialize Git repository on branch "{branch_name}"')
    success(f"{GREEN}Git repository initialized successfully{NC}")
    return SessionStep.DISCOVER_CHANGES


def log_repository_context() -> None:
    """Record where we are in the debug log (no-op unless --debug)."""
    debug_log(
        "repository",
        {
            "root": get_root_path(),
            "git_dir": get_git_dir_path(),
            "commits": get_commit_count(),
            "tags": get_tags(),
        },
    )


def handle_discover_changes(ctx: SessionContext) -> SessionStep:
    log_repository_context()

    ctx.branch_name = get_current_branch()
    ctx.staged = get_staged_files()
    ctx.unstaged = get_untracked_files() + get_unstaged_files()

    if ctx.change_count == 0:
        return ctx.terminate(
            f'No changes on branch "{ctx.branch_name or "HEAD"}", no need to commit',
            "Please make sure you are on the correct branch before making any commits",
        )

    columns = ctx.config.columns
    if ctx.branch_name:
        section("Branch", ctx.branch_name)
    if ctx.unstaged:
        section("Unstaged Files", format_files(ctx.unstaged, columns))
    if ctx.staged:
        section("Staged Files", format_files(ctx.staged, columns))
    print()

    return SessionStep.SELECT_UNSTAGED if ctx.unstaged else SessionStep.COMMIT_PROMPT


def handle_select_unstaged(ctx: SessionContext) -> SessionStep:
    if not ctx.staged:
        warn(f"{YELLOW}Staged files are empty, but unstaged files present{NC}")
    else:
        warn(f"{YELLOW}Unstaged files detected{NC}")
        message(f"{YELLOW}Please make sure you haven't forgotten them before committing{NC}")

    should_select = ctx.prompter.confirm(
        "Do you want to select unstaged files to include them in what will be committed?"
    )
    if is_cancel(should_select):
        return ctx.cancel()
    if not should_select:
        if not ctx.staged:
            return ctx.terminate("No files to commit", "Please stage the files before committing")
        return SessionStep.COMMIT_PROMPT

    options = [Option(value=entry, label=entry.label) for entry in ctx.unstaged]
    selected = ctx.prompter.multiselect(
        "Select unstaged files:",
        options,
        required=True,
        hint='Press "a" key to select/deselect all',
    )
    if is_cancel(selected):
        return ctx.cancel()
    ctx.selected = list(selected)
    return SessionStep.COMMIT_PROMPT


def handle_commit_prompt(ctx: SessionContext) -> SessionStep:
    intent = prompt_commit_intent(ctx.prompter)
    if is_cancel(intent):
        return ctx.cancel()
    ctx.intent = intent
    ctx.message = build_commit_message(intent)
    return SessionStep.CONFIRM


def handle_confirm(ctx: SessionContext) -> SessionStep:
    section("Commit Files", format_files(ctx.commit_files, ctx.config.columns))
    section("Commit Message", ctx.message)
    print()

    proceed = ctx.prompter.confirm("Are you sure you want to proceed with the commit above?")
    if is_cancel(proceed):
        return ctx.cancel()
    if not proceed:
        return ctx.terminate()
    return SessionStep.EXECUTE


def handle_execute(ctx: SessionContext) -> SessionStep:
    if ctx.selected:
        log(f"Staging {len(ctx.selected)} selected file(s)")
    staged_ok = stage_files([entry.path for entry in ctx.selected])
    ctx.committed = staged_ok and commit(ctx.message)
    outro(f"{GREEN}Success{NC}" if ctx.committed else f"{RED}Failure{NC}")
    return SessionStep.DONE


# State handler dispatch table
STATE_HANDLERS: dict[SessionStep, Callable[[SessionContext], SessionStep]] = {
    SessionStep.TOOL_CHECK: handle_tool_check,
    SessionStep.REPO_CHECK: handle_repo_check,
    SessionStep.INIT_REPO: handle_init_repo,
    SessionStep.DISCOVER_CHANGES: handle_discover_changes,
    SessionStep.SELECT_UNSTAGED: handle_select_unstaged,
    SessionStep.COMMIT_PROMPT: handle_commit_prompt,
    SessionStep.CONFIRM: handle_confirm,
    SessionStep.EXECUTE: handle_execute,
}


def run_session(ctx: SessionContext) -> Optional[Termination]:
    """Drive the session to DONE or TERMINATED. Returns the termination, if any."""
    step = SessionStep.TOOL_CHECK
    while step not in (SessionStep.DONE, SessionStep.TERMINATED):
        handler = STATE_HANDLERS.get(step)
        if handler is None:
            raise RuntimeError(f"Unknown session step: {step}")
        debug_log("step", step.name)
        step = handler(ctx)
    return ctx.termination
