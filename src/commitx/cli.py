"""CLI entry point and argument parsing."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Optional

try:
    __version__ = get_version("commitx")
except PackageNotFoundError:
    __version__ = "dev"

from commitx.config.settings import (
    get_config_loaded_sources,
    get_config_warnings,
    get_setting,
)
from commitx.models.results import Termination
from commitx.models.state import RunConfig, SessionContext
from commitx.phases.session import run_session
from commitx.ui.output import (
    NC,
    RED,
    YELLOW,
    cancel,
    clear_terminal,
    error,
    intro,
    message,
    outro,
    warn,
)
from commitx.ui.prompts import TerminalPrompter
from commitx.utils.debug import DEBUG_LOG, debug_log, set_debug
from commitx.utils.errors import pretty_error


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="commitx",
        description="Compose a conventional commit message interactively and commit it.",
        epilog="""
How it works:
  1. Checks git is installed and offers `git init` outside a repository
  2. Lists staged, unstaged and untracked files
  3. Lets you pick unstaged files to include
  4. Asks for type, scope, subject, body, breaking change and closed issues
  5. Shows the files and message, then stages and commits on confirmation

Message format:
  type(scope)!: subject

  body ("|" starts a new line)

  BREAKING CHANGE: note

  closed: #31, #34

Config (later wins):
  bundled defaults < ~/.config/commitx/config.yaml < .commitx/config.yaml
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--columns",
        type=positive_int,
        default=None,
        metavar="N",
        help="Columns in file listings (default: files.columns from config, 1)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal before starting",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Log every git invocation to {DEBUG_LOG}",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def resolve_run_config(args: argparse.Namespace) -> RunConfig:
    """Merge CLI flags over the (already validated) config values."""
    return RunConfig(
        columns=args.columns if args.columns is not None else get_setting("files.columns"),
        clear=get_setting("terminal.clear") and not args.no_clear,
        debug=args.debug or get_setting("debug"),
        branches=list(get_setting("repository.branches")),
    )


def handle_exit(termination: Termination) -> int:
    """Print the termination messages and banner; return the exit code."""
    messages = [m for m in termination.messages if isinstance(m, str) and m.strip()]
    for index, value in enumerate(messages):
        if index == 0:
            error(f"{RED}{value}{NC}")
        else:
            message(f"{RED}{value}{NC}")

    if termination.cancelled:
        cancel("Operation cancelled")
    else:
        outro(f"{RED}Operation terminated{NC}")
    return termination.exit_code


def main() -> None:
    args = parse_args()
    try:
        config = resolve_run_config(args)
        set_debug(config.debug)
        debug_log("config", {"sources": get_config_loaded_sources(), **vars(config)})

        if config.clear:
            clear_terminal()
        intro("commitx")
        for problem in get_config_warnings():
            warn(f"{YELLOW}{problem}{NC}")

        ctx = SessionContext(config=config, prompter=TerminalPrompter())
        termination = run_session(ctx)
    except KeyboardInterrupt:
        termination = Termination(cancelled=True)
    except Exception as e:
        termination = Termination(messages=[pretty_error(e)], exit_code=1)

    sys.exit(handle_exit(termination) if termination else 0)


if __name__ == "__main__":
    main()
