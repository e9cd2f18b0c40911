"""UI components for terminal output and questions."""

from commitx.ui.output import (
    BLUE,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    cancel,
    clear_terminal,
    dim,
    error,
    intro,
    log,
    message,
    outro,
    section,
    success,
    warn,
)
from commitx.ui.picker import Option, Picker, pick
from commitx.ui.prompts import Prompter, TerminalPrompter

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "CYAN",
    "GRAY",
    "MAGENTA",
    "NC",
    # Functions
    "dim",
    "clear_terminal",
    "log",
    "success",
    "warn",
    "error",
    "message",
    "section",
    "intro",
    "outro",
    "cancel",
    "pick",
    # Classes
    "Option",
    "Picker",
    "Prompter",
    "TerminalPrompter",
]
