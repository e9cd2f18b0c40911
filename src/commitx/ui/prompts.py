"""Interactive question widgets.

Every widget returns the answer or CANCEL; a cancelled question never
raises past this module.
"""

from typing import Any, Callable, Optional, Protocol

from commitx.models.results import CANCEL
from commitx.ui.output import CYAN, GRAY, NC, RED, YELLOW, dim
from commitx.ui.picker import Option, pick

Validator = Callable[[str], Optional[str]]

YES = ("y", "yes")
NO = ("n", "no")


class Prompter(Protocol):
    """The four kinds of question the commit flow can ask."""

    def text(self, message: str, validate: Optional[Validator] = None) -> Any: ...

    def confirm(self, message: str, default: bool = True) -> Any: ...

    def select(self, message: str, options: list[Option]) -> Any: ...

    def multiselect(
        self, message: str, options: list[Option], required: bool = False, hint: str = ""
    ) -> Any: ...


class TerminalPrompter:
    """Prompter backed by input() for text/confirm and curses for lists."""

    def text(self, message: str, validate: Optional[Validator] = None) -> Any:
        while True:
            try:
                answer = input(f"{CYAN}?{NC} {message} ")
            except (EOFError, KeyboardInterrupt):
                print()
                return CANCEL
            problem = validate(answer) if validate else None
            if problem is None:
                return answer
            print(f"  {YELLOW}{problem}{NC}")

    def confirm(self, message: str, default: bool = True) -> Any:
        choices = "[Y/n]" if default else "[y/N]"
        while True:
            try:
                answer = input(f"{CYAN}?{NC} {message} {GRAY}{choices}{NC} ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                print()
                return CANCEL
            if not answer:
                return default
            if answer in YES:
                return True
            if answer in NO:
                return False
            print(f"  {YELLOW}Please answer y or n{NC}")

    def select(self, message: str, options: list[Option]) -> Any:
        try:
            value = pick(message, options)
        except KeyboardInterrupt:
            return CANCEL
        if value is not CANCEL:
            print(f"{CYAN}?{NC} {message} {dim(str(value))}")
        return value

    def multiselect(
        self, message: str, options: list[Option], required: bool = False, hint: str = ""
    ) -> Any:
        try:
            values = pick(message, options, multiple=True, required=required, hint=hint)
        except KeyboardInterrupt:
            return CANCEL
        if values is not CANCEL:
            chosen = [o.label for o in options if o.value in values]
            print(f"{CYAN}?{NC} {message}")
            for label in chosen:
                print(f"  {dim(label)}")
            if not chosen:
                print(f"  {RED}(none){NC}")
        return values
