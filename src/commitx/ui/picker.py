"""Curses-based list picker for single and multiple selection."""

import curses
from dataclasses import dataclass, field
from typing import Any

from commitx.models.results import CANCEL
from commitx.ui.output import CYAN, GRAY, NC, YELLOW

REQUIRED_MESSAGE = "Please select at least one option. Press SPACE to select, ENTER to submit"

# Smallest screen the curses picker draws on; below it pick_numbered takes over
MIN_HEIGHT = 6
MIN_WIDTH = 30

TOO_SMALL = object()


@dataclass
class Option:
    """A choice in a select/multiselect prompt."""

    value: Any
    label: str = ""
    hint: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = str(self.value)


@dataclass
class Picker:
    """Keyboard state for a list picker, independent of curses drawing.

    `handle_key` returns True once the picker is finished; `result` then
    holds the chosen value, the list of chosen values, or CANCEL.
    """

    options: list[Option]
    multiple: bool = False
    required: bool = False
    current: int = 0
    checked: set[int] = field(default_factory=set)
    error: str = ""
    result: Any = None

    def handle_key(self, key: int) -> bool:
        self.error = ""
        if key in (ord("q"), ord("Q"), 27):  # q / ESC
            self.result = CANCEL
            return True
        if key in (curses.KEY_UP, ord("k")):
            self.current = max(0, self.current - 1)
        elif key in (curses.KEY_DOWN, ord("j")):
            self.current = min(len(self.options) - 1, self.current + 1)
        elif self.multiple and key == ord(" "):
            self.checked ^= {self.current}
        elif self.multiple and key in (ord("a"), ord("A")):
            everything = set(range(len(self.options)))
            self.checked = set() if self.checked == everything else everything
        elif key in (curses.KEY_ENTER, 10, 13):
            return self._submit()
        return False

    def _submit(self) -> bool:
        if not self.multiple:
            self.result = self.options[self.current].value
            return True
        if self.required and not self.checked:
            self.error = REQUIRED_MESSAGE
            return False
        self.result = [o.value for i, o in enumerate(self.options) if i in self.checked]
        return True


def parse_numbered(
    answer: str, options: list[Option], multiple: bool, required: bool
) -> tuple[Any, str]:
    """Turn a typed answer into value(s). `problem` is "" when the answer is valid."""
    count = len(options)
    if multiple and answer.lower() == "a":
        return [o.value for o in options], ""

    tokens = answer.replace(",", " ").split()
    if not all(t.isdigit() and 1 <= int(t) <= count for t in tokens):
        return None, f"Enter numbers between 1 and {count}"

    if not multiple:
        if len(tokens) != 1:
            return None, f"Enter one number between 1 and {count}"
        return options[int(tokens[0]) - 1].value, ""

    chosen = {int(t) - 1 for t in tokens}
    if required and not chosen:
        return None, "Please select at least one option"
    return [o.value for i, o in enumerate(options) if i in chosen], ""


def pick_numbered(
    message: str, options: list[Option], multiple: bool = False, required: bool = False
) -> Any:
    """Numbered input() list for terminals too small for the curses picker."""
    print(f"{CYAN}?{NC} {message} {GRAY}(terminal too small for the list picker){NC}")
    for number, option in enumerate(options, start=1):
        hint = f" {GRAY}({option.hint}){NC}" if option.hint else ""
        print(f"  {number}. {option.label}{hint}")

    question = "Numbers separated by spaces, a for all, q to cancel: "
    if not multiple:
        question = "Number, q to cancel: "
    while True:
        try:
            answer = input(question).strip()
        except EOFError:
            print()
            return CANCEL
        if answer.lower() == "q":
            return CANCEL
        result, problem = parse_numbered(answer, options, multiple, required)
        if not problem:
            return result
        print(f"  {YELLOW}{problem}{NC}")


def pick(
    message: str,
    options: list[Option],
    multiple: bool = False,
    required: bool = False,
    hint: str = "",
) -> Any:
    """Interactive curses picker. Returns the chosen value(s) or CANCEL.

    Controls:
    - ↑/↓ or j/k: navigate
    - Space: toggle selection (multiple)
    - a: select/deselect all (multiple)
    - Enter: confirm
    - q / ESC: cancel
    """
    if not options:
        return [] if multiple else CANCEL
    picker = Picker(options=options, multiple=multiple, required=required)

    def _curses_main(stdscr) -> Any:
        curses.curs_set(0)  # Hide cursor
        curses.start_color()
        curses.use_default_colors()

        curses.init_pair(1, curses.COLOR_CYAN, -1)  # Header
        curses.init_pair(2, curses.COLOR_YELLOW, -1)  # Current item
        curses.init_pair(3, curses.COLOR_GREEN, -1)  # Checked box
        curses.init_pair(4, curses.COLOR_WHITE, -1)  # Normal text
        curses.init_pair(5, curses.COLOR_RED, -1)  # Error line

        while True:
            stdscr.clear()
            height, width = stdscr.getmaxyx()

            if height < MIN_HEIGHT or width < MIN_WIDTH:
                return TOO_SMALL

            stdscr.addstr(0, 0, f"? {message}"[: width - 1], curses.color_pair(1) | curses.A_BOLD)
            if hint:
                stdscr.addstr(1, 2, hint[: width - 3], curses.color_pair(4) | curses.A_DIM)

            # Scroll so the current item stays visible
            visible = max(1, height - 5)
            top = max(0, picker.current - visible + 1)
            for row, i in enumerate(range(top, min(len(options), top + visible)), start=2):
                option = options[i]
                is_current = i == picker.current
                stdscr.addstr(row, 0, ">" if is_current else " ", curses.color_pair(2))
                col = 2
                if multiple:
                    box = "[x]" if i in picker.checked else "[ ]"
                    box_color = curses.color_pair(3) if i in picker.checked else curses.color_pair(4)
                    stdscr.addstr(row, col, box, box_color)
                    col += 4
                text_color = (
                    curses.color_pair(2) | curses.A_BOLD if is_current else curses.color_pair(4)
                )
                stdscr.addstr(row, col, option.label[: width - col - 1], text_color)
                if option.hint and is_current:
                    hint_col = col + len(option.label) + 1
                    if hint_col < width - 4:
                        stdscr.addstr(
                            row,
                            hint_col,
                            f"({option.hint})"[: width - hint_col - 1],
                            curses.color_pair(4) | curses.A_DIM,
                        )

            footer_row = height - 2
            if picker.error:
                stdscr.addstr(footer_row, 0, picker.error[: width - 1], curses.color_pair(5))
            else:
                controls = "  j/k nav  SPACE toggle  a all  ENTER confirm  q cancel  "
                if not multiple:
                    controls = "  j/k nav  ENTER confirm  q cancel  "
                stdscr.addstr(
                    footer_row, 0, controls[: width - 1], curses.color_pair(4) | curses.A_DIM
                )

            stdscr.refresh()

            if picker.handle_key(stdscr.getch()):
                return picker.result

    result = curses.wrapper(_curses_main)
    if result is TOO_SMALL:
        return pick_numbered(message, options, multiple=multiple, required=required)
    return result
