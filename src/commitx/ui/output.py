"""Terminal output helpers with colors and section panels."""

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
CYAN = "\033[0;36m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
DIM = "\033[2m"
BG_CYAN = "\033[46;30m"
NC = "\033[0m"


def dim(text: str) -> str:
    return f"{DIM}{text}{NC}"


def clear_terminal() -> None:
    print("\033[2J\033[0f", end="")


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}[commitx]{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}[commitx]{NC} {msg}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}[commitx]{NC} {msg}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}[commitx]{NC} {msg}")


def message(msg: str) -> None:
    """Plain indented line(s), no prefix."""
    for line in msg.split("\n"):
        print(f"  {line}")


def section(title: str, body: str) -> None:
    """Cyan heading followed by a dimmed body, one panel per concern."""
    print(f"\n{CYAN}{title}{NC}")
    message("\n".join(dim(line) for line in body.split("\n")))


def intro(title: str) -> None:
    print(f"{BG_CYAN} {title} {NC}\n")


def outro(msg: str) -> None:
    print(f"\n{msg}\n")


def cancel(msg: str) -> None:
    print(f"\n{GRAY}{msg}{NC}\n")
