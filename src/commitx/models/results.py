"""Result models for prompts and session outcomes."""

from dataclasses import dataclass, field


class Cancelled:
    """Marker returned by any prompt the user aborted."""

    _instance: "Cancelled | None" = None

    def __new__(cls) -> "Cancelled":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCEL"


CANCEL = Cancelled()


def is_cancel(value: object) -> bool:
    return value is CANCEL


@dataclass
class Termination:
    """Why a session stopped early. Turned into a process exit exactly once."""

    messages: list[str] = field(default_factory=list)
    exit_code: int = 0
    cancelled: bool = False
