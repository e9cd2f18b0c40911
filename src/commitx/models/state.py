"""State models for the CLI run and the commit session."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from commitx.models.core import ChangeEntry, CommitIntent
from commitx.models.results import Termination

if TYPE_CHECKING:
    from commitx.ui.prompts import Prompter


class SessionStep(Enum):
    """States in the commit session state machine."""

    TOOL_CHECK = auto()  # Is git installed?
    REPO_CHECK = auto()  # Are we inside a work tree?
    INIT_REPO = auto()  # Offer `git init`
    DISCOVER_CHANGES = auto()  # Collect staged/unstaged/untracked files
    SELECT_UNSTAGED = auto()  # Pick unstaged files to include
    COMMIT_PROMPT = auto()  # Ask for type, scope, subject, ...
    CONFIRM = auto()  # Preview and confirm
    EXECUTE = auto()  # Stage + commit, report result
    DONE = auto()  # Terminal: ran to completion
    TERMINATED = auto()  # Terminal: stopped early, see ctx.termination


@dataclass
class RunConfig:
    """CLI arguments merged with config file values."""

    columns: int = 1
    clear: bool = True
    debug: bool = False
    branches: list[str] = field(default_factory=lambda: ["main", "master"])


@dataclass
class SessionContext:
    """State owned by the session state machine for one invocation."""

    config: RunConfig
    prompter: "Prompter"

    branch_name: Optional[str] = None  # None when detached or unavailable
    staged: list[ChangeEntry] = field(default_factory=list)
    unstaged: list[ChangeEntry] = field(default_factory=list)  # untracked + unstaged
    selected: list[ChangeEntry] = field(default_factory=list)

    intent: Optional[CommitIntent] = None
    message: str = ""
    committed: Optional[bool] = None

    termination: Optional[Termination] = None

    @property
    def change_count(self) -> int:
        return len(self.staged) + len(self.unstaged)

    @property
    def commit_files(self) -> list[ChangeEntry]:
        return self.staged + self.selected

    def terminate(self, *messages: str) -> SessionStep:
        self.termination = Termination(messages=list(messages))
        return SessionStep.TERMINATED

    def cancel(self) -> SessionStep:
        self.termination = Termination(cancelled=True)
        return SessionStep.TERMINATED
