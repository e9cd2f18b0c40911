"""Shared test fixtures."""

import subprocess

import pytest

from commitx.models.core import ChangeEntry, CommitIntent
from commitx.models.results import is_cancel
from commitx.models.state import RunConfig, SessionContext


class FakePrompter:
    """Prompter that replays scripted answers and records every question.

    Text answers go through the validator; a rejected answer is recorded in
    `errors` and the next scripted answer is used, like a user retrying.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked: list[tuple[str, str]] = []
        self.errors: list[str] = []
        self.defaults: dict[str, bool] = {}
        self.options: dict[str, list] = {}

    def _next(self, kind: str, message: str):
        self.asked.append((kind, message))
        if not self.answers:
            raise AssertionError(f"Unexpected question: {message}")
        return self.answers.pop(0)

    def text(self, message, validate=None):
        while True:
            answer = self._next("text", message)
            if is_cancel(answer) or validate is None:
                return answer
            problem = validate(answer)
            if problem is None:
                return answer
            self.errors.append(problem)

    def confirm(self, message, default=True):
        self.defaults[message] = default
        return self._next("confirm", message)

    def select(self, message, options):
        self.options[message] = options
        return self._next("select", message)

    def multiselect(self, message, options, required=False, hint=""):
        self.options[message] = options
        return self._next("multiselect", message)


@pytest.fixture
def make_prompter():
    return FakePrompter


@pytest.fixture
def sample_entries():
    return [
        ChangeEntry(path="src/app.py", status="M"),
        ChangeEntry(path="README.md", status="A"),
        ChangeEntry(path="old.txt", status="D"),
        ChangeEntry(path="notes/todo.md", status="?"),
        ChangeEntry(path="setup.cfg", status="M"),
    ]


@pytest.fixture
def sample_intent():
    return CommitIntent(type="feat", subject="add login form")


@pytest.fixture
def sample_run_config():
    """RunConfig with the screen clear disabled."""
    return RunConfig(columns=1, clear=False, debug=False)


@pytest.fixture
def make_context(sample_run_config):
    def _make(*answers, **overrides):
        ctx = SessionContext(config=sample_run_config, prompter=FakePrompter(answers))
        for key, value in overrides.items():
            setattr(ctx, key, value)
        return ctx

    return _make


@pytest.fixture
def git_env(mocker):
    """Patch every git call the session makes. Defaults: clean repo on main."""
    defaults = {
        "is_git_installed": True,
        "is_inside_repository": True,
        "initialize_repository": True,
        "get_current_branch": "main",
        "get_staged_files": [],
        "get_untracked_files": [],
        "get_unstaged_files": [],
        "get_root_path": "/repo",
        "get_git_dir_path": "/repo/.git",
        "get_commit_count": 3,
        "get_tags": [],
        "stage_files": True,
        "commit": True,
    }
    return {
        name: mocker.patch(f"commitx.phases.session.{name}", return_value=value)
        for name, value in defaults.items()
    }


@pytest.fixture
def reset_config_cache():
    import commitx.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    settings._warnings = []
    yield
    settings._config = None
    settings._loaded_sources = []
    settings._warnings = []


@pytest.fixture(autouse=True)
def reset_debug():
    from commitx.utils.debug import set_debug

    set_debug(False)
    yield
    set_debug(False)


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run in the git runner, returning success by default."""
    mock = mocker.patch("commitx.git.runner.subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock
