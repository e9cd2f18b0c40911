"""Data models for commitx."""

from commitx.models.core import COMMIT_TYPES, MAX_SUBJECT_LENGTH, ChangeEntry, CommitIntent
from commitx.models.results import CANCEL, Cancelled, Termination, is_cancel
from commitx.models.state import RunConfig, SessionContext, SessionStep

__all__ = [
    # Core
    "COMMIT_TYPES",
    "MAX_SUBJECT_LENGTH",
    "ChangeEntry",
    "CommitIntent",
    # Results
    "CANCEL",
    "Cancelled",
    "Termination",
    "is_cancel",
    # State
    "RunConfig",
    "SessionContext",
    "SessionStep",
]
