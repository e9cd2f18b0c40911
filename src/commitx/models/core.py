"""Core domain models."""

from dataclasses import dataclass

# Conventional commit types, in the order they are offered
COMMIT_TYPES: dict[str, str] = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "test": "Adding missing tests or correcting existing tests",
    "perf": "A code change that improves performance",
    "ci": "Changes to our CI configuration files and scripts",
    "build": "Changes that affect the build system or external dependencies",
    "chore": "Other changes that don't modify src or test files",
    "revert": "Reverts a previous commit",
}

MAX_SUBJECT_LENGTH = 50


@dataclass(frozen=True)
class ChangeEntry:
    """A changed path and its single-character git status."""

    path: str
    status: str  # A, M, D, R, C, T, U or ? (untracked)

    @property
    def label(self) -> str:
        return f"{self.status} {self.path}"

    @classmethod
    def parse_name_status(cls, fields: list[str]) -> list["ChangeEntry"]:
        """Parse the NUL-separated fields of `git diff --name-status -z`.

        Records are `status, path`. Renames and copies (`R100, old, new`)
        carry a second path and keep the first status letter and the
        destination path. A truncated trailing record is dropped.
        """
        entries = []
        index = 0
        while index < len(fields):
            status = fields[index]
            count = 2 if status[:1] in ("R", "C") else 1
            paths = fields[index + 1 : index + 1 + count]
            index += 1 + count
            if len(paths) < count:
                break
            entries.append(cls(path=paths[-1], status=status[:1]))
        return entries


@dataclass
class CommitIntent:
    """Answers collected for one commit. Empty string means absent."""

    type: str
    subject: str
    scope: str = ""
    body: str = ""  # "|" marks a line break
    breaking: str = ""
    closed_issue: str = ""

    @property
    def is_breaking(self) -> bool:
        return bool(self.breaking)
