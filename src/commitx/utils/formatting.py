"""Formatting utilities for file listings."""

import math

from commitx.models.core import ChangeEntry


def format_files(entries: list[ChangeEntry], columns: int = 3) -> str:
    """Lay out entries as a column-major grid.

    Entries fill down each column before moving to the next one
    (index = col * rows + row). Every cell is padded to the longest path
    plus two characters.
    """
    if not entries:
        return ""

    columns = max(columns, 1)
    rows = math.ceil(len(entries) / columns)
    width = max(len(e.path) for e in entries) + 2

    lines = []
    for row in range(rows):
        line = ""
        for col in range(columns):
            index = col * rows + row
            if index < len(entries):
                line += entries[index].label.ljust(width)
        lines.append(line)
    return "\n".join(lines).rstrip()
