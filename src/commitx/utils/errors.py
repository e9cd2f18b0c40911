"""Readable rendering of unexpected exceptions."""

import os
import re
import traceback

from commitx.ui.output import NC, RED, dim

_FILE_SCHEME = re.compile(r"file:///?")


def clean_path(path: str, cwd: str | None = None) -> str:
    """Strip a file:// scheme and make the path relative to the working directory."""
    prefix = (cwd or os.getcwd()) + os.sep
    path = _FILE_SCHEME.sub("", path, count=1)
    return path.replace(prefix, "", 1)


def parse_stack(exc: BaseException, cwd: str | None = None) -> list[str]:
    """One line per traceback frame, innermost last."""
    frames = traceback.extract_tb(exc.__traceback__)
    return [
        f"at {frame.name} ({clean_path(frame.filename, cwd)}:{frame.lineno})" for frame in frames
    ]


def pretty_error(exc: BaseException, cwd: str | None = None) -> str:
    """`Type: message` in red followed by the dimmed, cleaned stack."""
    name = type(exc).__name__
    message = str(exc)
    headline = f"{name}: {message}" if message else name
    result = f"{RED}{headline}{NC}"
    for line in parse_stack(exc, cwd):
        result += "\n  " + dim(line)
    return result
