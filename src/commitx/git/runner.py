"""Single entry point for invoking git."""

import subprocess
from typing import Optional

from commitx.utils.debug import debug_log

GIT = "git"


def run_git(args: list[str], input: Optional[str] = None, strip: bool = True) -> Optional[str]:
    """Run `git <args>` and return stdout, or None when unavailable.

    Missing executable, OS errors and non-zero exit status all count as
    unavailable; nothing here raises. Output is trimmed unless `strip` is
    False.
    """
    cmd = [GIT, *args]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, input=input)
    except (OSError, subprocess.SubprocessError) as e:
        debug_log(" ".join(cmd), {"error": str(e)})
        return None
    debug_log(
        " ".join(cmd),
        {"returncode": result.returncode, "stdout": result.stdout, "stderr": result.stderr},
    )
    if result.returncode != 0:
        return None
    return result.stdout.strip() if strip else result.stdout


def run_git_lines(args: list[str]) -> list[str]:
    """Non-empty output lines of `git <args>`, [] when unavailable."""
    output = run_git(args)
    if not output:
        return []
    return [line for line in output.split("\n") if line.strip()]


def run_git_fields(args: list[str]) -> list[str]:
    """NUL-separated fields of a `-z` invocation, [] when unavailable.

    Paths come back verbatim: no C-style quoting, surrounding spaces kept.
    """
    output = run_git(args, strip=False)
    if not output:
        return []
    return [field for field in output.split("\0") if field]
