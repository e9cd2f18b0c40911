"""Debug logging utilities."""

import json
import time
from pathlib import Path

from commitx.ui.output import GRAY, MAGENTA, NC, YELLOW

DEBUG_LOG = Path.home() / ".cache" / "commitx" / "debug.log"

_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn debug logging on or off for the whole process."""
    global _enabled
    _enabled = enabled


def _render(data) -> str:
    if isinstance(data, str):
        try:
            return json.dumps(json.loads(data), indent=2)
        except json.JSONDecodeError:
            return data
    return json.dumps(data, indent=2, default=str)


def debug_log(label: str, data) -> None:
    """Append debug info to log file if debug mode enabled.

    A log file that cannot be written turns debug logging off with one
    warning; callers never see the OSError.
    """
    if not _enabled:
        return

    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    try:
        DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
        with open(DEBUG_LOG, "a") as f:
            f.write(f"\n{'=' * 60}\n")
            f.write(f"[{timestamp}] {label}\n")
            f.write(f"{'=' * 60}\n")
            f.write(_render(data))
            f.write("\n")
    except OSError as e:
        set_debug(False)
        print(f"\r\033[K{YELLOW}[debug]{NC} cannot write {DEBUG_LOG} ({e}), debug log disabled")
        return
    print(f"\r\033[K{MAGENTA}[debug]{NC} {label}  {GRAY}-> {DEBUG_LOG}{NC}")
