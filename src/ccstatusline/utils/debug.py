"""Debug logging utilities."""

import os
import sys
import time

DEBUG_ENV_VAR = "CCSTATUSLINE_DEBUG"


def get_logs_dir() -> str:
    """Get the directory debug logs are written to."""
    state_home = os.getenv("XDG_STATE_HOME", os.path.expanduser("~/.local/state"))
    return os.path.join(state_home, "ccstatusline", "logs")


def debug_log(message: str, session_id: str = "") -> None:
    """Log debug messages to per-session debug log files if debug mode is enabled.

    Args:
        message: Debug message to log
        session_id: Optional session identifier
    """
    if not os.getenv(DEBUG_ENV_VAR):
        return

    logs_dir = get_logs_dir()
    log_file = os.path.join(logs_dir, f"statusline_debug_{session_id or 'unknown'}.log")
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    session_prefix = f"[{session_id}] " if session_id else ""
    log_message = f"[{timestamp}] {session_prefix}{message}\n"

    try:
        os.makedirs(logs_dir, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {session_prefix}{message}",
            file=sys.stderr,
        )
