"""Debug logging utilities."""

import os
import sys
import time

DEBUG_ENV_VAR = "CCSTATUSLINE_DEBUG"


def get_log_path(session_id: str = "") -> str:
    """Get the debug log file for a session."""
    logs_dir = os.getenv("CCSTATUSLINE_LOG_DIR") or os.path.join(
        os.path.expanduser("~"), ".cache", "ccstatusline"
    )
    return os.path.join(logs_dir, f"statusline_debug_{session_id or 'unknown'}.log")


def debug_log(message: str, session_id: str = "") -> None:
    """Log debug messages to per-session debug log files if debug mode is enabled.

    Args:
        message: Debug message to log
        session_id: Optional session identifier
    """
    if not os.getenv(DEBUG_ENV_VAR):
        return

    log_file = get_log_path(session_id)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    session_prefix = f"[{session_id}] " if session_id else ""
    log_message = f"[{timestamp}] {session_prefix}{message}\n"

    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {session_prefix}{message}",
            file=sys.stderr,
        )
