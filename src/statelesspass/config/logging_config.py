import logging
import os
import sys
import traceback
import pendulum

LOG_FILE = "error.log"
_log_file = LOG_FILE  # file chosen by setup_logging

def setup_logging(log_file: str = LOG_FILE) -> None:
    """
    Configure the error log and install the uncaught exception hook.

    Only errors are recorded. Messages are written as-is, callers stamp
    them with a pendulum timestamp. Secrets must never be passed to the logger.
    """
    global _log_file
    if logging.getLogger().handlers:
        return  # already configured

    _log_file = log_file

    logging.basicConfig(
        filename=log_file,
        filemode="a",
        level=logging.ERROR,
        format="%(message)s",
    )

    sys.excepthook = log_uncaught_exceptions


def log_uncaught_exceptions(exctype, value, tb):
    now = pendulum.now().to_iso8601_string()

    lines = []
    for frame in traceback.extract_tb(tb):
        filename = os.path.basename(frame.filename)
        lines.append(
            f'  File "{filename}", line {frame.lineno}, in {frame.name}'
        )

    trace_summary = "\n".join(reversed(lines)) if lines else "  <no traceback>"
    error_msg = f"{exctype.__name__}: {value}"

    logging.error(
        f"[{now}] Uncaught exception: {error_msg}\n"
        f"Traceback (most recent call last):\n"
        f"{trace_summary}\n"
        f"{error_msg}\n"
    )

    print("\nError! Something went wrong.", file=sys.stderr)
    print(f"Details saved to {_log_file}\n", file=sys.stderr)


def timestamp() -> str:
    """Current time as an ISO-8601 string for log lines."""
    return pendulum.now().to_iso8601_string()
