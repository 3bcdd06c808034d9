# src/oracle_focus/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "oracle.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"

# The LLM stack logs every request at INFO/DEBUG.
_QUIET_LIBRARIES = ("httpx", "httpcore", "openai")


class _ConsoleNoiseFilter(logging.Filter):
    """Let the app's own records through; everything else must be ERROR+."""

    def __init__(self, app_prefix: str = "oracle_focus.") -> None:
        super().__init__()
        self._app_prefix = app_prefix

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(self._app_prefix):
            return True
        # Includes 'py.warnings' from captureWarnings.
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/oracle",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Replace the root handlers with a quiet stderr handler and a full file log.

    The console shares the terminal with the task prompt, so it only shows
    oracle_focus records at `console_level` and library errors. The file at
    `<log_dir>/oracle.log` keeps everything from `file_level` up, including
    the LLM fallback trail. Returns the log file path.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
