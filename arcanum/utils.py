"""Console output, log file setup and small string helpers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOGGER_NAME = "arcanum"
LOG_FORMAT = "[%(levelname)s]   [%(filename)s:%(lineno)d] %(message)s"


class _LogState:
    handler: logging.Handler | None = None


def get_work_path() -> str:
    """Return the folder holding the running program, with a trailing separator."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    folder = Path(program).resolve().parent
    return str(folder) + os.sep


def str_eq_ci(a: str, b: str) -> bool:
    """Compare two strings ignoring case."""
    return a.lower() == b.lower()


def create_log_file(name: str | os.PathLike[str]) -> Path:
    """Create (or truncate) ``<name>.log`` and route the package logger to it."""
    path = Path(f"{os.fspath(name)}.log")
    with path.open("w", encoding="utf-8") as stream:
        stream.write(f"Created log file {path}\n")

    logger = logging.getLogger(LOGGER_NAME)
    if _LogState.handler is not None:
        logger.removeHandler(_LogState.handler)
        _LogState.handler.close()

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    _LogState.handler = handler
    return path


def uci_out(text: object) -> None:
    """Write one line of protocol output to standard output."""
    print(text, flush=True)