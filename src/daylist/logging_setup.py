# src/daylist/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Loggers that print below ERROR on the console: name -> minimum level.
_CONSOLE_LEVELS: dict[str, int] = {
    "daylist": logging.NOTSET,
    # The clock ticks every second in a background thread.
    "daylist.clock": logging.WARNING,
}


class _ConsoleNoiseFilter(logging.Filter):
    """
    The console shows daylist logs (the clock only from WARNING); everything
    else, third-party libraries and captured warnings included, only from ERROR.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        while name:
            if name in _CONSOLE_LEVELS:
                return record.levelno >= _CONSOLE_LEVELS[name]
            name = name.rpartition(".")[0]
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/daylist",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: readable + filtered for interactive use
    - File handler: full logs for debugging

    Call this ONCE, very early (before first logger.info).
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "daylist.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)

    # httpx logs every request at INFO; the file does not need that either.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
