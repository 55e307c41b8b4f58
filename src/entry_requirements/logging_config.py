"""Shared logging setup for the entry-requirements CLI.

``configure_logging()`` is idempotent: if the root logger already has
handlers (pytest, an embedding application) it leaves them alone.
"""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = "logs/entry_requirements.log"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = DEFAULT_LOG_FILE,
) -> None:
    """Attach a console handler and, if possible, an append-mode file handler.

    Args:
        level: Level number or name ("DEBUG", "INFO", ...)
        log_file: File to append to; None logs to the console only
    """
    root = logging.getLogger()
    if root.handlers:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        try:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            fh.setFormatter(formatter)
            root.addHandler(fh)
        except OSError:
            pass

    root.setLevel(level)
