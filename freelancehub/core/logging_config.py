"""
Logging setup for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger. Modules log through
``logging.getLogger(__name__)``; nothing else configures handlers.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    If the root logger already has handlers (tests, repeated
    ``create_app`` calls) this is a no-op.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive. Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a file to mirror log records into.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
