"""
Logging configuration for the memo service.

``setup_logging`` attaches a console handler and, when a log file is
configured, a size‑rotated file handler to the root logger.  Records
carry the thread name because requests and direct store users may log
from different threads.  Configuration happens at most once per
process; later calls are ignored.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation limits for the optional log file.
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 3


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    debug: bool = False,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Configure logging for the service, on the root logger by default.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
        If omitted, logs go to the console only.
    debug : bool
        Force ``DEBUG`` level whatever ``level`` says; mirrors the
        ``DEBUG`` setting of the application.
    logger : Optional[logging.Logger]
        Logger to configure; the root logger when omitted.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by uvicorn, pytest or a previous
        # ``create_app`` call.
        return

    numeric_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
