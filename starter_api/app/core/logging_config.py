"""
Logging setup for the service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger so that application modules, uvicorn and
FastAPI all write through the same format.  Modules obtain their own
logger with ``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated calls (one per create_app,
# e.g. in tests) do not stack duplicates.
_HANDLER_MARK = "_starter_api_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARK, True)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to append log records to.  Missing parent
        directories are created.  If omitted, only the console is used.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    ours = [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in ours):
        console_handler = _mark(logging.StreamHandler())
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        # One file handler per path, however many apps are created.
        if any(getattr(h, "baseFilename", None) == str(log_path) for h in ours):
            return
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _mark(logging.FileHandler(log_path, encoding="utf-8"))
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
