"""
Logging setup for the Guitars API.

Service, store and endpoint modules log through
``logging.getLogger(__name__)``; this module gives those records
somewhere to go.  ``create_app`` calls ``setup_logging`` with the
``LOG_LEVEL`` and ``LOG_FILE`` settings.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send application logs to stderr and, optionally, to a file.

    Does nothing when the root logger already has handlers: uvicorn,
    the test runner or an earlier ``create_app`` set them up first.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record.  Missing parent
        directories are created.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
