"""
Logging configuration for the Posts API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Records carry the timestamp and the
source file and line that emitted them, followed by the logger name,
level and message.

It also prepares the ``posts_api.requests`` logger that receives one
line per request.  That logger is pinned to INFO so request lines are
written even when ``LOG_LEVEL`` raises the threshold for everything
else.
"""

import logging
from pathlib import Path
from typing import Optional

REQUEST_LOGGER_NAME = "posts_api.requests"

LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure logging and return the request logger.

    The root logger is only configured when it has no handlers yet
    (uvicorn, pytest or an earlier ``create_app`` call may already have
    set it up); the request logger is prepared either way.

    Parameters
    ----------
    level : str
        Logging level name for the root logger (e.g. ``"DEBUG"``).
        Case insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that also receives every record.  Resolved
        relative to the current working directory.

    Returns
    -------
    logging.Logger
        The ``posts_api.requests`` logger.
    """
    request_logger = logging.getLogger(REQUEST_LOGGER_NAME)
    request_logger.setLevel(logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        return request_logger

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return request_logger
