"""
Logging configuration for the catalog service.

``setup_logging`` configures the root logger with a console handler and an
optional file handler. Every record is stamped with the id of the request
being handled (see ``api.middleware``), or ``-`` outside a request. Logging
is configured at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional

from core.request_context import get_request_id

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestIdFilter(logging.Filter):
    """Attach the current request id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a console
    handler and optionally a file handler. The root logger's level is set
    from ``level`` (case insensitive, unknown names fall back to INFO).
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by a test runner or a second app start.
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    request_filter = RequestIdFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(request_filter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(request_filter)
        logger.addHandler(file_handler)
