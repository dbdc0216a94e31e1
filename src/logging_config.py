"""Logging setup for the command line tools.

Library modules only call ``logging.getLogger(__name__)``; the entry points
call :func:`configure_logging` once.
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "UPPASSN_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr so stdout stays clean for verdicts.

    Level precedence: explicit argument, then $UPPASSN_LOG_LEVEL, then WARNING.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
