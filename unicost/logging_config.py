"""
Logging setup shared by the API and command-line use.

Modules log through ``logging.getLogger(__name__)``; this only decides where
records go and at which level.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV_VAR = "UNICOST_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Attach a console handler to the ``unicost`` logger once.

    ``level`` defaults to UNICOST_LOG_LEVEL, then INFO.
    """
    global _LOGGING_CONFIGURED

    level = level or os.getenv(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    package_logger = logging.getLogger("unicost")
    package_logger.setLevel(level)

    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    package_logger.addHandler(handler)
    _LOGGING_CONFIGURED = True
