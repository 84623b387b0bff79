# SPDX-License-Identifier: AGPL-3.0-only

"""
Logging setup for the PaperPal backend.

    from common.log import get_logger
    logger = get_logger(__name__)

setup_logging() installs the stream handler once; later calls only adjust
the root level when one is given.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _to_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        level: DEBUG/INFO/WARNING/ERROR. Defaults to PAPERPAL_LOG_LEVEL,
               falls back to INFO.
    """
    global _configured
    root = logging.getLogger()

    if _configured:
        if level:
            root.setLevel(_to_level(level))
        return

    root.setLevel(_to_level(level or os.getenv("PAPERPAL_LOG_LEVEL", "INFO")))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, configuring the root logger first if needed."""
    setup_logging()
    return logging.getLogger(name)
