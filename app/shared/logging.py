"""
Logging configuration for the application.

Logging must not change program behavior and never carries secrets,
API keys or raw request bodies (brokerage notes included).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole process.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
