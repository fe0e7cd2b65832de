"""
Logging configuration for the quiz service.

Standard library logging to stdout. The Supabase client stack logs every
HTTP exchange through httpx/httpcore; those loggers are capped at WARNING
unless the service itself runs at DEBUG.
"""

import logging
import sys
from typing import Iterable

# Loggers of the Supabase client stack (HTTP transport, HTTP/2 framing)
NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def setup_logging(
    log_level: str = "INFO",
    service_name: str = "quiz-service",
    noisy_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name of the service for log identification
        noisy_loggers: Third-party loggers to cap at WARNING
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=f"%(asctime)s - {service_name} - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if level > logging.DEBUG:
        for name in noisy_loggers:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name (usually __name__)."""
    return logging.getLogger(name)
