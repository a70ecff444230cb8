"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.

What the service logs:
- INFO: each person added, updated or removed, by id.
- WARNING: each request answered with a 4xx error payload.
- ERROR: each unexpected failure answered with a 500, with its traceback.
- DEBUG: listing parameters, repository writes and rejected name kinds.
- SQL statements and their bound values, through sqlalchemy.engine, only
  when echo is on. Keep echo off wherever person names must not reach logs.

Otherwise person names, request bodies and form values are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Let SQLAlchemy statement logging through at INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
