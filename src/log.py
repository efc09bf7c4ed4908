"""Structlog-based logging for the kinship analyzer.

Library modules log through `get_logger`; only the CLI writes to the console.
"""

from typing import Literal

import logging

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel = "WARNING") -> None:
    logging.basicConfig(format="%(message)s", level=getattr(logging, level))
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "kinship"):
    return structlog.get_logger(name)


# Initialize default config
configure_logging()
