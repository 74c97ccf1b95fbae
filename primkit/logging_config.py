"""
Structured logging configuration for primkit.

Provides JSON-formatted logs with an operation field for correlating the
attempts of a retried call.

The library never configures logging on import; applications (and the
primkit CLI) call setup_logging() once at startup.

Usage:
    from primkit.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, operation="sync-prices")
    logger.info("Retrying", extra={"attempt": 2})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import PrimkitConfig


def setup_logging(config: Optional[PrimkitConfig] = None) -> None:
    """
    Configure root logger with structured logging.

    Reads PRIMKIT_LOG_LEVEL and PRIMKIT_LOG_FORMAT through
    PrimkitConfig.from_env() unless a config is passed in.
    """
    config = config or PrimkitConfig.from_env()
    level = getattr(logging, config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr keeps CLI stdout clean for piping
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(OperationFilter())

    if config.log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(operation)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [operation=%(operation)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, operation: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with an optional operation label.

    Args:
        name: Logger name (typically __name__)
        operation: Label correlating related log lines (e.g. one retried call)

    Returns:
        LoggerAdapter with operation in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"operation": operation or "N/A"})


class OperationFilter(logging.Filter):
    """
    Logging filter that adds operation to all log records.

    Ensures records from plain loggers format cleanly too.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "operation"):
            record.operation = "N/A"  # type: ignore
        return True
