"""
Runtime configuration read from the environment.

Environment Variables:
    PRIMKIT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    PRIMKIT_LOG_FORMAT: Log format (json, text) - default: json
    PRIMKIT_RETRY_SCHEDULE: Comma separated retry delays in seconds - default: 3,5
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_RETRY_SCHEDULE = "3,5"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("json", "text")


def parse_retry_schedule(raw: str) -> List[float]:
    """
    Parse "3,5" into [3.0, 5.0]. Blank input means no retries.

    Raises:
        ValueError: If an entry is not a number or is negative
    """
    schedule: List[float] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        seconds = float(part)
        if seconds < 0:
            raise ValueError(f"retry delay must not be negative: {part}")
        schedule.append(seconds)
    return schedule


def retry_schedule_from_env() -> List[float]:
    """Read PRIMKIT_RETRY_SCHEDULE alone, ignoring the other settings."""
    return parse_retry_schedule(os.getenv("PRIMKIT_RETRY_SCHEDULE", DEFAULT_RETRY_SCHEDULE))


@dataclass
class PrimkitConfig:
    log_level: str = "INFO"
    log_format: str = "json"
    retry_schedule: List[float] = field(default_factory=lambda: parse_retry_schedule(DEFAULT_RETRY_SCHEDULE))

    @staticmethod
    def from_env() -> "PrimkitConfig":
        log_level = os.getenv("PRIMKIT_LOG_LEVEL", "INFO").upper()
        log_format = os.getenv("PRIMKIT_LOG_FORMAT", "json").lower()
        retry_schedule = retry_schedule_from_env()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"PRIMKIT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}: {log_level}")
        if log_format not in _LOG_FORMATS:
            raise ValueError(f"PRIMKIT_LOG_FORMAT must be one of {', '.join(_LOG_FORMATS)}: {log_format}")
        return PrimkitConfig(
            log_level=log_level,
            log_format=log_format,
            retry_schedule=retry_schedule,
        )
