from __future__ import annotations

"""
Logging Configuration Model.

Immutable description of how the logging subsystem should be set up,
plus the mapping from textual level names to logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for configure_logging().

    Attributes:
        level: Minimum severity to capture ("DEBUG", "INFO", ...).
        console: Emit records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold before the file rolls over.
        backup_count: Number of rolled files to keep.
        console_fmt: Format string for stderr output.
        file_fmt: Format string for file output.
        datefmt: Timestamp format for file output.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def parse_level(level: Optional[str]) -> int:
    """Convert a level name to its numeric constant, defaulting to INFO."""
    if not level:
        return logging.INFO
    return LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)
