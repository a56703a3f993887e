from __future__ import annotations

from .config import LoggingConfig
from .core import (
    attach_ui_queue,
    configure_logging,
    get_default_log_path,
    get_logger,
    get_recent_logs,
)
from .handlers import HANDLER_TAG_ATTR

__all__ = [
    "HANDLER_TAG_ATTR",
    "LoggingConfig",
    "attach_ui_queue",
    "configure_logging",
    "get_default_log_path",
    "get_logger",
    "get_recent_logs",
]
