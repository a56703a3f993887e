from __future__ import annotations

"""
Logging Core.

Configures the root logger once per process. All output handlers sit
behind a QueueHandler/QueueListener pair so that file writes happen on
the listener thread and never stall the Tk event loop.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from uview.infra.fs import get_user_data_dir
from uview.infra.logging.config import LoggingConfig, parse_level
from uview.infra.logging.handlers import (
    create_console_handler,
    create_rotating_file_handler,
    is_own_handler,
    tag_handler,
)

CONFIGURED_FLAG_ATTR: str = "_uview_configured"
QUEUE_LISTENER_ATTR: str = "_uview_queue_listener"

DEFAULT_LOG_FILE = "uview.log"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = DEFAULT_LOG_FILE) -> str:
    """Location of the persistent log inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger. Repeated calls are no-ops unless forced.

    Args:
        cfg: Logging settings.
        force: Tear down previously installed handlers and rebuild them.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_own_handlers(root)
    _stop_existing_listener(root)

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers.append(fh)

    if not handlers:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def attach_ui_queue(ui_queue: queue.Queue, level: int = logging.INFO) -> QueueHandler:
    """
    Mirror root records into a queue polled by the GUI log console.

    Args:
        ui_queue: Queue drained on the Tk thread.
        level: Minimum level forwarded to the console.

    Returns:
        QueueHandler: The installed handler.
    """
    handler = QueueHandler(ui_queue)
    handler.setLevel(level)
    logging.getLogger().addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_recent_logs(n_lines: int = 100, log_path: Optional[str] = None) -> str:
    """
    Return the last lines of the persistent log file.

    Args:
        n_lines: Maximum number of lines to return.
        log_path: Log file to read, defaults to the standard location.

    Returns:
        str: Log tail, or a short notice when the file is unavailable.
    """
    log_path = log_path or get_default_log_path()
    if not os.path.exists(log_path):
        return "Log file not found."

    try:
        with open(log_path, "r", encoding="utf-8", errors="replace") as f:
            return "".join(f.readlines()[-n_lines:])
    except OSError as e:
        return f"Error retrieving logs: {e}"

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_own_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if is_own_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
