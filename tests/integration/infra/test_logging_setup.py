from __future__ import annotations

"""
Integration tests for the logging infrastructure.

Verifies the QueueListener architecture, idempotent configuration,
file rotation and the GUI console queue bridge.
"""

import logging
import queue
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from uview.infra.logging import HANDLER_TAG_ATTR, LoggingConfig, attach_ui_queue, configure_logging, get_recent_logs
from uview.infra.logging.config import parse_level
from uview.infra.logging.core import CONFIGURED_FLAG_ATTR, QUEUE_LISTENER_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, HANDLER_TAG_ATTR, False) or isinstance(h, QueueHandler):
                root.removeHandler(h)
                h.close()
        if hasattr(root, CONFIGURED_FLAG_ATTR):
            delattr(root, CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def test_configuration_is_idempotent():
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_root_uses_single_tagged_queue_handler():
    configure_logging(LoggingConfig(level="INFO", console=True))
    root = logging.getLogger()

    own = [h for h in root.handlers if getattr(h, HANDLER_TAG_ATTR, False)]
    assert len(own) == 1
    assert isinstance(own[0], QueueHandler)
    assert isinstance(getattr(root, QUEUE_LISTENER_ATTR), QueueListener)


def test_force_rebuilds_handlers():
    configure_logging(LoggingConfig(level="INFO", console=True))
    first_listener = getattr(logging.getLogger(), QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG", console=True), force=True)
    root = logging.getLogger()

    assert getattr(root, QUEUE_LISTENER_ATTR) is not first_listener
    assert root.level == logging.DEBUG
    assert len([h for h in root.handlers if getattr(h, HANDLER_TAG_ATTR, False)]) == 1


def test_file_logging_and_rotation(tmp_path: Path):
    log_file = tmp_path / "logs" / "rotate.log"
    configure_logging(LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    ))
    logger = logging.getLogger("uview.test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Let the QueueListener drain
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "rotate.log.1").exists(), "Rotation backup file was not created."


def test_no_handlers_leaves_root_unconfigured():
    root = configure_logging(LoggingConfig(console=False, log_file=None))
    assert not getattr(root, CONFIGURED_FLAG_ATTR, False)


def test_ui_queue_receives_records():
    configure_logging(LoggingConfig(level="INFO", console=False))
    ui_queue: queue.Queue = queue.Queue()
    handler = attach_ui_queue(ui_queue)
    try:
        logging.getLogger("uview.test_ui").warning("visible in console")
        record = ui_queue.get(timeout=1)
        assert record.getMessage() == "visible in console"
    finally:
        logging.getLogger().removeHandler(handler)


def test_get_recent_logs_tail(tmp_path: Path):
    log_file = tmp_path / "app.log"
    log_file.write_text("".join(f"line {i}\n" for i in range(10)), encoding="utf-8")

    assert get_recent_logs(3, log_path=str(log_file)) == "line 7\nline 8\nline 9\n"
    assert get_recent_logs(3, log_path=str(tmp_path / "none.log")) == "Log file not found."


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    (" WARN ", logging.WARNING),
    ("", logging.INFO),
    (None, logging.INFO),
    ("nonsense", logging.INFO),
])
def test_parse_level(name, expected):
    assert parse_level(name) == expected
