from __future__ import annotations

"""
Unit tests for the uview entrypoint.

Any command line argument selects the CLI; a bare invocation starts
the GUI with no arguments.
"""

import sys
from unittest.mock import MagicMock

import pytest

from uview import main as entry
from uview.interface.cli import app as cli_app
from uview.interface.gui import app as gui_app


@pytest.fixture(autouse=True)
def keep_excepthook(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_arguments_route_to_cli(monkeypatch):
    cli_main = MagicMock(return_value=2)
    gui_main = MagicMock()
    monkeypatch.setattr(cli_app, "main", cli_main)
    monkeypatch.setattr(gui_app, "main", gui_main)
    monkeypatch.setattr(sys, "argv", ["uview", "demo.unitypackage"])

    assert entry.main() == 2
    cli_main.assert_called_once_with()
    gui_main.assert_not_called()


def test_no_arguments_route_to_gui(monkeypatch):
    cli_main = MagicMock()
    gui_main = MagicMock()
    monkeypatch.setattr(cli_app, "main", cli_main)
    monkeypatch.setattr(gui_app, "main", gui_main)
    monkeypatch.setattr(sys, "argv", ["uview"])

    assert entry.main() == 0
    gui_main.assert_called_once_with()
    cli_main.assert_not_called()
