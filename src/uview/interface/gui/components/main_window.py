from __future__ import annotations

"""
Main Application Window Factory.

Initializes the root CustomTkinter window with TkinterDnD2 support so
that .unitypackage files can be dropped onto it, applies the theme and
lays out the sidebar and content grid.
"""

from typing import Any

import customtkinter as ctk
from tkinterdnd2 import TkinterDnD

from uview.domain import constants as const

# -----------------------------------------------------------------------------
# ROOT WINDOW CONSTRUCTION
# -----------------------------------------------------------------------------

class CtkDnDWrapper(ctk.CTk, TkinterDnD.DnDWrapper):
    """CustomTkinter root window that accepts drag & drop events."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.TkdndVersion = TkinterDnD._require(self)


def create_main_window(appearance_mode: str = "System") -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        appearance_mode: "System", "Light" or "Dark".

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(appearance_mode)
    ctk.set_default_color_theme("blue")

    app = CtkDnDWrapper()

    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("1100x700")

    # Column 0: sidebar, Column 1: content
    app.grid_columnconfigure(1, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app


def set_window_title(app: ctk.CTk, package_name: str = "", modified: bool = False) -> None:
    """Reflect the open package and its unsaved state in the title bar."""
    title = f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}"
    if package_name:
        title = f"{'*' if modified else ''}{package_name} - {title}"
    app.title(title)
