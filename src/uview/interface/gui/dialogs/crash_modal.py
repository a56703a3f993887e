from __future__ import annotations

"""
Crash Reporting Modal.

Displays an unhandled error with its traceback and the tail of the log
file so the user can copy the details into a bug report.
"""

import logging
from typing import Optional

import customtkinter as ctk

from uview.domain import constants as const
from uview.infra.logging import get_recent_logs

logger = logging.getLogger(__name__)


def show_crash_modal(error_msg: str, stack_trace: str, parent: Optional[ctk.CTk] = None) -> None:
    """
    Display critical error details in a modal window.

    Creates a hidden root when called before the main window exists.
    """
    is_root_created = False
    if parent is None:
        parent = ctk.CTk()
        parent.withdraw()
        is_root_created = True

    toplevel = ctk.CTkToplevel(parent)
    toplevel.title(f"{const.APP_NAME} - Fatal Error")
    toplevel.geometry("700x550")
    toplevel.grab_set()

    ctk.CTkLabel(
        toplevel,
        text="Unexpected Error",
        font=ctk.CTkFont(size=18, weight="bold"),
        text_color="#E04F5F"
    ).pack(pady=(20, 10))

    details = f"Error: {error_msg}\n\n{stack_trace}\n--- Recent log ---\n{get_recent_logs(50)}"

    textbox = ctk.CTkTextbox(toplevel, font=("Consolas", 10))
    textbox.insert("1.0", details)
    textbox.configure(state="disabled")
    textbox.pack(fill="both", expand=True, padx=20, pady=10)

    def _close() -> None:
        if is_root_created:
            parent.destroy()
        else:
            toplevel.destroy()

    def _copy() -> None:
        parent.clipboard_clear()
        parent.clipboard_append(details)

    btn_frame = ctk.CTkFrame(toplevel, fg_color="transparent")
    btn_frame.pack(fill="x", padx=20, pady=20)

    ctk.CTkButton(btn_frame, text="Copy Details", command=_copy).pack(side="left", padx=5)
    ctk.CTkButton(btn_frame, text="Close", fg_color="gray", command=_close).pack(side="right", padx=5)

    toplevel.protocol("WM_DELETE_WINDOW", _close)

    if is_root_created:
        parent.mainloop()
    else:
        parent.wait_window(toplevel)
