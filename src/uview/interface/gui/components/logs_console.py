from __future__ import annotations

"""
Log Console.

Read-only terminal-like view of the application log, fed from a queue
polled on the Tk thread.
"""

from typing import Any

import customtkinter as ctk

# -----------------------------------------------------------------------------
# LOGS VIEW CLASS
# -----------------------------------------------------------------------------

class LogsFrame(ctk.CTkFrame):
    """Monospaced console showing the records of the current session."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.textbox = ctk.CTkTextbox(self, state="disabled", font=("Consolas", 10))
        self.textbox.grid(row=0, column=0, sticky="nsew")

        self.btn_copy = ctk.CTkButton(self, text="Copy to Clipboard", command=self._copy_logs)
        self.btn_copy.grid(row=1, column=0, pady=10, sticky="e")

    def append_log(self, msg: str) -> None:
        """Append one formatted record while keeping the buffer read-only."""
        self.textbox.configure(state="normal")
        self.textbox.insert("end", msg + "\n")
        self.textbox.see("end")
        self.textbox.configure(state="disabled")

    def _copy_logs(self) -> None:
        self.clipboard_clear()
        self.clipboard_append(self.textbox.get("1.0", "end"))
