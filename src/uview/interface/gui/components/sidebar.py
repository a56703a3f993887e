from __future__ import annotations

"""
Sidebar Navigation Component.

Persistent left panel holding the package actions (open, save, extract,
remove), the recent files selector and navigation between the package
view and the log console.
"""

from typing import Any, List

import customtkinter as ctk

from uview.domain import constants as const

NO_RECENT_LABEL = "(no recent files)"

# -----------------------------------------------------------------------------
# SIDEBAR VIEW CLASS
# -----------------------------------------------------------------------------

class SidebarFrame(ctk.CTkFrame):
    """Action and navigation sidebar."""

    def __init__(self, master: Any, nav_callback: Any, **kwargs: Any):
        """
        Args:
            master: Parent window container.
            nav_callback: Called with "package" or "logs" to switch views.
        """
        super().__init__(master, width=200, corner_radius=0, **kwargs)

        self.nav_callback = nav_callback

        # -----------------------------------------------------------------------------
        # COMPONENT: BRANDING AND VERSIONING
        # -----------------------------------------------------------------------------
        self.logo_label = ctk.CTkLabel(
            self,
            text=const.APP_NAME,
            font=ctk.CTkFont(size=20, weight="bold")
        )
        self.logo_label.grid(row=0, column=0, padx=20, pady=(20, 0))

        self.version_label = ctk.CTkLabel(
            self,
            text=f"v{const.CURRENT_CONFIG_VERSION}",
            font=ctk.CTkFont(size=10),
            text_color="gray"
        )
        self.version_label.grid(row=1, column=0, padx=20, pady=(0, 20))

        # -----------------------------------------------------------------------------
        # COMPONENT: PACKAGE ACTIONS
        # -----------------------------------------------------------------------------
        self.btn_open = ctk.CTkButton(self, text="Open Package...")
        self.btn_open.grid(row=2, column=0, padx=20, pady=(0, 10))

        self.btn_save = ctk.CTkButton(self, text="Save As...", state="disabled")
        self.btn_save.grid(row=3, column=0, padx=20, pady=10)

        self.btn_extract = ctk.CTkButton(self, text="Extract Selected...", state="disabled")
        self.btn_extract.grid(row=4, column=0, padx=20, pady=10)

        self.btn_remove = ctk.CTkButton(
            self,
            text="Remove Selected",
            fg_color="#E04F5F",
            hover_color="#A03541",
            state="disabled"
        )
        self.btn_remove.grid(row=5, column=0, padx=20, pady=10)

        self.recent_menu = ctk.CTkOptionMenu(self, values=[NO_RECENT_LABEL], dynamic_resizing=False)
        self.recent_menu.set("Recent files")
        self.recent_menu.grid(row=6, column=0, padx=20, pady=10)

        # Push navigation to the bottom
        self.grid_rowconfigure(7, weight=1)

        # -----------------------------------------------------------------------------
        # COMPONENT: NAVIGATION ROUTING
        # -----------------------------------------------------------------------------
        self.btn_package = ctk.CTkButton(
            self,
            text="Package",
            command=lambda: self.nav_callback("package"),
            fg_color="transparent",
            border_width=2,
            text_color=("gray10", "#DCE4EE")
        )
        self.btn_package.grid(row=8, column=0, padx=20, pady=10)

        self.btn_logs = ctk.CTkButton(
            self,
            text="Logs",
            command=lambda: self.nav_callback("logs"),
            fg_color="transparent",
            border_width=2,
            text_color=("gray10", "#DCE4EE")
        )
        self.btn_logs.grid(row=9, column=0, padx=20, pady=(10, 20))

    def set_package_actions_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        for btn in (self.btn_save, self.btn_extract, self.btn_remove):
            btn.configure(state=state)

    def set_recent_files(self, paths: List[str]) -> None:
        self.recent_menu.configure(values=paths or [NO_RECENT_LABEL])
        self.recent_menu.set("Recent files")
