from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle.

Initializes logging and persistent state, assembles the window and its
frames, binds widget events to the AppController and enters the Tk
main loop. Log records are mirrored into the in-app console by polling
a queue from the Tk thread.
"""

import logging
import queue
from typing import List

from tkinterdnd2 import DND_FILES

from uview.domain import config as cfg
from uview.domain import constants as const
from uview.infra.logging import (
    LoggingConfig,
    attach_ui_queue,
    configure_logging,
    get_default_log_path,
)
from uview.interface.gui.components.logs_console import LogsFrame
from uview.interface.gui.components.main_window import create_main_window
from uview.interface.gui.components.package_view import PackageFrame
from uview.interface.gui.components.sidebar import SidebarFrame
from uview.interface.gui.controllers.main_controller import AppController

logger = logging.getLogger(__name__)

LOG_POLL_MS = 100


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """Launch the graphical interface."""
    # -----------------------------------------------------------------------------
    # PHASE 1: DIAGNOSTICS AND STATE
    # -----------------------------------------------------------------------------
    app_state = cfg.load_app_state()
    settings = app_state["app_settings"]

    configure_logging(LoggingConfig(
        level=settings.get("log_level", "INFO"),
        console=True,
        log_file=get_default_log_path(),
    ))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    gui_log_queue: queue.Queue = queue.Queue()
    attach_ui_queue(gui_log_queue)

    # -----------------------------------------------------------------------------
    # PHASE 2: VIEW HIERARCHY
    # -----------------------------------------------------------------------------
    app = create_main_window(settings.get("appearance_mode", "System"))

    def show_frame(name: str) -> None:
        """Switch the visible content frame."""
        package_frame.grid_forget()
        logs_frame.grid_forget()
        sidebar_frame.btn_package.configure(fg_color="transparent")
        sidebar_frame.btn_logs.configure(fg_color="transparent")

        if name == "logs":
            logs_frame.grid(row=0, column=1, sticky="nsew", padx=20, pady=20)
            sidebar_frame.btn_logs.configure(fg_color=("gray75", "gray25"))
        else:
            package_frame.grid(row=0, column=1, sticky="nsew", padx=20, pady=20)
            sidebar_frame.btn_package.configure(fg_color=("gray75", "gray25"))

    sidebar_frame = SidebarFrame(app, nav_callback=show_frame)
    sidebar_frame.grid(row=0, column=0, sticky="nsew")

    package_frame = PackageFrame(app)
    logs_frame = LogsFrame(app)

    show_frame("package")

    # -----------------------------------------------------------------------------
    # PHASE 3: CONTROLLER AND EVENT BINDING
    # -----------------------------------------------------------------------------
    controller = AppController(app, app_state)
    controller.register_views(package_frame, logs_frame, sidebar_frame)

    sidebar_frame.btn_open.configure(command=controller.prompt_open)
    sidebar_frame.btn_save.configure(command=controller.prompt_save_as)
    sidebar_frame.btn_extract.configure(command=controller.prompt_extract)
    sidebar_frame.btn_remove.configure(command=controller.remove_selected)
    sidebar_frame.recent_menu.configure(command=controller.on_recent_selected)
    package_frame.tree.bind("<Delete>", lambda _e: controller.remove_selected())

    def on_drop(event) -> None:
        paths: List[str] = list(app.tk.splitlist(event.data))
        controller.on_files_dropped(paths)

    app.drop_target_register(DND_FILES)
    app.dnd_bind("<<Drop>>", on_drop)

    # -----------------------------------------------------------------------------
    # PHASE 4: BACKGROUND POLLING
    # -----------------------------------------------------------------------------
    log_formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", "%H:%M:%S")

    def poll_log_queue() -> None:
        """Flush queued records into the console frame."""
        while True:
            try:
                record = gui_log_queue.get_nowait()
            except queue.Empty:
                break
            logs_frame.append_log(log_formatter.format(record))
        app.after(LOG_POLL_MS, poll_log_queue)

    # -----------------------------------------------------------------------------
    # PHASE 5: LIFECYCLE
    # -----------------------------------------------------------------------------
    app.protocol("WM_DELETE_WINDOW", controller.on_closing)
    app.after(LOG_POLL_MS, poll_log_queue)
    app.mainloop()


if __name__ == "__main__":
    main()
