from __future__ import annotations

"""
Main Application Controller.

Bridges the views and the package model. Owns the currently open
UnityPackage, rebuilds the tree after every change, and runs archive
I/O on worker threads whose results are marshalled back to the Tk
thread before the catalog is touched.
"""

import logging
import os
import threading
import tkinter.messagebox as mb
from tkinter import filedialog
from typing import Any, Callable, Dict, Iterable, List, Optional

import customtkinter as ctk

from uview.core.analysis.tree_builder import build_tree, normalize_asset_path
from uview.core.package.catalog import UnityPackage
from uview.core.package.extractor import ExtractionReport
from uview.domain import config as cfg
from uview.domain.asset_models import UnityAsset
from uview.domain.constants import PACKAGE_EXTENSION
from uview.domain.tree_models import TreeEntry
from uview.infra.fs import is_package_file
from uview.interface.gui import threads
from uview.interface.gui.components.main_window import set_window_title

logger = logging.getLogger(__name__)

PACKAGE_FILETYPES = [("Unity Package", f"*{PACKAGE_EXTENSION}"), ("All files", "*.*")]

# ==============================================================================
# PRIMARY APPLICATION CONTROLLER
# ==============================================================================

class AppController:
    """
    Central controller between the UI frames and the package catalog.

    All catalog mutations happen on the Tk thread; worker threads only
    read a package or produce a new one.
    """

    def __init__(self, app: ctk.CTk, app_state: Dict[str, Any]):
        """
        Args:
            app: Root CustomTkinter application instance.
            app_state: Persistent application state (recent files, settings).
        """
        self.app = app
        self.app_state = app_state
        self.package: Optional[UnityPackage] = None
        self.busy = False

        self.package_view: Any = None
        self.logs_view: Any = None
        self.sidebar_view: Any = None

    # -------------------------------------------------------------------------
    # VIEW REGISTRATION
    # -------------------------------------------------------------------------

    def register_views(self, package_view: Any, logs: Any, sidebar: Any) -> None:
        self.package_view = package_view
        self.logs_view = logs
        self.sidebar_view = sidebar
        self.sidebar_view.set_recent_files(self.app_state.get("recent_files", []))

    # -------------------------------------------------------------------------
    # OPEN
    # -------------------------------------------------------------------------

    def prompt_open(self) -> None:
        """Ask for a package file and open it."""
        path = filedialog.askopenfilename(
            parent=self.app,
            title="Open Unity Package",
            initialdir=self.app_state.get("last_directory") or None,
            filetypes=PACKAGE_FILETYPES,
        )
        if path:
            self.open_package(path)

    def open_package(self, path: str) -> bool:
        """
        Start loading a package in the background.

        Returns:
            bool: False when the request was rejected (busy or unsaved changes kept).
        """
        if self.busy or not self._confirm_discard():
            return False

        logger.info(f"Opening package: {path}")
        self._set_busy(True)
        self._run_background(threads.load_package_task, path, self._dispatch(self.on_package_loaded))
        return True

    def on_recent_selected(self, choice: str) -> None:
        if os.path.isfile(choice):
            self.open_package(choice)
        elif choice in self.app_state.get("recent_files", []):
            mb.showwarning("Missing File", f"The file no longer exists:\n{choice}")

    def on_files_dropped(self, paths: Iterable[str]) -> None:
        """Open the first dropped .unitypackage file."""
        for path in paths:
            if is_package_file(path):
                self.open_package(path)
                return
        logger.warning("Dropped files contain no .unitypackage")

    def on_package_loaded(self, result: Any) -> None:
        self._set_busy(False)
        if isinstance(result, Exception):
            mb.showerror("Open Failed", f"Could not open the package:\n{result}")
            return

        self.package = result
        if result.source_path:
            self._remember(result.source_path)
        self.refresh_tree()

    # -------------------------------------------------------------------------
    # EDIT
    # -------------------------------------------------------------------------

    def remove_selected(self) -> int:
        """
        Remove the selected entries and everything beneath them.

        Returns:
            int: Number of assets removed.
        """
        if self.package is None or self.busy:
            return 0

        targets = assets_under(self.package, self.package_view.selected_entries())
        if not targets:
            return 0
        if not mb.askyesno("Remove Assets", f"Remove {len(targets)} asset(s) from the package?"):
            return 0

        for asset in targets:
            self.package.remove_asset_by_path(asset.asset_path)
        logger.info(f"Removed {len(targets)} assets")
        self.refresh_tree()
        return len(targets)

    # -------------------------------------------------------------------------
    # SAVE / EXTRACT
    # -------------------------------------------------------------------------

    def prompt_save_as(self) -> None:
        if self.package is None or self.busy:
            return
        initial = os.path.basename(self.package.source_path or f"package{PACKAGE_EXTENSION}")
        path = filedialog.asksaveasfilename(
            parent=self.app,
            title="Save Unity Package",
            initialdir=self.app_state.get("last_directory") or None,
            initialfile=initial,
            defaultextension=PACKAGE_EXTENSION,
            filetypes=PACKAGE_FILETYPES,
        )
        if path:
            self.save_package(path)

    def save_package(self, path: str) -> None:
        if self.package is None or self.busy:
            return
        self._set_busy(True)
        self._run_background(
            threads.save_package_task, self.package, path, self._dispatch(self.on_package_saved)
        )

    def on_package_saved(self, result: Any) -> None:
        self._set_busy(False)
        if isinstance(result, Exception):
            mb.showerror("Save Failed", f"Could not save the package:\n{result}")
            return
        if self.package is not None:
            self.package.source_path = result
            self.package.mark_saved()
            self._remember(result)
            self._update_title()
        mb.showinfo("Package Saved", f"Saved to:\n{result}")

    def prompt_extract(self) -> None:
        if self.package is None or self.busy:
            return
        selected = self.package_view.selected_entries()
        assets = assets_under(self.package, selected) if selected else list(self.package.get_assets().values())
        if not assets:
            return
        out_dir = filedialog.askdirectory(parent=self.app, title="Extract To")
        if out_dir:
            self.extract(assets, out_dir)

    def extract(self, assets: List[UnityAsset], out_dir: str, include_meta: bool = False) -> None:
        self._set_busy(True)
        self._run_background(
            threads.extract_assets_task, assets, out_dir, include_meta, self._dispatch(self.on_extracted)
        )

    def on_extracted(self, result: Any) -> None:
        self._set_busy(False)
        if isinstance(result, Exception):
            mb.showerror("Extraction Failed", str(result))
            return
        report: ExtractionReport = result
        msg = f"{len(report.written)} written, {len(report.skipped)} skipped"
        if report.errors:
            mb.showwarning("Extraction Finished With Errors", msg + "\n\n" + "\n".join(report.errors[:10]))
        else:
            mb.showinfo("Extraction Finished", msg)

    # -------------------------------------------------------------------------
    # VIEW SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def refresh_tree(self) -> None:
        """Rebuild the hierarchy from the catalog and redraw it."""
        if self.package is None:
            self.package_view.clear()
            self.sidebar_view.set_package_actions_enabled(False)
            return

        assets = sorted(self.package.get_assets().values(), key=lambda a: a.asset_path)
        root = build_tree(assets)
        name = os.path.basename(self.package.source_path or "")
        self.package_view.populate(root, title=f"{name} ({len(assets)} assets)")
        self.sidebar_view.set_package_actions_enabled(True)
        self._update_title()

    def on_closing(self) -> None:
        """Persist state and close the window, unless the user cancels."""
        if self.busy or not self._confirm_discard():
            return
        cfg.save_app_state(self.app_state)
        self.app.destroy()

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _confirm_discard(self) -> bool:
        if self.package is None or not self.package.modified:
            return True
        return bool(mb.askyesno("Unsaved Changes", "Discard unsaved changes to the current package?"))

    def _remember(self, path: str) -> None:
        recent = cfg.add_recent_file(self.app_state, path)
        self.sidebar_view.set_recent_files(recent)

    def _update_title(self) -> None:
        if self.package is None:
            set_window_title(self.app)
            return
        set_window_title(
            self.app,
            os.path.basename(self.package.source_path or ""),
            modified=self.package.modified,
        )

    def _set_busy(self, busy: bool) -> None:
        self.busy = busy
        self.app.configure(cursor="watch" if busy else "")

    def _dispatch(self, callback: Callable[[Any], None]) -> Callable[[Any], None]:
        """Wrap a callback so it runs on the Tk thread."""
        return lambda result: self.app.after(0, lambda: callback(result))

    def _run_background(self, target: Callable[..., None], *args: Any) -> None:
        threading.Thread(target=target, args=args, daemon=True).start()


# ==============================================================================
# SELECTION HELPERS
# ==============================================================================

def assets_under(package: UnityPackage, entries: Iterable[TreeEntry]) -> List[UnityAsset]:
    """
    Collect the assets covered by tree entries.

    An entry covers the asset at its own path plus every asset below
    that path, so selecting a folder or synthetic directory selects its
    whole subtree.

    Args:
        package: Catalog to search.
        entries: Selected tree entries.

    Returns:
        List[UnityAsset]: Matching assets ordered by path, without duplicates.
    """
    prefixes = {normalize_asset_path(entry.path) for entry in entries}
    if not prefixes:
        return []

    matched: Dict[str, UnityAsset] = {}
    for asset in package.get_assets().values():
        path = normalize_asset_path(asset.asset_path)
        for prefix in prefixes:
            if path == prefix or path.startswith(prefix + "/"):
                matched[asset.guid] = asset
                break
    return sorted(matched.values(), key=lambda a: a.asset_path)
