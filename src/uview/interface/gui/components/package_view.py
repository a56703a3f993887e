from __future__ import annotations

"""
Package Tree View.

Displays the package hierarchy in a ttk.Treeview next to a details
panel for the selected entry. The hidden TreeNode root maps to the
Treeview's implicit root item, so only real content is shown.
"""

import base64
import logging
import tkinter as tk
from tkinter import ttk
from typing import Any, Dict, List, Optional

import customtkinter as ctk

from uview.core.analysis.tree_renderer import node_label
from uview.domain.tree_models import ASSET_KIND, TreeEntry, TreeNode
from uview.utils.formatting import format_size

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PACKAGE VIEW CLASS
# -----------------------------------------------------------------------------

class PackageFrame(ctk.CTkFrame):
    """Tree of package entries with a details side panel."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(1, weight=1)

        self._entries: Dict[str, TreeEntry] = {}

        self.lbl_title = ctk.CTkLabel(
            self,
            text="Drop a .unitypackage here or use Open Package...",
            font=ctk.CTkFont(size=14, weight="bold"),
            anchor="w"
        )
        self.lbl_title.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 10))

        # -----------------------------------------------------------------------------
        # COMPONENT: TREE
        # -----------------------------------------------------------------------------
        tree_container = ctk.CTkFrame(self)
        tree_container.grid(row=1, column=0, sticky="nsew", padx=(0, 10))
        tree_container.grid_columnconfigure(0, weight=1)
        tree_container.grid_rowconfigure(0, weight=1)

        self.tree = ttk.Treeview(tree_container, columns=("size",), selectmode="extended")
        self.tree.heading("#0", text="Path", anchor="w")
        self.tree.heading("size", text="Size", anchor="e")
        self.tree.column("size", width=90, anchor="e", stretch=False)
        self.tree.grid(row=0, column=0, sticky="nsew")

        scrollbar = ctk.CTkScrollbar(tree_container, command=self.tree.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        self.tree.configure(yscrollcommand=scrollbar.set)

        # -----------------------------------------------------------------------------
        # COMPONENT: DETAILS
        # -----------------------------------------------------------------------------
        self.details = AssetDetailsFrame(self)
        self.details.grid(row=1, column=1, sticky="nsew")

        self.tree.bind("<<TreeviewSelect>>", self._on_select)

    # -------------------------------------------------------------------------
    # POPULATION
    # -------------------------------------------------------------------------

    def populate(self, root: TreeNode, title: str = "") -> None:
        """
        Replace the displayed hierarchy.

        Args:
            root: Hidden root returned by build_tree().
            title: Heading text, usually the package file name.
        """
        self.clear()
        if title:
            self.lbl_title.configure(text=title)
        self._insert_children("", root)

    def clear(self) -> None:
        self.tree.delete(*self.tree.get_children(""))
        self._entries.clear()
        self.details.show(None)

    def _insert_children(self, parent_id: str, node: TreeNode) -> None:
        for child in node.children:
            entry = child.entry
            if entry is None:
                continue
            size = ""
            if entry.kind == ASSET_KIND and not entry.asset.is_folder:
                size = format_size(entry.asset.size)
            item_id = self.tree.insert(parent_id, "end", text=node_label(child), values=(size,))
            self._entries[item_id] = entry
            self._insert_children(item_id, child)

    # -------------------------------------------------------------------------
    # SELECTION
    # -------------------------------------------------------------------------

    def selected_entries(self) -> List[TreeEntry]:
        return [self._entries[i] for i in self.tree.selection() if i in self._entries]

    def _on_select(self, _event: Any = None) -> None:
        selected = self.selected_entries()
        self.details.show(selected[0] if len(selected) == 1 else None)


# -----------------------------------------------------------------------------
# DETAILS PANEL
# -----------------------------------------------------------------------------

class AssetDetailsFrame(ctk.CTkFrame):
    """Shows GUID, path, size, preview and meta text of one entry."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        self._preview_image: Optional[tk.PhotoImage] = None

        self.lbl_info = ctk.CTkLabel(self, text="", justify="left", anchor="w", wraplength=360)
        self.lbl_info.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))

        self.lbl_preview = tk.Label(self, borderwidth=0)
        self.lbl_preview.grid(row=1, column=0, padx=10, pady=5)

        ctk.CTkLabel(self, text="Meta", anchor="w").grid(row=2, column=0, sticky="ew", padx=10)
        self.txt_meta = ctk.CTkTextbox(self, state="disabled", font=("Consolas", 10))
        self.txt_meta.grid(row=3, column=0, sticky="nsew", padx=10, pady=(0, 10))

    def show(self, entry: Optional[TreeEntry]) -> None:
        """Render the details of an entry, or clear the panel for None."""
        info = ""
        meta = ""
        preview: Optional[bytes] = None

        if entry is not None and entry.kind == ASSET_KIND:
            asset = entry.asset
            kind = "Folder" if asset.is_folder else f"File, {format_size(asset.size)}"
            info = f"{asset.asset_path}\nGUID: {asset.guid}\n{kind}"
            meta = asset.meta_text()
            preview = asset.preview
        elif entry is not None:
            info = f"{entry.path}\nDirectory (no asset of its own)"

        self.lbl_info.configure(text=info)
        self._set_meta(meta)
        self._set_preview(preview)

    def _set_meta(self, text: str) -> None:
        self.txt_meta.configure(state="normal")
        self.txt_meta.delete("1.0", "end")
        self.txt_meta.insert("1.0", text)
        self.txt_meta.configure(state="disabled")

    def _set_preview(self, png: Optional[bytes]) -> None:
        self._preview_image = None
        if png:
            try:
                self._preview_image = tk.PhotoImage(data=base64.b64encode(png).decode("ascii"))
            except tk.TclError as e:
                logger.debug(f"Preview image could not be decoded: {e}")
        self.lbl_preview.configure(image=self._preview_image or "")
