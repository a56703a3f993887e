from __future__ import annotations

"""
Unity Asset Data Model.

Immutable record describing one entry of a .unitypackage archive: its
GUID, its logical project path and the optional raw payloads stored
alongside it.
"""

from dataclasses import dataclass, field
from typing import Optional

# -----------------------------------------------------------------------------
# ASSET RECORD
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class UnityAsset:
    """
    A single asset (file or folder marker) inside a Unity package.

    Attributes:
        guid: Identifier of the asset, unique within the package.
        asset_path: Forward-slash logical path (e.g. "Assets/Scripts/Player.cs").
        content: Raw bytes of the "asset" member, None for folders.
        meta: Raw bytes of the "asset.meta" sidecar.
        preview: Raw PNG bytes of the "preview.png" thumbnail.
    """
    guid: str
    asset_path: str
    content: Optional[bytes] = field(default=None, repr=False)
    meta: Optional[bytes] = field(default=None, repr=False)
    preview: Optional[bytes] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        """Last segment of the asset path."""
        return self.asset_path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]

    @property
    def is_folder(self) -> bool:
        """Folder assets carry a meta sidecar but no content payload."""
        return self.content is None

    @property
    def size(self) -> int:
        return len(self.content) if self.content is not None else 0

    @property
    def has_preview(self) -> bool:
        return bool(self.preview)

    def meta_text(self) -> str:
        """Decode the meta sidecar for display, empty when absent."""
        if not self.meta:
            return ""
        return self.meta.decode("utf-8", errors="replace")
