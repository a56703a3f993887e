from __future__ import annotations

"""
Unity Package Asset Catalog.

Authoritative in-memory store for the assets of one package. Keeps a
primary GUID index and a secondary path index behind a single pair of
private update helpers so that both maps always describe the same set
of assets.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from uview.core.package.pathname import sanitize_pathname
from uview.domain.asset_models import UnityAsset
from uview.domain.constants import ASSET_BLOB, META_BLOB, PATHNAME_BLOB, PREVIEW_BLOB

logger = logging.getLogger(__name__)

RawPackageData = Mapping[str, Mapping[str, Optional[bytes]]]

# -----------------------------------------------------------------------------
# CATALOG
# -----------------------------------------------------------------------------

class UnityPackage:
    """
    Container for the assets of a single .unitypackage.

    Not thread-safe; callers confine mutation to one thread (the GUI
    thread in the desktop application).
    """

    def __init__(self, source_path: Optional[str] = None):
        """
        Args:
            source_path: Optional filesystem origin of the package.
        """
        self.source_path = source_path
        self.modified = False
        self._assets_by_guid: Dict[str, UnityAsset] = {}
        self._path_to_guid: Dict[str, str] = {}

    # -------------------------------------------------------------------------
    # BULK OPERATIONS
    # -------------------------------------------------------------------------

    def load_from_raw_data(self, raw_data: RawPackageData) -> None:
        """
        Replace the catalog content with assets built from raw archive data.

        Entries without a usable "pathname" member are skipped silently.

        Args:
            raw_data: Mapping of GUID to a mapping of member name to bytes.
        """
        self.clear()
        skipped = 0

        for guid, files in raw_data.items():
            pathname_bytes = files.get(PATHNAME_BLOB)
            if pathname_bytes is None:
                skipped += 1
                continue

            asset = UnityAsset(
                guid=guid,
                asset_path=sanitize_pathname(pathname_bytes),
                content=files.get(ASSET_BLOB),
                meta=files.get(META_BLOB),
                preview=files.get(PREVIEW_BLOB),
            )
            self._put(asset)

        self.modified = False
        logger.debug(f"Catalog loaded: {len(self._assets_by_guid)} assets, {skipped} entries skipped")

    def clear(self) -> None:
        """Reset the catalog to an empty state."""
        self._assets_by_guid.clear()
        self._path_to_guid.clear()
        self.modified = False

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def get_assets(self) -> Mapping[str, UnityAsset]:
        """Return a read-only live view of the GUID index."""
        return MappingProxyType(self._assets_by_guid)

    def get_asset(self, guid: str) -> Optional[UnityAsset]:
        return self._assets_by_guid.get(guid)

    def get_asset_by_path(self, asset_path: str) -> Optional[UnityAsset]:
        """
        Look up an asset by its exact logical path.

        Args:
            asset_path: Path such as "Assets/Scripts/Player.cs".

        Returns:
            Optional[UnityAsset]: The asset, or None if the path is unknown.
        """
        guid = self._path_to_guid.get(asset_path)
        if guid is None:
            return None
        return self._assets_by_guid.get(guid)

    def paths(self) -> List[str]:
        return sorted(self._path_to_guid)

    def __len__(self) -> int:
        return len(self._assets_by_guid)

    def __contains__(self, guid: object) -> bool:
        return guid in self._assets_by_guid

    # -------------------------------------------------------------------------
    # MUTATIONS
    # -------------------------------------------------------------------------

    def add_asset(self, asset: UnityAsset) -> None:
        """
        Insert or replace an asset keyed by its GUID.

        When the GUID already exists under a different path, the old
        path entry is dropped so it no longer resolves.

        Args:
            asset: The asset to add or update.
        """
        self._put(asset)
        self.modified = True

    def remove_asset_by_path(self, asset_path: str) -> Optional[UnityAsset]:
        """
        Remove the asset stored at the given path.

        Unknown paths are ignored.

        Args:
            asset_path: Logical path of the asset to remove.

        Returns:
            Optional[UnityAsset]: The removed asset, or None.
        """
        guid = self._path_to_guid.get(asset_path)
        if guid is None:
            return None
        removed = self._drop(guid)
        self.modified = True
        return removed

    def mark_saved(self) -> None:
        self.modified = False

    # -------------------------------------------------------------------------
    # INDEX MAINTENANCE
    # -------------------------------------------------------------------------

    def _put(self, asset: UnityAsset) -> None:
        """Write both indices for an asset as one update."""
        previous = self._assets_by_guid.get(asset.guid)
        if previous is not None and previous.asset_path != asset.asset_path:
            if self._path_to_guid.get(previous.asset_path) == asset.guid:
                del self._path_to_guid[previous.asset_path]

        self._assets_by_guid[asset.guid] = asset
        self._path_to_guid[asset.asset_path] = asset.guid

    def _drop(self, guid: str) -> Optional[UnityAsset]:
        """Remove an asset from both indices as one update."""
        asset = self._assets_by_guid.pop(guid, None)
        if asset is not None and self._path_to_guid.get(asset.asset_path) == guid:
            del self._path_to_guid[asset.asset_path]
        return asset

    def __repr__(self) -> str:
        return f"UnityPackage(source={self.source_path!r}, assets={len(self)})"
