from __future__ import annotations

"""
Package Tree Builder.

Converts the flat, path-keyed asset collection of a package into a
hierarchy of TreeNode objects. Directories that have no asset of their
own are created on demand as synthetic DirectoryEntry nodes.
"""

import logging
from typing import Dict, Iterable, Optional

from uview.domain.asset_models import UnityAsset
from uview.domain.tree_models import AssetEntry, DirectoryEntry, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(assets: Optional[Iterable[UnityAsset]]) -> TreeNode:
    """
    Build the display hierarchy for a collection of assets.

    Children are appended in iteration order. When an asset's path is
    already occupied (for instance by a directory created for an earlier
    asset's ancestors), the existing node keeps the slot and the asset
    gets no node of its own.

    Args:
        assets: Assets to arrange; None or empty yields an empty root.

    Returns:
        TreeNode: Hidden root whose children are the top-level entries.
    """
    root = TreeNode()
    if not assets:
        return root

    node_map: Dict[str, TreeNode] = {"": root}
    shadowed = 0

    for asset in assets:
        path = normalize_asset_path(asset.asset_path)
        parent = _get_or_create_dir(node_map, parent_path(path))

        if path in node_map:
            shadowed += 1
            continue

        node_map[path] = parent.add_child(TreeNode(entry=AssetEntry(asset)))

    if shadowed:
        logger.debug(f"Tree build: {shadowed} assets shared a path with an existing node")
    return root


def normalize_asset_path(path: str) -> str:
    """Use forward slashes and drop a single trailing slash."""
    path = path.replace("\\", "/")
    if path.endswith("/"):
        path = path[:-1]
    return path


def parent_path(path: str) -> str:
    """
    Everything before the last '/', or "" for top-level entries.

    A leading slash does not produce a separate "/" level: "/Assets"
    is a top-level entry.
    """
    if "/" not in path:
        return ""
    return path.rsplit("/", 1)[0]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _get_or_create_dir(node_map: Dict[str, TreeNode], path: str) -> TreeNode:
    """Resolve a directory node, creating it and its missing ancestors."""
    existing = node_map.get(path)
    if existing is not None:
        return existing

    parent = _get_or_create_dir(node_map, parent_path(path))
    node = parent.add_child(TreeNode(entry=DirectoryEntry(path + "/")))
    node_map[path] = node
    return node
