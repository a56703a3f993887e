from __future__ import annotations

"""
Package Tree Data Models.

Defines the tagged union of entries shown in the package tree and the
mutable node type that links them into a hierarchy. Consumers dispatch on
``entry.kind`` rather than on class identity.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Optional, Union

from uview.domain.asset_models import UnityAsset

ASSET_KIND = "asset"
DIRECTORY_KIND = "directory"

# -----------------------------------------------------------------------------
# ENTRY VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetEntry:
    """
    Tree entry backed by a real package asset (file or folder).

    Attributes:
        asset: The wrapped UnityAsset.
    """
    asset: UnityAsset
    kind: Literal["asset"] = field(default=ASSET_KIND, init=False)

    @property
    def path(self) -> str:
        return self.asset.asset_path

    @property
    def label(self) -> str:
        return self.asset.name


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Synthetic tree entry for a path segment with no asset of its own.

    Attributes:
        path: Normalized directory path, always ending with a single '/'.
    """
    path: str
    kind: Literal["directory"] = field(default=DIRECTORY_KIND, init=False)

    @property
    def label(self) -> str:
        return self.path.rstrip("/").rsplit("/", 1)[-1]


TreeEntry = Union[AssetEntry, DirectoryEntry]

# -----------------------------------------------------------------------------
# STRUCTURAL NODE
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode:
    """
    Node of the package hierarchy.

    The root node carries no entry and is never displayed; every other
    node has exactly one parent.
    """
    entry: Optional[TreeEntry] = None
    children: List["TreeNode"] = field(default_factory=list)
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return self.entry is None

    def add_child(self, child: "TreeNode") -> "TreeNode":
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator["TreeNode"]:
        """Depth-first pre-order traversal, root excluded."""
        for child in self.children:
            yield child
            yield from child.walk()

    def __repr__(self) -> str:
        return f"TreeNode(entry={self.entry!r}, children={len(self.children)})"
