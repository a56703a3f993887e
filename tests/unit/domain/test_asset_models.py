from __future__ import annotations

"""
Unit tests for the domain models.

Verifies:
1. Immutability of UnityAsset and entry records.
2. Derived properties used by the views.
3. Tag values of the tree entry variants.
"""

import dataclasses

import pytest

from uview.domain.asset_models import UnityAsset
from uview.domain.tree_models import ASSET_KIND, DIRECTORY_KIND, AssetEntry, DirectoryEntry, TreeNode
from uview.utils.formatting import format_size


def test_unity_asset_is_frozen():
    asset = UnityAsset("g1", "Assets/A.cs")
    with pytest.raises(dataclasses.FrozenInstanceError):
        asset.asset_path = "Assets/B.cs"  # type: ignore[misc]


def test_unity_asset_derived_properties():
    asset = UnityAsset("g1", "Assets/Scripts/Player.cs", content=b"12345", preview=b"png")
    assert asset.name == "Player.cs"
    assert asset.is_folder is False
    assert asset.size == 5
    assert asset.has_preview is True


def test_folder_asset_properties():
    folder = UnityAsset("g2", "Assets/Scripts/", meta=b"folderAsset: yes\n")
    assert folder.name == "Scripts"
    assert folder.is_folder is True
    assert folder.size == 0
    assert folder.has_preview is False
    assert folder.meta_text() == "folderAsset: yes\n"


def test_meta_text_empty_without_meta():
    assert UnityAsset("g1", "A").meta_text() == ""


def test_repr_hides_payloads():
    text = repr(UnityAsset("g1", "Assets/A.cs", content=b"secret-bytes"))
    assert "secret-bytes" not in text
    assert "Assets/A.cs" in text


def test_entry_variants_carry_kind_tag():
    asset_entry = AssetEntry(UnityAsset("g1", "Assets/A.cs"))
    dir_entry = DirectoryEntry("Assets/Scripts/")

    assert asset_entry.kind == ASSET_KIND
    assert dir_entry.kind == DIRECTORY_KIND
    assert asset_entry.path == "Assets/A.cs"
    assert asset_entry.label == "A.cs"
    assert dir_entry.label == "Scripts"


def test_tree_node_add_child_sets_parent():
    root = TreeNode()
    child = root.add_child(TreeNode(entry=DirectoryEntry("Assets/")))

    assert child.parent is root
    assert root.children == [child]
    assert list(root.walk()) == [child]


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 B"),
    (512, "512 B"),
    (2048, "2.0 KB"),
    (5 * 1024 * 1024, "5.0 MB"),
    (3 * 1024 ** 3, "3.0 GB"),
])
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected
