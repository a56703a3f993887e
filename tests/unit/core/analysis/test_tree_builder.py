from __future__ import annotations

"""
Unit tests for the package tree builder.

Verifies hierarchy construction from flat asset paths, synthetic
directory creation, path normalization and the first-writer-wins
collision policy.
"""

from uview.core.analysis.tree_builder import build_tree, normalize_asset_path, parent_path
from uview.domain.asset_models import UnityAsset
from uview.domain.tree_models import ASSET_KIND, DIRECTORY_KIND, AssetEntry, DirectoryEntry


def _asset(guid: str, path: str, content: bytes = b"x") -> UnityAsset:
    return UnityAsset(guid=guid, asset_path=path, content=content)


# -----------------------------------------------------------------------------
# Empty input
# -----------------------------------------------------------------------------

def test_empty_collection_yields_empty_root():
    root = build_tree([])
    assert root.is_root
    assert root.children == []


def test_none_yields_empty_root():
    root = build_tree(None)
    assert root.entry is None
    assert root.children == []


# -----------------------------------------------------------------------------
# Hierarchy construction
# -----------------------------------------------------------------------------

def test_single_nested_asset_creates_directory_chain():
    player = _asset("g1", "Assets/Scripts/Player.cs")
    root = build_tree([player])

    assert len(root.children) == 1
    assets_dir = root.children[0]
    assert assets_dir.entry == DirectoryEntry("Assets/")
    assert assets_dir.entry.kind == DIRECTORY_KIND

    scripts_dir = assets_dir.children[0]
    assert scripts_dir.entry == DirectoryEntry("Assets/Scripts/")

    leaf = scripts_dir.children[0]
    assert leaf.entry.kind == ASSET_KIND
    assert leaf.entry.asset is player
    assert leaf.children == []
    assert leaf.parent is scripts_dir
    assert scripts_dir.parent is assets_dir
    assert assets_dir.parent is root


def test_directory_paths_end_with_single_slash():
    root = build_tree([_asset("g1", "Assets/A/B/C/file.txt")])
    dirs = [n.entry.path for n in root.walk() if n.entry.kind == DIRECTORY_KIND]

    assert dirs == ["Assets/", "Assets/A/", "Assets/A/B/", "Assets/A/B/C/"]
    assert all(p.endswith("/") and not p.endswith("//") for p in dirs)


def test_siblings_share_directory_nodes():
    root = build_tree([
        _asset("g1", "Assets/Scripts/Player.cs"),
        _asset("g2", "Assets/Scripts/Enemy.cs"),
        _asset("g3", "Assets/Textures/Ground.png"),
    ])

    assert len(root.children) == 1
    assets_dir = root.children[0]
    assert [c.entry.path for c in assets_dir.children] == ["Assets/Scripts/", "Assets/Textures/"]
    scripts = assets_dir.children[0]
    assert [c.entry.asset.guid for c in scripts.children] == ["g1", "g2"]


def test_children_follow_processing_order_not_sorted():
    root = build_tree([_asset("z", "Zeta.cs"), _asset("a", "Alpha.cs")])
    assert [c.entry.asset.guid for c in root.children] == ["z", "a"]


def test_top_level_asset_attaches_to_root():
    root = build_tree([_asset("g1", "README.md")])
    assert isinstance(root.children[0].entry, AssetEntry)
    assert root.children[0].parent is root


def test_folder_asset_before_children_is_asset_entry():
    folder = UnityAsset("f1", "Assets/Scripts", meta=b"folderAsset: yes")
    root = build_tree([
        UnityAsset("a1", "Assets", meta=b"folderAsset: yes"),
        folder,
        _asset("g1", "Assets/Scripts/Player.cs"),
    ])

    assets_node = root.children[0]
    assert assets_node.entry.kind == ASSET_KIND
    scripts_node = assets_node.children[0]
    assert scripts_node.entry.asset is folder
    assert scripts_node.children[0].entry.asset.guid == "g1"


def test_every_node_reachable_once():
    assets = [
        _asset("g1", "Assets/Scripts/Player.cs"),
        _asset("g2", "Assets/Scripts/AI/Brain.cs"),
        _asset("g3", "Packages/com.example/package.json"),
    ]
    root = build_tree(assets)
    nodes = list(root.walk())

    assert len(nodes) == len(set(map(id, nodes)))
    guids = {n.entry.asset.guid for n in nodes if n.entry.kind == ASSET_KIND}
    assert guids == {"g1", "g2", "g3"}


# -----------------------------------------------------------------------------
# Normalization
# -----------------------------------------------------------------------------

def test_backslashes_and_trailing_slash_are_normalized():
    root = build_tree([
        _asset("g1", "Assets\\Scripts\\Player.cs"),
        UnityAsset("f1", "Assets/Data/"),
    ])

    assets_dir = root.children[0]
    assert [c.entry.path for c in assets_dir.children][0] == "Assets/Scripts/"
    data_node = assets_dir.children[1]
    assert data_node.entry.kind == ASSET_KIND
    assert data_node.entry.asset.guid == "f1"


def test_normalize_asset_path_helpers():
    assert normalize_asset_path("A\\B\\c.cs") == "A/B/c.cs"
    assert normalize_asset_path("A/B/") == "A/B"
    assert normalize_asset_path("A/B//") == "A/B/"
    assert parent_path("A/B/c.cs") == "A/B"
    assert parent_path("c.cs") == ""
    assert parent_path("/Assets") == ""


def test_leading_slash_hangs_first_segment_off_root():
    root = build_tree([_asset("g1", "/Assets/A.cs")])

    assert len(root.children) == 1
    top = root.children[0]
    assert top.entry == DirectoryEntry("/Assets/")
    assert top.parent is root
    assert [c.entry.path for c in top.children] == ["/Assets/A.cs"]


# -----------------------------------------------------------------------------
# Collision policy (first writer wins)
# -----------------------------------------------------------------------------

def test_asset_first_keeps_slot_and_adopts_children():
    """Asset 'Assets/A' processed before 'Assets/A/B.cs' becomes the parent."""
    a = _asset("ga", "Assets/A")
    b = _asset("gb", "Assets/A/B.cs")
    root = build_tree([a, b])

    a_node = root.children[0].children[0]
    assert a_node.entry.kind == ASSET_KIND
    assert a_node.entry.asset is a
    assert a_node.children[0].entry.asset is b


def test_directory_first_shadows_later_asset():
    """A synthetic 'Assets/A/' created for 'Assets/A/B.cs' keeps the slot."""
    a = _asset("ga", "Assets/A")
    b = _asset("gb", "Assets/A/B.cs")
    root = build_tree([b, a])

    assets_dir = root.children[0]
    assert len(assets_dir.children) == 1
    a_node = assets_dir.children[0]
    assert a_node.entry == DirectoryEntry("Assets/A/")
    assert a_node.children[0].entry.asset is b

    shown = {n.entry.asset.guid for n in root.walk() if n.entry.kind == ASSET_KIND}
    assert shown == {"gb"}


def test_duplicate_path_keeps_first_asset():
    first = _asset("g1", "Assets/Dup.cs")
    second = _asset("g2", "Assets/Dup.cs")
    root = build_tree([first, second])

    assets_dir = root.children[0]
    assert len(assets_dir.children) == 1
    assert assets_dir.children[0].entry.asset is first


def test_rebuild_returns_fresh_tree():
    assets = [_asset("g1", "Assets/A.cs")]
    first = build_tree(assets)
    second = build_tree(assets)

    assert first is not second
    assert first.children[0] is not second.children[0]
