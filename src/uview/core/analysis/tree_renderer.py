from __future__ import annotations

"""
Tree Renderer.

Converts a package TreeNode hierarchy into ASCII lines for terminal
output, using the same connectors as the `tree` utility.
"""

from typing import List

from uview.domain.tree_models import ASSET_KIND, DIRECTORY_KIND, TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        node: TreeNode,
        lines: List[str],
        prefix: str = "",
        show_guids: bool = False,
) -> None:
    """
    Recursively append the rendered children of a node to lines.

    Args:
        node: Node whose children are rendered (usually the hidden root).
        lines: Accumulator for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_guids: Append the GUID of asset-backed entries.
    """
    total = len(node.children)

    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{node_label(child, show_guids)}")

        if child.children:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree(child, lines, prefix=new_prefix, show_guids=show_guids)


def node_label(node: TreeNode, show_guids: bool = False) -> str:
    """Display text for a single node."""
    entry = node.entry
    if entry is None:
        return ""

    if entry.kind == DIRECTORY_KIND:
        return entry.label + "/"

    # Scenario: asset-backed entry (file or folder asset)
    label = entry.label
    if entry.kind == ASSET_KIND and entry.asset.is_folder:
        label += "/"
    if show_guids:
        label += f"  [{entry.asset.guid}]"
    return label
