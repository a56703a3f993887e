from __future__ import annotations

"""
Display Formatting Helpers.
"""


def format_size(num_bytes: int) -> str:
    """Human readable byte count (B, KB, MB, GB)."""
    size = float(num_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"
