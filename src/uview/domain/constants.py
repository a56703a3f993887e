from __future__ import annotations

"""
Domain Constants.

Centralizes application identity, versioning and the member names that
make up a single asset inside a .unitypackage archive.
"""

from typing import Tuple

APP_NAME = "UView"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# ARCHIVE LAYOUT
# -----------------------------------------------------------------------------

PATHNAME_BLOB = "pathname"
ASSET_BLOB = "asset"
META_BLOB = "asset.meta"
PREVIEW_BLOB = "preview.png"

KNOWN_BLOBS: Tuple[str, ...] = (PATHNAME_BLOB, ASSET_BLOB, META_BLOB, PREVIEW_BLOB)

PACKAGE_EXTENSION = ".unitypackage"

# Some packaging tools append a literal "00" after the pathname
SPURIOUS_PATH_SUFFIX = "00"

# Written after every pathname so sanitizing restores the exact path
PATHNAME_TERMINATOR = "\n" + SPURIOUS_PATH_SUFFIX

# -----------------------------------------------------------------------------
# USER SETTINGS
# -----------------------------------------------------------------------------

DEFAULT_MAX_RECENT_FILES = 10
APPEARANCE_MODES: Tuple[str, ...] = ("System", "Light", "Dark")
