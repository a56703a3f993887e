from __future__ import annotations

"""
Unity Package Archive Reader.

A .unitypackage is a gzip-compressed tar archive with one directory per
asset, named by the asset GUID:

    <guid>/pathname     - logical asset path (text)
    <guid>/asset        - file content (absent for folders)
    <guid>/asset.meta   - Unity metadata sidecar
    <guid>/preview.png  - optional thumbnail

This module turns such an archive into the raw mapping consumed by the
asset catalog.
"""

import logging
import os
import tarfile
from pathlib import PurePosixPath
from typing import Dict, Optional

from uview.core.package.catalog import UnityPackage
from uview.domain.constants import KNOWN_BLOBS
from uview.domain.errors import PackageReadError

logger = logging.getLogger(__name__)

RawData = Dict[str, Dict[str, Optional[bytes]]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_unitypackage(package_path: str) -> RawData:
    """
    Read every known member of a package archive into memory.

    Args:
        package_path: Filesystem path of the .unitypackage file.

    Returns:
        RawData: Mapping of GUID to {member name: bytes}.

    Raises:
        PackageReadError: If the file is missing or is not a tar archive.
    """
    if not os.path.isfile(package_path):
        raise PackageReadError(f"Package not found: {package_path}")

    try:
        with tarfile.open(package_path, "r:*") as tar:
            raw_data = _parse_members(tar)
    except (tarfile.TarError, EOFError, OSError) as e:
        raise PackageReadError(f"Unreadable package '{package_path}': {e}") from e

    logger.info(f"Read {len(raw_data)} GUID entries from {package_path}")
    return raw_data


def load_package(package_path: str) -> UnityPackage:
    """
    Read an archive and build its asset catalog in one step.

    Args:
        package_path: Filesystem path of the .unitypackage file.

    Returns:
        UnityPackage: Catalog populated from the archive.
    """
    package = UnityPackage(source_path=os.path.abspath(package_path))
    package.load_from_raw_data(read_unitypackage(package_path))
    logger.info(f"Loaded package with {len(package)} assets")
    return package

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _parse_members(tar: tarfile.TarFile) -> RawData:
    """Group regular-file members by their GUID directory."""
    raw_data: RawData = {}

    for member in tar:
        if not member.isfile():
            continue

        parts = [p for p in PurePosixPath(member.name).parts if p not in (".", "/")]
        if len(parts) != 2:
            logger.debug(f"Skipping unexpected member: {member.name}")
            continue

        guid, blob_name = parts
        if blob_name not in KNOWN_BLOBS:
            logger.debug(f"Skipping unknown member '{blob_name}' for {guid}")
            continue

        extracted = tar.extractfile(member)
        if extracted is None:
            continue
        with extracted:
            raw_data.setdefault(guid, {})[blob_name] = extracted.read()

    return raw_data
