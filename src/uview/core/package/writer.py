from __future__ import annotations

"""
Unity Package Archive Writer.

Serializes an asset catalog back into the .unitypackage layout. Output
is written to a temporary sibling file and moved into place once the
archive is complete.
"""

import io
import logging
import os
import stat
import tarfile
import tempfile
import time
from typing import Optional

from uview.core.package.catalog import UnityPackage
from uview.domain.asset_models import UnityAsset
from uview.domain.constants import (
    ASSET_BLOB,
    META_BLOB,
    PATHNAME_BLOB,
    PATHNAME_TERMINATOR,
    PREVIEW_BLOB,
)
from uview.domain.errors import PackageWriteError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def write_unitypackage(package: UnityPackage, dest_path: str, compresslevel: int = 9) -> None:
    """
    Persist every asset of the catalog as a gzip tar archive.

    Args:
        package: Catalog to serialize.
        dest_path: Target .unitypackage path; replaced if it exists.
        compresslevel: gzip compression level (0-9).

    Raises:
        PackageWriteError: If the archive cannot be written.
    """
    dest_path = os.path.abspath(dest_path)
    dest_dir = os.path.dirname(dest_path)
    assets = sorted(package.get_assets().values(), key=lambda a: a.asset_path)
    tmp_path: Optional[str] = None

    try:
        os.makedirs(dest_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".uview-", suffix=".tmp", dir=dest_dir)
        os.close(fd)

        with tarfile.open(tmp_path, "w:gz", compresslevel=compresslevel) as tar:
            mtime = int(time.time())
            for asset in assets:
                _add_asset(tar, asset, mtime)

        # mkstemp creates 0600 files; keep the permissions a plain open() would give
        os.chmod(tmp_path, _target_mode(dest_path))
        os.replace(tmp_path, dest_path)
        tmp_path = None
    except (OSError, tarfile.TarError) as e:
        raise PackageWriteError(f"Failed to write package '{dest_path}': {e}") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)

    logger.info(f"Wrote {len(assets)} assets to {dest_path}")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _target_mode(dest_path: str) -> int:
    """Mode of the file being replaced, or 0666 filtered by the umask."""
    try:
        return stat.S_IMODE(os.stat(dest_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _add_asset(tar: tarfile.TarFile, asset: UnityAsset, mtime: int) -> None:
    """Append the GUID directory and its members for one asset."""
    dir_info = tarfile.TarInfo(f"{asset.guid}/")
    dir_info.type = tarfile.DIRTYPE
    dir_info.mode = 0o755
    dir_info.mtime = mtime
    tar.addfile(dir_info)

    pathname = asset.asset_path + PATHNAME_TERMINATOR
    _add_blob(tar, asset.guid, PATHNAME_BLOB, pathname.encode("utf-8"), mtime)
    for blob_name, payload in (
            (ASSET_BLOB, asset.content),
            (META_BLOB, asset.meta),
            (PREVIEW_BLOB, asset.preview),
    ):
        if payload is not None:
            _add_blob(tar, asset.guid, blob_name, payload, mtime)


def _add_blob(tar: tarfile.TarFile, guid: str, name: str, payload: bytes, mtime: int) -> None:
    info = tarfile.TarInfo(f"{guid}/{name}")
    info.type = tarfile.REGTYPE
    info.mode = 0o644
    info.size = len(payload)
    info.mtime = mtime
    tar.addfile(info, io.BytesIO(payload))
