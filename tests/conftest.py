from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for raw package data and on-disk sample packages.
"""

import io
import os
import sys
import tarfile
from typing import Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def raw_package_data() -> Dict[str, Dict[str, Optional[bytes]]]:
    """
    Return raw archive data as produced by the package reader.

    Contains a folder asset, two scripts (one with a noisy pathname),
    a texture with a preview and an entry without a pathname.
    """
    return {
        "a1000000000000000000000000000001": {
            "pathname": b"Assets/Scripts",
            "asset.meta": b"fileFormatVersion: 2\nguid: a1000000000000000000000000000001\nfolderAsset: yes\n",
        },
        "b2000000000000000000000000000002": {
            "pathname": b"Assets/Scripts/Player.cs",
            "asset": b"public class Player {}",
            "asset.meta": b"fileFormatVersion: 2\nguid: b2000000000000000000000000000002\n",
        },
        "c3000000000000000000000000000003": {
            "pathname": b"Assets/Scripts/Enemy.cs\n00",
            "asset": b"public class Enemy {}",
        },
        "d4000000000000000000000000000004": {
            "pathname": b"Assets/Textures/Ground.png",
            "asset": b"\x89PNG fake",
            "asset.meta": b"guid: d4000000000000000000000000000004\n",
            "preview.png": b"\x89PNG preview",
        },
        "e5000000000000000000000000000005": {
            "asset": b"orphan content without a pathname",
        },
    }


def write_raw_package(path: str, raw: Dict[str, Dict[str, Optional[bytes]]], prefix: str = "") -> str:
    """Write raw data as a gzip tar using the .unitypackage layout."""
    with tarfile.open(path, "w:gz") as tar:
        for guid, files in raw.items():
            dir_info = tarfile.TarInfo(f"{prefix}{guid}")
            dir_info.type = tarfile.DIRTYPE
            tar.addfile(dir_info)
            for name, payload in files.items():
                if payload is None:
                    continue
                info = tarfile.TarInfo(f"{prefix}{guid}/{name}")
                info.size = len(payload)
                tar.addfile(info, io.BytesIO(payload))
    return path


@pytest.fixture
def sample_package_file(tmp_path, raw_package_data) -> str:
    """A .unitypackage on disk built from raw_package_data."""
    return write_raw_package(str(tmp_path / "sample.unitypackage"), raw_package_data)


@pytest.fixture
def package_writer():
    """Expose write_raw_package to tests that need custom archives."""
    return write_raw_package
