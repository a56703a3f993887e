from __future__ import annotations

"""
Asset Extractor.

Writes package assets to a regular directory tree, refusing any asset
path that would land outside the chosen output directory.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from uview.domain.asset_models import UnityAsset
from uview.infra.fs import safe_mkdir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass
class ExtractionReport:
    """
    Outcome of an extraction run.

    Attributes:
        written: Absolute paths of files and folders created.
        skipped: Asset paths refused or without content.
        errors: Human readable I/O failures.
    """
    written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_assets(
        assets: Iterable[UnityAsset],
        output_dir: str,
        include_meta: bool = False,
) -> ExtractionReport:
    """
    Materialize assets on disk under their logical paths.

    Args:
        assets: Assets to write.
        output_dir: Destination root directory.
        include_meta: Also write "<file>.meta" sidecars.

    Returns:
        ExtractionReport: Summary of created, skipped and failed entries.
    """
    report = ExtractionReport()
    root = os.path.abspath(output_dir)

    ok, err = safe_mkdir(root)
    if not ok:
        report.errors.append(f"{root}: {err}")
        return report

    for asset in assets:
        target = resolve_target(root, asset.asset_path)
        if target is None:
            logger.warning(f"Refusing to extract outside output dir: {asset.asset_path}")
            report.skipped.append(asset.asset_path)
            continue

        try:
            if asset.is_folder:
                os.makedirs(target, exist_ok=True)
            else:
                os.makedirs(os.path.dirname(target), exist_ok=True)
                with open(target, "wb") as f:
                    f.write(asset.content or b"")

            if include_meta and asset.meta is not None:
                with open(target.rstrip(os.sep) + ".meta", "wb") as f:
                    f.write(asset.meta)

            report.written.append(target)
        except OSError as e:
            logger.error(f"Failed to extract '{asset.asset_path}': {e}")
            report.errors.append(f"{asset.asset_path}: {e}")

    logger.info(
        f"Extraction finished: {len(report.written)} written, "
        f"{len(report.skipped)} skipped, {len(report.errors)} errors"
    )
    return report


def resolve_target(root: str, asset_path: str) -> Optional[str]:
    """
    Map an asset path to an absolute location inside root.

    Returns:
        Optional[str]: The target path, or None when it escapes root.
    """
    rel = asset_path.replace("\\", "/").strip("/")
    if not rel or os.path.isabs(rel) or ":" in rel.split("/", 1)[0]:
        return None

    target = os.path.abspath(os.path.join(root, *rel.split("/")))
    if os.path.commonpath([root, target]) != root or target == root:
        return None
    return target
