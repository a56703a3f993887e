from __future__ import annotations

"""
Background Worker Tasks for GUI Operations.

Reading, writing and extracting packages can take seconds for large
archives. These tasks run on daemon threads and report back through a
callback; the controller marshals that callback onto the Tk thread.
Each callback receives either the result or the raised exception.
"""

import logging
from typing import Any, Callable, Iterable

from uview.core.package.catalog import UnityPackage
from uview.core.package.extractor import extract_assets
from uview.core.package.reader import load_package
from uview.core.package.writer import write_unitypackage
from uview.domain.asset_models import UnityAsset

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PACKAGE I/O WORKERS
# -----------------------------------------------------------------------------

def load_package_task(package_path: str, on_complete: Callable[[Any], None]) -> None:
    """
    Read and catalog a package off the UI thread.

    Args:
        package_path: File to open.
        on_complete: Receives the UnityPackage or the exception.
    """
    try:
        result: Any = load_package(package_path)
    except Exception as e:
        logger.error(f"Load Thread: Failed to open '{package_path}': {e}", exc_info=True)
        result = e
    on_complete(result)


def save_package_task(
        package: UnityPackage,
        dest_path: str,
        on_complete: Callable[[Any], None],
) -> None:
    """
    Write a package archive off the UI thread.

    Args:
        package: Catalog snapshot to persist.
        dest_path: Target file.
        on_complete: Receives the destination path or the exception.
    """
    try:
        write_unitypackage(package, dest_path)
        result: Any = dest_path
    except Exception as e:
        logger.error(f"Save Thread: Failed to write '{dest_path}': {e}", exc_info=True)
        result = e
    on_complete(result)


def extract_assets_task(
        assets: Iterable[UnityAsset],
        output_dir: str,
        include_meta: bool,
        on_complete: Callable[[Any], None],
) -> None:
    """
    Extract assets to disk off the UI thread.

    Args:
        assets: Assets to write.
        output_dir: Destination directory.
        include_meta: Also write .meta sidecars.
        on_complete: Receives the ExtractionReport or the exception.
    """
    try:
        result: Any = extract_assets(list(assets), output_dir, include_meta=include_meta)
    except Exception as e:
        logger.error(f"Extract Thread: Failed to extract into '{output_dir}': {e}", exc_info=True)
        result = e
    on_complete(result)
