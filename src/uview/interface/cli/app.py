from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, package loading,
optional extraction and rendering of the listing (plain, tree or JSON).
"""

import json
import sys
from typing import Any, Dict, List, Optional

from uview.core.analysis.tree_builder import build_tree
from uview.core.analysis.tree_renderer import render_tree
from uview.core.package.catalog import UnityPackage
from uview.core.package.extractor import extract_assets
from uview.core.package.reader import load_package
from uview.domain.asset_models import UnityAsset
from uview.domain.errors import PackageReadError
from uview.infra.fs import normalize_path
from uview.infra.logging import LoggingConfig, configure_logging, get_logger
from uview.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 ok, 1 runtime failure, 2 bad input, 130 interrupted).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    args = cli_args.build_parser().parse_args(argv)

    # 2. Logging bootstrap (console only)
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "WARNING", console=True))

    # 3. Package loading
    package_path = normalize_path(args.package, fallback=args.package)
    try:
        package = load_package(package_path)
    except PackageReadError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 4. Optional extraction phase
    if args.extract_dir:
        report = extract_assets(
            _sorted_assets(package),
            normalize_path(args.extract_dir, fallback="."),
            include_meta=args.meta,
        )
        if not args.json_output:
            print(f"Extracted {len(report.written)} assets to {args.extract_dir}")
            for path in report.skipped:
                print(f"  skipped: {path}", file=sys.stderr)
        for err in report.errors:
            print(f"ERROR: {err}", file=sys.stderr)
        if not report.ok:
            return 1

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asset_listing(package), ensure_ascii=False, indent=2))
    elif args.tree:
        lines: List[str] = []
        render_tree(build_tree(_sorted_assets(package)), lines, show_guids=args.guids)
        print("\n".join(lines))
    elif not args.extract_dir:
        for asset in _sorted_assets(package):
            print(f"{asset.guid}  {asset.asset_path}" if args.guids else asset.asset_path)

    return 0

# -----------------------------------------------------------------------------
# VIEW HELPERS
# -----------------------------------------------------------------------------

def asset_listing(package: UnityPackage) -> List[Dict[str, Any]]:
    """Machine-readable summary of every asset, ordered by path."""
    return [
        {
            "guid": asset.guid,
            "path": asset.asset_path,
            "size": asset.size,
            "has_meta": asset.meta is not None,
            "has_preview": asset.has_preview,
        }
        for asset in _sorted_assets(package)
    ]


def _sorted_assets(package: UnityPackage) -> List[UnityAsset]:
    return sorted(package.get_assets().values(), key=lambda a: a.asset_path)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
