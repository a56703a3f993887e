from __future__ import annotations

"""
CLI Argument Definition.

Defines the command-line schema for inspecting a package without the
graphical interface.
"""

import argparse

from uview.domain import constants as const

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the uview CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="uview",
        description="Inspect and extract the contents of .unitypackage archives.",
    )
    p.add_argument(
        "package",
        help="Path to the .unitypackage file.",
    )

    # --- Listing ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the package contents as a directory tree.",
    )
    p.add_argument(
        "--guids",
        action="store_true",
        help="Show asset GUIDs next to paths.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the asset listing as JSON.",
    )

    # --- Extraction ---
    p.add_argument(
        "-x", "--extract",
        dest="extract_dir",
        default=None,
        help="Extract all assets into this directory.",
    )
    p.add_argument(
        "--meta",
        action="store_true",
        help="Also write .meta sidecars when extracting.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {const.CURRENT_CONFIG_VERSION}",
    )

    return p
