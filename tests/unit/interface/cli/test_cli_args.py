from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Positional package argument and defaults.
2. Listing flags (store_true).
3. Extraction destinations and the version action.
"""

import pytest

from uview.interface.cli.args import build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_defaults():
    """Only the package path is required; every option is off."""
    args = parse_args(["demo.unitypackage"])

    assert args.package == "demo.unitypackage"
    assert args.tree is False
    assert args.guids is False
    assert args.json_output is False
    assert args.extract_dir is None
    assert args.meta is False
    assert args.debug is False


def test_cli_listing_flags():
    args = parse_args(["demo.unitypackage", "--tree", "--guids", "--json", "--debug"])

    assert args.tree is True
    assert args.guids is True
    assert args.json_output is True
    assert args.debug is True


@pytest.mark.parametrize("flag", ["-x", "--extract"])
def test_cli_extract_destination(flag):
    args = parse_args(["demo.unitypackage", flag, "/out/dir", "--meta"])

    assert args.extract_dir == "/out/dir"
    assert args.meta is True


def test_cli_missing_package_exits():
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 2


def test_cli_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--version"])

    assert exc.value.code == 0
    assert "uview" in capsys.readouterr().out
