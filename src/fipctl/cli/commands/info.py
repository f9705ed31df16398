"""Informational CLI commands: config overview."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from ...lib.core.config import (
    config_root as _config_root,
    get_api_host as _get_api_host,
    get_api_timeout as _get_api_timeout,
    get_api_version as _get_api_version,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
    state_root as _state_root,
)
from ...lib.terminal import (
    gray as _gray,
    supports_color as _supports_color,
    yes_no as _yes_no,
)


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (config)."""
    subparsers.add_parser("config", help="Show configuration paths and the resolved API endpoint")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle the config command.  Returns True if handled."""
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _print_config() -> None:
    """Display configuration paths and the API endpoint the client would use."""
    color_enabled = _supports_color()
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    print(f"- Config dir: {_gray(str(_config_root()), color_enabled)}")
    paths = _global_config_search_paths()
    if paths:
        print("- Global config search order:")
        for p in paths:
            exists = Path(p).is_file()
            print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(exists, color_enabled)})")

    print("API endpoint:")
    print(f"- Host: {_gray(_get_api_host(), color_enabled)}")
    print(f"- Version: {_gray(_get_api_version() or '(unversioned)', color_enabled)}")
    print(f"- Timeout: {_get_api_timeout():g}s")

    print("Writable locations (write):")
    sroot = _state_root()
    print(
        f"- State root: {_gray(str(sroot), color_enabled)} "
        f"(exists: {_yes_no(Path(sroot).is_dir(), color_enabled)})"
    )
    print(f"- Debug log: {_gray(str(sroot / 'fipctl.log'), color_enabled)}")

    print("Environment overrides (if set):")
    for var in (
        "FIPCTL_HOST",
        "FIPCTL_API_VERSION",
        "FIPCTL_CONFIG_FILE",
        "FIPCTL_CONFIG_DIR",
        "FIPCTL_STATE_DIR",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")
