#!/usr/bin/env python3

import argparse
import sys

from ..lib.client import FipClientError
from ..lib.core.version import format_version_string, get_version
from .commands import fip as _fip_cmd, info as _info_cmd

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except Exception:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore

_COMMAND_MODULES = (_fip_cmd, _info_cmd)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fip",
        description="fip – manage floating IPs through the container engine API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Run 'fip COMMAND --help' for more information on a command.",
    )
    parser.add_argument(
        "--version", action="version", version=f"fipctl {format_version_string(get_version())}"
    )
    sub = parser.add_subparsers(dest="cmd", metavar="COMMAND", title="Commands")
    for module in _COMMAND_MODULES:
        module.register(sub)
    return parser


def main() -> None:
    parser = build_parser()

    # Enable bash completion if argcomplete is present and activated
    if argcomplete is not None:  # pragma: no cover - shell integration
        argcomplete.autocomplete(parser)  # type: ignore[attr-defined]

    args = parser.parse_args()

    if args.cmd is None:
        parser.print_help(sys.stderr)
        raise SystemExit(2)

    try:
        for module in _COMMAND_MODULES:
            if module.dispatch(args):
                return
    except FipClientError as e:
        raise SystemExit(str(e)) from e
    parser.error("Unknown command")


if __name__ == "__main__":
    main()
