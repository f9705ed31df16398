"""Floating IP commands: allocate, release, associate, deassociate, ls."""

from __future__ import annotations

import argparse
import sys

from ...lib.client import FipClient, FipClientError
from ...lib.filters import FilterArgs, FilterFormatError, parse_filters
from ._completers import complete_fips, set_completer

FIP_COMMANDS = {
    "allocate": "Allocate a or some IPs",
    "associate": "Associate floating IP to container",
    "deassociate": "Deassociate floating IP from container",
    "ls": "List all floating IPs",
    "release": "Release a floating IP",
}


def _filter_expr(value: str) -> str:
    """argparse ``type`` for ``-f``: reject malformed filters before any request."""
    try:
        FilterArgs().parse_flag(value)
    except FilterFormatError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


def _client() -> FipClient:
    return FipClient.from_config()


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the floating IP subcommands."""
    p_allocate = subparsers.add_parser(
        "allocate",
        help=FIP_COMMANDS["allocate"],
        description="Creates some new floating IPs by the user",
    )
    p_allocate.add_argument("count", metavar="COUNT", help="Number of IPs to allocate")

    p_release = subparsers.add_parser(
        "release",
        help=FIP_COMMANDS["release"],
        description="Release one or more fips",
    )
    _a = p_release.add_argument("fips", metavar="FIP", nargs="+", help="Floating IP to release")
    set_completer(_a, complete_fips)

    p_associate = subparsers.add_parser(
        "associate",
        help=FIP_COMMANDS["associate"],
        description="Connects a container to a floating IP",
    )
    _a = p_associate.add_argument("fip", metavar="FIP")
    set_completer(_a, complete_fips)
    p_associate.add_argument("container", metavar="CONTAINER")

    p_deassociate = subparsers.add_parser(
        "deassociate",
        help=FIP_COMMANDS["deassociate"],
        description="Disconnects container from a floating IP",
    )
    p_deassociate.add_argument("container", metavar="CONTAINER")

    p_ls = subparsers.add_parser("ls", help=FIP_COMMANDS["ls"], description="Lists fips")
    p_ls.add_argument(
        "-f",
        "--filter",
        dest="filters",
        action="append",
        default=[],
        type=_filter_expr,
        metavar="FILTER",
        help="Filter output based on conditions provided (name=value, repeatable)",
    )


def dispatch(args: argparse.Namespace) -> bool:
    """Handle floating IP commands.  Returns True if handled."""
    if args.cmd not in FIP_COMMANDS:
        return False

    with _client() as client:
        if args.cmd == "allocate":
            for ip in client.allocate(args.count):
                print(ip)
        elif args.cmd == "release":
            _cmd_release(client, args.fips)
        elif args.cmd == "associate":
            client.associate(args.fip, args.container)
        elif args.cmd == "deassociate":
            print(client.deassociate(args.container))
        elif args.cmd == "ls":
            for ip in client.list(parse_filters(args.filters)):
                print(ip)
    return True


def _cmd_release(client: FipClient, fips: list[str]) -> None:
    """Release every IP in *fips*, reporting each failure and exiting 1 if any failed."""
    status = 0
    for ip in fips:
        try:
            client.release(ip)
        except FipClientError as e:
            print(e, file=sys.stderr)
            status = 1
    if status != 0:
        raise SystemExit(status)
