"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from ...lib.client import FipClient


def complete_fips(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover
    """Return floating IPs matching *prefix* for argcomplete."""
    try:
        with FipClient.from_config() as client:
            ips = client.list()
    except Exception:
        return []
    if prefix:
        ips = [ip for ip in ips if ip.startswith(prefix)]
    return ips


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*, ignoring missing argcomplete."""
    action.completer = fn  # type: ignore[attr-defined]
