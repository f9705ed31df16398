# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Filter expressions for ``fip ls -f name=value``."""

import json
from collections.abc import Iterable

BAD_FORMAT = "bad format of filter (expected name=value)"


class FilterFormatError(ValueError):
    """Raised when a filter expression is not of the form ``name=value``."""

    def __init__(self) -> None:
        super().__init__(BAD_FORMAT)


class FilterArgs:
    """Set of filter values keyed by lowercased filter name."""

    def __init__(self) -> None:
        self._fields: dict[str, set[str]] = {}

    def add(self, name: str, value: str) -> None:
        self._fields.setdefault(name, set()).add(value)

    def get(self, name: str) -> list[str]:
        return sorted(self._fields.get(name, ()))

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def parse_flag(self, arg: str) -> "FilterArgs":
        """Add one ``name=value`` expression; empty expressions are ignored."""
        if not arg:
            return self
        if "=" not in arg:
            raise FilterFormatError()
        name, value = arg.split("=", 1)
        self.add(name.strip().lower(), value.strip())
        return self

    def to_param(self) -> str:
        """Encode as the JSON query parameter the daemon expects.

        ``{"status": {"associated": true}}``; an empty set encodes to ``""``.
        """
        if not self._fields:
            return ""
        return json.dumps(
            {name: {v: True for v in sorted(values)} for name, values in sorted(self._fields.items())}
        )


def parse_filters(args: Iterable[str]) -> FilterArgs:
    """Consolidate all ``-f`` flags into one FilterArgs, failing on the first bad one."""
    filters = FilterArgs()
    for arg in args:
        filters.parse_flag(arg)
    return filters
