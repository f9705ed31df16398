# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version information for fipctl, used by ``fip --version``."""


def get_version() -> str:
    """Return the installed fipctl version, or ``"unknown"``."""
    try:
        from fipctl import __version__

        return __version__
    except (ImportError, AttributeError):
        return "unknown"


def format_version_string(version: str) -> str:
    """Format the version for display.

    Returns:
        Formatted string like "0.1.0\\nLicense: Apache-2.0"
    """
    return f"{version}\nLicense: Apache-2.0"
