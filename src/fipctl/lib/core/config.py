import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root as _config_root_base, state_root as _state_root_base

DEFAULT_HOST = "unix:///var/run/docker.sock"
DEFAULT_TIMEOUT = 30.0

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If FIPCTL_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        0) $FIPCTL_CONFIG_DIR/config.yml (only if FIPCTL_CONFIG_DIR is set)
        1) ${XDG_CONFIG_HOME:-~/.config}/fipctl/config.yml
        2) sys.prefix/etc/fipctl/config.yml
        3) /etc/fipctl/config.yml
    """
    env_file = os.environ.get("FIPCTL_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    paths = []
    if os.environ.get("FIPCTL_CONFIG_DIR"):
        paths.append(config_root() / "config.yml")

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (Path(xdg_home) if xdg_home else Path.home() / ".config") / "fipctl" / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "fipctl" / "config.yml"
    etc_cfg = Path("/etc/fipctl/config.yml")
    return [*paths, user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    Resolution order (first existing wins, except explicit override is returned even
    if missing to make intent visible to the user):
    - FIPCTL_CONFIG_FILE env (returned as-is)
    - $FIPCTL_CONFIG_DIR/config.yml (when FIPCTL_CONFIG_DIR is set)
    - ${XDG_CONFIG_HOME:-~/.config}/fipctl/config.yml (user override)
    - sys.prefix/etc/fipctl/config.yml (pip wheels)
    - /etc/fipctl/config.yml (system default)
    If none exist, return the last path (/etc/fipctl/config.yml).
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``api: "oops"``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Roots ----------


def config_root() -> Path:
    return _config_root_base().resolve()


def state_root() -> Path:
    """Writable state directory.

    Precedence:
    - Environment variable FIPCTL_STATE_DIR (handled first)
    - If set in global config (paths.state_root), use it.
    - Otherwise, use fipctl.lib.core.paths.state_root() (FHS/XDG handling).
    """
    env = os.environ.get("FIPCTL_STATE_DIR")
    if env:
        return Path(env).expanduser().resolve()
    try:
        val = get_global_section("paths").get("state_root")
    except (OSError, yaml.YAMLError):
        val = None
    if val:
        return Path(str(val)).expanduser().resolve()
    return _state_root_base().resolve()


# ---------- API endpoint ----------


def get_api_host() -> str:
    """Daemon endpoint: FIPCTL_HOST → api.host → unix:///var/run/docker.sock."""
    env = os.environ.get("FIPCTL_HOST")
    if env:
        return env
    host = get_global_section("api").get("host")
    return str(host) if host else DEFAULT_HOST


def get_api_version() -> str | None:
    """API version prefix (e.g. ``1.23``), or None to talk to the unversioned API."""
    env = os.environ.get("FIPCTL_API_VERSION")
    if env:
        return env
    version = get_global_section("api").get("version")
    return str(version) if version else None


def get_api_timeout() -> float:
    """Request timeout in seconds from api.timeout (default 30)."""
    raw = get_global_section("api").get("timeout", DEFAULT_TIMEOUT)
    try:
        return float(raw)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT
