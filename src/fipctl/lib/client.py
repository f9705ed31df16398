# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Client for the floating-IP endpoints of the engine API.

The daemon owns allocation and association; this module only turns a call
into one HTTP request and the response into plain Python values.
"""

from __future__ import annotations

from typing import Any

import httpx

from .core.config import get_api_host, get_api_timeout, get_api_version
from .filters import FilterArgs
from .util.logging_utils import _log_debug

# Host part of the URL when talking over a unix socket; the daemon ignores it.
_UDS_BASE_URL = "http://localhost"


class FipClientError(Exception):
    """A floating-IP request failed (transport error or non-2xx response)."""


def _base_url_and_transport(
    host: str,
) -> tuple[str, httpx.BaseTransport | None]:
    if host.startswith("unix://"):
        path = host[len("unix://") :]
        if not path:
            raise FipClientError(f"Invalid host {host!r}: missing socket path")
        return _UDS_BASE_URL, httpx.HTTPTransport(uds=path)
    if host.startswith("tcp://"):
        host = "http://" + host[len("tcp://") :]
    if host.startswith(("http://", "https://")) and len(host.split("://", 1)[1]) > 0:
        return host.rstrip("/"), None
    raise FipClientError(
        f"Invalid host {host!r}: expected unix://, tcp://, http:// or https://"
    )


def _error_message(response: httpx.Response) -> str:
    """Best human-readable message for a failed response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    text = response.text.strip()
    if text:
        return text
    return f"Error response from daemon: HTTP {response.status_code}"


class FipClient:
    """Synchronous floating-IP API client.

    Usable as a context manager; the underlying ``httpx.Client`` is closed on
    exit.
    """

    def __init__(
        self,
        host: str,
        api_version: str | None = None,
        timeout: float = 30.0,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        base_url, default_transport = _base_url_and_transport(host)
        self.host = host
        self.api_version = api_version
        self._http = httpx.Client(
            base_url=base_url,
            transport=transport or default_transport,
            timeout=httpx.Timeout(timeout),
        )

    @classmethod
    def from_config(cls) -> FipClient:
        """Build a client from FIPCTL_* env vars and the global config."""
        return cls(get_api_host(), api_version=get_api_version(), timeout=get_api_timeout())

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> FipClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---------- Transport ----------

    def _path(self, path: str) -> str:
        if self.api_version:
            return f"/v{self.api_version}{path}"
        return path

    def _request(self, method: str, path: str, params: dict[str, str] | None = None) -> Any:
        url = self._path(path)
        try:
            response = self._http.request(method, url, params=params)
        except httpx.HTTPError as e:
            _log_debug(f"{method} {url} failed: {e}")
            raise FipClientError(f"Cannot connect to daemon at {self.host}: {e}") from e

        _log_debug(f"{method} {url} -> {response.status_code}")
        if not response.is_success:
            raise FipClientError(_error_message(response))
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise FipClientError(f"Invalid response from daemon: {e}") from e

    # ---------- Floating IP operations ----------

    def allocate(self, count: str) -> list[str]:
        """Allocate *count* new floating IPs and return them."""
        data = self._request("POST", "/fips/allocate", {"count": str(count)})
        return [str(ip) for ip in data or []]

    def release(self, ip: str) -> None:
        self._request("POST", "/fips/release", {"ip": ip})

    def associate(self, ip: str, container: str) -> None:
        self._request("POST", "/fips/associate", {"ip": ip, "container": container})

    def deassociate(self, container: str) -> str:
        """Detach the floating IP from *container* and return the released IP."""
        data = self._request("POST", "/fips/deassociate", {"container": container})
        return "" if data is None else str(data)

    def list(self, filters: FilterArgs | None = None) -> list[str]:
        """List floating IPs, optionally narrowed by *filters*.

        Items may be plain IP strings or objects carrying an ``ip`` field.
        """
        params = {}
        if filters:
            params["filters"] = filters.to_param()
        data = self._request("GET", "/fips", params or None)
        ips = []
        for item in data or []:
            if isinstance(item, dict):
                ips.append(str(item.get("ip", "")))
            else:
                ips.append(str(item))
        return ips
