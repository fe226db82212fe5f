"""HTTP transport for the Zulip REST API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from zulip_api.core.errors import TransportError

SUPPORTED_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of an HTTP response."""

    status_code: int
    body: str


class HttpTransport:
    """Send basic-auth requests with form or query-string parameters."""

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        logger: Any | None = None,
    ) -> None:
        self._timeout = timeout
        self._logger = logger or logging.getLogger("zulip_api")

    def request(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        *,
        email: str,
        api_key: str,
        timeout: float | None = None,
    ) -> RawResponse:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"unsupported HTTP method: {method}")

        kwargs: dict[str, Any] = {}
        if method == "GET":
            kwargs["params"] = params or {}
        else:
            kwargs["data"] = params or {}

        self._logger.debug("%s %s", method, url)

        try:
            response = requests.request(
                method,
                url,
                auth=(email, api_key),
                timeout=timeout if timeout is not None else self._timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            self._logger.warning("%s %s failed: %s", method, url, exc, exc_info=True)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        return RawResponse(status_code=response.status_code, body=response.text)
