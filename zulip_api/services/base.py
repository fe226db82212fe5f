"""Shared request plumbing for the domain clients."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

import pydantic
from pydantic import TypeAdapter

from zulip_api.adapters.transport import HttpTransport
from zulip_api.config import Config
from zulip_api.core.errors import ValidationError, ZulipApiError
from zulip_api.core.responses import classify

STRING_LIST: TypeAdapter[list[str]] = TypeAdapter(list[str])
NARROW: TypeAdapter[list[list[str]]] = TypeAdapter(list[list[str]])


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def encode_json(
    adapter: TypeAdapter[Any],
    value: Any,
    *,
    error: type[ValidationError],
    code: Enum,
) -> str:
    """Validate ``value`` against ``adapter`` and serialize it as JSON text."""

    try:
        validated = adapter.validate_python(value)
        return json.dumps(validated)
    except (pydantic.ValidationError, TypeError, ValueError):
        raise error(code) from None


class BaseClient:
    """Hold the shared configuration and issue requests against the API root."""

    def __init__(
        self,
        config: Config,
        *,
        transport: HttpTransport | None = None,
        logger: Any | None = None,
    ) -> None:
        self._config = config
        self._logger = logger or logging.getLogger("zulip_api")
        self._transport = transport or HttpTransport(
            timeout=config.timeout,
            logger=self._logger,
        )

    @property
    def config(self) -> Config:
        return self._config

    def _call(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        raw = self._transport.request(
            method,
            f"{self._config.api_url}{path}",
            params,
            email=self._config.email_address,
            api_key=self._config.api_key,
            timeout=timeout,
        )

        try:
            return classify(raw)
        except ZulipApiError as exc:
            self._logger.warning(
                "%s %s returned an error (HTTP %s): %s",
                method,
                path,
                raw.status_code,
                exc.message,
                exc_info=True,
            )
            raise
