"""Turn raw HTTP responses into payloads or typed errors."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import pydantic

from zulip_api.adapters.transport import RawResponse
from zulip_api.core.errors import DEFAULT_ERROR_MESSAGE, MalformedResponseError, ZulipApiError
from zulip_api.core.models import ResponseEnvelope

T = TypeVar("T")

# Keys describing the request outcome rather than its payload.
_BOOKKEEPING_KEYS = ("msg", "result")


def parse_json(raw: RawResponse) -> dict[str, Any]:
    """Decode the body as a JSON object."""

    try:
        data = json.loads(raw.body)
    except json.JSONDecodeError:
        raise MalformedResponseError(
            "Unparseable response from server.",
            body=raw.body,
            status_code=raw.status_code,
        ) from None

    if not isinstance(data, dict):
        raise MalformedResponseError(
            "Unexpected response from server.",
            body=raw.body,
            status_code=raw.status_code,
        )

    return data


def classify(raw: RawResponse) -> dict[str, Any]:
    """Return the payload of a successful response or raise the server error.

    A non-empty ``msg`` or a ``result`` other than ``"success"`` is treated as
    a failure whatever the HTTP status code was.
    """

    data = parse_json(raw)

    try:
        envelope = ResponseEnvelope.model_validate(data)
    except pydantic.ValidationError:
        raise MalformedResponseError(
            "Unexpected response envelope from server.",
            body=raw.body,
            status_code=raw.status_code,
        ) from None

    if not envelope.is_success:
        raise ZulipApiError(
            envelope.msg or DEFAULT_ERROR_MESSAGE,
            code=envelope.code,
            status_code=raw.status_code,
        )

    return {key: value for key, value in data.items() if key not in _BOOKKEEPING_KEYS}


def require(payload: dict[str, Any], key: str, expected_type: type[T]) -> T:
    """Fetch ``payload[key]``, raising if it is missing or of the wrong type."""

    value = payload.get(key)
    # bool is an int subclass; never accept it for a numeric field.
    if not isinstance(value, expected_type) or (
        isinstance(value, bool) and expected_type is not bool
    ):
        raise MalformedResponseError(f"Response is missing a valid '{key}' field.")

    return value


def require_objects(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Fetch a list of JSON objects stored under ``key``."""

    items = require(payload, key, list)
    if not all(isinstance(item, dict) for item in items):
        raise MalformedResponseError(f"Response field '{key}' must be a list of objects.")

    return items
