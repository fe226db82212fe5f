"""Stream listing and subscription management."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter

from zulip_api.core.errors import StreamError, StreamErrorCode
from zulip_api.core.responses import require, require_objects
from zulip_api.services.base import STRING_LIST, BaseClient, encode_bool, encode_json


class StreamRequest(BaseModel):
    """A stream to subscribe to, created on the fly if it does not exist."""

    name: str
    description: str | None = None


STREAM_REQUESTS: TypeAdapter[list[StreamRequest]] = TypeAdapter(list[StreamRequest])


class Streams(BaseClient):
    """Query streams and manage the current user's subscriptions."""

    def get_all(
        self,
        include_public: bool = True,
        include_subscribed: bool = True,
        include_all_active: bool = False,
        include_default: bool = False,
    ) -> list[dict[str, Any]]:
        params = {
            "include_public": encode_bool(include_public),
            "include_subscribed": encode_bool(include_subscribed),
            "include_all_active": encode_bool(include_all_active),
            "include_default": encode_bool(include_default),
        }

        payload = self._call("GET", "/streams", params)
        return require_objects(payload, "streams")

    def get_id(self, name: str) -> int:
        """Look up a stream id by name."""

        payload = self._call("GET", "/get_stream_id", {"stream": name})
        return require(payload, "stream_id", int)

    def get_subscribed(self) -> list[dict[str, Any]]:
        payload = self._call("GET", "/users/me/subscriptions")
        return require_objects(payload, "subscriptions")

    def subscribe(
        self,
        streams: Sequence[Mapping[str, str]],
        invite_only: bool = False,
        announce: bool = False,
        principals: Sequence[str] = (),
        authorization_errors_fatal: bool = True,
    ) -> dict[str, Any]:
        """Subscribe users to streams.

        ``streams`` holds mappings with a ``name`` and an optional
        ``description``; ``principals`` lists the emails to subscribe and
        defaults to the current user when empty. The result maps emails to the
        stream names in ``subscribed`` and ``already_subscribed``.
        """

        try:
            stream_requests = STREAM_REQUESTS.validate_python(streams)
        except ValueError:
            raise StreamError(StreamErrorCode.INVALID_STREAMS) from None

        params = {
            "subscriptions": STREAM_REQUESTS.dump_json(stream_requests, exclude_none=True).decode(),
            "invite_only": encode_bool(invite_only),
            "announce": encode_bool(announce),
            "principals": encode_json(
                STRING_LIST,
                principals,
                error=StreamError,
                code=StreamErrorCode.INVALID_PRINCIPALS,
            ),
            "authorization_errors_fatal": encode_bool(authorization_errors_fatal),
        }

        return self._call("POST", "/users/me/subscriptions", params)

    def unsubscribe(
        self,
        streams: Sequence[str],
        principals: Sequence[str] = (),
    ) -> dict[str, Any]:
        """Unsubscribe users from the named streams.

        The result lists stream names under ``removed`` and ``not_subscribed``.
        """

        params = {
            "subscriptions": encode_json(
                STRING_LIST,
                streams,
                error=StreamError,
                code=StreamErrorCode.INVALID_STREAMS,
            ),
            "principals": encode_json(
                STRING_LIST,
                principals,
                error=StreamError,
                code=StreamErrorCode.INVALID_PRINCIPALS,
            ),
        }

        return self._call("DELETE", "/users/me/subscriptions", params)
