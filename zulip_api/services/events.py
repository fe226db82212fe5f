"""Event queue operations: register, poll and delete."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pydantic

from zulip_api.core.errors import EventError, EventErrorCode, MalformedResponseError
from zulip_api.core.models import RegisteredQueue
from zulip_api.core.responses import require_objects
from zulip_api.services.base import NARROW, STRING_LIST, BaseClient, encode_bool, encode_json


class Events(BaseClient):
    """Client for Zulip's real-time event queues.

    The queue id and the ``last_event_id`` cursor are owned by the caller:
    each :meth:`get` must pass the id of the last event already processed,
    and that value must never decrease.
    """

    def register(
        self,
        apply_markdown: bool = False,
        client_gravatar: bool = False,
        event_types: Sequence[str] = (),
        all_public_streams: bool = False,
        include_subscribers: bool = False,
        fetch_event_types: Sequence[str] = (),
        narrow: Sequence[Sequence[str]] = ((),),
    ) -> RegisteredQueue:
        """Register a new event queue.

        ``event_types`` limits the events delivered (empty means all of them),
        e.g. ``["message"]`` or ``["subscription", "pointer"]``.
        ``fetch_event_types`` selects the initial state returned with the
        queue and falls back to ``event_types`` on the server. ``narrow`` is a
        list of filters such as ``[["stream", "general"], ["sender", "a@b.c"]]``.
        """

        event_types_json = encode_json(
            STRING_LIST,
            event_types,
            error=EventError,
            code=EventErrorCode.INVALID_EVENT_TYPES,
        )
        fetch_event_types_json = encode_json(
            STRING_LIST,
            fetch_event_types,
            error=EventError,
            code=EventErrorCode.INVALID_FETCH_EVENT_TYPES,
        )
        narrow_json = encode_json(
            NARROW,
            narrow,
            error=EventError,
            code=EventErrorCode.INVALID_NARROW,
        )

        params = {
            "apply_markdown": encode_bool(apply_markdown),
            "client_gravatar": encode_bool(client_gravatar),
            "event_types": event_types_json,
            "all_public_streams": encode_bool(all_public_streams),
            "include_subscribers": encode_bool(include_subscribers),
            "fetch_event_types": fetch_event_types_json,
            "narrow": narrow_json,
        }

        payload = self._call("POST", "/register", params)

        try:
            queue = RegisteredQueue.model_validate(payload)
        except pydantic.ValidationError:
            raise MalformedResponseError(
                "Response is missing a valid 'queue_id' or 'last_event_id' field."
            ) from None

        self._logger.info("registered event queue %s", queue.queue_id)
        return queue

    def get(
        self,
        queue_id: str,
        last_event_id: int,
        dont_block: bool = False,
        *,
        timeout: float | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch the events queued after ``last_event_id``.

        Pass ``-1`` to receive every buffered event. Unless ``dont_block`` is
        set the server holds the request open until an event arrives or a
        heartbeat is due, so the request uses the long poll timeout by default.
        """

        params = {
            "queue_id": queue_id,
            "last_event_id": str(last_event_id),
            "dont_block": encode_bool(dont_block),
        }

        if timeout is None and not dont_block:
            timeout = self._config.long_poll_timeout

        payload = self._call("GET", "/events", params, timeout=timeout)
        return require_objects(payload, "events")

    def delete_queue(self, queue_id: str) -> None:
        """Delete an event queue."""

        self._call("DELETE", "/events", {"queue_id": queue_id})
        self._logger.info("deleted event queue %s", queue_id)
