"""Pydantic models for Zulip API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class ResponseEnvelope(BaseModel):
    """Bookkeeping fields present on every Zulip API response."""

    model_config = ConfigDict(extra="allow")

    result: str | None = None
    msg: str = ""
    code: str | None = None

    @property
    def is_success(self) -> bool:
        return self.result == "success" and not self.msg


class RegisteredQueue(BaseModel):
    """A freshly registered event queue.

    Only ``queue_id`` and ``last_event_id`` are guaranteed; any initial state
    requested through ``fetch_event_types`` is kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    queue_id: StrictStr
    last_event_id: StrictInt
