"""Message operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from zulip_api.core.errors import MessageError, MessageErrorCode
from zulip_api.core.responses import require, require_objects
from zulip_api.services.base import NARROW, STRING_LIST, BaseClient, encode_bool, encode_json

MESSAGE_TYPES = ("stream", "private")


class Messages(BaseClient):
    """Send, fetch, render and edit messages."""

    def send(
        self,
        message_type: str,
        to: str | Sequence[str],
        content: str,
        subject: str | None = None,
    ) -> int:
        """Send a message and return its id.

        For ``"stream"`` messages ``to`` is the stream name and ``subject`` is
        required; for ``"private"`` messages ``to`` is a list of emails.
        """

        if message_type not in MESSAGE_TYPES:
            raise MessageError(MessageErrorCode.INVALID_MESSAGE_TYPE)

        params = {"type": message_type, "content": content}

        if message_type == "stream":
            if not isinstance(to, str):
                raise MessageError(MessageErrorCode.INVALID_RECIPIENTS)
            if not subject:
                raise MessageError(MessageErrorCode.MISSING_SUBJECT)
            params["to"] = to
            params["subject"] = subject
        else:
            recipients = [to] if isinstance(to, str) else to
            if not recipients or "" in recipients:
                raise MessageError(MessageErrorCode.INVALID_RECIPIENTS)
            params["to"] = encode_json(
                STRING_LIST,
                recipients,
                error=MessageError,
                code=MessageErrorCode.INVALID_RECIPIENTS,
            )

        payload = self._call("POST", "/messages", params)
        return require(payload, "id", int)

    def get(
        self,
        narrow: Sequence[Sequence[str]] = ((),),
        anchor: int = 0,
        amount_before: int = 0,
        amount_after: int = 0,
        apply_markdown: bool = True,
        client_gravatar: bool = False,
        use_first_unread_anchor: bool = False,
    ) -> list[dict[str, Any]]:
        """Fetch messages around ``anchor`` that match ``narrow``."""

        params = {
            "narrow": encode_json(
                NARROW,
                narrow,
                error=MessageError,
                code=MessageErrorCode.INVALID_NARROW,
            ),
            "anchor": str(anchor),
            "num_before": str(amount_before),
            "num_after": str(amount_after),
            "apply_markdown": encode_bool(apply_markdown),
            "client_gravatar": encode_bool(client_gravatar),
            "use_first_unread_anchor": encode_bool(use_first_unread_anchor),
        }

        payload = self._call("GET", "/messages", params)
        return require_objects(payload, "messages")

    def render(self, content: str) -> str:
        """Render Markdown ``content`` to HTML without sending it."""

        payload = self._call("POST", "/messages/render", {"content": content})
        return require(payload, "rendered", str)

    def update(
        self,
        message_id: int,
        content: str | None = None,
        subject: str | None = None,
    ) -> None:
        if content is None and subject is None:
            raise MessageError(MessageErrorCode.NOTHING_TO_UPDATE)

        params: dict[str, str] = {}
        if content is not None:
            params["content"] = content
        if subject is not None:
            params["subject"] = subject

        self._call("PATCH", f"/messages/{message_id}", params)
