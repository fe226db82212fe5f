"""Exception hierarchy raised by the Zulip API client."""

from __future__ import annotations

from enum import Enum

DEFAULT_ERROR_MESSAGE = "An unknown error occurred."


class ZulipError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(ZulipError):
    """Raised before any request is sent when an argument cannot be encoded."""

    code: Enum

    def __init__(self, code: Enum, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or code.value)


class EventErrorCode(str, Enum):
    INVALID_EVENT_TYPES = "invalid_event_types"
    INVALID_FETCH_EVENT_TYPES = "invalid_fetch_event_types"
    INVALID_NARROW = "invalid_narrow"


class MessageErrorCode(str, Enum):
    INVALID_MESSAGE_TYPE = "invalid_message_type"
    INVALID_RECIPIENTS = "invalid_recipients"
    MISSING_SUBJECT = "missing_subject"
    INVALID_NARROW = "invalid_narrow"
    NOTHING_TO_UPDATE = "nothing_to_update"


class StreamErrorCode(str, Enum):
    INVALID_STREAMS = "invalid_streams"
    INVALID_PRINCIPALS = "invalid_principals"


class EventError(ValidationError):
    """Invalid arguments for an event queue operation."""

    code: EventErrorCode


class MessageError(ValidationError):
    """Invalid arguments for a message operation."""

    code: MessageErrorCode


class StreamError(ValidationError):
    """Invalid arguments for a stream operation."""

    code: StreamErrorCode


class TransportError(ZulipError):
    """The HTTP request could not be completed (DNS, connection, timeout)."""


class ZulipApiError(ZulipError):
    """The server answered with ``result != "success"`` or a non-empty ``msg``."""

    def __init__(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        *,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(ZulipApiError):
    """The response body was not a JSON object or lacked an expected field."""

    def __init__(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        *,
        body: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.body = body
        super().__init__(message, status_code=status_code)
