"""Python client for the Zulip REST API."""

from zulip_api.adapters.transport import HttpTransport, RawResponse
from zulip_api.config import Config
from zulip_api.core.errors import (
    EventError,
    EventErrorCode,
    MalformedResponseError,
    MessageError,
    MessageErrorCode,
    StreamError,
    StreamErrorCode,
    TransportError,
    ValidationError,
    ZulipApiError,
    ZulipError,
)
from zulip_api.core.models import RegisteredQueue
from zulip_api.logger import configure_logging
from zulip_api.services.events import Events
from zulip_api.services.messages import Messages
from zulip_api.services.streams import Streams
from zulip_api.services.users import Users
from zulip_api.zulip import Zulip

__all__ = [
    "Config",
    "EventError",
    "EventErrorCode",
    "Events",
    "HttpTransport",
    "MalformedResponseError",
    "MessageError",
    "MessageErrorCode",
    "Messages",
    "RawResponse",
    "RegisteredQueue",
    "StreamError",
    "StreamErrorCode",
    "Streams",
    "TransportError",
    "Users",
    "ValidationError",
    "ZulipApiError",
    "ZulipError",
    "Zulip",
    "configure_logging",
]
