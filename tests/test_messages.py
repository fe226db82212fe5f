from __future__ import annotations

import pytest
from conftest import DummyLogger, FakeTransport, json_response

from zulip_api.core.errors import MalformedResponseError, MessageError, MessageErrorCode
from zulip_api.services.messages import Messages


def build_messages(config, transport: FakeTransport) -> Messages:
    return Messages(config, transport=transport, logger=DummyLogger())  # type: ignore[arg-type]


def test_send_stream_message(config, transport: FakeTransport) -> None:
    transport.responses.append(json_response({"result": "success", "msg": "", "id": 42}))

    message_id = build_messages(config, transport).send(
        "stream", "general", "hello", subject="topic"
    )

    assert message_id == 42  # noqa: S101
    assert transport.calls[0]["url"] == "https://chat.example.com/api/v1/messages"  # noqa: S101
    assert transport.calls[0]["params"] == {  # noqa: S101
        "type": "stream",
        "to": "general",
        "content": "hello",
        "subject": "topic",
    }


def test_send_private_message_encodes_recipients(config, transport: FakeTransport) -> None:
    transport.responses.append(json_response({"result": "success", "id": 7}))

    build_messages(config, transport).send("private", ["a@example.com", "b@example.com"], "hi")

    assert transport.calls[0]["params"] == {  # noqa: S101
        "type": "private",
        "content": "hi",
        "to": '["a@example.com", "b@example.com"]',
    }


@pytest.mark.parametrize(
    ("args", "kwargs", "code"),
    [
        (("broadcast", "general", "hi"), {}, MessageErrorCode.INVALID_MESSAGE_TYPE),
        (("stream", "general", "hi"), {}, MessageErrorCode.MISSING_SUBJECT),
        (("stream", ["general"], "hi"), {"subject": "t"}, MessageErrorCode.INVALID_RECIPIENTS),
        (("private", [1, 2], "hi"), {}, MessageErrorCode.INVALID_RECIPIENTS),
        (("private", [], "hi"), {}, MessageErrorCode.INVALID_RECIPIENTS),
        (("private", "", "hi"), {}, MessageErrorCode.INVALID_RECIPIENTS),
    ],
)
def test_send_validates_locally(config, transport: FakeTransport, args, kwargs, code) -> None:
    with pytest.raises(MessageError) as excinfo:
        build_messages(config, transport).send(*args, **kwargs)

    assert excinfo.value.code is code  # noqa: S101
    assert transport.calls == []  # noqa: S101


def test_send_requires_message_id(config, transport: FakeTransport) -> None:
    transport.responses.append(json_response({"result": "success"}))

    with pytest.raises(MalformedResponseError):
        build_messages(config, transport).send("private", "a@example.com", "hi")


def test_get_messages(config, transport: FakeTransport) -> None:
    messages = [{"id": 1, "content": "<p>hi</p>"}]
    transport.responses.append(json_response({"result": "success", "messages": messages}))

    result = build_messages(config, transport).get(
        narrow=[["stream", "general"]], anchor=10, amount_before=5
    )

    assert result == messages  # noqa: S101
    call = transport.calls[0]
    assert call["method"] == "GET"  # noqa: S101
    assert call["params"] == {  # noqa: S101
        "narrow": '[["stream", "general"]]',
        "anchor": "10",
        "num_before": "5",
        "num_after": "0",
        "apply_markdown": "true",
        "client_gravatar": "false",
        "use_first_unread_anchor": "false",
    }


def test_get_messages_rejects_invalid_narrow(config, transport: FakeTransport) -> None:
    with pytest.raises(MessageError) as excinfo:
        build_messages(config, transport).get(narrow=[[None]])

    assert excinfo.value.code is MessageErrorCode.INVALID_NARROW  # noqa: S101
    assert transport.calls == []  # noqa: S101


def test_render(config, transport: FakeTransport) -> None:
    transport.responses.append(json_response({"result": "success", "rendered": "<p><b>hi</b></p>"}))

    assert build_messages(config, transport).render("**hi**") == "<p><b>hi</b></p>"  # noqa: S101
    assert transport.calls[0]["method"] == "POST"  # noqa: S101
    assert transport.calls[0]["url"].endswith("/api/v1/messages/render")  # noqa: S101


def test_update(config, transport: FakeTransport) -> None:
    transport.responses.append(json_response({"result": "success"}))

    build_messages(config, transport).update(99, subject="new topic")

    call = transport.calls[0]
    assert call["method"] == "PATCH"  # noqa: S101
    assert call["url"] == "https://chat.example.com/api/v1/messages/99"  # noqa: S101
    assert call["params"] == {"subject": "new topic"}  # noqa: S101


def test_update_requires_a_change(config, transport: FakeTransport) -> None:
    with pytest.raises(MessageError) as excinfo:
        build_messages(config, transport).update(99)

    assert excinfo.value.code is MessageErrorCode.NOTHING_TO_UPDATE  # noqa: S101
