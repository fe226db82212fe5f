from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from zulip_api.adapters.transport import RawResponse  # noqa: E402
from zulip_api.config import Config  # noqa: E402


def json_response(body: dict[str, Any], status_code: int = 200) -> RawResponse:
    return RawResponse(status_code=status_code, body=json.dumps(body))


@dataclass
class FakeTransport:
    """Record requests and answer them from a queue of canned responses."""

    responses: list[RawResponse] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)

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
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "auth": (email, api_key),
                "timeout": timeout,
            }
        )
        return self.responses.pop(0)


class DummyLogger:
    def __init__(self) -> None:
        self.debugs: list[str] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.warning_kwargs: list[dict[str, Any]] = []
        self.errors: list[str] = []

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.debugs.append(message % args if args else message)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.infos.append(message % args if args else message)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.warning_kwargs.append(kwargs)
        self.warnings.append(message % args if args else message)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.errors.append(message % args if args else message)


@pytest.fixture
def config() -> Config:
    return Config(
        realm_url="https://chat.example.com/",
        email_address="bot@example.com",
        api_key="key",
        _env_file=None,
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def logger() -> DummyLogger:
    return DummyLogger()
