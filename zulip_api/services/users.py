"""User directory operations."""

from __future__ import annotations

from typing import Any

from zulip_api.core.responses import require_objects
from zulip_api.services.base import BaseClient, encode_bool


class Users(BaseClient):
    """List, inspect and create users in the realm."""

    def get_all(self, client_gravatar: bool = False) -> list[dict[str, Any]]:
        payload = self._call("GET", "/users", {"client_gravatar": encode_bool(client_gravatar)})
        return require_objects(payload, "members")

    def get_current(self, client_gravatar: bool = False) -> dict[str, Any]:
        """Return the profile of the authenticated user."""

        return self._call("GET", "/users/me", {"client_gravatar": encode_bool(client_gravatar)})

    def create(self, email: str, password: str, full_name: str, short_name: str) -> None:
        """Create a user; requires administrator credentials."""

        params = {
            "email": email,
            "password": password,
            "full_name": full_name,
            "short_name": short_name,
        }
        self._call("POST", "/users", params)
