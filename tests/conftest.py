# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_idp_google

import json
from typing import Any

import pytest

from coreason_idp_google.exceptions import IdentityProviderAPIError
from coreason_idp_google.resource import GoogleIdentityProviderResource

APP_ONE = "11111111-1111-1111-1111-111111111111"
APP_TWO = "22222222-2222-2222-2222-222222222222"


class InMemoryIdentityService:
    """
    Stands in for the identity service: stores request bodies and echoes them back with an id.
    """

    def __init__(self) -> None:
        self.providers: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, ...]] = []
        self._counter = 0

    def _next_id(self) -> str:
        self._counter += 1
        return f"00000000-0000-4000-8000-{self._counter:012d}"

    def _echo(self, identifier: str) -> bytes:
        return json.dumps({"identityProvider": self.providers[identifier]}).encode("utf-8")

    def create(self, body: bytes) -> bytes:
        self.calls.append(("create",))
        identifier = self._next_id()
        provider = json.loads(body)["identityProvider"]
        self.providers[identifier] = {**provider, "id": identifier, "type": "Google"}
        return self._echo(identifier)

    def read(self, identifier: str) -> bytes:
        self.calls.append(("read", identifier))
        if identifier not in self.providers:
            raise IdentityProviderAPIError(404)
        return self._echo(identifier)

    def update(self, body: bytes, identifier: str) -> bytes:
        self.calls.append(("update", identifier))
        if identifier not in self.providers:
            raise IdentityProviderAPIError(404)
        provider = json.loads(body)["identityProvider"]
        self.providers[identifier] = {**provider, "id": identifier, "type": "Google"}
        return self._echo(identifier)

    def delete(self, identifier: str) -> None:
        self.calls.append(("delete", identifier))
        if self.providers.pop(identifier, None) is None:
            raise IdentityProviderAPIError(404)


@pytest.fixture
def service() -> InMemoryIdentityService:
    return InMemoryIdentityService()


@pytest.fixture
def resource() -> GoogleIdentityProviderResource:
    return GoogleIdentityProviderResource()
