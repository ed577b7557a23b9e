# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_idp_google

"""
Client interface for the identity service's identity-provider API, and its httpx implementation.
"""

from typing import Any, Protocol
from urllib.parse import quote

import httpx
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

from coreason_idp_google.config import ServiceConfig
from coreason_idp_google.exceptions import IdentityProviderAPIError, OversizedResponseError, TransportError
from coreason_idp_google.utils.logger import logger


class IdentityProviderClient(Protocol):
    """
    The calls the resource makes against the identity service.
    Bodies are opaque JSON bytes; implementations raise on any failure.
    """

    def create(self, body: bytes) -> bytes: ...

    def read(self, identifier: str) -> bytes: ...

    def update(self, body: bytes, identifier: str) -> bytes: ...

    def delete(self, identifier: str) -> None: ...


class HTTPIdentityProviderClient:
    """
    Talks to `/api/identity-provider` over HTTP.

    No retries are made here; every failure is raised to the caller.
    """

    api_path = "/api/identity-provider"

    def __init__(self, config: ServiceConfig, client: httpx.Client | None = None) -> None:
        """
        Initialize the HTTPIdentityProviderClient.

        Args:
            config: The service configuration.
            client: External sync client (optional). If not provided, one is created with the configured timeout
                and closed by `close()`.
        """
        self.config = config
        self._internal_client = client is None

        if client:
            self._client = client
        else:
            self._client = httpx.Client(timeout=self.config.http_timeout)

        HTTPXClientInstrumentor().instrument_client(self._client)

    def __enter__(self) -> "HTTPIdentityProviderClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._internal_client:
            self._client.close()

    def create(self, body: bytes) -> bytes:
        return self._request("POST", self.api_path, body)

    def read(self, identifier: str) -> bytes:
        return self._request("GET", self._item_path(identifier))

    def update(self, body: bytes, identifier: str) -> bytes:
        return self._request("PUT", self._item_path(identifier), body)

    def delete(self, identifier: str) -> None:
        self._request("DELETE", self._item_path(identifier))

    def _item_path(self, identifier: str) -> str:
        return f"{self.api_path}/{quote(identifier, safe='')}"

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": self.config.api_key.get_secret_value(),
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.config.tenant_id:
            headers["X-FusionAuth-TenantId"] = self.config.tenant_id
        return headers

    def _request(self, method: str, path: str, body: bytes | None = None) -> bytes:
        """
        Sends one request and reads the response body with a size cap.

        Returns:
            The raw response body.

        Raises:
            OversizedResponseError: If the body exceeds `max_response_bytes`.
            IdentityProviderAPIError: If the service answers with a non-2xx status.
            TransportError: If the request could not be completed.
        """
        url = f"{self.config.host}{path}"
        limit = self.config.max_response_bytes

        logger.debug(f"{method} {path}")
        try:
            with self._client.stream(method, url, content=body, headers=self._headers(body is not None)) as response:
                content_length = response.headers.get("Content-Length")
                if content_length and content_length.isdigit() and int(content_length) > limit:
                    raise OversizedResponseError(f"Response from {path} too large ({content_length} bytes)")

                content = bytearray()
                for chunk in response.iter_bytes():
                    content.extend(chunk)
                    if len(content) > limit:
                        raise OversizedResponseError(f"Response from {path} exceeded {limit} bytes")
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            logger.warning(f"{method} {path} returned status {response.status_code}")
            raise IdentityProviderAPIError(response.status_code, bytes(content))

        return bytes(content)
