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
Configuration for the coreason-idp-google package.
"""

from urllib.parse import urlparse

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceConfig(BaseSettings):
    """
    Connection settings for the identity-management service.

    Attributes:
        host (str): Base URL of the service (e.g. https://auth.coreason.com).
        api_key (SecretStr): API key sent in the Authorization header.
        tenant_id (str | None): Tenant to scope requests to, if the service is multi-tenant.
        http_timeout (float): Timeout in seconds for every request.
        max_response_bytes (int): Upper bound on a response body.
        strict_envelope (bool): Treat an unparseable read response as an error instead of an empty provider.
        unsafe_local_dev (bool): Allow plain HTTP hosts for local testing.
    """

    model_config = SettingsConfigDict(
        env_prefix="COREASON_IDP_",
        case_sensitive=False,
    )

    unsafe_local_dev: bool = False
    host: str
    api_key: SecretStr
    tenant_id: str | None = None
    http_timeout: float = Field(..., description="Timeout in seconds for all identity service calls.")
    max_response_bytes: int = Field(default=1_000_000, gt=0)
    strict_envelope: bool = False

    @field_validator("host")
    @classmethod
    def normalize_host(cls, v: str, info: ValidationInfo) -> str:
        """
        Ensures the host is a scheme plus authority (e.g. https://auth.coreason.com).
        Defaults the scheme to https and strips any path.

        Args:
            v: The host string to normalize.
            info: Validation context, used to read `unsafe_local_dev`.

        Returns:
            The normalized base URL.

        Raises:
            ValueError: If the host is plain HTTP without `unsafe_local_dev`.
        """
        v = v.strip()
        if "://" not in v:
            v = f"https://{v}"

        parsed = urlparse(v)
        if not parsed.netloc:
            raise ValueError(f"Invalid host '{v}'")

        scheme = parsed.scheme.lower()
        if scheme == "http" and not info.data.get("unsafe_local_dev", False):
            raise ValueError("HTTPS is required for production. Set 'unsafe_local_dev=True' only for local testing.")
        if scheme not in ("http", "https"):
            raise ValueError(f"Unsupported scheme '{scheme}'")

        return f"{scheme}://{parsed.netloc.lower()}"
