# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_idp_google

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from coreason_idp_google.config import ServiceConfig


def test_config_loading() -> None:
    """Test loading configuration from environment variables."""
    with patch.dict(
        os.environ,
        {
            "COREASON_IDP_HOST": "auth.example.com",
            "COREASON_IDP_API_KEY": "key-from-env",
            "COREASON_IDP_HTTP_TIMEOUT": "7.5",
            "COREASON_IDP_TENANT_ID": "tenant-1",
            "COREASON_IDP_STRICT_ENVELOPE": "true",
        },
    ):
        config = ServiceConfig()

    assert config.host == "https://auth.example.com"
    assert config.api_key.get_secret_value() == "key-from-env"
    assert config.http_timeout == 7.5
    assert config.tenant_id == "tenant-1"
    assert config.strict_envelope is True
    assert config.max_response_bytes == 1_000_000


def test_config_case_insensitive() -> None:
    with patch.dict(
        os.environ,
        {
            "coreason_idp_host": "lower.example.com",
            "coreason_idp_api_key": "k",
            "COREASON_IDP_HTTP_TIMEOUT": "1",
        },
    ):
        config = ServiceConfig()

    assert config.host == "https://lower.example.com"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("auth.example.com", "https://auth.example.com"),
        ("https://auth.example.com", "https://auth.example.com"),
        ("https://Auth.Example.com/", "https://auth.example.com"),
        ("https://auth.example.com/api/identity-provider", "https://auth.example.com"),
        ("  auth.example.com:9011  ", "https://auth.example.com:9011"),
    ],
)
def test_host_normalization(raw: str, expected: str) -> None:
    assert ServiceConfig(host=raw, api_key="k", http_timeout=1.0).host == expected


def test_timeout_required() -> None:
    with patch.dict(os.environ, clear=True):
        with pytest.raises(ValidationError) as exc:
            ServiceConfig(host="auth.example.com", api_key="k")
    assert "http_timeout" in str(exc.value)


def test_api_key_required() -> None:
    with patch.dict(os.environ, clear=True):
        with pytest.raises(ValidationError) as exc:
            ServiceConfig(host="auth.example.com", http_timeout=1.0)
    assert "api_key" in str(exc.value)


def test_https_enforcement() -> None:
    with pytest.raises(ValidationError, match="HTTPS is required"):
        ServiceConfig(host="http://localhost:9011", api_key="k", http_timeout=1.0)


def test_http_allowed_for_local_dev() -> None:
    config = ServiceConfig(host="http://localhost:9011", api_key="k", http_timeout=1.0, unsafe_local_dev=True)
    assert config.host == "http://localhost:9011"


def test_unsupported_scheme() -> None:
    with pytest.raises(ValidationError, match="Unsupported scheme"):
        ServiceConfig(host="ftp://auth.example.com", api_key="k", http_timeout=1.0)


def test_max_response_bytes_positive() -> None:
    with pytest.raises(ValidationError):
        ServiceConfig(host="auth.example.com", api_key="k", http_timeout=1.0, max_response_bytes=0)


def test_api_key_masked() -> None:
    config = ServiceConfig(host="auth.example.com", api_key="super-secret-key", http_timeout=1.0)
    assert "super-secret-key" not in repr(config)
