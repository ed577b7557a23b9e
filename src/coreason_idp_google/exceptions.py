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
Custom exceptions for the coreason-idp-google package.
"""


class CoreasonIdpError(Exception):
    """Base exception for all coreason-idp-google errors."""


class SerializationError(CoreasonIdpError):
    """Raised when the declarative state cannot be encoded into a request body."""


class DeserializationError(CoreasonIdpError):
    """Raised when a response body from the identity service cannot be decoded."""


class FieldAssignmentError(DeserializationError):
    """
    Raised when a value read back from the service cannot be assigned to a state field.

    Attributes:
        field (str): The name of the declarative field that failed.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"idpGoogle.{field}: {reason}")


class ResourceStateError(CoreasonIdpError):
    """Raised when an operation needs a server identifier that the state does not carry."""


class TransportError(CoreasonIdpError):
    """Raised when the request to the identity service could not be completed."""


class IdentityProviderAPIError(TransportError):
    """
    Raised when the identity service answers with a non-2xx status.

    Attributes:
        status_code (int): The HTTP status returned by the service.
        body (bytes): The raw response body, kept for diagnostics.
    """

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        detail = body.decode("utf-8", errors="replace")[:200]
        super().__init__(f"Identity service returned status {status_code}: {detail}")


class OversizedResponseError(CoreasonIdpError):
    """Raised when an HTTP response is too large."""
