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
Declarative state models for the Google identity-provider resource.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

_UUID_PATTERN = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def validate_uuid(v: str) -> str:
    """
    Checks that `v` is a UUID in its canonical 8-4-4-4-12 hex form.

    Raises:
        ValueError: If `v` is not a UUID.
    """
    if not _UUID_PATTERN.fullmatch(v):
        raise ValueError(f"expected a UUID, got {v!r}")
    return v


class GoogleApplicationConfiguration(BaseModel):
    """
    Per-application override of the Google identity provider.

    Frozen so that records are hashable and can live in a set; their order carries no meaning.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    application_id: str = Field(..., description="The Id of the Application this override applies to.")
    button_text: str = Field(
        default="",
        description="This is an optional Application specific override for the top level button text.",
    )
    client_id: str = Field(
        default="",
        description="This is an optional Application specific override for the top level client id.",
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        description="This is an optional Application specific override for the top level client secret.",
    )
    scope: str = Field(
        default="",
        description="This is an optional Application specific override for for the top level scope.",
    )
    create_registration: bool = Field(
        default=True,
        description=(
            "Determines if a UserRegistration is created for the User automatically or not. If a user doesn't "
            "exist in FusionAuth and logs in through an identity provider, this boolean controls whether or not "
            "FusionAuth creates a registration for the User in the Application they are logging into."
        ),
    )
    enabled: bool = Field(
        default=False,
        description="Determines if this identity provider is enabled for the Application specified by the applicationId key.",
    )

    @field_validator("application_id")
    @classmethod
    def check_application_id(cls, v: str) -> str:
        return validate_uuid(v)


class GoogleIdentityProviderState(BaseModel):
    """
    The declarative state of a Google identity provider.

    Validated once when it is constructed; every operation on the resource returns a new
    instance rather than mutating this one.

    Attributes:
        id (str | None): Identifier assigned by the identity service, None until created.
        button_text (str): Button text shown on the login page.
        client_id (str): Google OAuth client id.
        client_secret (SecretStr): Google OAuth client secret.
        scope (str): OAuth scope requested from Google.
        debug (bool): Whether the service writes an event log entry on every login.
        enabled (bool): Whether the provider is enabled globally.
        lambda_reconcile_id (str): Lambda used to reconcile Google claims into the local user.
        application_configuration (frozenset[GoogleApplicationConfiguration]): Per-application overrides.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "button_text": "Login with Google",
                "client_id": "254311943570-8e2i2hds0qdnee4124socceeh2q2mtjl.apps.googleusercontent.com",
                "scope": "profile",
                "application_configuration": [
                    {
                        "application_id": "1c212e59-0d0e-6b1a-ad48-f4f92793be32",
                        "create_registration": True,
                        "enabled": True,
                    }
                ],
            }
        },
    )

    id: str | None = Field(default=None, description="The Id assigned by the identity service.")
    button_text: str = Field(
        ...,
        description="The top-level button text to use on the FusionAuth login page for this Identity Provider.",
    )
    client_id: str = Field(
        ...,
        description=(
            "The top-level Google client id for your Application. This value is retrieved from the Google "
            "developer website when you setup your Google developer account."
        ),
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        description=(
            "The top-level client secret to use with the Google Identity Provider when retrieving the long-lived "
            "token. This value is retrieved from the Google developer website when you setup your Google "
            "developer account."
        ),
    )
    scope: str = Field(default="", description="The top-level scope that you are requesting from Google.")
    debug: bool = Field(
        default=False,
        description=(
            "Determines if debug is enabled for this provider. When enabled, each time this provider is invoked "
            "to reconcile a login an Event Log will be created."
        ),
    )
    enabled: bool = Field(
        default=False,
        description="Determines if this provider is enabled. If it is false then it will be disabled globally.",
    )
    lambda_reconcile_id: str = Field(
        default="",
        description=(
            "The unique Id of the lambda to used during the user reconcile process to map custom claims from the "
            "external identity provider to the FusionAuth user."
        ),
    )
    application_configuration: frozenset[GoogleApplicationConfiguration] = Field(
        default_factory=frozenset,
        description="The configuration for each Application that the identity provider is enabled for.",
    )
