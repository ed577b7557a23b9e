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
Wire-format models exchanged with the identity service.
These are not exposed in the public API.

The outer provider fields use the service's camelCase names while the OAuth fields keep
their snake_case names (`client_id`, `client_secret`). Both must be sent exactly as declared.
"""

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_serializer,
)


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == "" or value == {}


class _WireModel(BaseModel):
    """
    Base for wire objects: empty values are left out of the JSON, except the keys named in
    `always_emitted`, and unknown keys from the service are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    always_emitted: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key in self.always_emitted or not _is_empty(value)
        }


class GoogleAppConfig(_WireModel):
    """
    Per-application override as stored by the service, keyed by application id in the parent.
    """

    always_emitted: ClassVar[frozenset[str]] = frozenset({"createRegistration"})

    button_text: str = Field(default="", alias="buttonText")
    client_id: str = Field(default="", alias="client_id")
    client_secret: SecretStr = Field(default=SecretStr(""), alias="client_secret")
    scope: str = Field(default="", alias="scope")
    create_registration: bool = Field(default=True, alias="createRegistration")
    enabled: bool = Field(default=False, alias="enabled")

    @field_validator("button_text", "client_id", "client_secret", "scope", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_serializer("client_secret")
    def reveal_secret(self, v: SecretStr) -> str:
        return v.get_secret_value()


class ProviderLambdaConfiguration(_WireModel):
    reconcile_id: str = Field(default="", alias="reconcileId")

    @field_validator("reconcile_id", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class GoogleIdentityProvider(_WireModel):
    """
    The Google identity provider object inside the `identityProvider` envelope.

    `id`, `type`, `name` and the timestamps are assigned by the service and are only read back.
    """

    always_emitted: ClassVar[frozenset[str]] = frozenset({"applicationConfiguration"})

    id: str | None = Field(default=None, alias="id")
    button_text: str = Field(default="", alias="buttonText")
    client_id: str = Field(default="", alias="client_id")
    client_secret: SecretStr = Field(default=SecretStr(""), alias="client_secret")
    scope: str = Field(default="", alias="scope")
    debug: bool = Field(default=False, alias="debug")
    enabled: bool = Field(default=False, alias="enabled")
    lambda_configuration: ProviderLambdaConfiguration = Field(
        default_factory=ProviderLambdaConfiguration, alias="lambdaConfiguration"
    )
    type: str | None = Field(default=None, alias="type")
    name: str | None = Field(default=None, alias="name")
    insert_instant: int | None = Field(default=None, alias="insertInstant")
    last_update_instant: int | None = Field(default=None, alias="lastUpdateInstant")
    application_configuration: dict[str, GoogleAppConfig] = Field(
        default_factory=dict, alias="applicationConfiguration"
    )

    @field_validator("button_text", "client_id", "client_secret", "scope", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("lambda_configuration", "application_configuration", mode="before")
    @classmethod
    def null_as_missing(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_serializer("client_secret")
    def reveal_secret(self, v: SecretStr) -> str:
        return v.get_secret_value()


class GoogleIdentityProviderBody(BaseModel):
    """
    Request and response envelope: `{"identityProvider": {...}}`.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    identity_provider: GoogleIdentityProvider = Field(..., alias="identityProvider")

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


class IdentityProviderEnvelope(BaseModel):
    """
    The outer `{"identityProvider": {...}}` frame of a read response, with the provider left
    unparsed so that a bad field inside it can be reported on its own.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    identity_provider: dict[str, Any] = Field(..., alias="identityProvider")
