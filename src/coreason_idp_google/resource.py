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
GoogleIdentityProviderResource component for managing a Google identity provider
through the identity service's API.
"""

from typing import Any

from pydantic import ValidationError

from coreason_idp_google.client import IdentityProviderClient
from coreason_idp_google.config import ServiceConfig
from coreason_idp_google.converters import application_configuration_from_wire, application_configuration_to_wire
from coreason_idp_google.exceptions import (
    DeserializationError,
    FieldAssignmentError,
    ResourceStateError,
    SerializationError,
)
from coreason_idp_google.models import GoogleIdentityProviderState
from coreason_idp_google.models_internal import (
    GoogleIdentityProvider,
    GoogleIdentityProviderBody,
    IdentityProviderEnvelope,
    ProviderLambdaConfiguration,
)
from coreason_idp_google.utils.logger import logger

# Wire fields whose declarative counterpart has a different name
_STATE_FIELD_NAMES = {"lambda_configuration": "lambda_reconcile_id"}


def _state_field(loc: tuple[int | str, ...]) -> str:
    """Names the declarative field behind the first element of a wire validation error location."""
    if not loc:
        return "identity_provider"
    name = str(loc[0])
    for field_name, info in GoogleIdentityProvider.model_fields.items():
        if info.alias == name:
            name = field_name
            break
    return _STATE_FIELD_NAMES.get(name, name)


class GoogleIdentityProviderResource:
    """
    Create, read, update and delete for a Google identity provider.

    Each operation takes the current state and a client, makes at most one call, and returns
    the resulting state. Client errors are raised unchanged.

    Attributes:
        strict_envelope (bool): If True, a read response whose envelope cannot be parsed is an error.
            Otherwise it is logged and read as an empty provider. A bad field inside the
            envelope is always an error.
    """

    def __init__(self, strict_envelope: bool = False) -> None:
        self.strict_envelope = strict_envelope

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "GoogleIdentityProviderResource":
        return cls(strict_envelope=config.strict_envelope)

    @staticmethod
    def schema() -> dict[str, Any]:
        """
        Returns the JSON schema of the declarative state.
        Secret fields are marked `writeOnly`.
        """
        return GoogleIdentityProviderState.model_json_schema()

    def build_request(self, state: GoogleIdentityProviderState) -> GoogleIdentityProviderBody:
        provider = GoogleIdentityProvider(
            button_text=state.button_text,
            client_id=state.client_id,
            client_secret=state.client_secret,
            scope=state.scope,
            debug=state.debug,
            enabled=state.enabled,
            lambda_configuration=ProviderLambdaConfiguration(reconcile_id=state.lambda_reconcile_id),
            application_configuration=application_configuration_to_wire(state.application_configuration),
        )
        return GoogleIdentityProviderBody(identity_provider=provider)

    def serialize(self, state: GoogleIdentityProviderState) -> bytes:
        """
        Encodes the state as a request body.

        Raises:
            SerializationError: If the state cannot be encoded.
        """
        try:
            return self.build_request(state).to_json()
        except ValueError as e:
            raise SerializationError(f"Failed to encode Google identity provider: {e}") from e

    def create(self, state: GoogleIdentityProviderState, client: IdentityProviderClient) -> GoogleIdentityProviderState:
        """
        Creates the identity provider and records the identifier the service assigned.

        Args:
            state: The desired state.
            client: The identity service client.

        Returns:
            The state with `id` set.

        Raises:
            SerializationError: If the request body cannot be built.
            DeserializationError: If the response cannot be parsed or carries no identifier.
        """
        body = self.serialize(state)
        response = client.create(body)
        identifier = self._identifier_from(self._parse(response))
        logger.info(f"Created Google identity provider {identifier}")
        return state.model_copy(update={"id": identifier})

    def read(self, state: GoogleIdentityProviderState, client: IdentityProviderClient) -> GoogleIdentityProviderState:
        """
        Reads the identity provider and rebuilds every field of the state from it.

        Raises:
            ResourceStateError: If the state has no identifier.
            FieldAssignmentError: If a value read back cannot be assigned; `field` names the field.
            DeserializationError: If `strict_envelope` is set and the envelope cannot be parsed.
        """
        return self._read_by_id(self._require_id(state, "read"), client)

    def update(self, state: GoogleIdentityProviderState, client: IdentityProviderClient) -> GoogleIdentityProviderState:
        """
        Replaces the stored identity provider with the desired state.

        The identifier is taken from the response again in case the service changed it.

        Raises:
            ResourceStateError: If the state has no identifier.
            SerializationError: If the request body cannot be built.
            DeserializationError: If the response cannot be parsed or carries no identifier.
        """
        current = self._require_id(state, "update")
        body = self.serialize(state)
        response = client.update(body, current)
        identifier = self._identifier_from(self._parse(response))
        if identifier != current:
            logger.warning(f"Identity provider {current} came back as {identifier}")
        logger.info(f"Updated Google identity provider {identifier}")
        return state.model_copy(update={"id": identifier})

    def delete(self, state: GoogleIdentityProviderState, client: IdentityProviderClient) -> GoogleIdentityProviderState:
        """
        Deletes the identity provider.

        Returns:
            The state with `id` cleared.

        Raises:
            ResourceStateError: If the state has no identifier.
        """
        identifier = self._require_id(state, "delete")
        client.delete(identifier)
        logger.info(f"Deleted Google identity provider {identifier}")
        return state.model_copy(update={"id": None})

    def import_state(self, identifier: str, client: IdentityProviderClient) -> GoogleIdentityProviderState:
        """
        Adopts an existing identity provider by its service identifier, used as given.

        Raises:
            ResourceStateError: If the identifier is empty.
        """
        if not identifier:
            raise ResourceStateError("Cannot import a Google identity provider without an id")
        logger.info(f"Importing Google identity provider {identifier}")
        return self._read_by_id(identifier, client)

    def state_from_provider(self, provider: GoogleIdentityProvider, identifier: str) -> GoogleIdentityProviderState:
        """
        Maps the service's representation onto the declarative state.

        Raises:
            FieldAssignmentError: If a value cannot be assigned; `field` names the field.
        """
        fields: dict[str, Any] = {
            "id": identifier,
            "button_text": provider.button_text,
            "debug": provider.debug,
            "enabled": provider.enabled,
            "lambda_reconcile_id": provider.lambda_configuration.reconcile_id,
            "client_id": provider.client_id,
            "client_secret": provider.client_secret,
            "scope": provider.scope,
            "application_configuration": application_configuration_from_wire(provider.application_configuration),
        }
        try:
            return GoogleIdentityProviderState.model_validate(fields)
        except ValidationError as e:
            loc = e.errors()[0]["loc"]
            field = str(loc[0]) if loc else "identity_provider"
            raise FieldAssignmentError(field, str(e)) from e

    def _read_by_id(self, identifier: str, client: IdentityProviderClient) -> GoogleIdentityProviderState:
        response = client.read(identifier)
        try:
            raw = IdentityProviderEnvelope.model_validate_json(response).identity_provider
        except ValidationError as e:
            if self.strict_envelope:
                raise DeserializationError(f"Invalid identity provider response: {e}") from e
            logger.warning(f"Ignoring unparseable response for identity provider {identifier}: {e}")
            raw = {}
        try:
            provider = GoogleIdentityProvider.model_validate(raw)
        except ValidationError as e:
            raise FieldAssignmentError(_state_field(e.errors()[0]["loc"]), str(e)) from e
        logger.debug(f"Read Google identity provider {identifier}")
        return self.state_from_provider(provider, identifier)

    @staticmethod
    def _parse(response: bytes) -> GoogleIdentityProviderBody:
        try:
            return GoogleIdentityProviderBody.model_validate_json(response)
        except ValidationError as e:
            raise DeserializationError(f"Invalid identity provider response: {e}") from e

    @staticmethod
    def _identifier_from(body: GoogleIdentityProviderBody) -> str:
        identifier = body.identity_provider.id
        if not identifier:
            raise DeserializationError("Identity provider response did not include an id")
        return identifier

    @staticmethod
    def _require_id(state: GoogleIdentityProviderState, operation: str) -> str:
        if not state.id:
            raise ResourceStateError(f"Cannot {operation} a Google identity provider that has no id")
        return state.id
