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
Conversion between the declarative set of application overrides and the service's
mapping keyed by application id.
"""

from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from coreason_idp_google.exceptions import FieldAssignmentError
from coreason_idp_google.models import GoogleApplicationConfiguration
from coreason_idp_google.models_internal import GoogleAppConfig


def _sort_key(record: GoogleApplicationConfiguration) -> tuple[str, str, str, str, str, bool, bool]:
    return (
        record.application_id,
        record.button_text,
        record.client_id,
        record.client_secret.get_secret_value(),
        record.scope,
        record.create_registration,
        record.enabled,
    )


def application_configuration_to_wire(
    records: Iterable[GoogleApplicationConfiguration],
) -> dict[str, GoogleAppConfig]:
    """
    Keys each override record by its application id.

    Records are visited in a total order (application id first, then every other field) so the
    output does not depend on set iteration order. Duplicate ids are left for the service to
    reject; of those, the record that sorts last wins.

    Args:
        records: The override records from the declarative state.

    Returns:
        The `applicationConfiguration` mapping for the request body.
    """
    mapping: dict[str, GoogleAppConfig] = {}
    for record in sorted(records, key=_sort_key):
        mapping[record.application_id] = GoogleAppConfig(
            button_text=record.button_text,
            client_id=record.client_id,
            client_secret=record.client_secret,
            scope=record.scope,
            create_registration=record.create_registration,
            enabled=record.enabled,
        )
    return mapping


def application_configuration_from_wire(
    mapping: Mapping[str, GoogleAppConfig],
) -> frozenset[GoogleApplicationConfiguration]:
    """
    Turns the service's `applicationConfiguration` mapping back into a set of records,
    moving each key into the record's `application_id`.

    Args:
        mapping: The mapping read from the service.

    Returns:
        The override records, in no particular order.

    Raises:
        FieldAssignmentError: If a key is not a valid application id.
    """
    records = set()
    for application_id, config in mapping.items():
        try:
            records.add(
                GoogleApplicationConfiguration(
                    application_id=application_id,
                    button_text=config.button_text,
                    client_id=config.client_id,
                    client_secret=config.client_secret,
                    scope=config.scope,
                    create_registration=config.create_registration,
                    enabled=config.enabled,
                )
            )
        except ValidationError as e:
            raise FieldAssignmentError("application_configuration", str(e)) from e
    return frozenset(records)
