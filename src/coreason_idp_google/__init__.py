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
Declarative management of a Google identity provider in the FusionAuth identity service.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .client import HTTPIdentityProviderClient, IdentityProviderClient
from .config import ServiceConfig
from .converters import application_configuration_from_wire, application_configuration_to_wire
from .exceptions import (
    CoreasonIdpError,
    DeserializationError,
    FieldAssignmentError,
    IdentityProviderAPIError,
    ResourceStateError,
    SerializationError,
    TransportError,
)
from .models import GoogleApplicationConfiguration, GoogleIdentityProviderState
from .resource import GoogleIdentityProviderResource

__all__ = [
    "CoreasonIdpError",
    "DeserializationError",
    "FieldAssignmentError",
    "GoogleApplicationConfiguration",
    "GoogleIdentityProviderResource",
    "GoogleIdentityProviderState",
    "HTTPIdentityProviderClient",
    "IdentityProviderAPIError",
    "IdentityProviderClient",
    "ResourceStateError",
    "SerializationError",
    "ServiceConfig",
    "TransportError",
    "application_configuration_from_wire",
    "application_configuration_to_wire",
]
