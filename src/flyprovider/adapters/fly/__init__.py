"""Public interface for the Fly adapter."""

from __future__ import annotations

from flyprovider.config.fly import get_fly_config

from .client import (
    FlyAPIError,
    FlyGraphQLClient,
    GraphQLResponseError,
    GraphQLTransportError,
    format_error_path,
)
from .operations import FlyApplicationOperations
from .translator import parse_application, parse_organization


def build_fly_operations(client: FlyGraphQLClient | None = None) -> FlyApplicationOperations:
    """Return operations wired to the environment configuration."""

    return FlyApplicationOperations(client=client or FlyGraphQLClient(config=get_fly_config()))


__all__ = [
    "FlyAPIError",
    "FlyApplicationOperations",
    "FlyGraphQLClient",
    "GraphQLResponseError",
    "GraphQLTransportError",
    "build_fly_operations",
    "format_error_path",
    "parse_application",
    "parse_organization",
]
