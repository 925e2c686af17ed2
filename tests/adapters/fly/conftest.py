"""Shared fixtures for Fly adapter tests."""

from __future__ import annotations

import pytest

from flyprovider.adapters.fly import FlyApplicationOperations, FlyGraphQLClient
from flyprovider.config.fly import FlyConfig
from flyprovider.config.http_resilience import ResilienceConfig, RetryPolicy
from tests.support.graphql import GraphQLServer, client_factory_for

API_URL = "https://api.fly.test/graphql"


@pytest.fixture
def fly_config() -> FlyConfig:
    return FlyConfig(
        api_token="secret-token",
        resilience=ResilienceConfig(
            name="fly-test",
            base_url=API_URL,
            retry=RetryPolicy(total=0, retry_on_exceptions=()),
        ),
    )


@pytest.fixture
def server() -> GraphQLServer:
    return GraphQLServer()


@pytest.fixture
def graphql_client(fly_config: FlyConfig, server: GraphQLServer) -> FlyGraphQLClient:
    return FlyGraphQLClient(config=fly_config, client_factory=client_factory_for(server))


@pytest.fixture
def operations(graphql_client: FlyGraphQLClient) -> FlyApplicationOperations:
    return FlyApplicationOperations(client=graphql_client)


@pytest.fixture
def retrying_operations(server: GraphQLServer) -> FlyApplicationOperations:
    config = FlyConfig(
        api_token="secret-token",
        resilience=ResilienceConfig(
            name="fly-test",
            base_url=API_URL,
            retry=RetryPolicy(total=3, backoff_factor=0, backoff_jitter=0),
        ),
    )
    client = FlyGraphQLClient(config=config, client_factory=client_factory_for(server))
    return FlyApplicationOperations(client=client)
