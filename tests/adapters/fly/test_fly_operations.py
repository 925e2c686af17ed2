"""Port implementation backed by the Fly GraphQL API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flyprovider.domain.lifecycle import APPLICATION_NOT_FOUND, ApplicationReconciler
from flyprovider.domain.model import RemoteApplication, RemoteOrganization, ResourceConfig
from flyprovider.domain.ports import RemoteApplicationOperations
from flyprovider.domain.results import Failed, Ok, RemoteErrorEntry, TransportError
from flyprovider.domain.values import known
from tests.support.graphql import app_payload

if TYPE_CHECKING:
    from flyprovider.adapters.fly import FlyApplicationOperations
    from tests.support.graphql import GraphQLServer


def test_operations_satisfy_port(operations: FlyApplicationOperations) -> None:
    assert isinstance(operations, RemoteApplicationOperations)


def test_default_organization_is_the_personal_one(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond(
        {
            "data": {
                "organizations": {
                    "nodes": [
                        {"id": "org_team", "slug": "team", "name": "Team", "type": "SHARED"},
                        {"id": "org_1", "slug": "personal", "name": "acme", "type": "PERSONAL"},
                    ]
                }
            }
        }
    )

    result = operations.resolve_default_organization()

    assert result == Ok(
        RemoteOrganization(id="org_1", slug="personal", name="acme", type="PERSONAL")
    )


def test_default_organization_missing(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": {"organizations": {"nodes": []}}})

    result = operations.resolve_default_organization()

    assert isinstance(result, Failed)
    assert result.messages == ("default organization not found",)


def test_resolve_organization_by_slug(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": {"organization": {"id": "org_team", "slug": "team"}}})

    result = operations.resolve_organization("team")

    assert result == Ok(RemoteOrganization(id="org_team", slug="team"))
    assert server.bodies()[0]["variables"] == {"slug": "team"}


def test_resolve_unknown_organization_fails(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": {"organization": None}})

    result = operations.resolve_organization("nope")

    assert isinstance(result, Failed)


def test_create_application_sends_name_and_organization(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": {"createApp": {"app": app_payload()}}})

    result = operations.create_application("demo-app", "org_1")

    assert result == Ok(
        RemoteApplication(
            id="app_123",
            name="demo-app",
            organization=RemoteOrganization(id="org_1", slug="acme"),
            application_url="demo-app.example",
            hostname="demo-app.fly.dev",
            shared_ip_address="",
        )
    )
    assert server.bodies()[0]["variables"] == {"name": "demo-app", "organizationId": "org_1"}


def test_application_attributes_are_kept_verbatim(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    payload = app_payload() | {"hostname": " demo-app.fly.dev ", "appUrl": "   "}
    server.respond({"data": {"app": payload}})

    result = operations.fetch_application("demo-app")

    assert isinstance(result, Ok)
    assert result.value.hostname == " demo-app.fly.dev "
    assert result.value.application_url == "   "
    assert result.value.shared_ip_address == ""


def test_fetch_application_errors_become_failed_result(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": None, "errors": [{"message": "Could not resolve ", "path": ["app"]}]})

    result = operations.fetch_application("ghost")

    assert result == Failed((RemoteErrorEntry("Could not resolve ", "app"),))


def test_fetch_null_application_reports_not_found(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": {"app": None}})

    result = operations.fetch_application("ghost")

    assert isinstance(result, Failed)
    assert result.messages == (APPLICATION_NOT_FOUND,)


def test_unexpected_payload_becomes_transport_error(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond({"data": {"app": {"id": "app_1"}}})

    result = operations.fetch_application("demo-app")

    assert isinstance(result, TransportError)


def test_delete_application(operations: FlyApplicationOperations, server: GraphQLServer) -> None:
    server.respond({"data": {"deleteApp": {"organization": {"id": "org_1", "slug": "acme"}}}})

    result = operations.delete_application("demo-app")

    assert result == Ok(None)
    assert server.bodies()[0]["variables"] == {"appId": "demo-app"}


def test_delete_transport_failure(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond_text("upstream unavailable", status_code=500)

    result = operations.delete_application("demo-app")

    assert isinstance(result, TransportError)


def test_create_is_not_resent_after_bad_gateway(
    retrying_operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond_text("bad gateway", status_code=502)
    server.respond({"data": {"createApp": {"app": app_payload()}}})

    result = retrying_operations.create_application("demo-app", "org_1")

    assert isinstance(result, TransportError)
    assert len(server.requests) == 1


def test_delete_is_not_resent_after_gateway_timeout(
    retrying_operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond_text("gateway timeout", status_code=504)
    server.respond({"data": {"deleteApp": {"organization": {"id": "org_1", "slug": "acme"}}}})

    result = retrying_operations.delete_application("demo-app")

    assert isinstance(result, TransportError)
    assert len(server.requests) == 1


def test_create_is_resent_after_rate_limit(
    retrying_operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond_text("slow down", status_code=429)
    server.respond({"data": {"createApp": {"app": app_payload()}}})

    result = retrying_operations.create_application("demo-app", "org_1")

    assert isinstance(result, Ok)
    assert len(server.requests) == 2


def test_fetch_is_resent_after_bad_gateway(
    retrying_operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    server.respond_text("bad gateway", status_code=502)
    server.respond({"data": {"app": app_payload()}})

    result = retrying_operations.fetch_application("demo-app")

    assert isinstance(result, Ok)
    assert len(server.requests) == 2


def test_reconciler_create_and_read_through_graphql(
    operations: FlyApplicationOperations, server: GraphQLServer
) -> None:
    reconciler = ApplicationReconciler(remote=operations)
    server.respond(
        {
            "data": {
                "organizations": {
                    "nodes": [{"id": "org_1", "slug": "acme", "name": "acme", "type": "PERSONAL"}]
                }
            }
        }
    )
    server.respond({"data": {"createApp": {"app": app_payload()}}})
    server.respond({"data": None, "errors": [{"message": "Could not resolve ", "path": ["app"]}]})

    created = reconciler.create(ResourceConfig(name=known("demo-app")))
    assert created.state is not None
    refreshed = reconciler.read(created.state)

    assert created.state.organization_id == "org_1"
    assert refreshed.removed
    assert len(refreshed.diagnostics) == 0
    assert len(server.requests) == 3
