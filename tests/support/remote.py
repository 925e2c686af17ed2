"""Reusable fakes and builders for lifecycle tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from flyprovider.domain.model import RemoteApplication, RemoteOrganization, ResourceState
from flyprovider.domain.results import (
    Failed,
    Ok,
    RemoteErrorEntry,
    RemoteResult,
    TransportError,
)


def make_organization(
    *, id: str = "org_1", slug: str = "acme", name: str = "acme", type: str = "PERSONAL"
) -> RemoteOrganization:
    return RemoteOrganization(id=id, slug=slug, name=name, type=type)


def make_remote_app(
    name: str = "demo-app",
    *,
    id: str = "app_123",
    organization: RemoteOrganization | None = None,
    application_url: str = "demo-app.example",
    hostname: str = "demo-app.fly.dev",
    shared_ip_address: str = "",
) -> RemoteApplication:
    return RemoteApplication(
        id=id,
        name=name,
        organization=organization or make_organization(),
        application_url=application_url,
        hostname=hostname,
        shared_ip_address=shared_ip_address,
    )


def make_state(name: str = "demo-app", *, organization_slug: str = "acme") -> ResourceState:
    return ResourceState(
        id="app_123",
        name=name,
        organization_slug=organization_slug,
        organization_id="org_1",
        application_url=f"{name}.example",
        hostname=f"{name}.fly.dev",
        shared_ip_address="",
    )


def failed(*messages: str, path: str = "app") -> Failed:
    return Failed(tuple(RemoteErrorEntry(message, path) for message in messages))


def transport_error(message: str = "connection reset") -> TransportError:
    return TransportError(message)


@dataclass
class FakeRemoteOperations:
    """In-memory implementation of the remote operations port recording every call."""

    default_organization: RemoteResult[RemoteOrganization] = field(
        default_factory=lambda: Ok(make_organization())
    )
    organizations: dict[str, RemoteResult[RemoteOrganization]] = field(default_factory=dict)
    create_result: RemoteResult[RemoteApplication] = field(
        default_factory=lambda: Ok(make_remote_app())
    )
    applications: dict[str, RemoteResult[RemoteApplication]] = field(default_factory=dict)
    delete_result: RemoteResult[None] = field(default_factory=lambda: Ok(None))
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def resolve_default_organization(self) -> RemoteResult[RemoteOrganization]:
        self.calls.append(("resolve_default_organization", ()))
        return self.default_organization

    def resolve_organization(self, slug: str) -> RemoteResult[RemoteOrganization]:
        self.calls.append(("resolve_organization", (slug,)))
        return self.organizations.get(slug, failed(f"organization {slug!r} not found"))

    def create_application(
        self, name: str, organization_id: str
    ) -> RemoteResult[RemoteApplication]:
        self.calls.append(("create_application", (name, organization_id)))
        return self.create_result

    def fetch_application(self, name: str) -> RemoteResult[RemoteApplication]:
        self.calls.append(("fetch_application", (name,)))
        return self.applications.get(name, failed("Could not resolve "))

    def delete_application(self, name: str) -> RemoteResult[None]:
        self.calls.append(("delete_application", (name,)))
        return self.delete_result

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return self.call_names().count(name)
