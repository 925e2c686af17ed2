"""Port for the remote control-plane operations used by the reconciler."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flyprovider.domain.model import RemoteApplication, RemoteOrganization
    from flyprovider.domain.results import RemoteResult


@runtime_checkable
class RemoteApplicationOperations(Protocol):
    """Remote calls needed to manage one application.

    Implementations convert every failure into a result value; they must not
    raise for errors reported by the remote side or by the transport.
    """

    def resolve_default_organization(self) -> RemoteResult[RemoteOrganization]: ...

    def resolve_organization(self, slug: str) -> RemoteResult[RemoteOrganization]: ...

    def create_application(
        self, name: str, organization_id: str
    ) -> RemoteResult[RemoteApplication]: ...

    def fetch_application(self, name: str) -> RemoteResult[RemoteApplication]: ...

    def delete_application(self, name: str) -> RemoteResult[None]: ...


__all__ = ["RemoteApplicationOperations"]
