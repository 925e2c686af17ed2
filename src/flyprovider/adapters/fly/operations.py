"""Fly implementation of the remote application operations port.

Client exceptions are converted into result values here; the domain never
sees adapter exception types.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ValidationError

from flyprovider.domain.lifecycle.classify import APPLICATION_NOT_FOUND
from flyprovider.domain.results import Failed, Ok, RemoteErrorEntry, TransportError

from .client import GraphQLResponseError, GraphQLTransportError
from .queries import (
    CREATE_APP_MUTATION,
    DELETE_APP_MUTATION,
    GET_APP_QUERY,
    ORGANIZATION_QUERY,
    ORGANIZATIONS_QUERY,
)
from .schema import AppData, CreateAppData, DeleteAppData, OrganizationData, OrganizationsData
from .translator import parse_application, parse_organization

if TYPE_CHECKING:
    from collections.abc import Mapping

    from flyprovider.domain.model import RemoteApplication, RemoteOrganization
    from flyprovider.domain.results import RemoteResult

    from .client import FlyGraphQLClient

log = getLogger(__name__)

PERSONAL_ORGANIZATION_TYPE: Final[str] = "PERSONAL"


def _failed(message: str, path: str = "") -> Failed:
    return Failed((RemoteErrorEntry(message, path),))


@dataclass(slots=True)
class FlyApplicationOperations:
    """Remote application operations backed by the Fly GraphQL API."""

    client: FlyGraphQLClient

    def resolve_default_organization(self) -> RemoteResult[RemoteOrganization]:
        result = self._query(OrganizationsData, ORGANIZATIONS_QUERY)
        if not isinstance(result, Ok):
            return result
        for node in result.value.organizations.nodes:
            if node.type == PERSONAL_ORGANIZATION_TYPE:
                return Ok(parse_organization(node))
        return _failed("default organization not found", "organizations")

    def resolve_organization(self, slug: str) -> RemoteResult[RemoteOrganization]:
        result = self._query(OrganizationData, ORGANIZATION_QUERY, {"slug": slug})
        if not isinstance(result, Ok):
            return result
        if result.value.organization is None:
            return _failed(f"organization {slug!r} not found", "organization")
        return Ok(parse_organization(result.value.organization))

    def create_application(
        self, name: str, organization_id: str
    ) -> RemoteResult[RemoteApplication]:
        result = self._query(
            CreateAppData,
            CREATE_APP_MUTATION,
            {"name": name, "organizationId": organization_id},
            mutation=True,
        )
        if not isinstance(result, Ok):
            return result
        return Ok(parse_application(result.value.create_app.app))

    def fetch_application(self, name: str) -> RemoteResult[RemoteApplication]:
        result = self._query(AppData, GET_APP_QUERY, {"name": name})
        if not isinstance(result, Ok):
            return result
        if result.value.app is None:
            return _failed(APPLICATION_NOT_FOUND, "app")
        return Ok(parse_application(result.value.app))

    def delete_application(self, name: str) -> RemoteResult[None]:
        result = self._query(
            DeleteAppData, DELETE_APP_MUTATION, {"appId": name}, mutation=True
        )
        if not isinstance(result, Ok):
            return result
        return Ok(None)

    def _query[M: BaseModel](
        self,
        model: type[M],
        query: str,
        variables: Mapping[str, object] | None = None,
        *,
        mutation: bool = False,
    ) -> RemoteResult[M]:
        try:
            data = self.client.execute(query, variables, mutation=mutation)
        except GraphQLResponseError as exc:
            return Failed(tuple(RemoteErrorEntry(message, path) for message, path in exc.errors))
        except GraphQLTransportError as exc:
            return TransportError(str(exc))

        try:
            return Ok(model.model_validate(data))
        except ValidationError as exc:
            log.exception("Unexpected Fly API payload for %s", model.__name__)
            return TransportError(f"Unexpected Fly API payload: {exc}")

