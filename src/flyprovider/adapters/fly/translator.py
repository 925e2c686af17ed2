"""Translate Fly GraphQL payloads into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flyprovider.domain.model import RemoteApplication, RemoteOrganization

if TYPE_CHECKING:
    from .schema import AppPayload, OrganizationPayload


def parse_organization(payload: OrganizationPayload) -> RemoteOrganization:
    return RemoteOrganization(
        id=payload.id,
        slug=payload.slug,
        name=payload.name or "",
        type=payload.type or "",
    )


def parse_application(payload: AppPayload) -> RemoteApplication:
    return RemoteApplication(
        id=payload.id,
        name=payload.name,
        organization=parse_organization(payload.organization),
        application_url=payload.app_url or "",
        hostname=payload.hostname or "",
        shared_ip_address=payload.shared_ip_address or "",
    )
