"""Map remote application payloads onto resource state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flyprovider.domain.model import ResourceState

if TYPE_CHECKING:
    from flyprovider.domain.model import RemoteApplication


def _text(value: str | None) -> str:
    return value or ""


def state_from_remote(app: RemoteApplication) -> ResourceState:
    """Build a complete state from ``app``; the remote side is authoritative."""

    return ResourceState(
        id=_text(app.id),
        name=_text(app.name),
        organization_slug=_text(app.organization.slug),
        organization_id=_text(app.organization.id),
        application_url=_text(app.application_url),
        hostname=_text(app.hostname),
        shared_ip_address=_text(app.shared_ip_address),
    )


__all__ = ["state_from_remote"]
