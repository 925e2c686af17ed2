"""Records describing a Fly application on both sides of the reconciler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .values import UNKNOWN, FieldValue

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceConfig:
    """Desired configuration as declared by the caller.

    The organization id is never part of the desired configuration; it is
    always derived from ``organization`` or from the default organization.
    """

    name: FieldValue[str]
    organization: FieldValue[str] = UNKNOWN


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceState:
    """Authoritative snapshot of a remote application, always fully populated."""

    id: str
    name: str
    organization_slug: str
    organization_id: str
    application_url: str
    hostname: str
    shared_ip_address: str

    # attribute names used when the state is stored outside the process
    STORED_KEYS: ClassVar[dict[str, str]] = {
        "id": "id",
        "name": "name",
        "organization_slug": "org",
        "organization_id": "orgid",
        "application_url": "appurl",
        "hostname": "hostname",
        "shared_ip_address": "sharedipaddress",
    }

    def to_dict(self) -> dict[str, str]:
        return {key: getattr(self, attr) for attr, key in self.STORED_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ResourceState:
        missing = [key for key in cls.STORED_KEYS.values() if key not in data]
        if missing:
            raise ValueError(f"Stored state is missing attributes: {', '.join(missing)}")
        invalid = [key for key in cls.STORED_KEYS.values() if not isinstance(data[key], str)]
        if invalid:
            raise ValueError(f"Stored state attributes must be strings: {', '.join(invalid)}")
        return cls(**{attr: data[key] for attr, key in cls.STORED_KEYS.items()})


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteOrganization:
    id: str
    slug: str
    name: str = ""
    type: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteApplication:
    """Application as reported by the control-plane API."""

    id: str
    name: str
    organization: RemoteOrganization
    application_url: str = ""
    hostname: str = ""
    shared_ip_address: str = ""


__all__ = [
    "RemoteApplication",
    "RemoteOrganization",
    "ResourceConfig",
    "ResourceState",
]
