"""Application orchestration entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flyprovider.adapters.fly import build_fly_operations
from flyprovider.domain.lifecycle import ApplicationReconciler
from flyprovider.domain.model import ResourceConfig
from flyprovider.domain.values import NULL, UNKNOWN, from_optional

if TYPE_CHECKING:
    from flyprovider.domain.lifecycle import (
        CreateOutcome,
        DeleteOutcome,
        ImportOutcome,
        ReadOutcome,
        UpdateOutcome,
    )
    from flyprovider.domain.model import ResourceState
    from flyprovider.domain.ports import RemoteApplicationOperations


def build_reconciler(
    operations: RemoteApplicationOperations | None = None,
) -> ApplicationReconciler:
    return ApplicationReconciler(remote=operations or build_fly_operations())


def create_app(
    *,
    name: str,
    organization: str | None = None,
    reconciler: ApplicationReconciler | None = None,
) -> CreateOutcome:
    """Create an application; without ``organization`` the default one is used."""

    effective = reconciler or build_reconciler()
    config = ResourceConfig(name=from_optional(name), organization=from_optional(organization))
    return effective.create(config)


def read_app(
    state: ResourceState,
    *,
    reconciler: ApplicationReconciler | None = None,
) -> ReadOutcome:
    return (reconciler or build_reconciler()).read(state)


def update_app(
    state: ResourceState,
    *,
    name: str | None = None,
    organization: str | None = None,
    reconciler: ApplicationReconciler | None = None,
) -> UpdateOutcome:
    """Validate a planned change; omitted attributes carry no opinion."""

    effective = reconciler or build_reconciler()
    plan = ResourceConfig(
        name=from_optional(name, unset=NULL),
        organization=from_optional(organization, unset=UNKNOWN),
    )
    return effective.update(plan, state)


def delete_app(
    state: ResourceState,
    *,
    reconciler: ApplicationReconciler | None = None,
) -> DeleteOutcome:
    return (reconciler or build_reconciler()).delete(state)


def import_app(
    identifier: str,
    *,
    reconciler: ApplicationReconciler | None = None,
) -> ImportOutcome:
    return (reconciler or build_reconciler()).import_state(identifier)
