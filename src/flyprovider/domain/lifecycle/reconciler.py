"""Lifecycle entry points for one Fly application.

Each entry point takes explicit input records and returns an outcome record.
The reconciler holds no state between calls; the caller persists the returned
state and serialises operations against one application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from flyprovider.domain.results import Ok
from flyprovider.domain.values import Known

from .classify import APPLICATION_NOT_FOUND, classify_failure, single_failure_diagnostic
from .contracts import CreateOutcome, DeleteOutcome, ImportOutcome, ReadOutcome, UpdateOutcome
from .immutability import ImmutableField, guard_immutable_fields
from .mapper import state_from_remote

if TYPE_CHECKING:
    from collections.abc import Collection

    from flyprovider.domain.diagnostics import Diagnostics
    from flyprovider.domain.model import RemoteOrganization, ResourceConfig, ResourceState
    from flyprovider.domain.ports import RemoteApplicationOperations
    from flyprovider.domain.results import RemoteResult

log = getLogger(__name__)


@dataclass(slots=True)
class ApplicationReconciler:
    """Reconcile desired application configuration with the remote API."""

    remote: RemoteApplicationOperations
    not_found_messages: Collection[str] = field(
        default_factory=lambda: frozenset({APPLICATION_NOT_FOUND})
    )

    def create(self, config: ResourceConfig) -> CreateOutcome:
        outcome = CreateOutcome()
        if not isinstance(config.name, Known):
            outcome.diagnostics.add_error(
                "Missing application name", "An application name is required to create it"
            )
            return outcome
        name = config.name.value

        organization = self._resolve_organization(config, outcome.diagnostics)
        if organization is None:
            return outcome

        log.info("Creating application %s in organization %s", name, organization.slug)
        result = self.remote.create_application(name, organization.id)
        if not isinstance(result, Ok):
            outcome.diagnostics.append(
                single_failure_diagnostic(result, "Create application failed")
            )
            return outcome

        outcome.state = state_from_remote(result.value)
        log.info("Created application %s (id=%s)", outcome.state.name, outcome.state.id)
        return outcome

    def read(self, state: ResourceState) -> ReadOutcome:
        log.info("Refreshing application %s", state.name)
        return self._refresh(state.name)

    def update(self, plan: ResourceConfig, prior: ResourceState) -> UpdateOutcome:
        """Validate ``plan`` against ``prior`` and return the unchanged state.

        Organization and name are immutable, so no remote call is made. Mutable
        attributes such as secrets would be written after the guard passes.
        """

        log.info("Validating update of application %s", prior.name)
        log.debug("Updating application: existing=%s, planned=%s", prior, plan)
        diagnostics = guard_immutable_fields(
            (
                ImmutableField("organization", prior.organization_slug, plan.organization),
                ImmutableField("name", prior.name, plan.name),
            )
        )
        if diagnostics.has_error():
            log.warning(
                "Rejected update of application %s: %d violation(s)", prior.name, len(diagnostics)
            )
        else:
            log.info("Application %s unchanged", prior.name)
        return UpdateOutcome(state=prior, diagnostics=diagnostics)

    def delete(self, state: ResourceState) -> DeleteOutcome:
        outcome = DeleteOutcome()
        log.info("Deleting application %s", state.name)
        result = self.remote.delete_application(state.name)
        if not isinstance(result, Ok):
            classified = classify_failure(result, summary="Delete application failed")
            outcome.diagnostics.extend(classified.diagnostics)
            log.warning(
                "Delete of application %s reported %d error(s); dropping it from tracking",
                state.name,
                len(classified.diagnostics),
            )
        else:
            log.info("Deleted application %s", state.name)
        return outcome

    def import_state(self, identifier: str) -> ImportOutcome:
        outcome = ImportOutcome()
        if not identifier or identifier != identifier.strip():
            outcome.diagnostics.add_error(
                "Unexpected import identifier",
                f"Expected an application name, got {identifier!r}",
            )
            return outcome
        name = identifier

        log.info("Importing application %s", name)
        refreshed = self._refresh(name)
        outcome.diagnostics.extend(refreshed.diagnostics)
        if refreshed.removed:
            outcome.diagnostics.add_error(
                "Cannot import non-existent remote application",
                f"Application {name!r} was not found",
            )
            return outcome
        outcome.state = refreshed.state
        return outcome

    def _refresh(self, name: str) -> ReadOutcome:
        outcome = ReadOutcome()
        result = self.remote.fetch_application(name)
        if isinstance(result, Ok):
            outcome.state = state_from_remote(result.value)
            log.info("Refreshed application %s (id=%s)", outcome.state.name, outcome.state.id)
            return outcome

        classified = classify_failure(
            result,
            summary="Application query failed",
            suppress=self.not_found_messages,
        )
        outcome.diagnostics.extend(classified.diagnostics)
        if classified.suppressed:
            log.info("Application %s no longer exists; dropping it from tracking", name)
            outcome.removed = True
        return outcome

    def _resolve_organization(
        self, config: ResourceConfig, diagnostics: Diagnostics
    ) -> RemoteOrganization | None:
        result: RemoteResult[RemoteOrganization]
        if isinstance(config.organization, Known):
            result = self.remote.resolve_organization(config.organization.value)
            summary = "Could not resolve organization"
        else:
            result = self.remote.resolve_default_organization()
            summary = "Could not detect default organization"

        if not isinstance(result, Ok):
            diagnostics.append(single_failure_diagnostic(result, summary))
            return None
        return result.value


__all__ = ["ApplicationReconciler"]
