"""Outcome records returned by lifecycle entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from flyprovider.domain.diagnostics import Diagnostics

if TYPE_CHECKING:
    from flyprovider.domain.model import ResourceState


@dataclass(slots=True, kw_only=True)
class CreateOutcome:
    """State of the new application, absent when creation failed."""

    state: ResourceState | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True, kw_only=True)
class ReadOutcome:
    """Refreshed state.

    ``removed`` means the application no longer exists remotely and should be
    dropped from tracking; ``state`` is then absent.
    """

    state: ResourceState | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    removed: bool = False


@dataclass(slots=True, kw_only=True)
class UpdateOutcome:
    state: ResourceState
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True, kw_only=True)
class DeleteOutcome:
    """Remote deletion result; tracking is always dropped."""

    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    removed: bool = True


@dataclass(slots=True, kw_only=True)
class ImportOutcome:
    state: ResourceState | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


__all__ = [
    "CreateOutcome",
    "DeleteOutcome",
    "ImportOutcome",
    "ReadOutcome",
    "UpdateOutcome",
]
