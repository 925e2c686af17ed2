"""Application lifecycle: create, read, update, delete and import."""

from __future__ import annotations

from .classify import (
    APPLICATION_NOT_FOUND,
    Classification,
    classify_failure,
    single_failure_diagnostic,
)
from .contracts import CreateOutcome, DeleteOutcome, ImportOutcome, ReadOutcome, UpdateOutcome
from .immutability import ImmutableField, check_immutable, guard_immutable_fields
from .mapper import state_from_remote
from .reconciler import ApplicationReconciler

__all__ = [
    "APPLICATION_NOT_FOUND",
    "ApplicationReconciler",
    "Classification",
    "CreateOutcome",
    "DeleteOutcome",
    "ImmutableField",
    "ImportOutcome",
    "ReadOutcome",
    "UpdateOutcome",
    "check_immutable",
    "classify_failure",
    "guard_immutable_fields",
    "single_failure_diagnostic",
    "state_from_remote",
]
