"""Reject changes to attributes that cannot change once an application exists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flyprovider.domain.diagnostics import Diagnostic, Diagnostics, Severity
from flyprovider.domain.values import Known

if TYPE_CHECKING:
    from collections.abc import Iterable

    from flyprovider.domain.values import FieldValue


@dataclass(frozen=True, slots=True)
class ImmutableField:
    label: str
    prior: str
    proposed: FieldValue[str]


def check_immutable(label: str, prior: str, proposed: FieldValue[str]) -> Diagnostic | None:
    """Return a violation when ``proposed`` is known and differs from ``prior``.

    Unknown and null proposals carry no opinion and never violate.
    """

    if not isinstance(proposed, Known):
        return None
    if proposed.value == prior:
        return None
    return Diagnostic(
        Severity.ERROR,
        f"Cannot change {label} of an existing application",
        f"Cannot switch {label} {prior!r} to {proposed.value!r}",
    )


def guard_immutable_fields(fields: Iterable[ImmutableField]) -> Diagnostics:
    """Check every field; all violations are reported together."""

    diagnostics = Diagnostics()
    for item in fields:
        violation = check_immutable(item.label, item.prior, item.proposed)
        if violation is not None:
            diagnostics.append(violation)
    return diagnostics


__all__ = ["ImmutableField", "check_immutable", "guard_immutable_fields"]
