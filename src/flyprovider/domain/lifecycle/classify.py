"""Turn remote failures into diagnostics.

Responsibilities of this stage:
- decompose a ``Failed`` result into one diagnostic per remote error entry
- suppress entries whose message is a known benign sentinel
- report a ``TransportError`` as a single diagnostic with a fixed summary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from flyprovider.domain.diagnostics import Diagnostic, Diagnostics, Severity
from flyprovider.domain.results import TransportError, describe_failure

if TYPE_CHECKING:
    from collections.abc import Collection

    from flyprovider.domain.results import RemoteFailure

# Message the Fly API answers with when an application does not exist.
APPLICATION_NOT_FOUND: Final[str] = "Could not resolve "


@dataclass(slots=True)
class Classification:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    suppressed: bool = False


def classify_failure(
    failure: RemoteFailure,
    *,
    summary: str,
    suppress: Collection[str] = frozenset(),
) -> Classification:
    """Classify ``failure``.

    ``summary`` is used for transport errors only. Remote error entries are
    keyed by their own message, with the path as detail. ``suppressed`` is
    set when at least one entry matched ``suppress`` exactly.
    """

    result = Classification()
    if isinstance(failure, TransportError):
        result.diagnostics.add_error(summary, failure.message)
        return result

    for entry in failure.errors:
        if entry.message in suppress:
            result.suppressed = True
            continue
        result.diagnostics.add_error(entry.message, entry.path)
    return result


def single_failure_diagnostic(failure: RemoteFailure, summary: str) -> Diagnostic:
    """Report ``failure`` as one diagnostic, whatever its shape."""

    return Diagnostic(Severity.ERROR, summary, describe_failure(failure))


__all__ = [
    "APPLICATION_NOT_FOUND",
    "Classification",
    "classify_failure",
    "single_failure_diagnostic",
]
