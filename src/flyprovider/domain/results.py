"""Result types returned by remote operations.

Every remote call answers with exactly one of:

- ``Ok``: the typed payload
- ``Failed``: the remote side rejected the request with one or more errors
- ``TransportError``: the request never produced a decodable answer
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class RemoteErrorEntry:
    """One error reported by the remote API."""

    message: str
    path: str = ""

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


@dataclass(frozen=True, slots=True)
class Failed:
    errors: tuple[RemoteErrorEntry, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Failed result must include at least one error entry")

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(entry.message for entry in self.errors)


@dataclass(frozen=True, slots=True)
class TransportError:
    message: str


type RemoteFailure = Failed | TransportError
type RemoteResult[T] = Ok[T] | Failed | TransportError


def describe_failure(failure: RemoteFailure) -> str:
    """Render a failure as text, one line per remote error entry."""

    if isinstance(failure, TransportError):
        return failure.message
    return "\n".join(str(entry) for entry in failure.errors)


__all__ = [
    "Failed",
    "Ok",
    "RemoteErrorEntry",
    "RemoteFailure",
    "RemoteResult",
    "TransportError",
    "describe_failure",
]
