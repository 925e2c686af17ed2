"""User-facing diagnostics collected by lifecycle operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.severity}: {self.summary}: {self.detail}"
        return f"{self.severity}: {self.summary}"


@dataclass(slots=True)
class Diagnostics:
    """Ordered collection of diagnostics.

    Presence of at least one error means the operation did not complete as
    intended. Steps already performed are not rolled back.
    """

    entries: list[Diagnostic] = field(default_factory=list)

    def append(self, diagnostic: Diagnostic) -> None:
        self.entries.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.entries.extend(diagnostics)

    def add_error(self, summary: str, detail: str = "") -> None:
        self.entries.append(Diagnostic(Severity.ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self.entries.append(Diagnostic(Severity.WARNING, summary, detail))

    def has_error(self) -> bool:
        return any(entry.severity is Severity.ERROR for entry in self.entries)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(entry for entry in self.entries if entry.severity is Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(entry for entry in self.entries if entry.severity is Severity.WARNING)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


__all__ = ["Diagnostic", "Diagnostics", "Severity"]
