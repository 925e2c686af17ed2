"""JSON files holding the persisted state of one application."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from flyprovider.domain.model import ResourceState

if TYPE_CHECKING:
    from pathlib import Path


class StateFileError(RuntimeError):
    """Raised when a state file cannot be read."""


def load_state(path: Path) -> ResourceState | None:
    """Return the state stored at ``path``, or ``None`` if nothing is tracked."""

    if not path.exists():
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StateFileError(f"State file {path} is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise StateFileError(f"State file {path} must contain a JSON object")
    try:
        return ResourceState.from_dict(payload)
    except ValueError as exc:
        raise StateFileError(f"State file {path}: {exc}") from exc


def save_state(path: Path, state: ResourceState) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(state.to_dict(), indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")


def remove_state(path: Path) -> None:
    path.unlink(missing_ok=True)
