from __future__ import annotations

from .state_file import StateFileError, load_state, remove_state, save_state

__all__ = ["StateFileError", "load_state", "remove_state", "save_state"]
