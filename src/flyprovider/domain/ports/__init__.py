"""Domain port definitions for adapters."""

from __future__ import annotations

from .remote import RemoteApplicationOperations

__all__ = ["RemoteApplicationOperations"]
