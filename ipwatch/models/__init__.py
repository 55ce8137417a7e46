"""Pydantic models for structured output."""

from ipwatch.models.interface_models import InterfaceRecord, Snapshot

__all__ = [
    "InterfaceRecord",
    "Snapshot",
]
