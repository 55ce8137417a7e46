"""Backends exposing operating system state to the watcher."""

from ipwatch.backends.network import (
    AddressLookupError,
    InterfaceEnumerationError,
    LinkInfo,
    NetworkBackend,
)

__all__ = [
    "AddressLookupError",
    "InterfaceEnumerationError",
    "LinkInfo",
    "NetworkBackend",
]
