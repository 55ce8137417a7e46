"""Polling loop that snapshots interfaces, persists changes and notifies."""

from __future__ import annotations

import threading
from enum import Enum
from pathlib import Path

from ipwatch.backends.network import (
    AddressLookupError,
    InterfaceEnumerationError,
    NetworkBackend,
)
from ipwatch.config import WatchConfig
from ipwatch.models.interface_models import InterfaceRecord, Snapshot
from ipwatch.notify import RestfulNotifier
from ipwatch.utils.logger import Logger


class IterationOutcome(Enum):
    """What a single polling iteration ended with."""

    ENUMERATION_FAILED = "enumeration_failed"
    SERIALIZATION_FAILED = "serialization_failed"
    UNCHANGED = "unchanged"
    WRITE_FAILED = "write_failed"
    UPDATED = "updated"


def filter_matches(name: str, pattern: str) -> bool:
    """Return True if ``name`` passes the interface filter ``pattern``.

    An empty pattern keeps every interface; otherwise the names must be
    equal ignoring case.
    """
    return pattern == "" or name.casefold() == pattern.casefold()


class InterfaceWatcher:
    """Poll network interfaces and react when their configuration changes.

    The last serialized snapshot is held on the instance and compared byte
    for byte with each new one. Only a change triggers a file write and a
    notification.
    """

    def __init__(
        self,
        config: WatchConfig,
        backend: NetworkBackend | None = None,
        notifier: RestfulNotifier | None = None,
    ) -> None:
        """Create a watcher.

        Args:
            config: Immutable watcher options.
            backend: Interface source; defaults to the psutil backend.
            notifier: Change sink; defaults to a RestfulNotifier when a URL
                is configured.
        """
        self.config = config
        self._backend = backend or NetworkBackend()
        if notifier is None and config.notification_enabled:
            notifier = RestfulNotifier(config)
        self._notifier = notifier
        self._latest: bytes | None = None
        self._stop_event = threading.Event()
        self._log = Logger.get("watcher")

    @property
    def latest(self) -> bytes | None:
        """Serialized form of the last snapshot seen, None before the first."""
        return self._latest

    def collect(self) -> Snapshot:
        """Enumerate interfaces that pass the filter into a snapshot.

        Raises
        ------
            InterfaceEnumerationError: If interfaces cannot be listed.
        """
        records = []
        for link in self._backend.list_links():
            if not filter_matches(link.name, self.config.filter):
                continue

            try:
                addresses = self._backend.addresses(link.name)
            except AddressLookupError as e:
                self._log.error(str(e))
                addresses = []

            records.append(
                InterfaceRecord(
                    name=link.name,
                    index=link.index,
                    flag=link.flags,
                    mac=link.mac,
                    mtu=link.mtu,
                    ip=addresses or None,
                )
            )
        return Snapshot(interfaces=records)

    def run_once(self) -> IterationOutcome:
        """Run one enumerate, diff, persist and notify pass."""
        try:
            snapshot = self.collect()
        except InterfaceEnumerationError as e:
            self._log.error(f"interface enumeration failed: {e}")
            return IterationOutcome.ENUMERATION_FAILED

        try:
            body = snapshot.to_json_bytes()
        except (TypeError, ValueError) as e:
            self._log.error(f"snapshot serialization failed: {e}")
            return IterationOutcome.SERIALIZATION_FAILED

        if body == self._latest:
            self._log.debug("interfaces unchanged")
            return IterationOutcome.UNCHANGED

        # Advanced before writing: a failed write is not retried until the
        # interfaces change again.
        self._latest = body
        try:
            Path(self.config.output).write_bytes(body)
        except OSError as e:
            self._log.error(f"writing {self.config.output} failed: {e}")
            return IterationOutcome.WRITE_FAILED

        if self._notifier is not None:
            self._notifier.notify(body)

        self._log.info("ip lookup success")
        return IterationOutcome.UPDATED

    def run(self, max_iterations: int | None = None) -> int:
        """Poll until stopped or ``max_iterations`` passes have run.

        There is no sleep before the first pass.

        Returns
        -------
            Number of iterations executed.
        """
        count = 0
        while not self._stop_event.is_set():
            if max_iterations is not None and count >= max_iterations:
                break
            if count > 0 and self._stop_event.wait(self.config.interval):
                break
            count += 1
            self.run_once()
        return count

    def stop(self) -> None:
        """Interrupt the interval sleep and end ``run``."""
        self._stop_event.set()
