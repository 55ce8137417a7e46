"""Watch command helper that drives the interface watcher."""

from __future__ import annotations

from ipwatch.config import WatchConfig
from ipwatch.utils.logger import Logger
from ipwatch.watcher import InterfaceWatcher


def run_watch(config: WatchConfig, once: bool = False) -> int:
    """Run the interface watcher until interrupted.

    Args:
        config: Options resolved from the command line.
        once: Run a single iteration and return instead of looping.

    Returns
    -------
        Number of iterations executed.
    """
    log = Logger.get("watch")
    log.debug(f"starting with {config.model_dump()}")

    watcher = InterfaceWatcher(config)
    try:
        return watcher.run(max_iterations=1 if once else None)
    except KeyboardInterrupt:
        log.info("interrupted, stopping")
        watcher.stop()
        return 0
