"""ipwatch - watch local network interfaces for address changes."""

from ipwatch.version.ipwatch_version import IPWATCH_VERSION, Version

__version__ = str(IPWATCH_VERSION)
__version_info__ = IPWATCH_VERSION

__all__ = [
    "IPWATCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
