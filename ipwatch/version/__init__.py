from ipwatch.version.ipwatch_version import IPWATCH_VERSION, Version

__all__ = ["IPWATCH_VERSION", "Version"]
