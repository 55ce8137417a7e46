"""
Version command - displays ipwatch version information
"""

import platform

from ipwatch.notify import user_agent
from ipwatch.version import IPWATCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display ipwatch version information.

    Args:
        verbose: If True, also show release date and host details
    """
    if verbose:
        print(f"ipwatch version {IPWATCH_VERSION.full_version()}")
        print("\nDetailed version information:")
        print(f"  Semantic Version: {IPWATCH_VERSION}")
        print(f"  Release Date:     {IPWATCH_VERSION.date_string()}")
        print(f"  Python:           {platform.python_version()}")
        print(f"  User-Agent:       {user_agent()}")
    else:
        print(f"ipwatch {IPWATCH_VERSION}")
