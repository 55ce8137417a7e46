"""Environment variable lookup.

Usage:
    from ipwatch.utils.env import get_env

    level = get_env("IPWATCH_LOG_LEVEL", default="INFO")
"""

from __future__ import annotations

import os
from typing import TypeVar, overload

T = TypeVar("T")


@overload
def get_env(name: str, *, default: T) -> str | T:
    ...


@overload
def get_env(name: str) -> str | None:
    ...


def get_env(name: str, *, default: T | None = None) -> str | T | None:
    """Get an environment variable, or ``default`` when it is not set.

    An empty value counts as set and is returned as-is.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value
