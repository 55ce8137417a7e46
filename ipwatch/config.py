"""Immutable watcher configuration built once at startup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT = "ip_info.json"
DEFAULT_METHOD = "POST"
DEFAULT_INTERVAL = 60
LOG_LEVEL_ENV = "IPWATCH_LOG_LEVEL"


class WatchConfig(BaseModel):
    """Options controlling one watcher process.

    Constructed by the CLI and passed explicitly to the watcher and the
    notifier; it is frozen so nothing can change it mid-run.
    """

    model_config = ConfigDict(frozen=True)

    output: str = Field(DEFAULT_OUTPUT, description="Path of the snapshot JSON file")
    filter: str = Field(
        "", description="Case-insensitive exact interface name; empty keeps all"
    )
    restful_url: str = Field("", description="Notification endpoint; empty disables")
    restful_method: str = Field(DEFAULT_METHOD, description="HTTP method to notify with")
    restful_header: str = Field("", description="Single 'key:value' header to attach")
    interval: int = Field(DEFAULT_INTERVAL, ge=0, description="Seconds between checks")

    @field_validator("restful_method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.strip().upper() or DEFAULT_METHOD

    @property
    def notification_enabled(self) -> bool:
        """Whether a notification endpoint is configured."""
        return self.restful_url != ""

    def header(self) -> tuple[str, str] | None:
        """Return the configured custom header as ``(key, value)``.

        The value must contain exactly one colon with text on both sides;
        anything else yields None.
        """
        return parse_header(self.restful_header)


def parse_header(raw: str) -> tuple[str, str] | None:
    """Split a ``key:value`` header string, or return None if malformed."""
    parts = raw.split(":")
    if len(parts) != 2:
        return None
    key, value = (part.strip() for part in parts)
    if not key or not value:
        return None
    return key, value
