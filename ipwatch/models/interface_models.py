"""Pydantic models for interface snapshots and their JSON file form."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

# The persisted file is indented with one tab per nesting level.
JSON_INDENT = "\t"


class InterfaceRecord(BaseModel):
    """One network interface as captured in a snapshot.

    Field order is the key order of the persisted JSON objects.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name (e.g., 'eth0', 'en0')")
    index: int = Field(..., description="Index assigned by the operating system")
    flag: str = Field(
        "", description="Interface state flags joined with '|' (e.g., 'up|running')"
    )
    mac: str = Field("", description="Hardware address, empty when there is none")
    mtu: int = Field(0, description="Maximum transmission unit")
    ip: list[str] | None = Field(
        None, description="Bound addresses in CIDR notation, None when none captured"
    )


class Snapshot(BaseModel):
    """Ordered set of interfaces captured in one polling iteration."""

    model_config = ConfigDict(frozen=True)

    interfaces: list[InterfaceRecord] = Field(
        default_factory=list, description="Interfaces that passed the name filter"
    )

    def __len__(self) -> int:
        return len(self.interfaces)

    def to_json_bytes(self) -> bytes:
        """Render the snapshot as the bytes written to the output file.

        Returns
        -------
            UTF-8 JSON array, tab indented, one object per interface.
        """
        payload = [record.model_dump() for record in self.interfaces]
        return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False).encode(
            "utf-8"
        )

    @classmethod
    def from_json_bytes(cls, data: bytes | str) -> Snapshot:
        """Parse bytes produced by ``to_json_bytes`` back into a snapshot."""
        items = json.loads(data)
        return cls(interfaces=[InterfaceRecord.model_validate(item) for item in items])
