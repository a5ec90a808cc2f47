"""
Network models — the parsed subset of Lima's shared default.yaml.

Only the top-level ``networks`` sequence is modelled. Everything else in
the document is kept as opaque extra data and never inspected. These
models are read-only views: nothing here serializes back to disk.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkEntry(BaseModel):
    """One item of the ``networks`` sequence.

    ``lima`` names a Lima-managed network (the shared-mode designator).
    The remaining attributes describe the interface the VM gets. Keys
    Lima knows but we don't model are kept so that structural
    comparison sees everything the user wrote.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    lima: str | None = None
    socket: str | None = None
    interface: str | None = None
    mac_address: str | None = Field(default=None, alias="macAddress")
    metric: int | None = None

    def attributes(self) -> dict[str, Any]:
        """All non-null keys of the entry, spelled as in the YAML."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def structurally_equal(self, other: NetworkEntry) -> bool:
        """Exact match of every key and value, extra keys included."""
        return self.attributes() == other.attributes()


class ConfigDocument(BaseModel):
    """Root of the shared config file: an ordered list of network entries."""

    model_config = ConfigDict(extra="allow")

    networks: list[NetworkEntry] = Field(default_factory=list)

    @field_validator("networks", mode="before")
    @classmethod
    def _null_networks(cls, value: Any) -> Any:
        # "networks:" with nothing after it parses as None
        return [] if value is None else value

    def network_count(self) -> int:
        """Number of entries in ``networks``, whatever kind they are."""
        return len(self.networks)
