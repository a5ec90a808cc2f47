"""
Status use case — report the live state of every vmnet capability.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from limanet.core.capabilities.base import describe
from limanet.core.capabilities.vmnet import VmnetCapabilities, build_vmnet_capabilities
from limanet.core.config.paths import LimaPaths


@dataclass
class CapabilityStatus:
    name: str
    installed: bool
    requires_root: bool

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "installed": self.installed,
            "requires_root": self.requires_root,
        }


@dataclass
class StatusResult:
    """Aggregated capability status."""

    config_path: Path | None = None
    capabilities: list[CapabilityStatus] = field(default_factory=list)

    @property
    def all_installed(self) -> bool:
        return bool(self.capabilities) and all(c.installed for c in self.capabilities)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "all_installed": self.all_installed,
            "capabilities": [c.to_dict() for c in self.capabilities],
        }


def get_status(
    paths: LimaPaths,
    capabilities: VmnetCapabilities | None = None,
) -> StatusResult:
    """Query every capability once. Nothing is cached between calls."""
    caps = capabilities or build_vmnet_capabilities(paths)
    result = StatusResult(config_path=paths.default_config_path())
    for capability in caps.all():
        result.capabilities.append(
            CapabilityStatus(
                name=describe(capability),
                installed=capability.installed(),
                requires_root=capability.requires_root(),
            )
        )
    return result
