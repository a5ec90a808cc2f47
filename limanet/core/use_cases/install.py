"""
Install use case — bring vmnet shared networking up in dependency order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from limanet.core.capabilities.group import install_optional
from limanet.core.capabilities.vmnet import VmnetCapabilities, build_vmnet_capabilities
from limanet.core.config.paths import LimaPaths


@dataclass
class InstallResult:
    installed: bool = False
    skipped_for_root: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.installed and not self.errors

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "installed": self.installed,
            "skipped_for_root": self.skipped_for_root,
            "errors": self.errors,
        }


def run_install(
    paths: LimaPaths,
    allow_root: bool = False,
    capabilities: VmnetCapabilities | None = None,
) -> InstallResult:
    """Install the vmnet group unless it's already in place.

    Args:
        paths: Resolved path layout.
        allow_root: Install even when a pending member needs root.
        capabilities: Pre-built capability set (default: built from ``paths``).
    """
    caps = capabilities or build_vmnet_capabilities(paths)
    group = caps.group()
    result = InstallResult()

    if not allow_root and not group.installed() and group.requires_root():
        result.skipped_for_root = True
        return result

    failures = install_optional([group], allow_root=allow_root)
    result.errors = [f"{name}: {err}" for name, err in failures]
    result.installed = group.installed()
    return result
