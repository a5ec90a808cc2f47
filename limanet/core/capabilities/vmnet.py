"""
vmnet wiring — builds the capability set for Lima shared networking.

Order matters: binaries, then the sudoers policy that references them,
then the network section that needs both.
"""

from __future__ import annotations

import getpass
from dataclasses import dataclass

from limanet.core.capabilities.binaries import DEFAULT_VMNET_BINARIES, BinariesCapability
from limanet.core.capabilities.group import CapabilityGroup
from limanet.core.capabilities.network import LimaNetworkConfig
from limanet.core.capabilities.sudoers import SudoersCapability, render_sudoers
from limanet.core.config.paths import LimaPaths
from limanet.core.config.template import FINCH_SHARED_NETWORK, NetworkTemplate


@dataclass
class VmnetCapabilities:
    binaries: BinariesCapability
    sudoers: SudoersCapability
    network: LimaNetworkConfig

    def all(self) -> list:
        return [self.binaries, self.sudoers, self.network]

    def group(self) -> CapabilityGroup:
        return CapabilityGroup(self.all(), description="vmnet shared networking")


def build_vmnet_capabilities(
    paths: LimaPaths,
    user: str | None = None,
    template: NetworkTemplate = FINCH_SHARED_NETWORK,
) -> VmnetCapabilities:
    """Wire the vmnet capabilities for the given path layout."""
    binaries = BinariesCapability(
        source_dir=paths.dependency_dir,
        install_dir=paths.vmnet_bin_dir,
        names=DEFAULT_VMNET_BINARIES,
    )
    sudoers = SudoersCapability(
        path=paths.sudoers_file,
        content=render_sudoers(
            user or getpass.getuser(),
            [paths.vmnet_bin_dir / name for name in DEFAULT_VMNET_BINARIES],
        ),
    )
    network = LimaNetworkConfig(
        config_path=paths.default_config_path(),
        binaries=binaries,
        sudoers=sudoers,
        template=template,
    )
    return VmnetCapabilities(binaries=binaries, sudoers=sudoers, network=network)
