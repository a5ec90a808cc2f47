"""Capabilities — independently installable pieces of system state.

Public re-exports for convenient access.
"""

from limanet.core.capabilities.base import Capability, describe, running_as_root
from limanet.core.capabilities.binaries import BinariesCapability
from limanet.core.capabilities.errors import (
    CapabilityError,
    CapabilityInstallError,
    PrerequisitesMissing,
)
from limanet.core.capabilities.gate import PrerequisiteGate
from limanet.core.capabilities.group import CapabilityGroup, install_optional
from limanet.core.capabilities.network import LimaNetworkConfig
from limanet.core.capabilities.sudoers import SudoersCapability

__all__ = [
    "BinariesCapability",
    "Capability",
    "CapabilityError",
    "CapabilityGroup",
    "CapabilityInstallError",
    "LimaNetworkConfig",
    "PrerequisiteGate",
    "PrerequisitesMissing",
    "SudoersCapability",
    "describe",
    "install_optional",
    "running_as_root",
]
