"""
Capability protocol — the contract between the orchestrator and each
independently installable piece of system state.

A capability is a vmnet binary set, a sudoers policy file, the shared
network section, or a group of those. Capabilities don't share a base
class; anything with these three methods qualifies.

State is never cached. Every ``installed()`` call re-inspects the disk
(and ``requires_root()`` the effective uid), so out-of-band edits and
half-finished installs are always seen.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable


@runtime_checkable
class Capability(Protocol):
    """Uniform contract for installable system state."""

    def installed(self) -> bool:
        """Whether the state is present right now. Must never raise."""

    def install(self) -> None:
        """Bring the state into existence.

        Raises on failure so the caller knows whether anything changed.
        """

    def requires_root(self) -> bool:
        """Whether ``install()`` needs elevated privileges."""


def describe(capability: object) -> str:
    """Human label for log lines and error messages."""
    return getattr(capability, "description", None) or type(capability).__name__


def running_as_root() -> bool:
    """True when the effective uid is 0 (always False where uids don't exist)."""
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0
