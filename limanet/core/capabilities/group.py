"""
Capability groups — several capabilities installed together, in order.

A group is itself a capability, so the orchestrator can treat "vmnet
support" as one unit while each member keeps its own state checks.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from limanet.core.capabilities.base import Capability, describe
from limanet.core.capabilities.errors import CapabilityError, CapabilityInstallError

logger = logging.getLogger(__name__)


class CapabilityGroup:
    """Ordered set of capabilities sharing one description.

    Members are installed in the order given. A failing member does not
    stop the rest; all failures are reported together.
    """

    def __init__(self, capabilities: Sequence[Capability], description: str):
        self._capabilities = tuple(capabilities)
        self.description = description

    @property
    def capabilities(self) -> tuple[Capability, ...]:
        return self._capabilities

    def installed(self) -> bool:
        return all(c.installed() for c in self._capabilities)

    def install(self) -> None:
        failures: list[tuple[str, Exception]] = []
        for capability in self._capabilities:
            if capability.installed():
                continue
            name = describe(capability)
            logger.info("Installing %s", name)
            try:
                capability.install()
            except (CapabilityError, OSError) as e:
                logger.error("Failed to install %s: %s", name, e)
                failures.append((name, e))

        if failures:
            raise CapabilityInstallError(self.description, failures)

    def requires_root(self) -> bool:
        """True if any member still to be installed needs root."""
        return any(
            c.requires_root() for c in self._capabilities if not c.installed()
        )


def install_optional(
    groups: Sequence[CapabilityGroup],
    allow_root: bool = True,
) -> list[tuple[str, Exception]]:
    """Install every group that isn't installed yet.

    Failures are logged and collected, never raised: these groups are
    optional and the caller decides what to tell the user.

    Args:
        groups: Groups to install, in priority order.
        allow_root: If False, groups needing root are skipped.

    Returns:
        ``(description, error)`` pairs for each failed group.
    """
    failures: list[tuple[str, Exception]] = []
    for group in groups:
        if group.installed():
            logger.debug("%s already installed", group.description)
            continue
        if not allow_root and group.requires_root():
            logger.warning("Skipping %s: installation requires root", group.description)
            continue

        logger.info("Installing %s", group.description)
        try:
            group.install()
        except CapabilityError as e:
            logger.error("Optional dependency %s failed to install: %s", group.description, e)
            failures.append((group.description, e))
    return failures
