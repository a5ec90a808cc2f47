"""
Prerequisite gate — ordered conjunction over other capabilities.

Prerequisites are queried in the order given and the first one that is
not installed stops the check. Put the cheaper, more fundamental
capability first.
"""

from __future__ import annotations

import logging

from limanet.core.capabilities.base import Capability, describe

logger = logging.getLogger(__name__)


class PrerequisiteGate:
    """Decides whether a dependent capability may be installed."""

    def __init__(self, *prerequisites: Capability):
        self._prerequisites = prerequisites

    @property
    def prerequisites(self) -> tuple[Capability, ...]:
        return self._prerequisites

    def first_missing(self) -> Capability | None:
        """The first prerequisite that is not installed, or None."""
        for capability in self._prerequisites:
            if not capability.installed():
                logger.info("Prerequisite not installed: %s", describe(capability))
                return capability
        return None

    def satisfied(self) -> bool:
        return self.first_missing() is None
