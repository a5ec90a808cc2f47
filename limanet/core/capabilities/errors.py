"""
Capability errors.

Only mutating operations raise these. Queries collapse every failure to
``False`` plus a log line.
"""

from __future__ import annotations


class CapabilityError(Exception):
    """Base for errors raised by ``Capability.install()``."""


class PrerequisitesMissing(CapabilityError):
    """Install refused because a prerequisite capability is not installed.

    Distinct from I/O failures so callers can tell the user about
    install ordering rather than about disk problems.
    """


class CapabilityInstallError(CapabilityError):
    """One or more members of a capability group failed to install."""

    def __init__(self, description: str, failures: list[tuple[str, Exception]]):
        self.description = description
        self.failures = failures
        detail = "; ".join(f"{name}: {err}" for name, err in failures)
        super().__init__(f"failed to install {description}: {detail}")
