"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from limanet.core.config.paths import LimaPaths


class FakeCapability:
    """Capability test double with switchable state and a call log."""

    def __init__(
        self,
        description: str = "fake",
        installed: bool = False,
        root: bool = False,
        error: Exception | None = None,
        calls: list[str] | None = None,
    ):
        self.description = description
        self._installed = installed
        self._root = root
        self._error = error
        self.calls = calls if calls is not None else []

    def installed(self) -> bool:
        self.calls.append(f"{self.description}.installed")
        return self._installed

    def install(self) -> None:
        self.calls.append(f"{self.description}.install")
        if self._error is not None:
            raise self._error
        self._installed = True

    def requires_root(self) -> bool:
        return self._root


@pytest.fixture
def fake_capability():
    """Factory for FakeCapability instances."""
    return FakeCapability


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path of a shared config file that does not exist yet."""
    return tmp_path / "lima" / "_config" / "default.yaml"


@pytest.fixture
def lima_paths(tmp_path: Path) -> LimaPaths:
    """A path layout rooted entirely inside tmp_path."""
    dependency_dir = tmp_path / "dependencies"
    dependency_dir.mkdir()
    for name in ("socket_vmnet", "socket_vmnet_client"):
        (dependency_dir / name).write_text("#!/bin/sh\n")
    return LimaPaths(
        home=tmp_path / "lima",
        dependency_dir=dependency_dir,
        vmnet_bin_dir=tmp_path / "opt" / "bin",
        sudoers_file=tmp_path / "sudoers.d" / "finch-lima",
    )
