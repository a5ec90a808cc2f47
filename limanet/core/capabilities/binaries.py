"""
vmnet binaries capability — the socket_vmnet executables Lima shells out to.

Installed means every named binary exists in the install directory and
is executable. Installing copies the missing ones from the dependency
directory shipped alongside limanet.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from limanet.core.capabilities.base import running_as_root
from limanet.core.capabilities.errors import CapabilityError

logger = logging.getLogger(__name__)

DEFAULT_VMNET_BINARIES = ("socket_vmnet", "socket_vmnet_client")


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def _nearest_existing(path: Path) -> Path:
    """Walk up until we hit a directory that exists."""
    current = path
    while not current.exists() and current.parent != current:
        current = current.parent
    return current


class BinariesCapability:
    """A fixed set of executables copied into a target directory."""

    def __init__(
        self,
        source_dir: Path,
        install_dir: Path,
        names: Sequence[str] = DEFAULT_VMNET_BINARIES,
        description: str = "vmnet binaries",
    ):
        self._source_dir = Path(source_dir)
        self._install_dir = Path(install_dir)
        self._names = tuple(names)
        self.description = description

    def missing(self) -> list[str]:
        """Names not yet present (or not executable) in the install dir."""
        return [n for n in self._names if not _is_executable(self._install_dir / n)]

    def installed(self) -> bool:
        return not self.missing()

    def install(self) -> None:
        missing = self.missing()
        if not missing:
            return

        self._install_dir.mkdir(parents=True, exist_ok=True)
        for name in missing:
            source = self._source_dir / name
            if not source.is_file():
                raise CapabilityError(f"{name} not found in dependency directory {self._source_dir}")
            target = self._install_dir / name
            shutil.copy2(source, target)
            target.chmod(0o755)
            logger.info("Installed %s to %s", name, target)

    def requires_root(self) -> bool:
        if running_as_root():
            return False
        return not os.access(_nearest_existing(self._install_dir), os.W_OK)
