"""
Path layout — where the shared config, sudoers file and vmnet binaries live.

Locations are resolved in precedence order:
    explicit argument  >  LIMANET_* env var  >  built-in default
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_LIMA_HOME = "LIMANET_LIMA_HOME"
ENV_DEPENDENCY_DIR = "LIMANET_DEPENDENCY_DIR"
ENV_VMNET_BIN_DIR = "LIMANET_VMNET_BIN_DIR"
ENV_SUDOERS_FILE = "LIMANET_SUDOERS_FILE"

DEFAULT_VMNET_BIN_DIR = Path("/opt/finch/bin")
DEFAULT_SUDOERS_FILE = Path("/etc/sudoers.d/finch-lima")

# Lima reads this file and merges it under every instance's lima.yaml
DEFAULT_CONFIG_RELPATH = Path("_config") / "default.yaml"


def _default_lima_home() -> Path:
    return Path.home() / ".finch" / "lima" / "data"


def _default_dependency_dir() -> Path:
    return Path.home() / ".finch" / "dependencies" / "bin"


@dataclass(frozen=True)
class LimaPaths:
    """Resolved filesystem locations for one Lima installation."""

    home: Path
    dependency_dir: Path
    vmnet_bin_dir: Path = DEFAULT_VMNET_BIN_DIR
    sudoers_file: Path = DEFAULT_SUDOERS_FILE

    @classmethod
    def from_env(
        cls,
        home: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> LimaPaths:
        """Build paths from an explicit home, the environment, or defaults."""
        env = os.environ if environ is None else environ

        def _pick(key: str, fallback: Path) -> Path:
            value = env.get(key)
            return Path(value).expanduser() if value else fallback

        return cls(
            home=home if home is not None else _pick(ENV_LIMA_HOME, _default_lima_home()),
            dependency_dir=_pick(ENV_DEPENDENCY_DIR, _default_dependency_dir()),
            vmnet_bin_dir=_pick(ENV_VMNET_BIN_DIR, DEFAULT_VMNET_BIN_DIR),
            sudoers_file=_pick(ENV_SUDOERS_FILE, DEFAULT_SUDOERS_FILE),
        )

    def default_config_path(self) -> Path:
        """The shared config file other Lima contributors also write to."""
        return self.home / DEFAULT_CONFIG_RELPATH
