"""
Sudoers capability — the privilege-elevation policy that lets Lima start
socket_vmnet without prompting.

Installed means the policy file exists and its content is exactly what
we would write. Anything else, a hand edit included, reads as not
installed.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from limanet.core.capabilities.base import running_as_root

logger = logging.getLogger(__name__)

SUDOERS_MODE = 0o440


def render_sudoers(user: str, binaries: Sequence[Path]) -> str:
    """Render a sudoers policy allowing ``user`` to run ``binaries`` as root."""
    lines = ["# Managed by limanet. Do not edit."]
    for binary in binaries:
        lines.append(f"{user} ALL=(root:root) NOPASSWD:NOSETENV: {binary}")
    return "\n".join(lines) + "\n"


class SudoersCapability:
    """A sudoers.d drop-in with fixed content."""

    def __init__(self, path: Path, content: str, description: str = "sudoers policy"):
        self._path = Path(path)
        self._content = content
        self.description = description

    @property
    def path(self) -> Path:
        return self._path

    def installed(self) -> bool:
        try:
            current = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("sudoers file not found: %s", self._path)
            return False
        except (OSError, UnicodeDecodeError) as e:
            logger.error("failed to read sudoers file %s: %s", self._path, e)
            return False
        return current == self._content

    def install(self) -> None:
        """Write the policy atomically (temp file in same dir, then rename)."""
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=".sudoers_",
            suffix=".tmp",
        )
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self._content)
            tmp.chmod(SUDOERS_MODE)
            tmp.replace(self._path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
        logger.info("Installed sudoers policy at %s", self._path)

    def requires_root(self) -> bool:
        return not running_as_root()
