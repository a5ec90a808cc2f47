"""
Lima network configuration capability.

Owns one section of a file it does not own: the shared default.yaml
that every Lima contributor may write to. The section is detected by
parsing and installed by appending the canonical template text, never
by rewriting the file.

Observable states:
    absent     file missing, empty, or no network entries
    installed  exactly one network entry, structurally equal to the template
    invalid    unparseable file, duplicate keys, several network entries,
               or a single entry that differs from the template

Absent and invalid both read as "not installed". Telling them apart is
left to the log.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from limanet.core.capabilities.base import Capability
from limanet.core.capabilities.errors import PrerequisitesMissing
from limanet.core.capabilities.gate import PrerequisiteGate
from limanet.core.config.loader import MalformedDocument, load_document
from limanet.core.config.template import FINCH_SHARED_NETWORK, NetworkTemplate

logger = logging.getLogger(__name__)


class LimaNetworkConfig:
    """Installs the shared network section into Lima's default config.

    Installation is gated on the vmnet binaries and then the sudoers
    policy, in that order.
    """

    description = "Lima shared network configuration"

    def __init__(
        self,
        config_path: Path,
        binaries: Capability | None,
        sudoers: Capability | None,
        template: NetworkTemplate = FINCH_SHARED_NETWORK,
    ):
        self._config_path = Path(config_path)
        self._binaries = binaries
        self._sudoers = sudoers
        self._template = template

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def template(self) -> NetworkTemplate:
        return self._template

    def verify_config_has_network_section(self, path: Path) -> bool:
        """Whether ``path`` holds exactly the canonical network section.

        Never raises: every failure is logged and reported as False.
        """
        try:
            document = load_document(Path(path))
        except FileNotFoundError as e:
            logger.debug("config file not found: %s", e)
            return False
        except OSError as e:
            logger.error("failed to read default config file: %s", e)
            return False
        except MalformedDocument as e:
            logger.error("failed to parse YAML from default config file: %s", e)
            return False

        if document.network_count() != 1:
            logger.error(
                "default config file has incorrect number of Networks defined (%d)",
                document.network_count(),
            )
            return False

        if not document.networks[0].structurally_equal(self._template.entry):
            logger.error(
                "default config file network %s does not match %s",
                document.networks[0].attributes(),
                self._template.entry.attributes(),
            )
            return False
        return True

    def append_network_configuration(self, path: Path) -> None:
        """Append the canonical block to ``path``, creating it if needed.

        Does not check for an existing section; callers confirm absence
        through ``installed()`` first.

        Raises:
            OSError: If the file cannot be opened or written.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "a+b") as f:
            f.seek(0, os.SEEK_END)
            separator = b""
            if f.tell() > 0:
                f.seek(-1, os.SEEK_END)
                if f.read(1) != b"\n":
                    separator = b"\n"
            f.write(separator + self._template.text.encode("utf-8"))

        logger.info("Appended network configuration to %s", path)

    def should_add_networks_config(self) -> bool:
        """Whether the binaries and then the sudoers policy are installed."""
        return PrerequisiteGate(self._binaries, self._sudoers).satisfied()

    def installed(self) -> bool:
        return self.verify_config_has_network_section(self._config_path)

    def install(self) -> None:
        if not self.should_add_networks_config():
            raise PrerequisitesMissing(
                "skipping installation of network configuration because pre-requisites are missing"
            )
        self.append_network_configuration(self._config_path)

    def requires_root(self) -> bool:
        return False
