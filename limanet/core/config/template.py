"""
Canonical network template — the exact block limanet appends.

The text is a fixed literal, byte-identical on every install, so
verification is an exact structural match rather than a semantic one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from limanet.core.config.loader import ConfigError, parse_document
from limanet.core.models.network import NetworkEntry


@dataclass(frozen=True)
class NetworkTemplate:
    """An immutable network block.

    Attributes:
        text:  YAML appended verbatim to the shared config.
        entry: The single network entry ``text`` describes.
    """

    text: str
    entry: NetworkEntry = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.text.endswith("\n"):
            raise ConfigError("Network template text must end with a newline")

        document = parse_document(self.text)
        if document.network_count() != 1:
            raise ConfigError(
                f"Network template must define exactly one network, got {document.network_count()}"
            )
        object.__setattr__(self, "entry", document.networks[0])


FINCH_SHARED_NETWORK = NetworkTemplate(text="networks:\n  - lima: finch-shared\n")
