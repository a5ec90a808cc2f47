"""
Config loader — parses the shared Lima default.yaml into domain models.

Reads YAML, validates against the Pydantic schema, and returns a typed
ConfigDocument. There is deliberately no write path here: the network
section is installed by appending pre-rendered text, so comments, key
order and keys we don't understand are never touched.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from pathlib import Path

import yaml
from pydantic import ValidationError

from limanet.core.models.network import ConfigDocument

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


class MalformedDocument(ConfigError):
    """Raised when the shared config file cannot be parsed."""


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a mapping key repeated in the same mapping.

    PyYAML keeps the last value silently; Lima's own parser refuses the
    file, so a repeated top-level ``networks`` must not read as valid.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_document(raw: bytes | str) -> ConfigDocument:
    """Parse a raw buffer into a ConfigDocument.

    An empty document yields an empty ConfigDocument.

    Raises:
        MalformedDocument: On YAML syntax errors, repeated mapping keys,
            a non-mapping root, or entries that do not fit the schema.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"Config is not valid UTF-8: {e}") from e

    try:
        data = yaml.load(raw, Loader=UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise MalformedDocument(f"Invalid YAML: {e}") from e

    if data is None:
        return ConfigDocument()

    if not isinstance(data, dict):
        raise MalformedDocument(f"Expected a YAML mapping, got {type(data).__name__}")

    try:
        return ConfigDocument.model_validate(data)
    except ValidationError as e:
        raise MalformedDocument(f"Invalid config document: {e}") from e


def load_document(path: Path) -> ConfigDocument:
    """Read and parse the config file at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        MalformedDocument: If the content cannot be parsed.
    """
    raw = path.read_bytes()
    logger.debug("Read %d bytes from %s", len(raw), path)
    return parse_document(raw)
