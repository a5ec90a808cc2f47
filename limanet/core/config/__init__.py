"""Configuration — shared config parsing, canonical template, path layout."""

from limanet.core.config.loader import ConfigError, MalformedDocument, load_document, parse_document
from limanet.core.config.paths import LimaPaths
from limanet.core.config.template import FINCH_SHARED_NETWORK, NetworkTemplate

__all__ = [
    "ConfigError",
    "FINCH_SHARED_NETWORK",
    "LimaPaths",
    "MalformedDocument",
    "NetworkTemplate",
    "load_document",
    "parse_document",
]
