"""limanet — install and verify the shared Lima network configuration."""

__version__ = "0.1.0"
