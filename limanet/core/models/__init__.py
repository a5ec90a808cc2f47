"""
Domain models — Pydantic types for the shared Lima config.

    from limanet.core.models import ConfigDocument, NetworkEntry
"""

from limanet.core.models.network import ConfigDocument, NetworkEntry

__all__ = [
    "ConfigDocument",
    "NetworkEntry",
]
