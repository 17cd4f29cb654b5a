"""http access to the crates.io registry."""
from .builder import KrateClientBuilder
from .client import AsyncKrateClient, SyncKrateClient

__all__ = [
    "KrateClientBuilder",
    "SyncKrateClient",
    "AsyncKrateClient",
]
