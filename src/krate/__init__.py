"""client for the crates.io registry api."""
from .__about__ import __version__
from .api import fetch, fetch_async, fetch_many, fetch_many_async
from .domain.errors import (
    EmptyVersionListError,
    KrateConfigError,
    KrateError,
    KrateNotFoundError,
    OtherKrateError,
)
from .domain.models import Krate, KrateCategory, KrateKeyword, KrateMetadata, KrateVersion
from .registry import AsyncKrateClient, KrateClientBuilder, SyncKrateClient

__all__ = [
    "__version__",
    "fetch",
    "fetch_async",
    "fetch_many",
    "fetch_many_async",
    "Krate",
    "KrateMetadata",
    "KrateVersion",
    "KrateCategory",
    "KrateKeyword",
    "KrateClientBuilder",
    "SyncKrateClient",
    "AsyncKrateClient",
    "KrateError",
    "KrateConfigError",
    "KrateNotFoundError",
    "OtherKrateError",
    "EmptyVersionListError",
]
