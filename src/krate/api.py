"""one-shot helpers for callers who do not want to keep a client around."""
from typing import Iterable, List, Optional

from .config import DEFAULT_TIMEOUT, REGISTRY_URL
from .domain.models import Krate
from .registry.builder import KrateClientBuilder, Transport


def _builder(
    user_agent: str,
    base_url: str,
    timeout: Optional[float],
    transport: Optional[Transport],
) -> KrateClientBuilder:
    return KrateClientBuilder(user_agent, base_url=base_url, timeout=timeout, transport=transport)


def fetch(
    crate_name: str,
    user_agent: str,
    *,
    base_url: str = REGISTRY_URL,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    transport: Optional[Transport] = None,
) -> Krate:
    """fetch one crate with a throwaway blocking client."""
    with _builder(user_agent, base_url, timeout, transport).build_sync() as client:
        return client.fetch(crate_name)


async def fetch_async(
    crate_name: str,
    user_agent: str,
    *,
    base_url: str = REGISTRY_URL,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    transport: Optional[Transport] = None,
) -> Krate:
    """fetch one crate with a throwaway asyncio client."""
    async with _builder(user_agent, base_url, timeout, transport).build_async() as client:
        return await client.fetch(crate_name)


def fetch_many(
    crate_names: Iterable[str],
    user_agent: str,
    *,
    base_url: str = REGISTRY_URL,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    transport: Optional[Transport] = None,
) -> List[Krate]:
    with _builder(user_agent, base_url, timeout, transport).build_sync() as client:
        return client.fetch_many(crate_names)


async def fetch_many_async(
    crate_names: Iterable[str],
    user_agent: str,
    *,
    base_url: str = REGISTRY_URL,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    transport: Optional[Transport] = None,
) -> List[Krate]:
    async with _builder(user_agent, base_url, timeout, transport).build_async() as client:
        return await client.fetch_many(crate_names)
