import asyncio
import logging
from typing import Iterable, List

import httpx

from ..domain.models import Krate
from .http import classify_error, crate_url, handle_response

logger = logging.getLogger(__name__)


class SyncKrateClient:
    """blocking registry client; one GET per fetch."""

    def __init__(self, client: httpx.Client, base_url: str):
        self.client = client
        self.base_url = base_url

    @property
    def user_agent(self) -> str:
        return self.client.headers["User-Agent"]

    def fetch(self, crate_name: str) -> Krate:
        """
        fetch the registry metadata for a crate.

        args:
            crate_name: name of the crate

        returns:
            the decoded Krate

        raises:
            KrateNotFoundError: if the registry answers 404
            OtherKrateError: for any other transport, status or decode failure
        """
        url = crate_url(self.base_url, crate_name)
        logger.debug(f"GET {url}")
        try:
            response = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise classify_error(e, crate_name) from e
        return handle_response(response, crate_name)

    def fetch_many(self, crate_names: Iterable[str]) -> List[Krate]:
        """fetch several crates one after another, stopping at the first failure."""
        return [self.fetch(name) for name in crate_names]

    def close(self):
        self.client.close()

    def __enter__(self) -> "SyncKrateClient":
        return self

    def __exit__(self, *exc_info):
        self.close()


class AsyncKrateClient:
    """asyncio registry client; same semantics as SyncKrateClient."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url

    @property
    def user_agent(self) -> str:
        return self.client.headers["User-Agent"]

    async def fetch(self, crate_name: str) -> Krate:
        url = crate_url(self.base_url, crate_name)
        logger.debug(f"GET {url}")
        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise classify_error(e, crate_name) from e
        return handle_response(response, crate_name)

    async def fetch_many(self, crate_names: Iterable[str]) -> List[Krate]:
        """
        fetch several crates concurrently.

        every request runs to completion; the first failure in input
        order is raised, otherwise results keep the order of crate_names.
        """
        results = await asyncio.gather(
            *(self.fetch(name) for name in crate_names),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncKrateClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
