from typing import Optional, Union

import httpx

from ..config import DEFAULT_TIMEOUT, REGISTRY_URL
from ..domain.errors import KrateConfigError
from .client import AsyncKrateClient, SyncKrateClient
from .http import build_headers

Transport = Union[httpx.BaseTransport, httpx.AsyncBaseTransport]


class KrateClientBuilder:
    """
    builds registry clients that identify the caller to the registry.

    crates.io asks every consumer to send a user agent naming the tool
    and a way to contact its author.
    """

    def __init__(
        self,
        user_agent: str,
        *,
        base_url: str = REGISTRY_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[Transport] = None,
    ):
        self.user_agent = user_agent
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def _client_options(self) -> dict:
        options = {
            "headers": build_headers(self.user_agent),
            "timeout": self.timeout,
        }
        if self.transport is not None:
            options["transport"] = self.transport
        return options

    def build_sync(self) -> SyncKrateClient:
        options = self._client_options()
        try:
            client = httpx.Client(**options)
        except ValueError as e:
            raise KrateConfigError(f"could not build http client: {e}") from e
        return SyncKrateClient(client, self.base_url)

    def build_async(self) -> AsyncKrateClient:
        options = self._client_options()
        try:
            client = httpx.AsyncClient(**options)
        except ValueError as e:
            raise KrateConfigError(f"could not build http client: {e}") from e
        return AsyncKrateClient(client, self.base_url)
