"""Shared HTTP plumbing for registry clients."""

import asyncio
from typing import Any

import httpx
from loguru import logger

from ..errors import MalformedResponseError, PackageNotFoundError, RegistryFetchError


class RegistryClient:
    """
    Issues exactly one GET per lookup and parses the body into a record.

    Subclasses set `registry_name` and implement `package_url()` and `parse()`.
    No retries: the first failure surfaces as a typed error.

    Args:
        base_url: Registry root, e.g. "https://registry.npmjs.org"
        timeout: Deadline for the whole request in seconds (also the
            per-read limit)
        connect_timeout: Connect phase timeout in seconds
        user_agent: User-Agent header sent upstream
        transport: Optional httpx transport (used to inject test doubles)
    """

    registry_name = "registry"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.total_timeout = timeout
        self.timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self.headers = {"Accept": "application/json"}
        if user_agent:
            self.headers["User-Agent"] = user_agent
        self._transport = transport

    def package_url(self, package_name: str) -> str:
        raise NotImplementedError

    def parse(self, data: Any, package_name: str) -> Any:
        raise NotImplementedError

    async def fetch(self, package_name: str) -> Any:
        """
        Fetch and parse the record for one package.

        Args:
            package_name: Identifier, passed verbatim into the URL path

        Returns:
            Registry-specific record

        Raises:
            PackageNotFoundError: Registry answered 404
            RegistryFetchError: Transport failure, deadline exceeded or other
                non-2xx status
            MalformedResponseError: Body is not JSON or misses required fields
        """
        url = self.package_url(package_name)
        logger.debug(f"GET {url}")

        try:
            response = await asyncio.wait_for(self._get(url), timeout=self.total_timeout)
        except asyncio.TimeoutError as e:
            raise RegistryFetchError(
                self.registry_name, f"Request timed out after {self.total_timeout:g}s"
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = f"Request failed with status code {status}"
            if status == 404:
                raise PackageNotFoundError(self.registry_name, detail, status) from e
            raise RegistryFetchError(self.registry_name, detail, status) from e
        except httpx.HTTPError as e:
            raise RegistryFetchError(self.registry_name, str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                self.registry_name, package_name, f"body is not valid JSON ({e})"
            ) from e

        return self.parse(data, package_name)

    async def _get(self, url: str) -> httpx.Response:
        # httpx timeouts are per operation; a trickling body never trips them
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response
