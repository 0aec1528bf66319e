"""Stacks API client: JSON over HTTPS against a single endpoint."""
import asyncio
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ...config import NetworkConfig
from ...errors import RemoteError

logger = logging.getLogger(__name__)


class StacksApiClient:
    """Stacks node / Hiro API client.

    Every call goes to the one configured endpoint. Failures are raised as
    :class:`RemoteError` and never retried here; mutating operations must not
    be replayed behind the caller's back.
    """

    def __init__(self, config: NetworkConfig) -> None:
        self.api_url = config.api_url.rstrip("/")
        self.timeout = config.timeout

    async def get_json(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post_json(self, path: str, body: dict[str, Any]) -> Any:
        return await self._request("POST", path, body)

    async def _request(
        self, method: str, path: str, body: dict[str, Any] | None = None
    ) -> Any:
        url = f"{self.api_url}/{path.lstrip('/')}"
        ssl_context = ssl.create_default_context(cafile=certifi.where())

        try:
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.request(
                    method,
                    url,
                    json=body,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if not 200 <= response.status < 300:
                        detail = await response.text()
                        logger.warning(
                            "%s %s failed: HTTP %s", method, url, response.status
                        )
                        raise RemoteError(
                            f"{method} {url} returned HTTP {response.status}: {detail}",
                            status=response.status,
                        )
                    try:
                        return await response.json()
                    except (aiohttp.ContentTypeError, ValueError) as e:
                        raise RemoteError(
                            f"{method} {url} returned malformed JSON: {e}",
                            status=response.status,
                        ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise RemoteError(f"{method} {url} failed: {e}") from e
