"""Remote key-value backend (Upstash-compatible Redis REST API).

Commands are sent as a JSON array to the endpoint root with a bearer token,
and the reply carries either ``result`` or ``error``. The collection is kept
under one key as a JSON string.
"""

import logging
from typing import Any

import httpx

from ..errors import StorageFailure
from ..models.tools import Tool
from .base import ToolStore, decode_tools, encode_tools

logger = logging.getLogger(__name__)


class KVToolStore(ToolStore):
    """Stores the collection under a single key of a Redis REST endpoint."""

    backend = "kv"

    def __init__(
        self,
        url: str,
        token: str,
        key: str = "tools",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url.rstrip("/")
        self.key = key
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._headers = {"Authorization": f"Bearer {token}"}

    async def _command(self, *args: str) -> Any:
        """Run one Redis command and return its ``result``."""
        try:
            response = await self._client.post(self.url, json=list(args), headers=self._headers)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise StorageFailure("Key-value store request failed") from e
        except ValueError as e:
            raise StorageFailure("Key-value store returned invalid JSON") from e

        if not isinstance(body, dict):
            raise StorageFailure("Key-value store returned an unexpected response")
        if "error" in body:
            raise StorageFailure("Key-value store returned an error")
        return body.get("result")

    async def load(self) -> list[Tool]:
        return decode_tools(await self._command("GET", self.key))

    async def save(self, tools: list[Tool]) -> None:
        await self._command("SET", self.key, encode_tools(tools))
        logger.info(f"Saved {len(tools)} tools to key '{self.key}'")

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
