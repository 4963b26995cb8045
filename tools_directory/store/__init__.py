"""Storage backends for the tool collection.

One store instance is shared by the process, created lazily from settings
and closed on shutdown.
"""

import asyncio
import logging

from ..config import Settings
from ..errors import ServerMisconfigured
from ..models.enums import StorageBackend
from .base import ToolStore, decode_tools, encode_tools
from .file_store import FileToolStore
from .kv_store import KVToolStore

logger = logging.getLogger(__name__)

# Global store instance
_store: ToolStore | None = None
_lock = asyncio.Lock()


def create_store(settings: Settings) -> ToolStore:
    """Build the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == StorageBackend.KV:
        if not settings.kv_rest_api_url or not settings.kv_rest_api_token:
            raise ServerMisconfigured("KV_REST_API_URL and KV_REST_API_TOKEN must be configured")
        return KVToolStore(
            url=settings.kv_rest_api_url,
            token=settings.kv_rest_api_token,
            key=settings.tools_key,
            timeout=settings.kv_timeout_seconds,
        )
    return FileToolStore(settings.tools_file)


async def get_store(settings: Settings) -> ToolStore:
    """Get or create the shared store instance."""
    global _store

    async with _lock:
        if _store is None:
            _store = create_store(settings)
            logger.info(f"Using {_store.backend} storage backend")
        return _store


async def close_store() -> None:
    """Close the shared store instance."""
    global _store
    async with _lock:
        if _store is not None:
            try:
                await _store.close()
                logger.info("Tool store closed")
            finally:
                _store = None


__all__ = [
    "FileToolStore",
    "KVToolStore",
    "ToolStore",
    "close_store",
    "create_store",
    "decode_tools",
    "encode_tools",
    "get_store",
]
