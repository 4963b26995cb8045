"""JSON file backend."""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from ..errors import StorageFailure
from ..models.tools import Tool
from .base import ToolStore, decode_tools, encode_tools

logger = logging.getLogger(__name__)


class FileToolStore(ToolStore):
    """Stores the collection as a JSON array in a single file."""

    backend = "file"

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def load(self) -> list[Tool]:
        return await asyncio.to_thread(self._load)

    async def save(self, tools: list[Tool]) -> None:
        await asyncio.to_thread(self._save, tools)

    def _load(self) -> list[Tool]:
        if not self.path.exists():
            logger.debug(f"Tools file {self.path} does not exist yet")
            return []
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageFailure("Failed to read tools") from e
        return decode_tools(raw)

    def _save(self, tools: list[Tool]) -> None:
        # Each save writes its own temp file in the target directory, then swaps it in
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(encode_tools(tools))
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StorageFailure("Failed to save tools") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
        logger.info(f"Saved {len(tools)} tools to {self.path}")
