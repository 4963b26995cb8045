"""Storage interface for the tool collection.

The whole collection is the unit of read and write: ``load`` returns every
record, ``save`` replaces every record. There is no versioning, so the last
writer wins.
"""

import json
from abc import ABC, abstractmethod

from pydantic import TypeAdapter, ValidationError

from ..errors import StorageFailure
from ..models.tools import Tool

_tool_list = TypeAdapter(list[Tool])


class ToolStore(ABC):
    """Persists the complete list of tools as one value."""

    backend: str = ""

    @abstractmethod
    async def load(self) -> list[Tool]:
        """Return all tools, or an empty list if nothing has been stored yet."""

    @abstractmethod
    async def save(self, tools: list[Tool]) -> None:
        """Replace the stored collection with ``tools``."""

    async def close(self) -> None:
        """Release any held resources."""


def encode_tools(tools: list[Tool]) -> str:
    """Serialize tools to a JSON array."""
    return _tool_list.dump_json(tools).decode()


def decode_tools(raw: str | bytes | list | None) -> list[Tool]:
    """
    Parse stored data into tools.

    Accepts a JSON string/bytes or an already-decoded list. ``None`` and
    blank strings mean nothing is stored yet.

    Raises:
        StorageFailure: if the stored data is not a list of tool records
    """
    if raw is None:
        return []
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        if isinstance(raw, str):
            if not raw.strip():
                return []
            raw = json.loads(raw)
        return _tool_list.validate_python(raw)
    except (ValueError, ValidationError) as e:
        raise StorageFailure("Stored tools are malformed") from e
