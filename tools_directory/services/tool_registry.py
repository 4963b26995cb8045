"""Tool registry service.

Each operation is one load-modify-save cycle against the store: load the
whole collection, apply a single mutation through the order-index engine,
and save the whole collection back.
"""

import logging

from ..engine import ordering
from ..errors import ToolValidationError
from ..models.tools import Tool, ToolCreateRequest, ToolUpdateRequest
from ..store import ToolStore

logger = logging.getLogger(__name__)


async def list_tools(store: ToolStore) -> list[Tool]:
    """Return all tools sorted by order."""
    tools = await store.load()
    return ordering.sorted_by_order(tools)


async def create_tool(store: ToolStore, request: ToolCreateRequest) -> Tool:
    """Append a new tool at the end of the collection.

    Raises:
        ToolValidationError: if name, description or url is missing or empty
    """
    if not request.name or not request.description or not request.url:
        raise ToolValidationError("Name, description, and URL are required")

    tools = await store.load()
    tool = ordering.insert_tool(tools, request.name, request.description, request.url)
    await store.save(tools)

    logger.info(f"Created tool {tool.id} '{tool.name}' at order {tool.order}")
    return tool


async def update_tool(store: ToolStore, request: ToolUpdateRequest) -> Tool:
    """
    Edit a tool's fields and/or move it to a new order.

    The move is applied before field edits. Fields left as ``None`` are not
    changed.

    Raises:
        ToolValidationError: if no id is given or the order is out of range
        ToolNotFound: if the id does not exist
    """
    if not request.id:
        raise ToolValidationError("Tool ID is required")

    tools = await store.load()
    tool = ordering.find_tool(tools, request.id)

    if request.order is not None and request.order != tool.order:
        previous = tool.order
        ordering.move_tool(tools, tool, request.order)
        logger.info(f"Moved tool {tool.id} from order {previous} to {tool.order}")

    ordering.update_fields(
        tool,
        name=request.name,
        description=request.description,
        url=request.url,
    )
    await store.save(tools)

    logger.info(f"Updated tool {tool.id}")
    return tool


async def delete_tool(store: ToolStore, tool_id: str | None) -> Tool:
    """Remove a tool and close the gap in the ordering.

    Raises:
        ToolValidationError: if no id is given
        ToolNotFound: if the id does not exist
    """
    if not tool_id:
        raise ToolValidationError("Tool ID is required")

    tools = await store.load()
    removed = ordering.delete_tool(tools, tool_id)
    await store.save(tools)

    logger.info(f"Deleted tool {removed.id} (was order {removed.order}), {len(tools)} remaining")
    return removed
