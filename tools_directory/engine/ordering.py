"""Order-index maintenance for the tool collection.

Every mutation keeps the ``order`` values of the collection a dense
permutation of ``1..N``. The functions here work on the in-memory list only;
persisting the result is the caller's job.
"""

import re

from ..errors import ToolNotFound, ToolValidationError
from ..models.tools import Tool


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _numeric_id(tool_id: str) -> int:
    """Leading decimal digits of a tool id as an integer, 0 if there are none.

    ``"12abc"`` counts as 12; ``"abc"`` and ``"1_000"``-style separators stop at
    the first non-digit.
    """
    match = _LEADING_INT.match(tool_id)
    return int(match.group(1)) if match else 0


def next_order(tools: list[Tool]) -> int:
    """Order for a record appended at the end."""
    return max((t.order for t in tools), default=0) + 1


def next_id(tools: list[Tool]) -> str:
    """Id for a new record: highest numeric id plus one."""
    return str(max((_numeric_id(t.id) for t in tools), default=0) + 1)


def sorted_by_order(tools: list[Tool]) -> list[Tool]:
    """Return the tools sorted by ascending order."""
    return sorted(tools, key=lambda t: t.order)


def is_dense(tools: list[Tool]) -> bool:
    """True if the orders are exactly ``{1..N}``."""
    return sorted(t.order for t in tools) == list(range(1, len(tools) + 1))


def find_tool(tools: list[Tool], tool_id: str) -> Tool:
    """Look up a tool by id.

    Raises:
        ToolNotFound: if no tool has this id
    """
    for tool in tools:
        if tool.id == tool_id:
            return tool
    raise ToolNotFound(tool_id)


def insert_tool(tools: list[Tool], name: str, description: str, url: str) -> Tool:
    """Append a new tool at the end of the collection and return it."""
    tool = Tool(
        id=next_id(tools),
        name=name,
        description=description,
        url=url,
        order=next_order(tools),
    )
    tools.append(tool)
    return tool


def move_tool(tools: list[Tool], tool: Tool, new_order: int) -> None:
    """
    Move ``tool`` to ``new_order``, shifting the records in between.

    Moving toward the front pushes every other record in
    ``[new_order, current)`` back by one; moving toward the back pulls every
    other record in ``(current, new_order]`` forward by one.

    Raises:
        ToolValidationError: if ``new_order`` is outside ``1..N``
    """
    if new_order < 1 or new_order > len(tools):
        raise ToolValidationError(f"Order must be between 1 and {len(tools)}")

    current = tool.order
    if new_order == current:
        return

    for other in tools:
        if other.id == tool.id:
            continue
        if new_order < current:
            if new_order <= other.order < current:
                other.order += 1
        elif current < other.order <= new_order:
            other.order -= 1

    tool.order = new_order


def delete_tool(tools: list[Tool], tool_id: str) -> Tool:
    """Remove a tool and close the gap it leaves. Returns the removed tool."""
    tool = find_tool(tools, tool_id)
    tools[:] = [t for t in tools if t is not tool]

    for other in tools:
        if other.order > tool.order:
            other.order -= 1

    return tool


def update_fields(
    tool: Tool,
    name: str | None = None,
    description: str | None = None,
    url: str | None = None,
) -> Tool:
    """Apply field edits. ``None`` leaves a field unchanged; order is untouched."""
    if name is not None:
        tool.name = name
    if description is not None:
        tool.description = description
    if url is not None:
        tool.url = url
    return tool
