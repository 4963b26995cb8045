"""Order-index engine for the tool collection."""

from .ordering import (
    delete_tool,
    find_tool,
    insert_tool,
    is_dense,
    move_tool,
    next_id,
    next_order,
    sorted_by_order,
    update_fields,
)

__all__ = [
    "delete_tool",
    "find_tool",
    "insert_tool",
    "is_dense",
    "move_tool",
    "next_id",
    "next_order",
    "sorted_by_order",
    "update_fields",
]
