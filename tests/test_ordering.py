"""Tests for the order-index engine."""

from __future__ import annotations

import random

import pytest

from tests.conftest import make_tool, make_tools, orders_by_id
from tools_directory.engine import ordering
from tools_directory.errors import ToolNotFound, ToolValidationError


class TestInsert:
    def test_insert_into_empty(self):
        tools = []
        tool = ordering.insert_tool(tools, "A", "B", "C")
        assert tool.id == "1"
        assert tool.order == 1
        assert (tool.name, tool.description, tool.url) == ("A", "B", "C")
        assert tools == [tool]

    def test_insert_appends_after_max_order(self):
        tools = make_tools(3)
        tool = ordering.insert_tool(tools, "New", "desc", "https://x")
        assert tool.order == 4
        assert tool.id == "4"
        assert tools[-1] is tool

    def test_id_uses_max_numeric_id_not_count(self):
        tools = [make_tool(id="7", order=1), make_tool(id="2", order=2)]
        tool = ordering.insert_tool(tools, "New", "desc", "https://x")
        assert tool.id == "8"
        assert tool.order == 3

    def test_deleted_id_below_max_is_not_reused(self):
        tools = make_tools(3)
        ordering.delete_tool(tools, "1")
        tool = ordering.insert_tool(tools, "New", "desc", "https://x")
        assert tool.id == "4"
        assert tool.order == 3

    def test_non_numeric_ids_count_as_zero(self):
        tools = [make_tool(id="abc", order=1)]
        assert ordering.next_id(tools) == "1"

    @pytest.mark.parametrize(
        ("ids", "expected"),
        [
            (["12abc"], "13"),
            (["1_000"], "2"),
            (["\u0663"], "1"),
            ([" 7"], "8"),
            (["3", "x9"], "4"),
        ],
    )
    def test_leading_digits_determine_next_id(self, ids, expected):
        tools = [make_tool(id=tool_id, order=i) for i, tool_id in enumerate(ids, start=1)]
        assert ordering.next_id(tools) == expected


class TestMove:
    def test_move_to_front(self):
        tools = make_tools(3)
        ordering.move_tool(tools, ordering.find_tool(tools, "3"), 1)
        assert orders_by_id(tools) == {"3": 1, "1": 2, "2": 3}

    def test_move_to_back(self):
        tools = make_tools(3)
        ordering.move_tool(tools, ordering.find_tool(tools, "1"), 3)
        assert orders_by_id(tools) == {"2": 1, "3": 2, "1": 3}

    def test_move_forward_only_shifts_range(self):
        tools = make_tools(5)
        ordering.move_tool(tools, ordering.find_tool(tools, "4"), 2)
        assert orders_by_id(tools) == {"1": 1, "4": 2, "2": 3, "3": 4, "5": 5}

    def test_move_backward_only_shifts_range(self):
        tools = make_tools(5)
        ordering.move_tool(tools, ordering.find_tool(tools, "2"), 4)
        assert orders_by_id(tools) == {"1": 1, "3": 2, "4": 3, "2": 4, "5": 5}

    def test_move_to_current_order_is_noop(self):
        tools = make_tools(3)
        before = [t.model_copy() for t in tools]
        ordering.move_tool(tools, ordering.find_tool(tools, "2"), 2)
        assert tools == before

    @pytest.mark.parametrize("target", [0, -1, 4, 100])
    def test_move_out_of_range_rejected(self, target):
        tools = make_tools(3)
        with pytest.raises(ToolValidationError):
            ordering.move_tool(tools, ordering.find_tool(tools, "2"), target)
        assert orders_by_id(tools) == {"1": 1, "2": 2, "3": 3}


class TestDelete:
    def test_delete_middle_closes_gap(self):
        tools = make_tools(3)
        removed = ordering.delete_tool(tools, "2")
        assert removed.id == "2"
        assert orders_by_id(tools) == {"1": 1, "3": 2}

    def test_delete_last(self):
        tools = make_tools(3)
        ordering.delete_tool(tools, "3")
        assert orders_by_id(tools) == {"1": 1, "2": 2}

    def test_delete_unknown_raises(self):
        tools = make_tools(2)
        with pytest.raises(ToolNotFound):
            ordering.delete_tool(tools, "99")
        assert len(tools) == 2


class TestUpdateFields:
    def test_only_given_fields_change(self):
        tool = make_tool(order=2)
        ordering.update_fields(tool, name="Renamed")
        assert tool.name == "Renamed"
        assert tool.description == "Dashboards"
        assert tool.order == 2


class TestHelpers:
    def test_sorted_by_order(self):
        tools = [make_tool(id="a", order=3), make_tool(id="b", order=1), make_tool(id="c", order=2)]
        assert [t.id for t in ordering.sorted_by_order(tools)] == ["b", "c", "a"]

    def test_is_dense(self):
        assert ordering.is_dense([])
        assert ordering.is_dense(make_tools(4))
        assert not ordering.is_dense([make_tool(id="1", order=1), make_tool(id="2", order=3)])
        assert not ordering.is_dense([make_tool(id="1", order=1), make_tool(id="2", order=1)])

    def test_find_missing(self):
        with pytest.raises(ToolNotFound) as exc_info:
            ordering.find_tool(make_tools(1), "x")
        assert exc_info.value.tool_id == "x"


def test_random_mutations_keep_orders_dense():
    rng = random.Random(1234)
    tools = []
    for _ in range(500):
        op = rng.choice(["insert", "insert", "move", "delete"])
        if op == "insert" or not tools:
            ordering.insert_tool(tools, "n", "d", "u")
        elif op == "move":
            tool = rng.choice(tools)
            ordering.move_tool(tools, tool, rng.randint(1, len(tools)))
        else:
            ordering.delete_tool(tools, rng.choice(tools).id)
        assert ordering.is_dense(tools)
        assert len({t.id for t in tools}) == len(tools)
