"""Shared pytest fixtures and factory functions for tools directory tests."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from tools_directory.api.deps import get_tool_store
from tools_directory.config import Settings, get_settings
from tools_directory.models.tools import Tool
from tools_directory.server import app
from tools_directory.store import FileToolStore

ADMIN_PASSWORD = "s3cret"


def make_tool(**overrides: Any) -> Tool:
    """Create a Tool with sensible defaults, overridable via kwargs."""
    defaults: dict[str, Any] = {
        "id": "1",
        "name": "Grafana",
        "description": "Dashboards",
        "url": "https://grafana.internal",
        "order": 1,
    }
    defaults.update(overrides)
    return Tool(**defaults)


def make_tools(count: int) -> list[Tool]:
    """Create ``count`` tools with ids and orders 1..count."""
    return [make_tool(id=str(i), name=f"Tool {i}", order=i) for i in range(1, count + 1)]


def orders_by_id(tools: list[Tool]) -> dict[str, int]:
    return {t.id: t.order for t in tools}


@pytest.fixture()
def settings(tmp_path: Any) -> Settings:
    """Settings pointing the file backend at a tmp_path document."""
    return Settings(
        admin_password=ADMIN_PASSWORD,
        tools_file=tmp_path / "tools.json",
        _env_file=None,
    )


@pytest.fixture()
def file_store(settings: Settings) -> FileToolStore:
    return FileToolStore(settings.tools_file)


@pytest.fixture()
def client(settings: Settings, file_store: FileToolStore):
    """TestClient with settings and store overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_tool_store] = lambda: file_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Password": ADMIN_PASSWORD}
