"""Enumeration types for the tools directory."""

from enum import StrEnum


class StorageBackend(StrEnum):
    """Where the tool collection is persisted."""

    FILE = "file"  # JSON document on local disk
    KV = "kv"  # Single key in a Redis REST endpoint


class MetricCategory(StrEnum):
    """Analytics event categories in the metrics catalogue."""

    SESSION = "session"
    NAVIGATION = "navigation"
    ECOMMERCE = "ecommerce"
    AUTHENTICATION = "authentication"
    STORE = "store"
    LOCATION = "location"
    MENU = "menu"
    SEARCH = "search"
    LOYALTY = "loyalty"
    ERROR = "error"
    EXPERIMENT = "experiment"
