"""Pydantic models for the tools directory request/response schemas.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from tools_directory.models.tools import Tool
    from tools_directory.models.enums import StorageBackend
"""

# ============ ENUMS ============
from .enums import MetricCategory, StorageBackend

# ============ HEALTH MODELS ============
from .health import HealthResponse

# ============ METRICS MODELS ============
from .metrics import CategoryInfo, Metric, MetricsCatalogResponse

# ============ TOOL MODELS ============
from .tools import (
    ErrorResponse,
    SuccessResponse,
    Tool,
    ToolCreateRequest,
    ToolUpdateRequest,
)

__all__ = [
    # Enums
    "MetricCategory",
    "StorageBackend",
    # Health
    "HealthResponse",
    # Metrics
    "CategoryInfo",
    "Metric",
    "MetricsCatalogResponse",
    # Tools
    "ErrorResponse",
    "SuccessResponse",
    "Tool",
    "ToolCreateRequest",
    "ToolUpdateRequest",
]
