"""Metrics catalogue models."""

from pydantic import BaseModel, Field

from .enums import MetricCategory


class Metric(BaseModel):
    """One analytics event exposed by the tracking SDK."""

    name: str = Field(..., description="Event name as sent to analytics")
    method: str = Field(..., description="SDK call or trigger that emits it")
    category: MetricCategory = Field(..., description="Event category")
    description: str = Field(..., description="What the event captures")
    parameters: str | None = Field(default=None, description="Event parameters")


class CategoryInfo(BaseModel):
    """Category with its display label and event count."""

    id: MetricCategory = Field(..., description="Category identifier")
    label: str = Field(..., description="Display label")
    count: int = Field(default=0, ge=0, description="Number of metrics in category")


class MetricsCatalogResponse(BaseModel):
    """Body of GET /api/metrics."""

    metrics: list[Metric] = Field(default_factory=list)
    categories: list[CategoryInfo] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
