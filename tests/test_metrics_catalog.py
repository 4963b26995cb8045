"""Tests for the metrics reference catalogue."""

from __future__ import annotations

from tools_directory.models.enums import MetricCategory
from tools_directory.services.metrics_catalog import CATEGORY_LABELS, METRICS, get_catalog


def test_every_category_has_a_label():
    assert set(CATEGORY_LABELS) == set(MetricCategory)


def test_metric_names_are_unique():
    names = [m.name for m in METRICS]
    assert len(names) == len(set(names))


def test_catalog_counts():
    catalog = get_catalog()
    counts = {c.id: c.count for c in catalog.categories}
    assert catalog.total == len(METRICS)
    assert counts[MetricCategory.ERROR] == 1
    assert counts[MetricCategory.SESSION] == 4


def test_custom_event_is_navigation():
    custom = next(m for m in METRICS if m.name == "custom")
    assert custom.category == MetricCategory.NAVIGATION
    assert custom.parameters == "eventName: string, properties?: object"
