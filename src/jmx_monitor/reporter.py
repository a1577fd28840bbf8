"""Report formatting."""

from __future__ import annotations

from jmx_monitor.models import MetricSpec


def format_metric(metric: MetricSpec) -> str:
    """Format one metric as ``ID:NAME:TYPE|VALUE|``."""
    return f"{metric.id}:{metric.name}:{metric.type}|{metric.value}|"


def format_report(metrics: list[MetricSpec]) -> str:
    """Format enabled metrics, one per line, without a trailing newline."""
    return "\n".join(format_metric(m) for m in metrics if m.enabled)
