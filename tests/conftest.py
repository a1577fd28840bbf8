"""Pytest fixtures for jmx-monitor tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from jmx_monitor.client import JmxtermClient
from jmx_monitor.models import EndpointTarget, MetricSpec

# =============================================================================
# Model Factories - Use these to build test data without duplication
# =============================================================================


@pytest.fixture
def metric_spec() -> Callable[..., MetricSpec]:
    """Factory for MetricSpec with configurable fields."""

    def _make(
        id: str = "1127",
        type: str = "4",
        name: str = "m1",
        domain: str | None = None,
        mbean: str = "type=Memory HeapMemoryUsage",
        attr_key: str | None = None,
        enabled: bool = True,
    ) -> MetricSpec:
        return MetricSpec(
            id=id,
            type=type,
            name=name,
            domain=domain,
            mbean=mbean,
            attr_key=attr_key,
            enabled=enabled,
        )

    return _make


@pytest.fixture
def target() -> EndpointTarget:
    """JMX endpoint without credentials."""
    return EndpointTarget(host="localhost", port="1099")


@pytest.fixture
def auth_target() -> EndpointTarget:
    """JMX endpoint with credentials."""
    return EndpointTarget(host="jmx.example.com", port="9010", username="admin", password="s3cret")


@pytest.fixture
def mock_client() -> AsyncMock:
    """Create a mock JmxtermClient."""
    client = AsyncMock(spec=JmxtermClient)
    client.timeout = 60.0
    return client


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep JMX_MONITOR_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("JMX_MONITOR_"):
            monkeypatch.delenv(key)
