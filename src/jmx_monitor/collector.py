"""Sequential retrieval of metric values."""

from __future__ import annotations

import logging

from jmx_monitor.client import JmxtermClient
from jmx_monitor.errors import MetricNotFoundError
from jmx_monitor.models import EndpointTarget, MetricSpec
from jmx_monitor.utils.builders import build_command, mask_password
from jmx_monitor.utils.extractors import get_key_value, is_scalar

logger = logging.getLogger(__name__)


def resolve_value(output: str, metric: MetricSpec) -> str:
    """Turn raw jmxterm output into the metric's reported value.

    Args:
        output: jmxterm standard output.
        metric: Metric the output belongs to.

    Returns:
        The trimmed value, narrowed to the composite key when one is set.

    Raises:
        MetricNotFoundError: If the output is empty, the key is missing, or
            the value is not a scalar.
    """
    value = output.strip()
    if not value:
        logger.error("Metric %s: empty output", metric.id)
        raise MetricNotFoundError()

    if metric.attr_key is not None:
        narrowed = get_key_value(value, metric.attr_key)
        if narrowed is None:
            logger.error("Metric %s: key %r not found", metric.id, metric.attr_key)
            raise MetricNotFoundError()
        value = narrowed

    if not is_scalar(value):
        logger.error("Metric %s: value is not a scalar: %r", metric.id, value)
        raise MetricNotFoundError()

    return value


async def collect_metrics(
    client: JmxtermClient,
    target: EndpointTarget,
    metrics: list[MetricSpec],
    *,
    java: str = "java",
    jar: str = "jmxterm.jar",
) -> list[MetricSpec]:
    """Retrieve every enabled metric, one jmxterm call at a time.

    Calls run in list order and each is awaited before the next starts.
    The first failure aborts the run; values already set are not reported.

    Args:
        client: jmxterm client.
        target: JMX endpoint.
        metrics: Parsed metric descriptors; values are set in place.
        java: Java binary for the command line.
        jar: jmxterm jar path for the command line.

    Returns:
        The same list, with values set for enabled metrics.

    Raises:
        MetricNotFoundError: If any enabled metric cannot be retrieved.
    """
    for metric in metrics:
        if not metric.enabled:
            continue

        cmd = build_command(target, metric, java=java, jar=jar)
        logger.debug("Metric %s: %s", metric.id, mask_password(cmd, target))

        output = await client.run(cmd)
        metric.value = resolve_value(output, metric)

    return metrics
