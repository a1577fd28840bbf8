"""Parsing of the metric list and enable mask into metric descriptors.

Metric list entries have the form ``ID,TYPE,NAME,MBEAN-SPECIFIER`` where the
specifier may itself contain commas and an optional ``DOMAIN:`` prefix.
"""

from __future__ import annotations

import logging

from jmx_monitor.errors import MetricNotFoundError
from jmx_monitor.models import AttributeKey, MetricSpec

logger = logging.getLogger(__name__)

METRIC_SEPARATOR = ";"
FIELD_SEPARATOR = ","
STATE_SEPARATOR = ","
DISABLED_SUFFIX = ",0"
ENABLED_FLAG = "1"


def get_attribute_key(attr: str) -> AttributeKey | None:
    """Split a composite-attribute key off an MBean path.

    Scans from the end: a key is recognized only when the last dot comes
    after the last space.

    Args:
        attr: MBean path, e.g. ``"type=Memory HeapMemoryUsage.used"``.

    Returns:
        The object name and key, or None if the path has no key suffix.
    """
    for i in range(len(attr) - 1, -1, -1):
        if attr[i] == " ":
            return None
        if attr[i] == ".":
            return AttributeKey(mbean=attr[:i], key=attr[i + 1 :])
    return None


def escape_spaces(mbean: str, *, double: bool) -> str:
    """Backslash-escape every space in an MBean path except the last.

    The last space separates the object name from the attribute in the
    jmxterm ``get`` command, so it stays bare.

    Args:
        mbean: MBean path.
        double: Use ``\\\\ `` instead of ``\\ ``.

    Returns:
        The escaped path.
    """
    head, sep, tail = mbean.rpartition(" ")
    if not sep:
        return mbean
    escaped = "\\\\ " if double else "\\ "
    return head.replace(" ", escaped) + sep + tail


def _split_domain(specifier: str) -> tuple[str | None, str]:
    if ":" not in specifier:
        return None, specifier
    tokens = specifier.split(":")
    if len(tokens) != 2:
        logger.error("Ambiguous MBean specifier %r: more than one ':'", specifier)
        raise MetricNotFoundError()
    return tokens[0], tokens[1]


def parse_metric(entry: str, enabled: bool, *, double_escape: bool) -> MetricSpec:
    """Parse one metric list entry."""
    if entry.endswith(DISABLED_SUFFIX):
        entry = entry[: -len(DISABLED_SUFFIX)]

    fields = entry.split(FIELD_SEPARATOR)
    fields += [""] * (3 - len(fields))
    metric_id, metric_type, metric_name = fields[:3]
    specifier = FIELD_SEPARATOR.join(fields[3:]).replace('"', "")

    domain, mbean = _split_domain(specifier)

    attr_key = None
    attr = get_attribute_key(mbean)
    if attr is not None:
        mbean = attr.mbean
        attr_key = attr.key

    return MetricSpec(
        id=metric_id,
        type=metric_type,
        name=metric_name,
        domain=domain,
        mbean=escape_spaces(mbean, double=double_escape),
        attr_key=attr_key,
        enabled=enabled,
    )


def parse_metrics(metrics: str, metric_state: str, *, double_escape: bool) -> list[MetricSpec]:
    """Parse the metric list and enable mask.

    Args:
        metrics: ``;``-separated metric entries.
        metric_state: ``,``-separated ``1``/``0`` flags aligned with metrics.
            Missing positions count as disabled; lengths are not checked.
        double_escape: Escape style passed to escape_spaces.

    Returns:
        Metric descriptors in input order.

    Raises:
        MetricNotFoundError: If a specifier has more than one ``:``.
    """
    states = metric_state.split(STATE_SEPARATOR)
    parsed: list[MetricSpec] = []

    for j, entry in enumerate(metrics.split(METRIC_SEPARATOR)):
        enabled = j < len(states) and states[j] == ENABLED_FLAG
        parsed.append(parse_metric(entry, enabled, double_escape=double_escape))

    return parsed
