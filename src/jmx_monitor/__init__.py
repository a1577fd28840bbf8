"""JMX Monitor - collect JMX attribute values through jmxterm."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from jmx_monitor.errors import (
    GENERIC_EXIT_CODE,
    InvalidParametersNumberError,
    exit_code_for,
    message_for,
)

if TYPE_CHECKING:
    from jmx_monitor.config import JMXMonitorSettings

logger = logging.getLogger(__name__)

ARGUMENT_COUNT = 6


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser reporting usage errors as InvalidParametersNumberError."""

    def error(self, message: str) -> None:  # type: ignore[override]
        logger.debug("Argument error: %s", message)
        raise InvalidParametersNumberError()


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = _ArgumentParser(
        prog="jmx-monitor",
        add_help=False,
        description="JMX Monitor - retrieve JMX attribute values with jmxterm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  JMX_MONITOR_JAVA          Java binary (default: java)
  JMX_MONITOR_JMXTERM_JAR   Path to the jmxterm jar (default: jmxterm.jar)
  JMX_MONITOR_TIMEOUT       Per-call timeout in seconds (default: 60)
  JMX_MONITOR_ESCAPE_STYLE  auto, single or double (default: auto)
  JMX_MONITOR_LOG_LEVEL     Logging level, to stderr (default: WARNING)

Exit codes:
  0 success, 3 wrong number of parameters, 8 metric not found,
  14 timeout, 1 any other error

Example:
  jmx-monitor localhost 1099 \\
    "1127,4,m1,org.apache.activemq:brokerName=localhost,type=Broker AverageMessageSize,0" \\
    "1" "username" "password"
""",
    )
    parser.add_argument("host", help="Hostname or IP where JMX is listening")
    parser.add_argument("port", help="Port where JMX is listening")
    parser.add_argument("metrics", help="';'-separated metric entries ID,TYPE,NAME,MBEAN")
    parser.add_argument("metric_state", help="','-separated 1/0 flags, one per metric")
    parser.add_argument("username", help="JMX auth username, empty for none")
    parser.add_argument("password", help="JMX auth password, empty for none")
    return parser


def _strip_quotes(value: str) -> str:
    return value.replace('"', "")


async def monitor(argv: list[str], settings: JMXMonitorSettings) -> str:
    """Parse arguments, collect every enabled metric and build the report.

    Args:
        argv: Command-line arguments without the program name.
        settings: jmxterm invocation settings.

    Returns:
        The report text.

    Raises:
        InvalidParametersNumberError: If there are not exactly six arguments.
        MetricNotFoundError: If any enabled metric cannot be retrieved.
    """
    from jmx_monitor.client import JmxtermClient
    from jmx_monitor.collector import collect_metrics
    from jmx_monitor.models import EndpointTarget
    from jmx_monitor.parser import parse_metrics
    from jmx_monitor.reporter import format_report

    # Values such as passwords may start with '-'.
    if len(argv) == ARGUMENT_COUNT:
        argv = ["--", *argv]
    args = build_parser().parse_args(argv)

    target = EndpointTarget(
        host=args.host,
        port=args.port,
        username=_strip_quotes(args.username),
        password=_strip_quotes(args.password),
    )
    metrics = parse_metrics(
        _strip_quotes(args.metrics),
        _strip_quotes(args.metric_state),
        double_escape=settings.double_escape,
    )

    async with JmxtermClient(timeout=settings.timeout) as client:
        await collect_metrics(
            client,
            target,
            metrics,
            java=settings.java,
            jar=settings.jmxterm_jar,
        )

    return format_report(metrics)


def run(argv: list[str]) -> int:
    """Run one collection cycle and print the report.

    Returns:
        The process exit code.
    """
    from jmx_monitor.config import JMXMonitorSettings
    from jmx_monitor.logging_setup import setup_logging

    settings = JMXMonitorSettings()
    setup_logging(settings.log_level)

    try:
        report = asyncio.run(monitor(argv, settings))
    except Exception as e:
        code = exit_code_for(e)
        if code == GENERIC_EXIT_CODE:
            logger.exception("Unexpected error")
        message = message_for(e)
        if message:
            print(message)
        return code

    print(report)
    return 0


def main() -> None:
    """Run the JMX monitor."""
    sys.exit(run(sys.argv[1:]))


__all__ = ["main", "monitor", "run"]
