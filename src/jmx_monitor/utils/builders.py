"""jmxterm command builders.

One of four command templates is chosen from whether the metric carries a
domain and whether the target carries credentials.
"""

from __future__ import annotations

from enum import Enum

from jmx_monitor.models import EndpointTarget, MetricSpec

_CLIENT = "{JAVA} -jar {JAR} -l {HOSTNAME}:{PORT} -v silent -n"
_AUTH = " -u {USERNAME} -p {PASSWORD}"


class CommandTemplate(str, Enum):
    """Shell command lines for a single jmxterm ``get``."""

    CMD = "echo get -s -b {MBEAN} | " + _CLIENT
    CMD_AUTH = "echo get -s -b {MBEAN} | " + _CLIENT + _AUTH
    CMD_DOMAIN = "echo get -s -d {DOMAIN} -b {MBEAN} | " + _CLIENT
    CMD_DOMAIN_AUTH = "echo get -s -d {DOMAIN} -b {MBEAN} | " + _CLIENT + _AUTH


def select_template(has_domain: bool, has_auth: bool) -> CommandTemplate:
    """Pick the template for a (domain present, credentials present) pair."""
    if has_domain:
        return CommandTemplate.CMD_DOMAIN_AUTH if has_auth else CommandTemplate.CMD_DOMAIN
    return CommandTemplate.CMD_AUTH if has_auth else CommandTemplate.CMD


def build_command(
    target: EndpointTarget,
    metric: MetricSpec,
    *,
    java: str = "java",
    jar: str = "jmxterm.jar",
) -> str:
    """Build the shell command that retrieves one metric.

    Placeholders are replaced literally. Nothing is quoted; the MBean has
    already had its spaces escaped by the parser.

    Args:
        target: JMX endpoint.
        metric: Metric to retrieve.
        java: Java binary.
        jar: Path to the jmxterm jar.

    Returns:
        The command line to run through the shell.
    """
    template = select_template(metric.domain is not None, target.has_auth)
    replacements = {
        "{DOMAIN}": metric.domain or "",
        "{MBEAN}": metric.mbean,
        "{JAVA}": java,
        "{JAR}": jar,
        "{HOSTNAME}": target.host,
        "{PORT}": target.port,
        "{USERNAME}": target.username or "",
        "{PASSWORD}": target.password or "",
    }

    cmd = template.value
    for placeholder, value in replacements.items():
        cmd = cmd.replace(placeholder, value)
    return cmd


def mask_password(cmd: str, target: EndpointTarget) -> str:
    """Hide the password in a command line before it is logged."""
    if not target.password:
        return cmd
    return cmd.replace(f"-p {target.password}", "-p ****")


__all__ = [
    "CommandTemplate",
    "select_template",
    "build_command",
    "mask_password",
]
