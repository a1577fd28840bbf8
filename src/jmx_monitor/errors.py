"""Error taxonomy and exit-code mapping for the JMX monitor."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure the monitor reports to its scheduler."""

    INVALID_PARAMETERS_NUMBER = "invalid_parameters_number"
    METRIC_NOT_FOUND = "metric_not_found"
    REQUEST_TIMED_OUT = "request_timed_out"


EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_PARAMETERS_NUMBER: 3,
    ErrorKind.METRIC_NOT_FOUND: 8,
    ErrorKind.REQUEST_TIMED_OUT: 14,
}

GENERIC_EXIT_CODE = 1


class JMXMonitorError(Exception):
    """Base JMX monitor error.

    Args:
        kind: The failure kind, which determines the exit code.
        message: Text printed before exiting. May be empty.
    """

    kind: ErrorKind = ErrorKind.METRIC_NOT_FOUND
    default_message: str = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    @property
    def code(self) -> int:
        """Process exit code for this error."""
        return EXIT_CODES[self.kind]


class InvalidParametersNumberError(JMXMonitorError):
    """Wrong number of command-line arguments."""

    kind = ErrorKind.INVALID_PARAMETERS_NUMBER
    default_message = "Wrong number of parameters."


class MetricNotFoundError(JMXMonitorError):
    """Metric value is empty, absent, malformed or ambiguous."""

    kind = ErrorKind.METRIC_NOT_FOUND


class RequestTimedOutError(JMXMonitorError):
    """JMX endpoint did not answer in time.

    Reserved: the per-call subprocess timeout is reported as
    MetricNotFoundError, so nothing raises this yet.
    """

    kind = ErrorKind.REQUEST_TIMED_OUT
    default_message = "Timeout. Verify hostname/ipaddress and jmx settings."


def exit_code_for(e: BaseException) -> int:
    """Map an exception to the process exit code.

    Uses isinstance() so subclasses of the taxonomy keep their kind's code.

    Args:
        e: The exception that ended the run.

    Returns:
        The exit code from EXIT_CODES, or GENERIC_EXIT_CODE for anything
        outside the taxonomy.
    """
    if isinstance(e, JMXMonitorError):
        return e.code
    return GENERIC_EXIT_CODE


def message_for(e: BaseException) -> str:
    """Text to print for an exception that ended the run."""
    if isinstance(e, JMXMonitorError):
        return e.message
    return str(e)
