"""Shared utility modules for jmx-monitor.

- builders: jmxterm command templates and builders
- extractors: Value extraction from jmxterm output
- decorators: Error handling for retrieval calls
"""

from jmx_monitor.utils.builders import (
    CommandTemplate,
    build_command,
    mask_password,
    select_template,
)
from jmx_monitor.utils.decorators import handle_retrieval_errors
from jmx_monitor.utils.extractors import get_key_value, is_scalar

__all__ = [
    # Builders
    "CommandTemplate",
    "select_template",
    "build_command",
    "mask_password",
    # Extractors
    "get_key_value",
    "is_scalar",
    # Decorators
    "handle_retrieval_errors",
]
