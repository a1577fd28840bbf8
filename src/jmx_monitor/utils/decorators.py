"""Error handling decorators for retrieval calls."""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

logger = logging.getLogger(__name__)


def handle_retrieval_errors(operation: str) -> Callable:
    """Decorator to convert retrieval failures to MetricNotFoundError.

    Errors already in the monitor's taxonomy pass through unchanged.

    Args:
        operation: Description of the operation (e.g., "running jmxterm").

    Returns:
        Decorated async function that handles retrieval errors.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            from jmx_monitor.errors import JMXMonitorError, MetricNotFoundError

            try:
                return await func(*args, **kwargs)
            except JMXMonitorError:
                raise
            except Exception as e:
                logger.error("Error during %s: %r", operation, e)
                raise MetricNotFoundError() from e

        return wrapper

    return decorator


__all__ = ["handle_retrieval_errors"]
