"""Value extraction from jmxterm output."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r?\n")


def get_key_value(output: str, attr_key: str) -> str | None:
    """Get a composite-attribute field from jmxterm output.

    jmxterm prints composite values one ``key = value;`` line per field.
    The first line containing ``attr_key`` is used.

    Args:
        output: Trimmed jmxterm output.
        attr_key: Composite key to look up.

    Returns:
        The field value without its trailing ``;``, or None if no line
        matches or the matching line is not a single ``key = value`` pair.
    """
    for line in _LINE_BREAK.split(output):
        if attr_key in line:
            tokens = line.strip().split("=")
            if len(tokens) != 2:
                return None
            return tokens[1].strip().replace(";", "", 1)
    return None


def is_scalar(value: str) -> bool:
    """Whether a value is a plain scalar rather than an unparsed structure."""
    return "=" not in value


__all__ = ["get_key_value", "is_scalar"]
