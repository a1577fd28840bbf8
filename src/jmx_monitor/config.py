"""Configuration for the JMX monitor."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JMXMonitorSettings(BaseSettings):
    """Configuration for the JMX monitor.

    The endpoint and metric list come from the command line; these settings
    cover how the external jmxterm client is invoked.

    Attributes:
        java: Java binary used to run jmxterm.
        jmxterm_jar: Path to the jmxterm jar.
        timeout: Per-call timeout in seconds.
        escape_style: How spaces in MBean names are escaped.
        log_level: Logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="JMX_MONITOR_",
        extra="ignore",
    )

    java: str = Field(default="java", description="Java binary used to run jmxterm")
    jmxterm_jar: str = Field(default="jmxterm.jar", description="Path to the jmxterm jar")
    timeout: float = Field(default=60.0, description="Per-call timeout in seconds")
    escape_style: Literal["auto", "single", "double"] = Field(
        default="auto",
        description=(
            "Backslash style for spaces in MBean names. "
            "'auto' uses a double backslash when the path separator is '/'."
        ),
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @property
    def double_escape(self) -> bool:
        """Whether spaces in MBean names get a double backslash."""
        if self.escape_style == "auto":
            return os.sep == "/"
        return self.escape_style == "double"
