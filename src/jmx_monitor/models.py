"""Pydantic models for the collection target and metric descriptors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EndpointTarget(BaseModel):
    """JMX endpoint queried for the whole run."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(description="Hostname or IP where JMX is listening")
    port: str = Field(description="Port where JMX is listening")
    username: str | None = Field(default=None, description="JMX auth username")
    password: str | None = Field(default=None, description="JMX auth password")

    @field_validator("username", "password", mode="before")
    @classmethod
    def _empty_is_absent(cls, v: str | None) -> str | None:
        return v or None

    @property
    def has_auth(self) -> bool:
        """True when credentials are sent to jmxterm."""
        return self.username is not None


class AttributeKey(BaseModel):
    """MBean path split into object name and composite-attribute key."""

    mbean: str = Field(description="MBean path without the key suffix")
    key: str = Field(description="Composite-attribute key")


class MetricSpec(BaseModel):
    """A single configured metric and, after collection, its value."""

    id: str = Field(description="Metric identifier")
    type: str = Field(description="Metric type code")
    name: str = Field(description="Metric name")
    domain: str | None = Field(default=None, description="MBean domain, if qualified")
    mbean: str = Field(description="MBean object name and attribute, spaces escaped")
    attr_key: str | None = Field(default=None, description="Composite-attribute key")
    enabled: bool = Field(default=False, description="Whether the metric is collected")
    value: str = Field(default="", description="Retrieved value")
