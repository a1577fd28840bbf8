"""Tests for command builders, extractors and decorators."""

from __future__ import annotations

import pytest

from jmx_monitor.errors import InvalidParametersNumberError, MetricNotFoundError
from jmx_monitor.models import EndpointTarget
from jmx_monitor.utils.builders import (
    CommandTemplate,
    build_command,
    mask_password,
    select_template,
)
from jmx_monitor.utils.decorators import handle_retrieval_errors
from jmx_monitor.utils.extractors import get_key_value, is_scalar


class TestSelectTemplate:
    @pytest.mark.parametrize(
        ("has_domain", "has_auth", "expected"),
        [
            (False, False, CommandTemplate.CMD),
            (False, True, CommandTemplate.CMD_AUTH),
            (True, False, CommandTemplate.CMD_DOMAIN),
            (True, True, CommandTemplate.CMD_DOMAIN_AUTH),
        ],
        ids=["neither", "auth_only", "domain_only", "domain_and_auth"],
    )
    def test_selection(self, has_domain: bool, has_auth: bool, expected: CommandTemplate) -> None:
        assert select_template(has_domain, has_auth) is expected

    def test_auth_templates_append_credentials(self) -> None:
        for template in (CommandTemplate.CMD_AUTH, CommandTemplate.CMD_DOMAIN_AUTH):
            assert template.value.endswith("-n -u {USERNAME} -p {PASSWORD}")

    def test_domain_templates_add_domain_clause(self) -> None:
        assert "-d {DOMAIN}" in CommandTemplate.CMD_DOMAIN.value
        assert "-d {DOMAIN}" in CommandTemplate.CMD_DOMAIN_AUTH.value
        assert "-d" not in CommandTemplate.CMD.value


class TestBuildCommand:
    def test_plain_command(self, target, metric_spec) -> None:
        cmd = build_command(target, metric_spec(mbean="type=Memory HeapMemoryUsage"))
        assert cmd == (
            "echo get -s -b type=Memory HeapMemoryUsage | "
            "java -jar jmxterm.jar -l localhost:1099 -v silent -n"
        )

    def test_domain_and_auth_command(self, auth_target, metric_spec) -> None:
        metric = metric_spec(
            domain="org.apache.activemq",
            mbean="brokerName=localhost,type=Broker AverageMessageSize",
        )
        cmd = build_command(auth_target, metric)
        assert cmd == (
            "echo get -s -d org.apache.activemq "
            "-b brokerName=localhost,type=Broker AverageMessageSize | "
            "java -jar jmxterm.jar -l jmx.example.com:9010 -v silent -n -u admin -p s3cret"
        )

    def test_configurable_java_and_jar(self, target, metric_spec) -> None:
        cmd = build_command(
            target, metric_spec(), java="/usr/bin/java", jar="/opt/jmxterm-uber.jar"
        )
        assert "/usr/bin/java -jar /opt/jmxterm-uber.jar -l localhost:1099" in cmd

    def test_escaped_mbean_is_used_verbatim(self, target, metric_spec) -> None:
        cmd = build_command(target, metric_spec(mbean="name=PS\\\\ Old\\\\ Gen Usage"))
        assert "-b name=PS\\\\ Old\\\\ Gen Usage |" in cmd

    def test_empty_credentials_select_plain_template(self, metric_spec) -> None:
        target = EndpointTarget(host="h", port="1", username="", password="")
        cmd = build_command(target, metric_spec())
        assert "-u" not in cmd
        assert "-p" not in cmd


class TestMaskPassword:
    def test_masks_password(self, auth_target, metric_spec) -> None:
        cmd = build_command(auth_target, metric_spec())
        masked = mask_password(cmd, auth_target)
        assert "s3cret" not in masked
        assert masked.endswith("-u admin -p ****")

    def test_no_password_is_unchanged(self, target) -> None:
        assert mask_password("echo get", target) == "echo get"


class TestGetKeyValue:
    COMPOSITE = (
        "{\n"
        "  committed = 257425408;\n"
        "  init = 264241152;\n"
        "  max = 3720347648;\n"
        "  used = 61896832;\n"
        "}"
    )

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("committed", "257425408"),
            ("used", "61896832"),
            ("max", "3720347648"),
            ("missing", None),
        ],
    )
    def test_lookup(self, key: str, expected: str | None) -> None:
        assert get_key_value(self.COMPOSITE, key) == expected

    def test_crlf_lines(self) -> None:
        assert get_key_value("a = 1;\r\nb = 2;", "b") == "2"

    def test_first_matching_line_wins(self) -> None:
        assert get_key_value("maxSize = 10;\nmax = 20;", "max") == "10"

    def test_line_with_two_equals_is_rejected(self) -> None:
        assert get_key_value("key = a = b;", "key") is None

    def test_line_without_equals_is_rejected(self) -> None:
        assert get_key_value("key 42", "key") is None

    def test_removes_only_first_semicolon(self) -> None:
        assert get_key_value("key = a;b;", "key") == "ab;"


class TestIsScalar:
    def test_scalar(self) -> None:
        assert is_scalar("42") is True

    def test_structure(self) -> None:
        assert is_scalar("used = 42;") is False


class TestHandleRetrievalErrors:
    async def test_returns_result(self) -> None:
        @handle_retrieval_errors("testing")
        async def ok() -> str:
            return "value"

        assert await ok() == "value"

    async def test_converts_exceptions(self) -> None:
        @handle_retrieval_errors("testing")
        async def fail() -> str:
            raise OSError("no such file")

        with pytest.raises(MetricNotFoundError) as exc_info:
            await fail()

        assert isinstance(exc_info.value.__cause__, OSError)

    async def test_taxonomy_errors_pass_through(self) -> None:
        @handle_retrieval_errors("testing")
        async def fail() -> str:
            raise InvalidParametersNumberError()

        with pytest.raises(InvalidParametersNumberError):
            await fail()
