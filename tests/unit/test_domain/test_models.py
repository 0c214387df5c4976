"""Tests for the domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lovense_cloud.domain.models import (
    CommandFields,
    CommandPayload,
    Credentials,
    ToolDescriptor,
    ToolInvocation,
)


class TestCommandPayload:
    def test_body_omits_unset_fields(self, credentials: Credentials) -> None:
        fields = CommandFields(command="Preset", name="wave", time_sec=10)
        body = CommandPayload.build(credentials, fields).to_body()
        assert body == {
            "token": "test-token",
            "uid": "test-uid",
            "apiVer": 2,
            "command": "Preset",
            "name": "wave",
            "timeSec": 10,
        }

    def test_body_key_order_starts_with_credentials(self, credentials: Credentials) -> None:
        body = CommandPayload.build(credentials, CommandFields(command="GetToys")).to_body()
        assert list(body) == ["token", "uid", "apiVer", "command"]

    def test_zero_time_kept(self, credentials: Credentials) -> None:
        fields = CommandFields(command="Function", action="Stop", time_sec=0)
        assert CommandPayload.build(credentials, fields).to_body()["timeSec"] == 0

    def test_integer_time_stays_integer(self, credentials: Credentials) -> None:
        body = CommandPayload.build(credentials, CommandFields(command="Function", time_sec=5)).to_body()
        assert isinstance(body["timeSec"], int)

    def test_unknown_command_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CommandFields(command="Explode")


class TestCredentials:
    def test_is_configured(self) -> None:
        assert Credentials(token="abc").is_configured
        assert not Credentials().is_configured

    def test_frozen(self, credentials: Credentials) -> None:
        with pytest.raises(ValidationError):
            credentials.token = "other"  # type: ignore[misc]


class TestToolModels:
    def test_descriptor_wire_form(self) -> None:
        tool = ToolDescriptor(name="stop", description="Stop")
        assert tool.to_wire() == {
            "name": "stop",
            "description": "Stop",
            "inputSchema": {"type": "object", "properties": {}, "required": []},
        }

    def test_invocation_defaults(self) -> None:
        assert ToolInvocation(name="stop").arguments == {}
