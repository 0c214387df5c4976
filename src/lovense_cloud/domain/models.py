"""Core domain models for the lovense-cloud system.

These models represent the data flowing through the adapter: the tool
catalog advertised to MCP clients, a single tool invocation, the
command-specific fields produced by the encoder, and the payload that
is finally POSTed to the Lovense cloud API.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_UID = "mai"
API_VERSION = 2


# ---------------------------------------------------------------------------
# Tool catalog models
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A named tool with its JSON-schema input description.

    Defined once at startup and never mutated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(description="Unique tool name")
    description: str = Field(description="Human-readable summary shown to clients")
    input_schema: dict[str, Any] = Field(
        alias="inputSchema",
        default_factory=lambda: {"type": "object", "properties": {}, "required": []},
        description="JSON schema for the tool arguments",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the camelCase keys MCP clients expect."""
        return self.model_dump(by_alias=True)


class ToolInvocation(BaseModel):
    """A single request to run a tool, one per inbound call."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Outbound command models
# ---------------------------------------------------------------------------


class Credentials(BaseModel):
    """Lovense developer token and target uid."""

    model_config = ConfigDict(frozen=True)

    token: str = ""
    uid: str = DEFAULT_UID

    @property
    def is_configured(self) -> bool:
        return bool(self.token)


class CommandFields(BaseModel):
    """The command-specific part of a Lovense command request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command: Literal["GetToys", "Function", "Pattern", "Preset"]
    action: str | None = None
    time_sec: int | float | None = Field(default=None, alias="timeSec")
    loop_running_sec: int | float | None = Field(default=None, alias="loopRunningSec")
    loop_pause_sec: int | float | None = Field(default=None, alias="loopPauseSec")
    rule: str | None = None
    strength: str | None = None
    name: str | None = None


class CommandPayload(CommandFields):
    """The full JSON body POSTed to the Lovense command endpoint."""

    token: str
    uid: str
    api_ver: int = Field(default=API_VERSION, alias="apiVer")

    @classmethod
    def build(cls, credentials: Credentials, fields: CommandFields) -> CommandPayload:
        return cls(
            token=credentials.token,
            uid=credentials.uid or DEFAULT_UID,
            **fields.model_dump(exclude_none=True),
        )

    def to_body(self) -> dict[str, Any]:
        """Render the wire body, credentials first, unset fields omitted."""
        body = {"token": self.token, "uid": self.uid, "apiVer": self.api_ver}
        body.update(
            self.model_dump(
                by_alias=True,
                exclude_none=True,
                exclude={"token", "uid", "api_ver"},
            )
        )
        return body
