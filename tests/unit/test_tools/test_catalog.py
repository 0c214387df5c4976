"""Tests for the static tool catalog."""

from __future__ import annotations

from lovense_cloud.tools.catalog import PRESET_NAMES, TOOL_NAMES, TOOLS, tool_catalog
from lovense_cloud.tools.encoder import COMMAND_ENCODERS, QR_CODE_TOOL

BY_NAME = {tool.name: tool for tool in TOOLS}


def test_tool_names_unique() -> None:
    assert len(set(TOOL_NAMES)) == len(TOOL_NAMES)


def test_every_tool_is_dispatchable() -> None:
    assert set(TOOL_NAMES) == set(COMMAND_ENCODERS) | {QR_CODE_TOOL}


def test_wire_form_uses_input_schema_key() -> None:
    entry = tool_catalog()[0]
    assert set(entry) == {"name", "description", "inputSchema"}
    assert entry["inputSchema"]["type"] == "object"


def test_preset_enum_matches_presets() -> None:
    preset = BY_NAME["preset"]
    assert preset.input_schema["properties"]["name"]["enum"] == list(PRESET_NAMES)


def test_vibrate_bounds() -> None:
    vibrate = BY_NAME["vibrate"]
    intensity = vibrate.input_schema["properties"]["intensity"]
    assert (intensity["minimum"], intensity["maximum"]) == (0, 20)


def test_catalog_has_ten_tools() -> None:
    assert len(TOOLS) == len(BY_NAME) == 10
    assert "dance" not in BY_NAME
