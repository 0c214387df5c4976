"""Static catalog of the tools advertised to MCP clients."""

from __future__ import annotations

from typing import Any

from lovense_cloud.domain.models import ToolDescriptor

PRESET_NAMES = ("pulse", "wave", "fireworks", "earthquake")


def _schema(properties: dict[str, dict[str, Any]] | None = None) -> dict[str, Any]:
    if not properties:
        return {"type": "object", "properties": {}, "required": []}
    return {"type": "object", "properties": properties}


def _number(description: str, **bounds: Any) -> dict[str, Any]:
    return {"type": "number", "description": description, **bounds}


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="get_qr_code",
        description=(
            "Generate QR code for pairing toy with this MCP. "
            "User scans with Lovense Remote app."
        ),
        input_schema=_schema(),
    ),
    ToolDescriptor(
        name="get_toys",
        description="Get list of connected Lovense toys",
        input_schema=_schema(),
    ),
    ToolDescriptor(
        name="vibrate",
        description="Vibrate the toy",
        input_schema=_schema({
            "intensity": _number("Vibration strength 0-20 (default 10)", minimum=0, maximum=20),
            "duration": _number("Duration in seconds (default 5)"),
        }),
    ),
    ToolDescriptor(
        name="vibrate_pattern",
        description="Vibrate with on/off pattern (pulsing)",
        input_schema=_schema({
            "intensity": _number("Vibration strength 0-20 (default 10)"),
            "duration": _number("Total duration in seconds (default 10)"),
            "on_sec": _number("Seconds of vibration per pulse (default 2)"),
            "off_sec": _number("Seconds of pause between pulses (default 1)"),
        }),
    ),
    ToolDescriptor(
        name="pattern",
        description="Send custom intensity pattern",
        input_schema=_schema({
            "strengths": {
                "type": "string",
                "description": (
                    'Semicolon-separated intensity values 0-20 (e.g., "5;10;15;20;15;10;5")'
                ),
            },
            "interval_ms": _number(
                "Milliseconds between each intensity change (min 100, default 500)"
            ),
            "duration": _number("Total duration in seconds (default 10)"),
        }),
    ),
    ToolDescriptor(
        name="preset",
        description="Run a built-in pattern preset: pulse, wave, fireworks, or earthquake",
        input_schema=_schema({
            "name": {
                "type": "string",
                "description": 'Preset name (default "pulse")',
                "enum": list(PRESET_NAMES),
            },
            "duration": _number("Duration in seconds (default 10)"),
        }),
    ),
    ToolDescriptor(
        name="stop",
        description="Stop all toy activity immediately",
        input_schema=_schema(),
    ),
    ToolDescriptor(
        name="edge",
        description="Edging pattern - build up then stop, repeat",
        input_schema=_schema({
            "intensity": _number("Peak vibration strength 0-20 (default 15)"),
            "duration": _number("Total duration in seconds (default 30)"),
            "on_sec": _number("Seconds of vibration per cycle (default 5)"),
            "off_sec": _number("Seconds of pause between cycles (default 3)"),
        }),
    ),
    ToolDescriptor(
        name="tease",
        description="Teasing pattern - random-feeling intensity changes",
        input_schema=_schema({
            "duration": _number("Duration in seconds (default 20)"),
        }),
    ),
    ToolDescriptor(
        name="escalate",
        description="Gradual escalation from low to high intensity",
        input_schema=_schema({
            "start": _number("Starting intensity 0-20 (default 3)"),
            "peak": _number("Peak intensity 0-20 (default 18)"),
            "duration": _number("Duration in seconds (default 30)"),
        }),
    ),
)

TOOL_NAMES: tuple[str, ...] = tuple(tool.name for tool in TOOLS)


def tool_catalog() -> list[dict[str, Any]]:
    """Return the catalog in its wire form."""
    return [tool.to_wire() for tool in TOOLS]
