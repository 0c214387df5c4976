"""Translate tool invocations into Lovense command fields.

Every function here is pure: it takes the raw argument mapping sent by
the MCP client and returns a :class:`CommandFields` ready to be combined
with credentials by the relay. Invalid input raises a :class:`ToolError`
subclass; the dispatcher turns those into ``{"error": ...}`` results.

Falsy arguments (missing, ``0``, ``""``, ``None``) fall back to the tool's
default, so ``intensity=0`` means "use the default", not "off". Use the
``stop`` tool to halt the toy.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from lovense_cloud.domain.models import CommandFields
from lovense_cloud.tools.catalog import PRESET_NAMES

logger = logging.getLogger(__name__)

QR_CODE_TOOL = "get_qr_code"

MIN_INTENSITY = 0
MAX_INTENSITY = 20
MIN_INTERVAL_MS = 100
MAX_ARGUMENT_VALUE = 1_000_000_000

DEFAULT_PATTERN = "5;10;15;20;15;10;5"
TEASE_PATTERN = "3;5;2;8;4;10;3;6;12;5;8;3;15;4;7;2;10;5"
TEASE_INTERVAL_MS = 800
ESCALATE_STEPS = 10

Number = int | float


class ToolError(Exception):
    """Raised when a tool invocation cannot be encoded."""


class InvalidArgumentError(ToolError):
    """An argument is out of its allowed domain."""


class UnknownToolError(ToolError):
    """No tool with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------


def _normalize(value: Number) -> Number:
    """Collapse integral floats so they render as ``10`` rather than ``10.0``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _number(args: Mapping[str, Any], key: str, default: Number) -> Number:
    value = args.get(key)
    if not value:
        return default
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{key} must be a number")
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            raise InvalidArgumentError(f"{key} must be a number") from None
    if not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{key} must be a number")
    # math.isfinite raises OverflowError for ints beyond float range
    if abs(value) > MAX_ARGUMENT_VALUE:
        raise InvalidArgumentError(f"{key} is out of range")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{key} must be a number")
    # "0" survives the falsy check above but still means the default
    return _normalize(value) or default


def clamp_intensity(value: Number) -> Number:
    return _normalize(max(MIN_INTENSITY, min(MAX_INTENSITY, value)))


def _pattern_rule(interval_ms: Number) -> str:
    return f"V:1;F:v;S:{interval_ms}#"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def escalation_strengths(start: Number, peak: Number, steps: int = ESCALATE_STEPS) -> list[int]:
    """Linear ramp of ``steps + 1`` integer points from ``start`` to ``peak``."""
    step_size = (peak - start) / steps
    return [_round_half_up(start + step_size * i) for i in range(steps + 1)]


# ---------------------------------------------------------------------------
# Per-tool encoders
# ---------------------------------------------------------------------------


def _get_toys(args: Mapping[str, Any]) -> CommandFields:
    return CommandFields(command="GetToys")


def _vibrate(args: Mapping[str, Any]) -> CommandFields:
    intensity = clamp_intensity(_number(args, "intensity", 10))
    return CommandFields(
        command="Function",
        action=f"Vibrate:{intensity}",
        time_sec=_number(args, "duration", 5),
    )


def _vibrate_pattern(args: Mapping[str, Any]) -> CommandFields:
    intensity = clamp_intensity(_number(args, "intensity", 10))
    return CommandFields(
        command="Function",
        action=f"Vibrate:{intensity}",
        time_sec=_number(args, "duration", 10),
        loop_running_sec=_number(args, "on_sec", 2),
        loop_pause_sec=_number(args, "off_sec", 1),
    )


def _pattern(args: Mapping[str, Any]) -> CommandFields:
    interval = max(MIN_INTERVAL_MS, _number(args, "interval_ms", 500))
    strengths = args.get("strengths") or DEFAULT_PATTERN
    if isinstance(strengths, (list, tuple)):
        strengths = ";".join(str(_normalize(s)) for s in strengths)
    return CommandFields(
        command="Pattern",
        rule=_pattern_rule(_normalize(interval)),
        strength=str(strengths),
        time_sec=_number(args, "duration", 10),
    )


def _preset(args: Mapping[str, Any]) -> CommandFields:
    name = str(args.get("name") or "pulse").lower()
    if name not in PRESET_NAMES:
        raise InvalidArgumentError(
            f"Invalid preset. Choose from: {', '.join(PRESET_NAMES)}"
        )
    return CommandFields(
        command="Preset",
        name=name,
        time_sec=_number(args, "duration", 10),
    )


def _stop(args: Mapping[str, Any]) -> CommandFields:
    return CommandFields(command="Function", action="Stop", time_sec=0)


def _edge(args: Mapping[str, Any]) -> CommandFields:
    intensity = clamp_intensity(_number(args, "intensity", 15))
    return CommandFields(
        command="Function",
        action=f"Vibrate:{intensity}",
        time_sec=_number(args, "duration", 30),
        loop_running_sec=_number(args, "on_sec", 5),
        loop_pause_sec=_number(args, "off_sec", 3),
    )


def _tease(args: Mapping[str, Any]) -> CommandFields:
    return CommandFields(
        command="Pattern",
        rule=_pattern_rule(TEASE_INTERVAL_MS),
        strength=TEASE_PATTERN,
        time_sec=_number(args, "duration", 20),
    )


def _escalate(args: Mapping[str, Any]) -> CommandFields:
    start = clamp_intensity(_number(args, "start", 3))
    peak = clamp_intensity(_number(args, "peak", 18))
    duration = _number(args, "duration", 30)

    strengths = escalation_strengths(start, peak)
    interval = max(MIN_INTERVAL_MS, math.floor(duration * 1000 / (ESCALATE_STEPS + 1)))

    return CommandFields(
        command="Pattern",
        rule=_pattern_rule(interval),
        strength=";".join(str(s) for s in strengths),
        time_sec=duration,
    )


COMMAND_ENCODERS: dict[str, Callable[[Mapping[str, Any]], CommandFields]] = {
    "get_toys": _get_toys,
    "vibrate": _vibrate,
    "vibrate_pattern": _vibrate_pattern,
    "pattern": _pattern,
    "preset": _preset,
    "stop": _stop,
    "edge": _edge,
    "tease": _tease,
    "escalate": _escalate,
}


def encode(name: str, args: Mapping[str, Any] | None = None) -> CommandFields:
    """Encode a command tool invocation.

    Args:
        name: Tool name. ``get_qr_code`` is not a command and is rejected
              here; the dispatcher routes it to the QR endpoint instead.
        args: Raw argument mapping from the client.

    Raises:
        UnknownToolError: If ``name`` has no command encoder.
        InvalidArgumentError: If an argument cannot be used.
    """
    encoder = COMMAND_ENCODERS.get(name)
    if encoder is None:
        raise UnknownToolError(name)
    fields = encoder(args or {})
    logger.debug("Encoded %s -> %s", name, fields)
    return fields
