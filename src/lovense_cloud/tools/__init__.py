"""Tool catalog, command encoding and dispatch."""

from lovense_cloud.tools.catalog import PRESET_NAMES, TOOL_NAMES, TOOLS, tool_catalog
from lovense_cloud.tools.dispatch import handle_tool, invoke
from lovense_cloud.tools.encoder import (
    InvalidArgumentError,
    ToolError,
    UnknownToolError,
    encode,
)

__all__ = [
    "PRESET_NAMES",
    "TOOLS",
    "TOOL_NAMES",
    "InvalidArgumentError",
    "ToolError",
    "UnknownToolError",
    "encode",
    "handle_tool",
    "invoke",
    "tool_catalog",
]
