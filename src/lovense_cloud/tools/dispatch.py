"""Route a tool invocation through the encoder and the relay."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lovense_cloud.domain.models import Credentials, ToolInvocation
from lovense_cloud.relay.base import Relay, RelayResult
from lovense_cloud.tools.encoder import QR_CODE_TOOL, ToolError, encode

logger = logging.getLogger(__name__)


async def handle_tool(
    name: str,
    args: Mapping[str, Any] | None,
    credentials: Credentials,
    relay: Relay,
) -> RelayResult:
    """Run one tool and return its result value.

    Encoding problems (unknown tool, invalid preset, ...) are returned as
    ``{"error": ...}`` instead of being raised.
    """
    logger.info("Tool call: %s", name)
    if name == QR_CODE_TOOL:
        return await relay.request_qr_code(credentials)
    try:
        fields = encode(name, args)
    except ToolError as e:
        logger.info("Rejected %s: %s", name, e)
        return {"error": str(e)}
    return await relay.send_command(credentials, fields)


async def invoke(invocation: ToolInvocation, credentials: Credentials, relay: Relay) -> RelayResult:
    return await handle_tool(invocation.name, invocation.arguments, credentials, relay)
