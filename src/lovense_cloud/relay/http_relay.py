"""HTTP relay to the Lovense cloud API.

POSTs JSON to the command and QR endpoints with httpx and hands the
decoded response back untouched.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lovense_cloud.config.settings import LOVENSE_COMMAND_URL, LOVENSE_QR_URL
from lovense_cloud.domain.models import (
    DEFAULT_UID,
    CommandFields,
    CommandPayload,
    Credentials,
)
from lovense_cloud.relay.base import MISSING_TOKEN_ERROR, Relay, RelayResult

logger = logging.getLogger(__name__)

QR_API_VERSION = 2


class HttpRelay(Relay):
    """Relays commands to the Lovense cloud over HTTPS."""

    def __init__(
        self,
        command_url: str = LOVENSE_COMMAND_URL,
        qr_url: str = LOVENSE_QR_URL,
        uname: str = "Mai",
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._command_url = command_url
        self._qr_url = qr_url
        self._uname = uname
        self._timeout = timeout
        self._transport = transport
        self._client = client
        self._owns_client = client is None

    async def open(self) -> None:
        """Create the shared HTTP client if one was not injected."""
        if self._client is not None:
            return
        kwargs: dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        self._client = httpx.AsyncClient(**kwargs)
        self._owns_client = True
        logger.debug("Opened Lovense HTTP client")

    async def close(self) -> None:
        """Close the HTTP client if this relay created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed Lovense HTTP client")

    async def send_command(self, credentials: Credentials, fields: CommandFields) -> RelayResult:
        if not credentials.is_configured:
            return {"error": MISSING_TOKEN_ERROR}
        payload = CommandPayload.build(credentials, fields)
        logger.debug("Sending %s command (action=%s)", payload.command, payload.action)
        return await self._post(self._command_url, payload.to_body())

    async def request_qr_code(self, credentials: Credentials) -> RelayResult:
        if not credentials.is_configured:
            return {"error": MISSING_TOKEN_ERROR}
        body = {
            "token": credentials.token,
            "uid": credentials.uid or DEFAULT_UID,
            "uname": self._uname,
            "v": QR_API_VERSION,
        }
        logger.debug("Requesting pairing QR code for uid=%s", body["uid"])
        return await self._post(self._qr_url, body)

    async def _post(self, url: str, body: dict[str, Any]) -> RelayResult:
        """POST ``body`` and return the decoded JSON or an error result."""
        if self._client is None:
            await self.open()
        assert self._client is not None
        try:
            resp = await self._client.post(url, json=body)
            return resp.json()
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, e)
            return {"error": str(e) or type(e).__name__}
        except ValueError as e:
            logger.warning("Invalid JSON from %s: %s", url, e)
            return {"error": str(e)}
