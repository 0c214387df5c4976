"""Abstract base class for the outbound Lovense relay.

The server and dispatcher only depend on this interface, so tests (and
any future transport) can stand in for the real HTTP client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from lovense_cloud.domain.models import CommandFields, Credentials

MISSING_TOKEN_ERROR = "LOVENSE_TOKEN not configured"

RelayResult = dict[str, Any]


class Relay(ABC):
    """Sends encoded commands to the Lovense cloud and returns its reply.

    Implementations never raise for transport problems; failures come
    back as ``{"error": "<message>"}`` so they can be relayed verbatim
    to the MCP client.

    Example usage::

        async with HttpRelay() as relay:
            toys = await relay.send_command(creds, CommandFields(command="GetToys"))
            qr = await relay.request_qr_code(creds)
    """

    async def open(self) -> None:
        """Acquire any connection resources. Optional for implementations."""

    async def close(self) -> None:
        """Release connection resources. Safe to call multiple times."""

    @abstractmethod
    async def send_command(self, credentials: Credentials, fields: CommandFields) -> RelayResult:
        """POST a command to the Lovense command endpoint.

        Args:
            credentials: Developer token and target uid.
            fields: Command-specific fields produced by the encoder.

        Returns:
            The decoded JSON response, or ``{"error": ...}``.
        """
        ...

    @abstractmethod
    async def request_qr_code(self, credentials: Credentials) -> RelayResult:
        """Ask the Lovense QR endpoint for a pairing code.

        Returns:
            The decoded JSON response, or ``{"error": ...}``.
        """
        ...

    async def __aenter__(self) -> Relay:
        await self.open()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.close()
