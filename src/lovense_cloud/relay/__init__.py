"""Outbound relay to the Lovense cloud API."""

from lovense_cloud.relay.base import MISSING_TOKEN_ERROR, Relay, RelayResult
from lovense_cloud.relay.http_relay import HttpRelay

__all__ = ["MISSING_TOKEN_ERROR", "HttpRelay", "Relay", "RelayResult"]
