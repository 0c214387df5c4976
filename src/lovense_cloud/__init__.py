"""lovense-cloud -- MCP tool server for remote Lovense toy control.

This package exposes a fixed catalog of tools over an MCP-style HTTP
interface and translates every tool call into one request against the
Lovense cloud API, relaying the response back to the caller untouched.
"""

__version__ = "1.0.0"
