"""MCP-style HTTP front-end for the Lovense cloud relay.

Accepts tool calls in three shapes (JSON-RPC ``tools/call``, a bare
``tool`` field, and the REST test endpoints) and relays each one as a
single Lovense API request:

    GET  /mcp, /sse       -> {"tools": [...], "name": ..., "version": ...}
    POST /mcp, /sse       <- {"method": "initialize" | "tools/list" | "tools/call", ...}
                          <- {"tool": "vibrate", "args": {"intensity": 12}}
    ANY  /test            -> get_toys result
    ANY  /qr              -> get_qr_code result
    ANY  /health, /       -> {"status": "ok", "service": ..., "tools": [...]}

Every response carries ``Access-Control-Allow-Origin: *``; ``OPTIONS`` on
any path is answered directly with the CORS preflight headers.
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from lovense_cloud import __version__
from lovense_cloud.config.settings import Settings, load_settings
from lovense_cloud.domain.models import ToolInvocation
from lovense_cloud.relay.base import Relay
from lovense_cloud.relay.http_relay import HttpRelay
from lovense_cloud.tools.catalog import TOOL_NAMES, tool_catalog
from lovense_cloud.tools.dispatch import invoke

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
JSONRPC_VERSION = "2.0"
PARSE_ERROR = -32700

MCP_PATHS = ("/mcp", "/sse")
ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE"]

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PrettyJSONResponse(JSONResponse):
    """JSON response indented for humans poking at the REST endpoints."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, indent=2, ensure_ascii=False).encode("utf-8")


class CorsShimMiddleware(BaseHTTPMiddleware):
    """Answer preflight requests and tag every response as cross-origin."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=PREFLIGHT_HEADERS)
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response


def _rpc_result(request_id: Any, result: dict[str, Any]) -> JSONResponse:
    return JSONResponse({"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result})


def _not_found() -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=404)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(settings: Settings | None = None, relay: Relay | None = None) -> FastAPI:
    """Create the MCP front-end application.

    Args:
        settings: Service configuration. Loaded from the default YAML
                  path and environment when omitted.
        relay: Optional pre-configured relay (for testing). An
               :class:`HttpRelay` built from ``settings.relay`` is used
               otherwise.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        r = _get_relay()
        await r.open()
        logger.info(
            "%s %s ready (token %s)",
            settings.server.name,
            settings.server.version,
            "configured" if settings.credentials().is_configured else "missing",
        )
        yield
        await r.close()
        logger.info("%s stopped", settings.server.name)

    app = FastAPI(
        title="lovense-cloud",
        description="MCP tool server relaying toy commands to the Lovense cloud API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.relay = relay
    app.add_middleware(CorsShimMiddleware)

    def _get_relay() -> Relay:
        r = app.state.relay
        if r is None:
            r = HttpRelay(
                command_url=settings.relay.command_url,
                qr_url=settings.relay.qr_url,
                uname=settings.relay.uname,
                timeout=settings.relay.timeout,
            )
            app.state.relay = r
        return r

    async def _run_tool(invocation: ToolInvocation) -> dict[str, Any]:
        s: Settings = app.state.settings
        return await invoke(invocation, s.credentials(), _get_relay())

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        # Unmatched paths and unsupported methods both fall through to 404
        if exc.status_code in (404, 405):
            return _not_found()
        return await http_exception_handler(request, exc)

    # -------------------------------------------------------------------
    # MCP endpoints
    # -------------------------------------------------------------------

    for path in MCP_PATHS:

        @app.get(path)
        async def describe_server() -> dict[str, Any]:
            return {
                "tools": tool_catalog(),
                "name": settings.server.name,
                "version": settings.server.version,
            }

        @app.post(path)
        async def handle_rpc(request: Request) -> Response:
            try:
                body = await request.json()
            except ValueError:
                body = None
            if not isinstance(body, dict):
                return JSONResponse(
                    {
                        "jsonrpc": JSONRPC_VERSION,
                        "id": None,
                        "error": {"code": PARSE_ERROR, "message": "Parse error"},
                    },
                    status_code=400,
                )

            method = body.get("method")
            request_id = body.get("id")
            params = body.get("params")
            if not isinstance(params, dict):
                params = {}

            if method == "tools/call" or body.get("tool"):
                name = params.get("name") or body.get("tool") or ""
                args = params.get("arguments") or body.get("args") or {}
                if not isinstance(args, dict):
                    args = {}
                result = await _run_tool(ToolInvocation(name=str(name), arguments=args))
                text = json.dumps(result, indent=2, ensure_ascii=False)
                return _rpc_result(request_id, {"content": [{"type": "text", "text": text}]})

            if method == "tools/list":
                return _rpc_result(request_id, {"tools": tool_catalog()})

            if method == "initialize":
                return _rpc_result(
                    request_id,
                    {
                        "protocolVersion": PROTOCOL_VERSION,
                        "serverInfo": {
                            "name": settings.server.name,
                            "version": settings.server.version,
                        },
                        "capabilities": {"tools": {}},
                    },
                )

            logger.debug("Unhandled MCP method: %s", method)
            return _not_found()

    # -------------------------------------------------------------------
    # REST test endpoints
    # -------------------------------------------------------------------

    @app.api_route("/test", methods=ANY_METHOD)
    async def test_toys() -> PrettyJSONResponse:
        return PrettyJSONResponse(await _run_tool(ToolInvocation(name="get_toys")))

    @app.api_route("/qr", methods=ANY_METHOD)
    async def pairing_qr_code() -> PrettyJSONResponse:
        return PrettyJSONResponse(await _run_tool(ToolInvocation(name="get_qr_code")))

    @app.api_route("/health", methods=ANY_METHOD)
    @app.api_route("/", methods=ANY_METHOD)
    async def health_check() -> PrettyJSONResponse:
        return PrettyJSONResponse({
            "status": "ok",
            "service": settings.server.name,
            "tools": list(TOOL_NAMES),
        })

    return app


# ---------------------------------------------------------------------------
# Standalone entry point
# ---------------------------------------------------------------------------

def main(settings: Settings | None = None) -> None:
    """Run the lovense-cloud server."""
    settings = settings or load_settings()
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
