"""
MCP Protocol Endpoint

Streamable HTTP transport for the MCP server (POST /mcp).

Every POST gets its own stateless transport: the server is run against the
transport's streams for the lifetime of that one request and torn down when
the response is complete. No session state survives between requests.
"""

import uuid

import anyio
from anyio.abc import TaskStatus
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from mcp.server.lowlevel import Server
from mcp.server.streamable_http import StreamableHTTPServerTransport
from pydantic import BaseModel, Field
from starlette.types import Message, Receive, Scope, Send

from mcp_gateway.configs import (
    INTERNAL_ERROR_CODE,
    INTERNAL_ERROR_MESSAGE,
    JSON_RPC_VERSION,
    get_logger,
)

logger = get_logger("http.mcp")

router = APIRouter()


# --- Error Models ---


class JSONRPCErrorDetail(BaseModel):
    """Error member of a JSON-RPC error response."""

    code: int
    message: str


class JSONRPCErrorResponse(BaseModel):
    """JSON-RPC error response not tied to a request id."""

    jsonrpc: str = JSON_RPC_VERSION
    error: JSONRPCErrorDetail
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))


def create_error_response(message: str = INTERNAL_ERROR_MESSAGE) -> dict:
    """
    Create a JSON-RPC error body.

    Args:
        message: Error message for the client

    Returns:
        Dict with jsonrpc, error {code, message} and a fresh id
    """
    error = JSONRPCErrorDetail(code=INTERNAL_ERROR_CODE, message=message)
    return JSONRPCErrorResponse(error=error).model_dump()


def internal_error_response() -> JSONResponse:
    """HTTP 500 carrying the generic JSON-RPC error body."""
    return JSONResponse(create_error_response(), status_code=500)


def _replay_body(body: bytes, receive: Receive) -> Receive:
    """
    Wrap receive so the already-read body is delivered again.

    After the body, calls fall through to the real channel so the
    transport still sees http.disconnect.
    """
    replayed = False

    async def replay() -> Message:
        nonlocal replayed
        if not replayed:
            replayed = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay


# --- Transport Response ---


class StreamableHTTPResponse(Response):
    """
    Response written by a per-request MCP transport.

    The transport owns the status line, headers and body (a JSON document or
    an SSE stream). Failures before anything reaches the client, including
    5xx replies the transport produces itself, become the generic JSON-RPC 500.
    """

    def __init__(self, server: Server, body: bytes, json_response: bool = False):
        super().__init__()
        self.server = server
        self.request_body = body
        self.json_response = json_response

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        started = False
        replaced = False

        async def tracked_send(message: Message) -> None:
            nonlocal started, replaced
            if message["type"] == "http.response.start":
                if message["status"] >= 500:
                    logger.error(f"MCP transport failed with status {message['status']}")
                    replaced = True
                    return
                started = True
            elif replaced:
                return
            await send(message)

        try:
            await self._run_transport(scope, _replay_body(self.request_body, receive), tracked_send)
        except Exception:
            logger.exception("Error handling MCP request")
            if started:
                return
            replaced = True

        if replaced:
            await internal_error_response()(scope, receive, send)
            return

        if self.background is not None:
            await self.background()

    async def _run_transport(self, scope: Scope, receive: Receive, send: Send) -> None:
        init_options = self.server.create_initialization_options()
        transport = StreamableHTTPServerTransport(
            mcp_session_id=None,
            is_json_response_enabled=self.json_response,
        )

        async with anyio.create_task_group() as tg:

            async def run_server(*, task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED) -> None:
                async with transport.connect() as (read_stream, write_stream):
                    task_status.started()
                    await self.server.run(
                        read_stream,
                        write_stream,
                        init_options,
                        stateless=True,
                    )

            await tg.start(run_server)
            try:
                await transport.handle_request(scope, receive, send)
            finally:
                logger.debug("Request closed")
                await transport.terminate()
                tg.cancel_scope.cancel()


# --- Handler ---


class MCPStreamableHttpHandler:
    """Bridges HTTP requests on /mcp to the MCP server."""

    def __init__(self, server: Server, json_response: bool = False):
        self.server = server
        self.json_response = json_response

    async def handle_get_request(self, request: Request) -> Response:
        """Reject GET: this transport only accepts POST."""
        logger.warning("GET request received - streamable HTTP transport only supports POST")
        return PlainTextResponse("Method Not Allowed", status_code=405, headers={"Allow": "POST"})

    async def handle_post_request(self, request: Request) -> Response:
        """
        Forward a JSON-RPC message to the MCP server.

        The body must be valid JSON; anything else becomes the generic 500.
        """
        try:
            message = await request.json()
            body = await request.body()
        except Exception as e:
            logger.error(f"Error handling MCP request: {e}")
            return internal_error_response()

        method = message.get("method") if isinstance(message, dict) else "batch"
        logger.info(f"MCP request: {method}")

        return StreamableHTTPResponse(self.server, body, json_response=self.json_response)


def get_mcp_handler(request: Request) -> MCPStreamableHttpHandler:
    """Get the handler attached to the running app."""
    return request.app.state.mcp_handler


# --- Endpoints ---


@router.get("")
async def mcp_get(
    request: Request,
    handler: MCPStreamableHttpHandler = Depends(get_mcp_handler),
) -> Response:
    """GET /mcp is not supported."""
    return await handler.handle_get_request(request)


@router.post("")
async def mcp_post(
    request: Request,
    handler: MCPStreamableHttpHandler = Depends(get_mcp_handler),
) -> Response:
    """Handle MCP JSON-RPC messages."""
    return await handler.handle_post_request(request)
