import json
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from uvicorn.config import LOG_LEVELS
from fastapi import FastAPI, Response, Header
from fastapi.responses import StreamingResponse

from salesforce_mcp import config
from salesforce_mcp.models.request import MCPRequest
from salesforce_mcp.models.response import MCPResponse, ErrorResponse
from salesforce_mcp.services.mcp_server import MCPServer

MCP_SESSION_ID_HEADER = "Mcp-Session-Id"

DEFAULT_LOG_LEVEL = "info"


def _resolve_log_level(name: str) -> str:
    """Normalize a uvicorn log level name, unknown names fall back to info"""
    level = name.strip().lower()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL = _resolve_log_level(config.LOG_LEVEL)

logging.basicConfig(
    level=LOG_LEVELS[LOG_LEVEL],
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)
if LOG_LEVEL != config.LOG_LEVEL.strip().lower():
    logger.warning("Unknown LOG_LEVEL %r, using %s", config.LOG_LEVEL, LOG_LEVEL)

mcp_server = MCPServer()


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    await mcp_server.close()


app = FastAPI(title="Salesforce MCP Tools Server", version="1.0.0", lifespan=lifespan)


def _validate_accept_header(accept_header: Optional[str]) -> bool:
    """Validate that client accepts both JSON and SSE"""
    if not accept_header:
        return False

    accept_types = [t.strip().lower() for t in accept_header.split(',')]
    has_json = any('application/json' in t for t in accept_types)
    has_sse = any('text/event-stream' in t for t in accept_types)

    return has_json and has_sse


def _error_response(status_code: int, message: str) -> Response:
    error_response = MCPResponse(
        id="server-error",
        error=ErrorResponse(
            code=-32600,
            message=message
        )
    )
    return Response(
        status_code=status_code,
        content=error_response.model_dump_json(),
        media_type="application/json"
    )


async def _create_sse_stream(messages: list[MCPResponse]):
    """Create Server-Sent Events stream for responses"""
    for message in messages:
        event_data = f"data: {json.dumps(message.model_dump(exclude_none=True))}\n\n"
        yield event_data.encode('utf-8')

    yield b"data: [DONE]\n\n"


@app.post("/mcp")
async def handle_mcp_request(
        request: MCPRequest,
        response: Response,
        accept: Optional[str] = Header(None),
        mcp_session_id: Optional[str] = Header(None, alias=MCP_SESSION_ID_HEADER)
):
    """Single MCP endpoint handling all JSON-RPC requests with proper session management"""
    if not _validate_accept_header(accept):
        return _error_response(406, "Client must accept both application/json and text/event-stream")

    # Handle initialization (no session required)
    if request.method == "initialize":
        mcp_response, session_id = mcp_server.handle_initialize(request)
        response.headers[MCP_SESSION_ID_HEADER] = session_id
        mcp_session_id = session_id
    else:
        if not mcp_session_id:
            return _error_response(400, "Missing session ID")

        session = mcp_server.get_session(mcp_session_id)
        if not session:
            return _error_response(400, "No valid session ID provided")

        # Handle notifications that don't need responses
        if request.method == "notifications/initialized":
            session.ready_for_operation = True
            logger.info("Client initialization complete for session %s", session.session_id)
            return Response(
                status_code=202,
                headers={MCP_SESSION_ID_HEADER: session.session_id},
            )

        if not session.ready_for_operation:
            return _error_response(400, "Session is not initialized")

        if request.method == "tools/list":
            mcp_response = mcp_server.handle_tools_list(request)
        elif request.method == "tools/call":
            mcp_response = await mcp_server.handle_tools_call(request)
        else:
            mcp_response = MCPResponse(
                id=request.id,
                error=ErrorResponse(
                    code=-32602,
                    message=f"Method '{request.method}' not found"
                )
            )

    return StreamingResponse(
        content=_create_sse_stream([mcp_response]),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            MCP_SESSION_ID_HEADER: mcp_session_id
        }
    )


if __name__ == "__main__":
    uvicorn.run(
        "salesforce_mcp.server:app",
        host=config.MCP_SERVER_HOST,
        port=config.MCP_SERVER_PORT,
        log_level=LOG_LEVEL
    )
