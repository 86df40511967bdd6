import logging
import time
import uuid
from typing import Optional

from salesforce_mcp import config
from salesforce_mcp.clients.salesforce_client import SalesforceClient, SalesforceConnection
from salesforce_mcp.models.request import MCPRequest
from salesforce_mcp.models.response import MCPResponse, ErrorResponse
from salesforce_mcp.tools.base import BaseTool
from salesforce_mcp.tools.users.create_user_tool import CreateUserTool
from salesforce_mcp.tools.users.user_service import UserService

logger = logging.getLogger(__name__)


class MCPSession:
    """Represents an MCP session with state management"""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.ready_for_operation = False
        self.last_activity = time.monotonic()


class MCPServer:

    def __init__(
            self,
            connection: Optional[SalesforceConnection] = None,
            session_ttl_seconds: float = config.MCP_SESSION_TTL_SECONDS,
    ):
        self.protocol_version = "2024-11-05"
        self.server_info = {
            "name": "salesforce-user-mcp-server",
            "version": "1.0.0"
        }

        self.connection = connection if connection is not None else SalesforceClient()

        # Session management
        self.sessions: dict[str, MCPSession] = {}
        self.session_ttl_seconds = session_ttl_seconds
        self.tools: dict[str, BaseTool] = {}
        self._register_tools()

    def _register_tools(self):
        """Register all available tools"""
        user_service = UserService(self.connection)
        for tool in [
            CreateUserTool(user_service),
        ]:
            self.tools[tool.name] = tool

    def _expire_sessions(self) -> None:
        """Drop sessions idle for longer than the TTL"""
        now = time.monotonic()
        expired = [
            session_id for session_id, session in self.sessions.items()
            if now - session.last_activity > self.session_ttl_seconds
        ]
        for session_id in expired:
            del self.sessions[session_id]
            logger.info("Expired idle MCP session %s", session_id)

    def get_session(self, session_id: str) -> MCPSession | None:
        """Get an existing session"""
        self._expire_sessions()
        session = self.sessions.get(session_id)
        if session:
            session.last_activity = time.monotonic()
        return session

    def handle_initialize(self, request: MCPRequest) -> tuple[MCPResponse, str]:
        """Handle initialization request with session creation"""
        self._expire_sessions()
        session_id = str(uuid.uuid4()).replace("-", "")
        session = MCPSession(session_id)
        self.sessions[session_id] = session
        logger.info("Created MCP session %s", session_id)

        protocol_version = request.params.get("protocolVersion") if request.params else self.protocol_version
        response = MCPResponse(
            id=request.id,
            result={
                "protocolVersion": protocol_version or self.protocol_version,
                "capabilities": {
                    "tools": {"listChanged": True},
                    "resources": None,
                    "prompts": None
                },
                "serverInfo": self.server_info
            }
        )

        return response, session_id

    def handle_tools_list(self, request: MCPRequest) -> MCPResponse:
        """Handle tools/list request"""
        tools_list = [tool.to_mcp_tool() for tool in self.tools.values()]
        return MCPResponse(
            id=request.id,
            result={"tools": tools_list}
        )

    async def handle_tools_call(self, request: MCPRequest) -> MCPResponse:
        """Handle tools/call request with proper MCP-compliant response format"""

        if not request.params:
            return MCPResponse(
                id=request.id,
                error=ErrorResponse(
                    code=-32602,
                    message="Missing parameters"
                )
            )

        # Extract tool name and arguments according to MCP spec
        tool_name = request.params.get("name")
        arguments = request.params.get("arguments") or {}

        if not tool_name:
            return MCPResponse(
                id=request.id,
                error=ErrorResponse(
                    code=-32602,
                    message="Missing required parameter: name"
                )
            )

        if tool_name not in self.tools:
            return MCPResponse(
                id=request.id,
                error=ErrorResponse(
                    code=-32601,
                    message=f"Tool '{tool_name}' not found"
                )
            )

        tool = self.tools[tool_name]
        logger.info("Calling tool %s", tool_name)

        try:
            result = await tool.execute(arguments)
            return MCPResponse(
                id=request.id,
                result=result.to_mcp_result()
            )
        except Exception as tool_error:
            logger.exception("Tool %s failed", tool_name)
            return MCPResponse(
                id=request.id,
                result={
                    "content": [
                        {
                            "type": "text",
                            "text": f"Tool execution error: {str(tool_error)}"
                        }
                    ],
                    "isError": True
                }
            )

    async def close(self) -> None:
        close = getattr(self.connection, "close", None)
        if close is not None:
            await close()
