from abc import ABC, abstractmethod
from typing import Any

from salesforce_mcp.models.tool_result import ToolResult


class BaseTool(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def input_schema(self) -> dict[str, Any]:
        pass

    @abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        pass

    def to_mcp_tool(self) -> dict[str, Any]:
        """Tool definition as listed by `tools/list`"""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema
        }
