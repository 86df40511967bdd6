from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result of a tool call as returned in `tools/call` responses"""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> 'ToolResult':
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @property
    def text_content(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_mcp_result(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
