from typing import Any, Optional, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class MCPResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[Union[str, int]] = None
    result: Optional[dict[str, Any]] = None
    error: Optional[ErrorResponse] = None
