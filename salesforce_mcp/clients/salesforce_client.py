import logging
from typing import Any, Optional, Protocol

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

from salesforce_mcp import config

logger = logging.getLogger(__name__)


class SalesforceError(Exception):
    """Failure reported by the Salesforce REST API"""

    def __init__(self, message: str, error_code: Optional[str] = None, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status = status


class QueryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_size: int = Field(default=0, alias="totalSize")
    done: bool = True
    records: list[dict[str, Any]] = Field(default_factory=list)


class SaveResult(BaseModel):
    id: Optional[str] = None
    success: bool = False
    errors: list[Any] = Field(default_factory=list)


class SalesforceConnection(Protocol):
    """What the user tools need from an authenticated Salesforce connection"""

    async def query(self, soql: str) -> QueryResult:
        ...

    async def create(self, sobject_type: str, fields: dict[str, Any]) -> SaveResult:
        ...


def _error_from_response(status: int, body: Any) -> SalesforceError:
    """Build an error from a REST error body.

    Salesforce answers failed calls with a list of
    `{"errorCode": ..., "message": ..., "fields": [...]}` entries. The error
    code is kept in the message so callers can match on it.
    """
    entries = body if isinstance(body, list) else [body]
    parts: list[str] = []
    error_code = None
    for entry in entries:
        if not isinstance(entry, dict):
            parts.append(str(entry))
            continue
        code = entry.get("errorCode") or entry.get("error")
        message = entry.get("message") or entry.get("error_description") or ""
        fields = entry.get("fields") or []
        if code and error_code is None:
            error_code = code
        text = f"{code}: {message}" if code else message
        if fields:
            text += f" [{', '.join(fields)}]"
        parts.append(text)

    message = "; ".join(part for part in parts if part) or f"HTTP {status}"
    return SalesforceError(message, error_code=error_code, status=status)


class SalesforceClient:
    """Salesforce REST API client working with an already issued access token"""

    def __init__(
            self,
            instance_url: str = config.SALESFORCE_INSTANCE_URL,
            access_token: str = config.SALESFORCE_ACCESS_TOKEN,
            api_version: str = config.SALESFORCE_API_VERSION,
            timeout_seconds: float = config.SALESFORCE_TIMEOUT_SECONDS,
    ) -> None:
        self.instance_url = instance_url.rstrip("/")
        self.access_token = access_token
        self.api_version = api_version
        self.timeout_seconds = timeout_seconds
        self.http_session: Optional[aiohttp.ClientSession] = None

    @property
    def base_url(self) -> str:
        return f"{self.instance_url}/services/data/v{self.api_version}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self.http_session is None or self.http_session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds, connect=10)
            connector = aiohttp.TCPConnector(limit=100, limit_per_host=10)
            self.http_session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        return self.http_session

    async def _send_request(
            self,
            method: str,
            path: str,
            params: Optional[dict[str, str]] = None,
            json_body: Optional[dict[str, Any]] = None,
    ) -> Any:
        if not self.instance_url or not self.access_token:
            raise SalesforceError(
                "Salesforce connection is not configured: "
                "set SALESFORCE_INSTANCE_URL and SALESFORCE_ACCESS_TOKEN"
            )

        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
        }

        async with self._get_session().request(
                method,
                f"{self.base_url}{path}",
                params=params,
                json=json_body,
                headers=headers
        ) as response:
            if response.content_type == "application/json":
                body = await response.json()
            else:
                body = await response.text()

            if response.status >= 400:
                error = _error_from_response(response.status, body)
                logger.warning("Salesforce %s %s failed with %s: %s", method, path, response.status, error)
                raise error

            return body

    async def query(self, soql: str) -> QueryResult:
        body = await self._send_request("GET", "/query", params={"q": soql})
        return QueryResult.model_validate(body)

    async def create(self, sobject_type: str, fields: dict[str, Any]) -> SaveResult:
        body = await self._send_request("POST", f"/sobjects/{sobject_type}/", json_body=fields)
        return SaveResult.model_validate(body)

    async def close(self) -> None:
        if self.http_session and not self.http_session.closed:
            await self.http_session.close()
        self.http_session = None
