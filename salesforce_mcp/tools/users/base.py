from salesforce_mcp.tools.base import BaseTool
from salesforce_mcp.tools.users.user_service import UserService


class BaseUserServiceTool(BaseTool):

    def __init__(self, user_service: UserService):
        self._user_service = user_service
