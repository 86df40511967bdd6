from typing import Any

from salesforce_mcp.models.tool_result import ToolResult
from salesforce_mcp.models.user_info import UserCreate
from salesforce_mcp.tools.users.base import BaseUserServiceTool

DESCRIPTION = """Create a new user in Salesforce. This tool handles user creation with proper validation and required fields.

This tool handles:
1. User creation with required fields (Username, Email, FirstName, LastName, Alias, ProfileId)
2. Optional fields (Phone, Title, Department, etc.)
3. Email validation and username uniqueness
4. Profile assignment and license validation

Examples:
1. Create a standard user:
   - username: "john.doe@company.com"
   - email: "john.doe@company.com"
   - firstName: "John"
   - lastName: "Doe"
   - alias: "jdoe"
   - profileId: "00e000000000000AAA"

2. Create user with additional details:
   - username: "jane.smith@company.com"
   - email: "jane.smith@company.com"
   - firstName: "Jane"
   - lastName: "Smith"
   - alias: "jsmith"
   - profileId: "00e000000000000AAA"
   - title: "Sales Manager"
   - department: "Sales"
   - phone: "+1-555-123-4567"

Important Rules:
- Username must be unique across all Salesforce orgs
- Username must be in email format
- Email must be valid format
- Alias must be unique and max 8 characters
- ProfileId must exist and be active
- User will be created as active by default"""


class CreateUserTool(BaseUserServiceTool):

    @property
    def name(self) -> str:
        return "salesforce_create_user"

    @property
    def description(self) -> str:
        return DESCRIPTION

    @property
    def input_schema(self) -> dict[str, Any]:
        return UserCreate.model_json_schema()

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        user = UserCreate.model_validate(arguments)
        return await self._user_service.create_user(user)
