"""
Tests for the salesforce_create_user tool definition
"""
import pytest
from pydantic import ValidationError

from salesforce_mcp.tools.users.create_user_tool import CreateUserTool
from salesforce_mcp.tools.users.user_service import UserService


@pytest.fixture
def tool(connection):
    return CreateUserTool(UserService(connection))


class TestCreateUserTool:
    """Test tool metadata and execution"""

    def test_mcp_definition(self, tool):
        definition = tool.to_mcp_tool()

        assert definition["name"] == "salesforce_create_user"
        assert "Create a new user in Salesforce" in definition["description"]

    def test_input_schema(self, tool):
        schema = tool.input_schema

        assert schema["type"] == "object"
        assert schema["required"] == ["username", "email", "firstName", "lastName", "alias", "profileId"]
        assert set(schema["properties"]) == {
            "username", "email", "firstName", "lastName", "alias", "profileId",
            "title", "department", "phone",
            "timeZoneSidKey", "localeSidKey", "emailEncodingKey", "languageLocaleKey",
        }
        assert schema["properties"]["alias"]["type"] == "string"

    def test_required_fields_have_no_default(self, tool):
        properties = tool.input_schema["properties"]

        for name in ["username", "email", "firstName", "lastName", "alias", "profileId"]:
            assert "default" not in properties[name]
        assert properties["title"]["default"] == ""

    @pytest.mark.asyncio
    async def test_execute(self, tool, user_arguments, connection):
        result = await tool.execute(user_arguments)

        assert result.is_error is False
        assert result.to_mcp_result()["isError"] is False
        connection.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_execute_rejects_non_string_values(self, tool, user_arguments):
        user_arguments["phone"] = 5551234567

        with pytest.raises(ValidationError):
            await tool.execute(user_arguments)
