"""
Tests for the user creation flow
"""
from unittest.mock import AsyncMock

import pytest

from salesforce_mcp.clients.salesforce_client import QueryResult, SalesforceError, SaveResult
from salesforce_mcp.models.user_info import UserCreate
from salesforce_mcp.tools.users.user_service import UserService


class TestCreateUser:
    """Test UserService.create_user"""

    @pytest.mark.asyncio
    async def test_successful_creation(self, connection, valid_user):
        result = await UserService(connection).create_user(valid_user)

        assert result.is_error is False
        assert result.text_content == (
            "User created successfully!\n\n"
            "User ID: 005000000000001AAA\n"
            "Username: john.doe@company.com\n"
            "Email: john.doe@company.com\n"
            "Name: John Doe\n"
            "Alias: jdoe\n"
            "Profile ID: 00e000000000000AAA"
        )
        connection.query.assert_awaited_once_with(
            "SELECT Id, Name FROM Profile WHERE Id = '00e000000000000AAA' AND IsActive = true"
        )
        sobject_type, record = connection.create.await_args.args
        assert sobject_type == "User"
        assert record["IsActive"] is True
        assert record["Username"] == "john.doe@company.com"

    @pytest.mark.asyncio
    async def test_validation_errors_skip_network(self, connection, user_arguments):
        user_arguments.update({"alias": "toolongalias", "email": "nope"})

        result = await UserService(connection).create_user(UserCreate.model_validate(user_arguments))

        assert result.is_error is True
        assert result.text_content == (
            "Validation errors:\n"
            "- Email must be in valid email format\n"
            "- Alias must be alphanumeric and maximum 8 characters"
        )
        connection.query.assert_not_awaited()
        connection.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_profile_stops_before_create(self, connection, valid_user):
        connection.query = AsyncMock(return_value=QueryResult(totalSize=0, records=[]))

        result = await UserService(connection).create_user(valid_user)

        assert result.is_error is True
        assert result.text_content == (
            "Error: Profile with ID '00e000000000000AAA' not found or is inactive"
        )
        connection.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_profile_query_failure(self, connection, valid_user):
        connection.query = AsyncMock(side_effect=SalesforceError("INVALID_SESSION_ID: Session expired"))

        result = await UserService(connection).create_user(valid_user)

        assert result.is_error is True
        assert result.text_content == "Error validating profile: INVALID_SESSION_ID: Session expired"
        connection.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_username_is_translated(self, connection, valid_user):
        connection.create = AsyncMock(
            side_effect=SalesforceError("DUPLICATE_USERNAME: Duplicate Username.", error_code="DUPLICATE_USERNAME")
        )

        result = await UserService(connection).create_user(valid_user)

        assert result.is_error is True
        assert result.text_content == (
            "Error creating user: Username 'john.doe@company.com' already exists. "
            "Usernames must be unique across all Salesforce orgs."
        )
        assert "Duplicate Username." not in result.text_content

    @pytest.mark.asyncio
    async def test_unknown_exception_is_passed_through(self, connection, valid_user):
        connection.create = AsyncMock(side_effect=RuntimeError("connection reset"))

        result = await UserService(connection).create_user(valid_user)

        assert result.is_error is True
        assert result.text_content == "Error creating user: connection reset"

    @pytest.mark.asyncio
    async def test_unsuccessful_save_result(self, connection, valid_user):
        connection.create = AsyncMock(return_value=SaveResult(
            success=False,
            errors=[{"statusCode": "LICENSE_LIMIT_EXCEEDED", "message": "License Limit Exceeded"}],
        ))

        result = await UserService(connection).create_user(valid_user)

        assert result.is_error is True
        assert result.text_content == (
            "Failed to create user: LICENSE_LIMIT_EXCEEDED: License Limit Exceeded"
        )

    @pytest.mark.asyncio
    async def test_unsuccessful_save_without_errors(self, connection, valid_user):
        connection.create = AsyncMock(return_value=SaveResult(success=False))

        result = await UserService(connection).create_user(valid_user)

        assert result.text_content == "Failed to create user: Unknown error"
