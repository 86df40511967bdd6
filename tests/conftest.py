"""
Test configuration and fixtures
"""

from unittest.mock import AsyncMock

import pytest

from salesforce_mcp.clients.salesforce_client import QueryResult, SaveResult
from salesforce_mcp.models.user_info import UserCreate

PROFILE_ID = "00e000000000000AAA"


@pytest.fixture
def user_arguments():
    """Tool arguments for a user that passes every validation rule"""
    return {
        "username": "john.doe@company.com",
        "email": "john.doe@company.com",
        "firstName": "John",
        "lastName": "Doe",
        "alias": "jdoe",
        "profileId": PROFILE_ID,
    }


@pytest.fixture
def valid_user(user_arguments):
    return UserCreate.model_validate(user_arguments)


@pytest.fixture
def connection():
    """Salesforce connection with an active profile and a successful create"""
    conn = AsyncMock()
    conn.query = AsyncMock(
        return_value=QueryResult(totalSize=1, records=[{"Id": PROFILE_ID, "Name": "Standard User"}])
    )
    conn.create = AsyncMock(
        return_value=SaveResult(id="005000000000001AAA", success=True, errors=[])
    )
    return conn
