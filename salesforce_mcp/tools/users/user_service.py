import logging

from salesforce_mcp.clients.salesforce_client import SalesforceConnection
from salesforce_mcp.models.tool_result import ToolResult
from salesforce_mcp.models.user_info import UserCreate
from salesforce_mcp.tools.users.error_messages import describe_create_error, format_save_errors
from salesforce_mcp.tools.users.user_record import build_user_record
from salesforce_mcp.tools.users.validation import validate_user_data

logger = logging.getLogger(__name__)

USER_SOBJECT = "User"


class UserService:
    """Creates Salesforce users on top of an authenticated connection"""

    def __init__(self, connection: SalesforceConnection) -> None:
        self._connection = connection

    async def create_user(self, user: UserCreate) -> ToolResult:
        validation = validate_user_data(user)
        if not validation.is_valid:
            logger.info("Rejected user %s: %d validation error(s)", user.username, len(validation.errors))
            errors = "\n".join(f"- {error}" for error in validation.errors)
            return ToolResult.text(f"Validation errors:\n{errors}", is_error=True)

        profile_error = await self._check_profile(user.profile_id)
        if profile_error:
            return profile_error

        try:
            record = build_user_record(user)
            result = await self._connection.create(USER_SOBJECT, record)
        except Exception as error:
            logger.exception("Creating user %s failed", user.username)
            return ToolResult.text(f"Error creating user: {describe_create_error(str(error), user)}", is_error=True)

        if not result.success:
            logger.warning("Salesforce refused user %s: %s", user.username, result.errors)
            return ToolResult.text(f"Failed to create user: {format_save_errors(result.errors)}", is_error=True)

        logger.info("Created user %s with id %s", user.username, result.id)
        return ToolResult.text(
            f"User created successfully!\n\n"
            f"User ID: {result.id}\n"
            f"Username: {user.username}\n"
            f"Email: {user.email}\n"
            f"Name: {user.first_name} {user.last_name}\n"
            f"Alias: {user.alias}\n"
            f"Profile ID: {user.profile_id}"
        )

    async def _check_profile(self, profile_id: str) -> ToolResult | None:
        """Return an error result unless the profile exists and is active"""
        # profile_id already matched the alphanumeric id pattern, so it is safe to inline
        soql = f"SELECT Id, Name FROM Profile WHERE Id = '{profile_id}' AND IsActive = true"
        try:
            profiles = await self._connection.query(soql)
        except Exception as error:
            logger.exception("Profile lookup for %s failed", profile_id)
            return ToolResult.text(f"Error validating profile: {error}", is_error=True)

        if not profiles.records:
            logger.warning("Profile %s not found or inactive", profile_id)
            return ToolResult.text(
                f"Error: Profile with ID '{profile_id}' not found or is inactive",
                is_error=True
            )
        return None
