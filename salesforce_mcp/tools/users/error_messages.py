from typing import Any

from salesforce_mcp.models.user_info import UserCreate


def describe_create_error(message: str, user: UserCreate) -> str:
    """Replace known Salesforce error codes with an explanation for the caller.

    Unknown errors are returned unchanged.
    """
    if "DUPLICATE_USERNAME" in message:
        return (
            f"Username '{user.username}' already exists. "
            f"Usernames must be unique across all Salesforce orgs."
        )
    if "DUPLICATE_VALUE" in message:
        if "Alias" in message:
            return f"Alias '{user.alias}' already exists. Please choose a different alias."
        if "Email" in message:
            return f"Email '{user.email}' already exists. Please use a different email address."
        return message
    if "INVALID_EMAIL_ADDRESS" in message:
        return f"Invalid email format: '{user.email}'. Please provide a valid email address."
    if "FIELD_CUSTOM_VALIDATION_EXCEPTION" in message:
        return f"Custom validation rule failed: {message}"
    return message


def format_save_errors(errors: list[Any]) -> str:
    """Render the `errors` list of a failed save result"""
    if not errors:
        return "Unknown error"

    rendered = []
    for error in errors:
        if isinstance(error, dict):
            code = error.get("statusCode") or error.get("errorCode")
            message = error.get("message", "")
            rendered.append(f"{code}: {message}" if code else message)
        else:
            rendered.append(str(error))
    return ", ".join(rendered)
