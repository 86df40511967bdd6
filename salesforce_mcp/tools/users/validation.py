import re
from dataclasses import dataclass, field

from salesforce_mcp.models.user_info import UserCreate

EMAIL_PART_PATTERN = re.compile(r"[^\s@]+")
ALIAS_PATTERN = re.compile(r"[a-zA-Z0-9]{1,8}")
SALESFORCE_ID_PATTERN = re.compile(r"[a-zA-Z0-9]{15}(?:[a-zA-Z0-9]{3})?")
# Rejects some valid international formats.
PHONE_PATTERN = re.compile(r"\+?[1-9][0-9\-()\s]{7,}")


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def is_valid_email(email: str) -> bool:
    """Accept `local@domain.tld`: one `@`, no whitespace, and a dot inside the domain.

    Checked part by part so the cost stays linear in the input length.
    """
    local, at, domain = email.partition("@")
    if not at or EMAIL_PART_PATTERN.fullmatch(local) is None or EMAIL_PART_PATTERN.fullmatch(domain) is None:
        return False
    return "." in domain[1:-1]


def is_valid_username(username: str) -> bool:
    """Salesforce usernames have to look like email addresses"""
    return is_valid_email(username)


def is_valid_alias(alias: str) -> bool:
    return ALIAS_PATTERN.fullmatch(alias) is not None


def is_valid_salesforce_id(record_id: str) -> bool:
    return SALESFORCE_ID_PATTERN.fullmatch(record_id) is not None


def is_valid_phone(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone) is not None


def validate_user_data(user: UserCreate) -> ValidationResult:
    """Check every rule and collect all violations in a fixed order.

    Presence is checked on trimmed values, formats on the values as given.
    """
    result = ValidationResult()

    required = [
        (user.username, "Username is required"),
        (user.email, "Email is required"),
        (user.first_name, "First name is required"),
        (user.last_name, "Last name is required"),
        (user.alias, "Alias is required"),
        (user.profile_id, "Profile ID is required"),
    ]
    for value, message in required:
        if not value.strip():
            result.errors.append(message)

    if user.username and not is_valid_username(user.username):
        result.errors.append("Username must be in valid email format")

    if user.email and not is_valid_email(user.email):
        result.errors.append("Email must be in valid email format")

    if user.alias and not is_valid_alias(user.alias):
        result.errors.append("Alias must be alphanumeric and maximum 8 characters")

    if user.profile_id and not is_valid_salesforce_id(user.profile_id):
        result.errors.append("Profile ID must be a valid 15 or 18 character Salesforce ID")

    if user.phone.strip() and not is_valid_phone(user.phone):
        result.errors.append("Phone number format is invalid")

    return result
