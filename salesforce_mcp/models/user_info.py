from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_USER_FIELDS = ["username", "email", "firstName", "lastName", "alias", "profileId"]


def _mark_required(schema: dict[str, Any]) -> None:
    """List the required fields and drop the parse-time empty default from them"""
    schema["required"] = list(REQUIRED_USER_FIELDS)
    properties = schema.get("properties", {})
    for name in REQUIRED_USER_FIELDS:
        properties.get(name, {}).pop("default", None)


class UserCreate(BaseModel):
    """Arguments of the user creation tool.

    Every field parses leniently: missing keys and explicit nulls become empty
    strings, so required-field checks are reported by the validator together
    with the format checks instead of failing at parse time.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra=_mark_required,
    )

    username: str = Field(default="", description="Unique username in email format (required)")
    email: str = Field(default="", description="Valid email address (required)")
    first_name: str = Field(default="", alias="firstName", description="User's first name (required)")
    last_name: str = Field(default="", alias="lastName", description="User's last name (required)")
    alias: str = Field(default="", description="User alias, max 8 characters (required)")
    profile_id: str = Field(default="", alias="profileId", description="Salesforce Profile ID (required)")
    title: str = Field(default="", description="Job title (optional)")
    department: str = Field(default="", description="Department name (optional)")
    phone: str = Field(default="", description="Phone number (optional)")
    time_zone_sid_key: str = Field(
        default="", alias="timeZoneSidKey", description="Timezone (defaults to America/New_York)"
    )
    locale_sid_key: str = Field(default="", alias="localeSidKey", description="Locale (defaults to en_US)")
    email_encoding_key: str = Field(
        default="", alias="emailEncodingKey", description="Email encoding (defaults to UTF-8)"
    )
    language_locale_key: str = Field(
        default="", alias="languageLocaleKey", description="Language locale (defaults to en_US)"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
