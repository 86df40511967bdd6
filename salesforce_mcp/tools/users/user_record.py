from typing import Any

from salesforce_mcp.models.user_info import UserCreate

DEFAULT_TIME_ZONE_SID_KEY = "America/New_York"
DEFAULT_LOCALE_SID_KEY = "en_US"
DEFAULT_EMAIL_ENCODING_KEY = "UTF-8"
DEFAULT_LANGUAGE_LOCALE_KEY = "en_US"


def build_user_record(user: UserCreate) -> dict[str, Any]:
    """Map tool arguments onto the fields of a Salesforce `User` record"""
    record: dict[str, Any] = {
        "Username": user.username.strip(),
        "Email": user.email.strip(),
        "FirstName": user.first_name.strip(),
        "LastName": user.last_name.strip(),
        "Alias": user.alias.strip(),
        "ProfileId": user.profile_id.strip(),
        "TimeZoneSidKey": user.time_zone_sid_key or DEFAULT_TIME_ZONE_SID_KEY,
        "LocaleSidKey": user.locale_sid_key or DEFAULT_LOCALE_SID_KEY,
        "EmailEncodingKey": user.email_encoding_key or DEFAULT_EMAIL_ENCODING_KEY,
        "LanguageLocaleKey": user.language_locale_key or DEFAULT_LANGUAGE_LOCALE_KEY,
        "IsActive": True,
    }

    optional = {
        "Title": user.title,
        "Department": user.department,
        "Phone": user.phone,
    }
    for key, value in optional.items():
        if value.strip():
            record[key] = value.strip()

    return record
