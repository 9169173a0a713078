"""Validators applied by write models on top of the request schemas.

The HTTP layer already rejects malformed bodies; these keep the same rules
when a model is called directly (CLI, tests, other models).
"""

from pydantic import EmailStr, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from invitation.errors import InvitationValidationError

MIN_NUMBER_OF_GUESTS = 1
MAX_NUMBER_OF_GUESTS = 10

_email_adapter = TypeAdapter(EmailStr)
_url_adapter = TypeAdapter(HttpUrl)


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is None or not value.strip():
        raise InvitationValidationError(f"{field_name} is required")
    return value


def validate_email(email: str | None) -> str | None:
    if email is None:
        return None
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError:
        raise InvitationValidationError(f"'{email}' is not a valid email address")
    return email


def validate_url(url: str, field_name: str = "url") -> str:
    try:
        _url_adapter.validate_python(url)
    except PydanticValidationError:
        raise InvitationValidationError(f"{field_name} '{url}' is not a valid URL")
    return url


def validate_number_of_guests(number_of_guests: int) -> int:
    if isinstance(number_of_guests, bool) or not isinstance(number_of_guests, int):
        raise InvitationValidationError("number_of_guests must be an integer")
    if not MIN_NUMBER_OF_GUESTS <= number_of_guests <= MAX_NUMBER_OF_GUESTS:
        raise InvitationValidationError(
            f"number_of_guests must be between {MIN_NUMBER_OF_GUESTS} "
            f"and {MAX_NUMBER_OF_GUESTS}, got {number_of_guests}"
        )
    return number_of_guests


def validate_rsvp_changes(changes: dict) -> dict:
    """Checks a partial RSVP update; only ``message`` may be cleared with None."""
    if "will_attend" in changes and changes["will_attend"] is None:
        raise InvitationValidationError("will_attend cannot be null")
    if "number_of_guests" in changes:
        validate_number_of_guests(changes["number_of_guests"])
    return changes
