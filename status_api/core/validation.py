# status_api/core/validation.py
"""Field rules for user payloads.

Each function returns the violated rules as human readable messages, in a
fixed field order (email, first name, last name, age). An empty list means
the payload is valid.
"""

from status_api.entities.user import UserPatch

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
AGE_MIN = 18
AGE_MAX = 120

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Invalid email format"
FIRST_NAME_REQUIRED = "First name is required"
FIRST_NAME_LENGTH = (
    f"First name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
)
LAST_NAME_REQUIRED = "Last name is required"
LAST_NAME_LENGTH = (
    f"Last name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
)
AGE_RANGE = f"Age must be between {AGE_MIN} and {AGE_MAX}"


def is_valid_email(value: str) -> bool:
    """Loose shape check: exactly one "@", neither first nor last, on one line.

    Dotless and intranet domains (``admin@localhost``) are accepted.
    """
    if "\r" in value or "\n" in value:
        return False
    at = value.find("@")
    return 0 < at < len(value) - 1 and at == value.rfind("@")


def _name_fits(value: str) -> bool:
    return NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH


def _age_fits(value: int) -> bool:
    return AGE_MIN <= value <= AGE_MAX


def validate_user(data) -> list[str]:
    """Validate a full user payload (create / replace).

    ``data`` needs ``email``, ``first_name``, ``last_name`` and ``age``
    attributes; a missing or blank string counts as absent.
    """
    errors: list[str] = []

    if not data.email or not data.email.strip():
        errors.append(EMAIL_REQUIRED)
    elif not is_valid_email(data.email):
        errors.append(EMAIL_INVALID)

    if not data.first_name or not data.first_name.strip():
        errors.append(FIRST_NAME_REQUIRED)
    elif not _name_fits(data.first_name):
        errors.append(FIRST_NAME_LENGTH)

    if not data.last_name or not data.last_name.strip():
        errors.append(LAST_NAME_REQUIRED)
    elif not _name_fits(data.last_name):
        errors.append(LAST_NAME_LENGTH)

    if data.age is None or not _age_fits(data.age):
        errors.append(AGE_RANGE)

    return errors


def validate_user_patch(patch: UserPatch) -> list[str]:
    """Validate only the fields a patch actually carries."""
    errors: list[str] = []

    if patch.email is not None and not is_valid_email(patch.email):
        errors.append(EMAIL_INVALID)
    if patch.first_name is not None and not _name_fits(patch.first_name):
        errors.append(FIRST_NAME_LENGTH)
    if patch.last_name is not None and not _name_fits(patch.last_name):
        errors.append(LAST_NAME_LENGTH)
    if patch.age is not None and not _age_fits(patch.age):
        errors.append(AGE_RANGE)

    return errors
