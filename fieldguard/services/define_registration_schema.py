"""Registration Schema — user sign-up record: username, email, password, age.

Invariants:
    - username: required, alphanumeric only, at least 6 characters
    - email: required, address-shaped AND contains "gmail" (two independent rules)
    - password: required, password_strength (upper, lower, digit, no whitespace, ≥ 8)
      AND at least one special character (two independent rules)
    - age: required integer, 18–22 inclusive

Design Decisions:
    - Email shape and provider restriction kept as separate rules: a gmail-less but
      well-formed address reports only "contains", a malformed one reports both
    - password_strength is one atomic custom rule with an override message naming
      exactly which requirements failed
"""

from fieldguard.core.domain_types import FieldType
from fieldguard.core.rules import contains, custom, email, in_range, regex
from fieldguard.core.schema import Schema, build_schema, field

SCHEMA_NAME = "registration"

PATTERNS: dict[str, str] = {
    "alphanumeric_min6": r"^[A-Za-z0-9]{6,}$",
    "special_character": r"[^A-Za-z0-9\s]",
}

PASSWORD_MIN_LENGTH = 8


def password_strength(value: str) -> tuple[bool, str | None]:
    """Upper + lower + digit, no whitespace, minimum length — one atomic check."""
    missing = []
    if len(value) < PASSWORD_MIN_LENGTH:
        missing.append(f"at least {PASSWORD_MIN_LENGTH} characters")
    if not any(ch.isupper() for ch in value):
        missing.append("an upper-case letter")
    if not any(ch.islower() for ch in value):
        missing.append("a lower-case letter")
    if not any(ch.isdigit() for ch in value):
        missing.append("a digit")
    if any(ch.isspace() for ch in value):
        missing.append("no whitespace")
    if not missing:
        return True, None
    return False, "password needs " + ", ".join(missing)


def build_registration_schema() -> Schema:
    return build_schema(
        SCHEMA_NAME,
        [
            field(
                "username",
                regex(
                    "alphanumeric_min6",
                    message="username must be at least 6 letters or digits, nothing else",
                ),
                required=True,
            ),
            field(
                "email",
                email(),
                contains("gmail", message="email must be a gmail address"),
                required=True,
            ),
            field(
                "password",
                custom(password_strength, code="password_strength"),
                regex(
                    "special_character",
                    message="password must contain at least one special character",
                ),
                required=True,
            ),
            field(
                "age",
                in_range(18, 22, message="age must be between {min} and {max}"),
                field_type=FieldType.INTEGER,
                required=True,
            ),
        ],
        PATTERNS,
    )
