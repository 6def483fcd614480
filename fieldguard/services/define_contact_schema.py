"""Contact Schema — contact-form record: name, email, optional phone, message."""

from fieldguard.core.rules import email, length, regex
from fieldguard.core.schema import Schema, build_schema, field

SCHEMA_NAME = "contact"

PATTERNS: dict[str, str] = {
    # Optional leading +, then 7–15 digits with optional single spaces/dashes between
    "phone_digits": r"^\+?\d(?:[ -]?\d){6,14}$",
}


def build_contact_schema() -> Schema:
    return build_schema(
        SCHEMA_NAME,
        [
            field("name", length(min=1, max=100), required=True),
            field("email", email(), required=True),
            field("phone", regex("phone_digits", message="phone must be 7 to 15 digits")),
            field("message", length(min=10, max=2000), required=True),
        ],
        PATTERNS,
    )
