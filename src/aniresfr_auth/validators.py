"""
Field format predicates.

Pure checks used before any request is sent. The orchestrator accepts
replacements for both.
"""

import re

EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)

# Optional leading +, then 10 to 15 digits. Spaces, dashes, dots and
# parentheses are ignored.
PHONE_RE = re.compile(r"^\+?\d{10,15}$")
PHONE_SEPARATORS_RE = re.compile(r"[\s\-.()]")


def is_valid_email(value: str) -> bool:
    """Return True if ``value`` looks like an email address."""
    if not isinstance(value, str):
        return False
    return EMAIL_RE.match(value.strip()) is not None


def is_valid_phone_number(value: str) -> bool:
    """Return True if ``value`` looks like a phone number."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return False
    return PHONE_RE.match(PHONE_SEPARATORS_RE.sub("", value.strip())) is not None
