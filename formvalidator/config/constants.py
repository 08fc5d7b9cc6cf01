"""
Shared constants used by the rule catalog.

Patterns are matched against the whole value (``re.fullmatch``).
"""

# Length bounds
NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8

# Phone numbers are exactly this many ASCII digits, no formatting
PHONE_DIGITS = 10

# Regular expressions
EMAIL_PATTERN = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
PHONE_PATTERN = rf"[0-9]{{{PHONE_DIGITS}}}"
ZIP_CODE_PATTERN = r"[0-9]{5}(-[0-9]{4})?"
