"""Text Rules"""

from formvalidator.config.constants import NAME_MIN_LENGTH, PASSWORD_MIN_LENGTH
from formvalidator.logic.rules.base import Rule, min_length_rule

# Whitespace-only input counts as content.
REQUIRED = Rule(
    name="required",
    message="This field is required",
    predicate=lambda value: value != "",
)

NAME = min_length_rule(
    "name",
    f"Name must be at least {NAME_MIN_LENGTH} characters long",
    NAME_MIN_LENGTH,
)

PASSWORD_LENGTH = min_length_rule(
    "password_length",
    f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
    PASSWORD_MIN_LENGTH,
)
