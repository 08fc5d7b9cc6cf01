"""Email Rule"""

from formvalidator.config.constants import EMAIL_PATTERN
from formvalidator.logic.rules.base import pattern_rule

EMAIL = pattern_rule("email", "Invalid email address", EMAIL_PATTERN)
