"""Phone Rule"""

from formvalidator.config.constants import PHONE_PATTERN
from formvalidator.logic.rules.base import pattern_rule

# Digits only: "(615) 555-1234" is rejected, "6155551234" passes.
PHONE_NUMBER = pattern_rule("phone_number", "Invalid phone number", PHONE_PATTERN)
