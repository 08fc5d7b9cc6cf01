"""ZIP Code Rule"""

from formvalidator.config.constants import ZIP_CODE_PATTERN
from formvalidator.logic.rules.base import pattern_rule

ZIP_CODE = pattern_rule("zip_code", "Invalid zip code", ZIP_CODE_PATTERN)
