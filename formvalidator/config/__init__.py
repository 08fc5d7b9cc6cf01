"""
Configuration.

The form registry lives in ``formvalidator.config.form_registry`` and is
re-exported from the top-level package; it is not imported here because the
rule catalog depends on these constants.
"""

from formvalidator.config.settings import (
    PROJECT_ROOT,
    FORMS_DIR,
    LOG_LEVEL,
    VERBOSE,
)
from formvalidator.config.constants import (
    NAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
    PHONE_DIGITS,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    ZIP_CODE_PATTERN,
)

__all__ = [
    # Settings
    "PROJECT_ROOT",
    "FORMS_DIR",
    "LOG_LEVEL",
    "VERBOSE",
    # Constants
    "NAME_MIN_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PHONE_DIGITS",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "ZIP_CODE_PATTERN",
]
