"""
Exceptions raised while defining rules, fields and forms.

A failing rule is never an exception: it is recorded on the field's
``error`` and reflected in the form's ``is_valid``. Everything here is a
construction-time fault.
"""

from typing import Any, Dict, Optional


class FormValidatorError(Exception):
    """Base class for all formvalidator faults."""

    default_message = "formvalidator error"

    def __init__(self, message: Optional[str] = None, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details or {}


class RuleDefinitionError(FormValidatorError, ValueError):
    """A rule could not be built (bad pattern, bad length...)."""

    default_message = "Invalid rule definition"


class UnknownRuleError(FormValidatorError, KeyError):
    """A rule name is not in the catalog."""

    default_message = "Unknown rule"

    def __str__(self) -> str:
        return self.message


class UnknownFieldError(FormValidatorError, KeyError):
    """A field id is not part of the form."""

    default_message = "Unknown field"

    def __str__(self) -> str:
        return self.message


class FormDefinitionError(FormValidatorError, ValueError):
    """A form definition is invalid."""

    default_message = "Invalid form definition"
