"""
formvalidator

A reactive field-validation engine: fields with ordered rules, fanned into
one form-validity signal.
"""

from formvalidator.logic.rules import RULES, Rule, get_rule, resolve_rules
from formvalidator.state.field_validator import FieldValidator
from formvalidator.state.form_validator import FormValidator
from formvalidator.state.snapshot import FieldState, FormState
from formvalidator.config.form_registry import FormRegistry, FormDefinition, get_registry

__all__ = [
    "Rule",
    "RULES",
    "get_rule",
    "resolve_rules",
    "FieldValidator",
    "FormValidator",
    "FieldState",
    "FormState",
    "FormRegistry",
    "FormDefinition",
    "get_registry",
]
