"""Field and form validation state."""

from formvalidator.state.field_validator import FieldValidator
from formvalidator.state.form_validator import FormValidator
from formvalidator.state.snapshot import FieldState, FormState

__all__ = [
    "FieldValidator",
    "FormValidator",
    "FieldState",
    "FormState",
]
