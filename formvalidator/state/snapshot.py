"""
Pydantic State Models

Read-only views of field and form state, handed to the presentation layer
for rendering.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldState(BaseModel):
    """State of one field as of its last validation pass."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="Field id, if the field is named")
    value: str = ""
    error: Optional[str] = Field(None, description="Message of the first failing rule")

    @property
    def is_valid(self) -> bool:
        return self.error is None


class FormState(BaseModel):
    """Aggregate form state plus one entry per field, in form order."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    fields: List[FieldState] = []

    @property
    def errors(self) -> List[str]:
        return [f.error for f in self.fields if f.error is not None]
