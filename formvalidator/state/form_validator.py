"""
FormValidator - fans many fields into one validity signal.

On construction the form registers a listener with every field. Each
listener owns one position in the form and only updates that position in
a set of currently failing fields, so a notification never re-scans the
other fields. ``is_valid`` is simply "no field is failing", which makes
the empty form valid.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from formvalidator.errors import FormDefinitionError, UnknownFieldError
from formvalidator.state.field_validator import FieldValidator
from formvalidator.state.snapshot import FormState

logger = logging.getLogger(__name__)

FormListener = Callable[[bool], None]


class FormValidator:
    """
    Aggregates a fixed, ordered list of fields.

    Fields cannot be added or removed after construction.
    """

    def __init__(self, validators: Sequence[FieldValidator]):
        self._validators: Tuple[FieldValidator, ...] = tuple(validators)
        self._by_name: Dict[str, FieldValidator] = {}
        for field in self._validators:
            if field.name is None:
                continue
            if field.name in self._by_name:
                raise FormDefinitionError(
                    f"Duplicate field name: '{field.name}'",
                    details={"field": field.name},
                )
            self._by_name[field.name] = field

        self._listeners: List[FormListener] = []
        self._failing: Set[int] = {
            index for index, field in enumerate(self._validators) if field.error is not None
        }
        self._is_valid = not self._failing

        self._unsubscribers = [
            field.subscribe(self._make_listener(index))
            for index, field in enumerate(self._validators)
        ]

        logger.debug(f"FORM | created with {len(self._validators)} field(s), is_valid={self._is_valid}")

    @property
    def validators(self) -> Tuple[FieldValidator, ...]:
        return self._validators

    @property
    def is_valid(self) -> bool:
        """True when no field failed its last validation pass."""
        return self._is_valid

    @property
    def errors(self) -> Dict[str, Optional[str]]:
        """Current error per named field."""
        return {name: field.error for name, field in self._by_name.items()}

    @property
    def values(self) -> Dict[str, str]:
        """Current value per named field."""
        return {name: field.value for name, field in self._by_name.items()}

    # =========================================================================
    # Keyed access for the presentation layer
    # =========================================================================

    def field(self, field_id: str) -> FieldValidator:
        field = self._by_name.get(field_id)
        if field is None:
            raise UnknownFieldError(
                f"Unknown field: '{field_id}' (known: {list(self._by_name)})",
                details={"field": field_id},
            )
        return field

    def set_value(self, field_id: str, value: str) -> None:
        self.field(field_id).set_value(value)

    def validate(self, field_id: str) -> bool:
        return self.field(field_id).validate()

    # =========================================================================
    # Aggregate validation
    # =========================================================================

    def validate_all(self) -> bool:
        """
        Validate every field, in order, and report whether all passed.

        Unlike ``is_valid`` this never relies on earlier passes: fields the
        user never touched are checked too. Use it right before accepting a
        submission.
        """
        # Build the full list first so every field is validated
        results = [field.validate() for field in self._validators]
        passed = all(results)
        logger.info(f"FORM | validate_all: {results.count(True)}/{len(results)} field(s) passed")
        return passed

    def subscribe(self, listener: FormListener) -> Callable[[], None]:
        """
        Call ``listener(is_valid)`` every time validity is recomputed.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> FormState:
        return FormState(
            is_valid=self._is_valid,
            fields=[field.snapshot() for field in self._validators],
        )

    def close(self) -> None:
        """Detach from all fields. ``is_valid`` stops updating."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # =========================================================================
    # Fan-in
    # =========================================================================

    def _make_listener(self, index: int) -> Callable[[FieldValidator], None]:
        def on_validated(field: FieldValidator) -> None:
            self._field_changed(index, field)
        return on_validated

    def _field_changed(self, index: int, field: FieldValidator) -> None:
        if field.error is None:
            self._failing.discard(index)
        else:
            self._failing.add(index)

        was_valid = self._is_valid
        self._is_valid = not self._failing
        if was_valid != self._is_valid:
            logger.info(
                f"FORM | is_valid {was_valid} -> {self._is_valid} "
                f"(field={field.name or index}, failing={len(self._failing)})"
            )

        for listener in list(self._listeners):
            try:
                listener(self._is_valid)
            except Exception as e:
                logger.warning(f"FORM | listener failed: {e}")
