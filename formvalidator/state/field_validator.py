"""
FieldValidator - one input's value, its rules and its current error.

The field never re-validates on its own: ``set_value`` only stores the
value, and ``error`` reflects the last explicit ``validate()`` call.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from formvalidator.logic.rules.base import Rule
from formvalidator.state.snapshot import FieldState

logger = logging.getLogger(__name__)

FieldListener = Callable[["FieldValidator"], None]


class FieldValidator:
    """
    Validates a single field against an ordered list of rules.

    Usage:
        field = FieldValidator([REQUIRED, EMAIL], name="email")
        field.set_value("a@b.com")
        field.validate()  # True, field.error is None
    """

    def __init__(self, rules: Sequence[Rule], name: Optional[str] = None, value: str = ""):
        self.name = name
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._value = value
        self._error: Optional[str] = None
        self._listeners: List[FieldListener] = []

    def __repr__(self) -> str:
        return f"FieldValidator(name={self.name!r}, rules={[r.name for r in self._rules]}, error={self._error!r})"

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str):
        self.set_value(value)

    @property
    def error(self) -> Optional[str]:
        """Message of the first failing rule from the last pass, or None."""
        return self._error

    def set_value(self, value: str) -> None:
        """Store a new raw value. Does not validate."""
        self._value = value

    def validate(self) -> bool:
        """
        Run the rules in order against the current value.

        Stops at the first failing rule and records its message; later
        rules are not evaluated. Listeners are notified after every call.

        Returns:
            True if every rule passed.
        """
        failed = next((rule for rule in self._rules if not rule(self._value)), None)

        if failed is None:
            self._error = None
            logger.debug(f"FIELD | {self.name or '<unnamed>'} passed {len(self._rules)} rule(s)")
        else:
            self._error = failed.message
            logger.debug(f"FIELD | {self.name or '<unnamed>'} failed '{failed.name}': {failed.message}")

        self._notify()
        return failed is None

    def subscribe(self, listener: FieldListener) -> Callable[[], None]:
        """
        Call ``listener(field)`` after every validation pass.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> FieldState:
        return FieldState(name=self.name, value=self._value, error=self._error)

    def _notify(self) -> None:
        # Copy: a listener may unsubscribe while we iterate
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.warning(f"FIELD | listener failed for {self.name or '<unnamed>'}: {e}")
