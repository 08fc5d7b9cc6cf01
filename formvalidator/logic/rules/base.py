"""
Base Rule

An immutable pairing of a pure string predicate and the message shown
when the predicate fails.
"""

import re
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from formvalidator.errors import RuleDefinitionError


class Rule(BaseModel):
    """
    A single validation rule.

    Rules are stateless and shared: the same instance can guard any number
    of fields. Calling a rule evaluates its predicate against a value.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Catalog key, used in form definitions and logs")
    message: str = Field(..., min_length=1, description="Shown when the predicate fails")
    predicate: Callable[[str], bool] = Field(..., description="Pure check over the raw value")

    def __call__(self, value: str) -> bool:
        return bool(self.predicate(value))


def pattern_rule(name: str, message: str, pattern: str) -> Rule:
    """
    Build a rule that passes when the whole value matches ``pattern``.

    The pattern is compiled here so a broken expression fails at definition
    time instead of on the first validation.

    Raises:
        RuleDefinitionError: If the pattern does not compile.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise RuleDefinitionError(
            f"Rule '{name}' has an invalid pattern {pattern!r}: {e}",
            details={"rule": name, "pattern": pattern},
        ) from e

    return Rule(
        name=name,
        message=message,
        predicate=lambda value: compiled.fullmatch(value) is not None,
    )


def min_length_rule(name: str, message: str, min_length: int) -> Rule:
    """Build a rule that passes when the value has at least ``min_length`` characters."""
    if min_length < 0:
        raise RuleDefinitionError(
            f"Rule '{name}' needs a non-negative minimum length, got {min_length}",
            details={"rule": name, "min_length": min_length},
        )

    return Rule(name=name, message=message, predicate=lambda value: len(value) >= min_length)
