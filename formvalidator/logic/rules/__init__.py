"""
Validation Rules

Provides the built-in rule catalog. Custom rules are plain ``Rule``
instances and can be handed to a field directly.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from formvalidator.errors import UnknownRuleError
from formvalidator.logic.rules.base import Rule, min_length_rule, pattern_rule
from formvalidator.logic.rules.email import EMAIL
from formvalidator.logic.rules.phone import PHONE_NUMBER
from formvalidator.logic.rules.text import NAME, PASSWORD_LENGTH, REQUIRED
from formvalidator.logic.rules.zip_code import ZIP_CODE

# Read-only catalog of built-in rules, keyed by rule name
RULES: Mapping[str, Rule] = MappingProxyType({
    rule.name: rule
    for rule in (REQUIRED, EMAIL, PHONE_NUMBER, ZIP_CODE, NAME, PASSWORD_LENGTH)
})


def get_rule(name: str) -> Optional[Rule]:
    """Get a rule by name. Returns None if not found."""
    return RULES.get(name)


def resolve_rules(names: Iterable[str]) -> List[Rule]:
    """
    Look up rules by name, keeping their order.

    Raises:
        UnknownRuleError: For the first name missing from the catalog.
    """
    resolved = []
    for name in names:
        rule = RULES.get(name)
        if rule is None:
            raise UnknownRuleError(
                f"Unknown rule: '{name}' (known: {sorted(RULES)})",
                details={"rule": name},
            )
        resolved.append(rule)
    return resolved


__all__ = [
    "Rule",
    "pattern_rule",
    "min_length_rule",
    "RULES",
    "get_rule",
    "resolve_rules",
    "REQUIRED",
    "EMAIL",
    "PHONE_NUMBER",
    "ZIP_CODE",
    "NAME",
    "PASSWORD_LENGTH",
]
