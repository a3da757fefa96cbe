"""Rule registry — central lookup of all available validation rules by name.

Rules are registered here so callers can reference them by name string
rather than importing functions directly. New rules are added with
register_rule(); existing entries are never replaced.

Every rule shares one calling convention:

    rule(field, value, requirement) -> bool

`field` only labels the data point for whoever reports the failure; no rule
uses it for its decision. `requirement` is the rule's parameter (a length
bound, an expected value, a UniqueConstraint) and is ignored by rules that
don't need one.
"""

import logging
from typing import Any, Callable

from app.rules.character_rules import (
    has_no_special_chars,
    is_alpha_numeric,
    is_alphabetic,
    is_digit,
    is_name,
)
from app.rules.errors import InvalidInputError, UnknownRuleError
from app.rules.format_rules import is_email, is_time_stamp, is_url, is_year_month
from app.rules.length_rules import is_max_length, is_min_length
from app.rules.presence_rules import is_required, matches
from app.rules.unique_rules import unique_rule

logger = logging.getLogger(__name__)

Rule = Callable[[str, Any, Any], bool]

# Maps rule names to their implementation functions.
RULE_REGISTRY: dict[str, Rule] = {
    "isMinLength": is_min_length,
    "isMaxLength": is_max_length,
    "matches": matches,
    "hasNoSpecialChars": has_no_special_chars,
    "isTimeStamp": is_time_stamp,
    "isYearMonth": is_year_month,
    "isAlphabetic": is_alphabetic,
    "isAlphaNumeric": is_alpha_numeric,
    "isDigit": is_digit,
    "isEmail": is_email,
    "isUrl": is_url,
    "isName": is_name,
    "isRequired": is_required,
    "checkUnique": unique_rule,
}


def get_rule(rule_name: str) -> Rule:
    """Return the rule registered under rule_name or raise UnknownRuleError."""
    rule_fn = RULE_REGISTRY.get(rule_name)
    if rule_fn is None:
        logger.warning("Unknown validation rule requested: %r", rule_name)
        raise UnknownRuleError(rule_name)
    return rule_fn


def evaluate(rule_name: str, field: str, value: Any, requirement: Any = None) -> bool:
    """Run one rule against one field value and return its verdict.

    Raises:
        UnknownRuleError: rule_name is not registered.
        InvalidInputError: field is not a string, or the rule rejected its input.
        DataStoreError: only from checkUnique, passed through from the store.
    """
    rule_fn = get_rule(rule_name)
    if not isinstance(field, str):
        raise InvalidInputError(f"Field name must be a string, got {type(field).__name__}.")
    return bool(rule_fn(field, value, requirement))


def register_rule(rule_name: str, rule_fn: Rule) -> None:
    """Add a new rule. Names already in use (built-in or custom) are rejected."""
    if not callable(rule_fn):
        raise TypeError(f"Rule '{rule_name}' must be callable.")
    if rule_name in RULE_REGISTRY:
        raise ValueError(f"A rule named '{rule_name}' is already registered.")
    RULE_REGISTRY[rule_name] = rule_fn
    logger.info("Registered validation rule %r", rule_name)


def list_rules() -> list[str]:
    """Return every registered rule name, sorted."""
    return sorted(RULE_REGISTRY)
