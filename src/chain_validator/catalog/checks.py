"""
Constraint Checks - The Built-in Rule Catalog.

Provides a check function per RuleKind:
    - string, number: Kind checks only
    - required: Presence, with numeric zero treated as absent
    - email, phone: Text kind plus full-string pattern match
    - min, max: Integer kind plus bound
    - min_length, max_length: Text kind plus character-length bound
    - min, max, min_length, max_length: A non-integer bound is reported
      as a failure when checked, never rejected while chaining

Design Notes:
    - Each check returns None on pass or a Failure on fail
    - A non-empty custom message replaces the default text for every
      failure sub-case of the rule; the category is still reported
    - Type mismatches are ordinary failures, never exceptions
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Protocol

from chain_validator.domain.kinds import ValueKind, classify
from chain_validator.domain.rules import Failure, FailureCategory, Rule, RuleKind
from chain_validator.exceptions import UnknownRuleError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")

# Default message templates
MSG_STRING = "{name} must be a string"
MSG_REQUIRED = "{name} is required"
MSG_EMAIL = "{name} must be a valid email"
MSG_NUMBER = "{name} must be a number"
MSG_INTEGER = "{name} must be an integer"
MSG_LESS_THAN = "{value} cannot be less than {param}"
MSG_GREATER_THAN = "{value} cannot be greater than {param}"
MSG_SHORTER_THAN = "{value} cannot be less than {param} characters"
MSG_LONGER_THAN = "{value} cannot be more than {param} characters"
MSG_PHONE = "{name} must be a valid phone number"
MSG_INVALID_BOUND = "{name} has an invalid limit: {param!r}"


class RuleCheck(Protocol):
    """Signature shared by every catalog check."""

    def __call__(self, rule: Rule) -> Optional[Failure]:
        """
        Check a rule against its captured value.

        Args:
            rule: Rule to check

        Returns:
            None if the rule passes, otherwise the Failure
        """
        ...


def _fail(rule: Rule, category: FailureCategory, template: str) -> Failure:
    """Build a Failure, letting a custom message override the template."""
    if rule.has_custom_message:
        message = rule.message
    else:
        message = template.format(name=rule.name, value=rule.value, param=rule.param)
    return Failure(
        field=rule.name,
        rule=rule.kind,
        category=category,
        message=message,
    )


def _bad_bound(rule: Rule) -> Optional[Failure]:
    """Failure when the min/max/length bound is not an integer (bools excluded)."""
    if classify(rule.param) is not ValueKind.INTEGER:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_INVALID_BOUND)
    return None


def check_string(rule: Rule) -> Optional[Failure]:
    if classify(rule.value) is not ValueKind.TEXT:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_STRING)
    return None


def check_required(rule: Rule) -> Optional[Failure]:
    """
    Check presence of a value.

    Empty text, integer 0 and float 0.0 count as absent, as does None.
    Booleans always count as present.
    """
    kind = classify(rule.value)
    if kind is ValueKind.TEXT:
        missing = len(rule.value) == 0
    elif kind is ValueKind.INTEGER:
        missing = rule.value == 0
    elif kind is ValueKind.FLOAT:
        missing = rule.value == 0.0
    elif kind is ValueKind.BOOLEAN:
        missing = False
    elif kind is ValueKind.NULL:
        missing = True
    else:
        missing = False

    if missing:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_REQUIRED)
    return None


def check_email(rule: Rule) -> Optional[Failure]:
    if classify(rule.value) is not ValueKind.TEXT:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_EMAIL)
    if EMAIL_PATTERN.fullmatch(rule.value) is None:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_EMAIL)
    return None


def check_number(rule: Rule) -> Optional[Failure]:
    # Floats are deliberately not numbers here
    if classify(rule.value) is not ValueKind.INTEGER:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_NUMBER)
    return None


def check_min(rule: Rule) -> Optional[Failure]:
    if classify(rule.value) is not ValueKind.INTEGER:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_INTEGER)
    bound_failure = _bad_bound(rule)
    if bound_failure is not None:
        return bound_failure
    if rule.value < rule.param:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_LESS_THAN)
    return None


def check_max(rule: Rule) -> Optional[Failure]:
    if classify(rule.value) is not ValueKind.INTEGER:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_INTEGER)
    bound_failure = _bad_bound(rule)
    if bound_failure is not None:
        return bound_failure
    if rule.value > rule.param:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_GREATER_THAN)
    return None


def check_min_length(rule: Rule) -> Optional[Failure]:
    """
    Text of at least param characters.

    Length counts code points, so non-ASCII text measures shorter than
    a UTF-8 byte count would.
    """
    if classify(rule.value) is not ValueKind.TEXT:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_STRING)
    bound_failure = _bad_bound(rule)
    if bound_failure is not None:
        return bound_failure
    if len(rule.value) < rule.param:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_SHORTER_THAN)
    return None


def check_max_length(rule: Rule) -> Optional[Failure]:
    """
    Text of at most param characters (code points, not UTF-8 bytes).
    """
    if classify(rule.value) is not ValueKind.TEXT:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_STRING)
    bound_failure = _bad_bound(rule)
    if bound_failure is not None:
        return bound_failure
    if len(rule.value) > rule.param:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_LONGER_THAN)
    return None


def check_phone(rule: Rule) -> Optional[Failure]:
    """Optional leading '+' followed by 10 to 15 digits."""
    if classify(rule.value) is not ValueKind.TEXT:
        return _fail(rule, FailureCategory.TYPE_MISMATCH, MSG_PHONE)
    if PHONE_PATTERN.fullmatch(rule.value) is None:
        return _fail(rule, FailureCategory.CONSTRAINT_VIOLATION, MSG_PHONE)
    return None


RULE_CATALOG: Dict[RuleKind, RuleCheck] = {
    RuleKind.STRING: check_string,
    RuleKind.REQUIRED: check_required,
    RuleKind.EMAIL: check_email,
    RuleKind.NUMBER: check_number,
    RuleKind.MIN: check_min,
    RuleKind.MAX: check_max,
    RuleKind.MIN_LENGTH: check_min_length,
    RuleKind.MAX_LENGTH: check_max_length,
    RuleKind.PHONE: check_phone,
}


def check(rule: Rule) -> Optional[Failure]:
    """
    Run the catalog check for a rule.

    Args:
        rule: Rule to check

    Returns:
        None if the rule passes, otherwise the Failure

    Raises:
        UnknownRuleError: If no check is registered for rule.kind
    """
    rule_check = RULE_CATALOG.get(rule.kind)
    if rule_check is None:
        raise UnknownRuleError(rule.kind)

    failure = rule_check(rule)
    if failure is not None:
        logger.debug(f"Rule {rule.kind.value} failed for {rule.name}: {failure.category.value}")
    return failure
