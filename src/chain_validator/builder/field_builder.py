"""
Field Builder - Chain Rules onto a Field.

Each method captures the field's value, name, parameters and optional
custom message into a Rule, appends it to the owning validator and
returns the same builder. Nothing is checked until evaluation.

Usage:
    v.field(username, "Username").required().string().min_length(3)
    v.field(age, "Age").number().min(18, message="Too young")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from chain_validator.domain.rules import Rule, RuleKind

if TYPE_CHECKING:
    from chain_validator.validator import Validator

logger = logging.getLogger(__name__)


class FieldBuilder:
    """Chaining handle binding one value/name pair to a Validator."""

    def __init__(self, validator: Validator, value: Any, name: str) -> None:
        self._validator = validator
        self._value = value
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    def _add(
        self,
        kind: RuleKind,
        param: Optional[int] = None,
        message: Optional[str] = None,
    ) -> FieldBuilder:
        rule = Rule(
            kind=kind,
            value=self._value,
            name=self._name,
            param=param,
            message=message,
        )
        self._validator.add_rule(rule)
        return self

    def string(self, message: Optional[str] = None) -> FieldBuilder:
        """Value must be text."""
        return self._add(RuleKind.STRING, message=message)

    def required(self, message: Optional[str] = None) -> FieldBuilder:
        """
        Value must be present.

        Empty text, None, 0 and 0.0 all fail. Booleans always pass.
        """
        return self._add(RuleKind.REQUIRED, message=message)

    def email(self, message: Optional[str] = None) -> FieldBuilder:
        """Value must be text shaped like an email address."""
        return self._add(RuleKind.EMAIL, message=message)

    def number(self, message: Optional[str] = None) -> FieldBuilder:
        """Value must be an integer (floats fail)."""
        return self._add(RuleKind.NUMBER, message=message)

    def min(self, limit: int, message: Optional[str] = None) -> FieldBuilder:
        """Value must be an integer >= limit."""
        return self._add(RuleKind.MIN, param=limit, message=message)

    def max(self, limit: int, message: Optional[str] = None) -> FieldBuilder:
        """Value must be an integer <= limit."""
        return self._add(RuleKind.MAX, param=limit, message=message)

    def min_length(self, length: int, message: Optional[str] = None) -> FieldBuilder:
        """Value must be text of at least length characters."""
        return self._add(RuleKind.MIN_LENGTH, param=length, message=message)

    def max_length(self, length: int, message: Optional[str] = None) -> FieldBuilder:
        """Value must be text of at most length characters."""
        return self._add(RuleKind.MAX_LENGTH, param=length, message=message)

    def phone(self, message: Optional[str] = None) -> FieldBuilder:
        """Value must be text: optional '+' then 10 to 15 digits."""
        return self._add(RuleKind.PHONE, message=message)

    def __repr__(self) -> str:
        return f"FieldBuilder(name={self._name!r})"
