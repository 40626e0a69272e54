"""
Validator - The Rule Registry for One Validation Session.

Owns the ordered list of rules added by every FieldBuilder bound to it
and runs them through the Evaluator.

Usage:
    v = Validator()
    v.field("john@example.com", "Email").required().email()
    v.field(username, "Username").string().min_length(3).max_length(20)

    result = v.evaluate(stop_on_first=False)
    if not result.is_valid:
        print(result.message)

Design Notes:
    - Registration order is evaluation order
    - One Validator per request/session; not safe for concurrent mutation
    - Values are held by reference unless config.snapshot_values is set
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from chain_validator.builder.field_builder import FieldBuilder
from chain_validator.config.models import EngineConfig
from chain_validator.domain.rules import Rule
from chain_validator.evaluation.evaluator import EvaluationResult, Evaluator

logger = logging.getLogger(__name__)


class Validator:
    """
    Ordered registry of deferred rules.

    Supports:
        - Binding any number of fields via field()
        - Fail-fast or collect-all evaluation
        - Inspection of the registered rules
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        """
        Initialize an empty validator.

        Args:
            config: Engine defaults (mode, separator, value snapshots)
        """
        self.config = config or EngineConfig()
        self._rules: List[Rule] = []
        self._evaluator = Evaluator(separator=self.config.message_separator)

    @classmethod
    def from_config_file(cls, path: Union[str, Path]) -> Validator:
        """
        Create an empty validator configured from a YAML file.

        Args:
            path: YAML file read by EngineConfig.from_yaml

        Returns:
            New Validator with no rules
        """
        config = EngineConfig.from_yaml(path)
        logger.debug(f"Loaded engine config from {path}: {config.model_dump()}")
        return cls(config=config)

    def field(self, value: Any, name: str) -> FieldBuilder:
        """
        Bind a value to this validator for rule chaining.

        No validation happens here.

        Args:
            value: Value under test
            name: Field name used in messages

        Returns:
            FieldBuilder appending to this validator
        """
        if self.config.snapshot_values:
            value = copy.deepcopy(value)
        return FieldBuilder(self, value, name)

    def add_rule(self, rule: Rule) -> None:
        """Append a rule; called by FieldBuilder."""
        self._rules.append(rule)
        logger.debug(f"Registered rule #{len(self._rules)}: {rule.kind.value} on {rule.name}")

    def evaluate(self, stop_on_first: Optional[bool] = None) -> EvaluationResult:
        """
        Run all registered rules in registration order.

        Args:
            stop_on_first: True for fail-fast, False for collect-all.
                           None uses config.stop_on_first.

        Returns:
            EvaluationResult (valid when no rule failed)
        """
        if stop_on_first is None:
            stop_on_first = self.config.stop_on_first

        result = self._evaluator.run(self._rules, stop_on_first=stop_on_first)

        if not result.is_valid:
            logger.info(
                f"Validation failed: {len(result.failures)} of "
                f"{len(self._rules)} rules"
            )
        return result

    def validate(self, stop_on_first: Optional[bool] = None) -> Optional[List[str]]:
        """
        Run all rules, returning only the messages.

        Args:
            stop_on_first: See evaluate()

        Returns:
            None on success, otherwise the failure messages in order
        """
        result = self.evaluate(stop_on_first)
        if result.is_valid:
            return None
        return result.messages

    def validate_or_raise(self, stop_on_first: Optional[bool] = None) -> None:
        """
        Run all rules and raise on failure.

        Args:
            stop_on_first: See evaluate()

        Raises:
            ValidationError: If any rule failed
        """
        self.evaluate(stop_on_first).raise_for_failures()

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Registered rules in registration order."""
        return tuple(self._rules)

    def describe(self) -> List[Dict[str, Any]]:
        """Registered rules as dictionaries, for logging or serialization."""
        return [rule.to_dict() for rule in self._rules]

    def clear(self) -> None:
        """Remove all registered rules."""
        self._rules.clear()
        logger.debug("Cleared all rules from validator")

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Validator(rules={len(self._rules)})"


def create_validator(config: Optional[EngineConfig] = None) -> Validator:
    """
    Create an empty validator.

    Args:
        config: Optional engine configuration

    Returns:
        New Validator with no rules
    """
    return Validator(config=config)
