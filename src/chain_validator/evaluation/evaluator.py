"""
Evaluator - Execute Deferred Rules.

Executes rules strictly in the order they were registered:
    - stop_on_first=True: Stop at the first failure, report only it
    - stop_on_first=False: Run every rule, report all failures in order

Design Notes:
    - Evaluation has no side effects and does not consume the rules
    - Zero rules, or all rules passing, is a success
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from chain_validator.catalog.checks import check
from chain_validator.domain.rules import Failure, Rule
from chain_validator.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "; "


@dataclass
class EvaluationResult:
    """Result of evaluating a validator's rules."""

    failures: List[Failure] = field(default_factory=list)
    separator: str = DEFAULT_SEPARATOR

    @property
    def is_valid(self) -> bool:
        """True when no rule failed."""
        return len(self.failures) == 0

    @property
    def messages(self) -> List[str]:
        """Failure messages in registration order."""
        return [f.message for f in self.failures]

    @property
    def message(self) -> Optional[str]:
        """All failure messages joined, or None on success."""
        if self.is_valid:
            return None
        return self.separator.join(self.messages)

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_failures(self) -> None:
        """
        Raise if any rule failed.

        Raises:
            ValidationError: If the result holds failures
        """
        if not self.is_valid:
            raise ValidationError(self)


class Evaluator:
    """Runs rules through the catalog in registration order."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        """
        Initialize evaluator.

        Args:
            separator: Joins messages in EvaluationResult.message
        """
        self.separator = separator

    def run(
        self,
        rules: Iterable[Rule],
        stop_on_first: bool = False,
    ) -> EvaluationResult:
        """
        Execute rules and collect failures.

        Args:
            rules: Rules in registration order
            stop_on_first: Stop after the first failing rule

        Returns:
            EvaluationResult with zero or more failures
        """
        failures: List[Failure] = []
        executed = 0

        for rule in rules:
            executed += 1
            failure = check(rule)
            if failure is None:
                continue
            failures.append(failure)
            if stop_on_first:
                break

        logger.debug(
            f"Evaluated {executed} rules "
            f"(stop_on_first={stop_on_first}): {len(failures)} failed"
        )
        return EvaluationResult(failures=failures, separator=self.separator)
