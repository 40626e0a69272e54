"""
Exceptions for Chain Validator.

Rule execution never raises: failed checks are returned as data.
These exceptions exist for callers that prefer raising over
inspecting an EvaluationResult, and for programming errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from chain_validator.domain.rules import Failure
    from chain_validator.evaluation.evaluator import EvaluationResult


class ChainValidatorError(Exception):
    """Base class for all Chain Validator errors."""
    pass


class ValidationError(ChainValidatorError):
    """Raised when an evaluation produced one or more failures."""

    def __init__(self, result: EvaluationResult) -> None:
        self.result = result
        self.message = result.message or ""
        super().__init__(self.message)

    @property
    def failures(self) -> List[Failure]:
        return list(self.result.failures)

    @property
    def messages(self) -> List[str]:
        return self.result.messages

    @property
    def fields(self) -> List[str]:
        """Names of the failed fields, in order, without duplicates."""
        seen: List[str] = []
        for failure in self.result.failures:
            if failure.field not in seen:
                seen.append(failure.field)
        return seen


class UnknownRuleError(ChainValidatorError):
    """Raised when the catalog has no check for a rule kind."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"No check registered for rule kind: {kind!r}")
