"""
Unit Tests for Evaluator and EvaluationResult.

Test Aspects Covered:
    ✅ Business Logic: Fail-fast vs collect-all
    ✅ Edge Cases: No rules, all passing
    ✅ Ordering: Registration order is evaluation order
"""

from __future__ import annotations

from typing import Callable, List
from unittest.mock import patch

import pytest

from chain_validator.catalog.checks import check as catalog_check
from chain_validator.domain.rules import Rule, RuleKind
from chain_validator.evaluation.evaluator import EvaluationResult, Evaluator
from chain_validator.exceptions import ValidationError

MakeRule = Callable[..., Rule]


@pytest.fixture
def evaluator() -> Evaluator:
    """Create evaluator with default separator."""
    return Evaluator()


@pytest.fixture
def two_failing(make_rule: MakeRule) -> List[Rule]:
    """Two failing rules, R1 then R2."""
    return [
        make_rule(RuleKind.STRING, 1, name="R1"),
        make_rule(RuleKind.REQUIRED, "", name="R2"),
    ]


class TestEvaluationModes:
    """Test cases for stop_on_first."""

    def test_stop_on_first_returns_first_failure(
        self, evaluator: Evaluator, two_failing: List[Rule]
    ) -> None:
        """
        SCENARIO: Two failing rules, fail-fast
        EXPECTED: Exactly R1's message
        """
        # Act
        result = evaluator.run(two_failing, stop_on_first=True)

        # Assert
        assert result.messages == ["R1 must be a string"]
        assert result.message == "R1 must be a string"

    def test_collect_all_returns_every_failure(
        self, evaluator: Evaluator, two_failing: List[Rule]
    ) -> None:
        """
        SCENARIO: Two failing rules, collect-all
        EXPECTED: Both messages joined with "; " in order
        """
        # Act
        result = evaluator.run(two_failing, stop_on_first=False)

        # Assert
        assert result.messages == ["R1 must be a string", "R2 is required"]
        assert result.message == "R1 must be a string; R2 is required"

    def test_reordering_changes_first_failure(
        self, evaluator: Evaluator, two_failing: List[Rule]
    ) -> None:
        # Arrange
        reordered = list(reversed(two_failing))

        # Act
        result = evaluator.run(reordered, stop_on_first=True)

        # Assert
        assert result.messages == ["R2 is required"]

    def test_stop_on_first_skips_remaining_rules(
        self, evaluator: Evaluator, two_failing: List[Rule], make_rule: MakeRule
    ) -> None:
        """
        SCENARIO: Fail-fast with a passing rule after the failures
        EXPECTED: Only the first rule is executed
        """
        # Arrange
        rules = two_failing + [make_rule(RuleKind.STRING, "ok")]

        # Act
        with patch(
            "chain_validator.evaluation.evaluator.check", wraps=catalog_check
        ) as spy:
            evaluator.run(rules, stop_on_first=True)

        # Assert
        assert spy.call_count == 1

    def test_passing_rules_skipped_until_failure(
        self, evaluator: Evaluator, make_rule: MakeRule
    ) -> None:
        # Arrange
        rules = [
            make_rule(RuleKind.STRING, "ok", name="A"),
            make_rule(RuleKind.NUMBER, "no", name="B"),
            make_rule(RuleKind.NUMBER, "no", name="C"),
        ]

        # Act
        result = evaluator.run(rules, stop_on_first=True)

        # Assert
        assert result.messages == ["B must be a number"]


class TestSuccess:
    """Test cases for successful evaluation."""

    @pytest.mark.parametrize("stop_on_first", [True, False])
    def test_no_rules_is_success(self, evaluator: Evaluator, stop_on_first: bool) -> None:
        # Act
        result = evaluator.run([], stop_on_first=stop_on_first)

        # Assert
        assert result.is_valid
        assert result.message is None
        assert result.messages == []

    def test_all_passing_is_success(self, evaluator: Evaluator, make_rule: MakeRule) -> None:
        # Arrange
        rules = [
            make_rule(RuleKind.EMAIL, "a@b.co"),
            make_rule(RuleKind.MIN, 6, param=5),
        ]

        # Act
        result = evaluator.run(rules)

        # Assert
        assert result.is_valid
        assert bool(result) is True

    def test_deterministic_on_repeat(
        self, evaluator: Evaluator, two_failing: List[Rule]
    ) -> None:
        # Act
        first = evaluator.run(two_failing)
        second = evaluator.run(two_failing)

        # Assert
        assert first.messages == second.messages


class TestEvaluationResult:
    """Test cases for EvaluationResult helpers."""

    def test_custom_separator(self, two_failing: List[Rule]) -> None:
        # Arrange
        evaluator = Evaluator(separator=" | ")

        # Act
        result = evaluator.run(two_failing)

        # Assert
        assert result.message == "R1 must be a string | R2 is required"

    def test_bool_false_on_failure(
        self, evaluator: Evaluator, two_failing: List[Rule]
    ) -> None:
        # Act
        result = evaluator.run(two_failing)

        # Assert
        assert not result

    def test_raise_for_failures(
        self, evaluator: Evaluator, two_failing: List[Rule]
    ) -> None:
        # Arrange
        result = evaluator.run(two_failing)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            result.raise_for_failures()

        assert str(exc_info.value) == "R1 must be a string; R2 is required"
        assert exc_info.value.fields == ["R1", "R2"]

    def test_raise_for_failures_noop_on_success(self) -> None:
        # Arrange
        result = EvaluationResult()

        # Act & Assert (no exception)
        result.raise_for_failures()
