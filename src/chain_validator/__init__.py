"""
Chain Validator - Declarative, Chainable Input Validation.

A small engine for checking form-like input values (strings, integers,
emails, phone numbers) against a catalog of named constraints. Rules are
built up per field by chaining calls, collected on a shared validator and
executed later, either fail-fast or collect-all.

Architecture:
    - Rules are immutable descriptors, not closures
    - A closed value-kind enum drives every type check
    - Evaluation is a plain walk over the registered rules, in order
    - Configuration-driven defaults via YAML

Main Components:
    - domain: Value kinds, rule descriptors, failures
    - catalog: Built-in constraint checks and default messages
    - builder: FieldBuilder chaining surface
    - evaluation: Evaluator and EvaluationResult
    - validator: Validator (the rule registry)
    - config: Engine configuration (Pydantic, YAML)

Example:
    >>> from chain_validator import Validator
    >>> v = Validator()
    >>> v.field("test@example.com", "Email").required().string().email()
    >>> v.field(17, "Age").number().min(18)
    >>> result = v.evaluate(stop_on_first=False)
    >>> print(result.message)
    17 cannot be less than 18

"""

import logging

from chain_validator.builder.field_builder import FieldBuilder
from chain_validator.config.models import EngineConfig
from chain_validator.domain.kinds import ValueKind, classify
from chain_validator.domain.rules import Failure, FailureCategory, Rule, RuleKind
from chain_validator.evaluation.evaluator import EvaluationResult, Evaluator
from chain_validator.exceptions import (
    ChainValidatorError,
    UnknownRuleError,
    ValidationError,
)
from chain_validator.validator import Validator, create_validator

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Chain Validator.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import chain_validator
        >>> chain_validator.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("chain_validator").setLevel(level)


__all__ = [
    "ChainValidatorError",
    "EngineConfig",
    "EvaluationResult",
    "Evaluator",
    "Failure",
    "FailureCategory",
    "FieldBuilder",
    "Rule",
    "RuleKind",
    "UnknownRuleError",
    "ValidationError",
    "Validator",
    "ValueKind",
    "classify",
    "configure_logging",
    "create_validator",
]
