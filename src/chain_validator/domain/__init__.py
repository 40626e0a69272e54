"""
Domain Layer - Value Kinds, Rule Descriptors and Failures.

This package contains the core model the engine operates on.
Everything here is pure Python with no I/O (Pydantic for the
immutable models).

Types:
    - ValueKind: Closed set of dynamic value kinds
    - RuleKind: Names of the built-in constraints
    - Rule: Deferred constraint check, captured at chain time
    - Failure: One failed check with its message
    - FailureCategory: TYPE_MISMATCH or CONSTRAINT_VIOLATION

Design Principles:
    - Immutable descriptors (frozen models)
    - Exhaustive dispatch over ValueKind
    - No infrastructure dependencies
"""

from chain_validator.domain.kinds import ValueKind, classify
from chain_validator.domain.rules import Failure, FailureCategory, Rule, RuleKind

__all__ = [
    "ValueKind",
    "classify",
    "Failure",
    "FailureCategory",
    "Rule",
    "RuleKind",
]
