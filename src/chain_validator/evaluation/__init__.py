"""
Evaluation Package - Running Registered Rules.

Components:
    - Evaluator: Walks rules in registration order, fail-fast or collect-all
    - EvaluationResult: Ordered failures, joined or as a list
"""

from chain_validator.evaluation.evaluator import EvaluationResult, Evaluator

__all__ = [
    "EvaluationResult",
    "Evaluator",
]
