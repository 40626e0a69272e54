"""
Catalog Package - Built-in Constraint Checks.

Provides one check per RuleKind plus the default message templates.
All checks share a single signature and never raise for any input.
"""

from chain_validator.catalog.checks import RULE_CATALOG, RuleCheck, check

__all__ = [
    "RULE_CATALOG",
    "RuleCheck",
    "check",
]
