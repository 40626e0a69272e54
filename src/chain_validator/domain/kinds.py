"""
Value Kinds - Closed Classification of Input Values.

Every value handed to the engine falls into exactly one ValueKind.
Rules dispatch on the kind, never on ad-hoc isinstance checks.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Dynamic kind of a value under validation."""

    TEXT = "TEXT"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    OTHER = "OTHER"


def classify(value: Any) -> ValueKind:
    """
    Classify a value into its ValueKind.

    bool is tested before int since bool subclasses int in Python;
    True and False are BOOLEAN, never INTEGER.

    Args:
        value: Any input value

    Returns:
        The matching ValueKind
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER
