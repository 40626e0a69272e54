"""
Rule Descriptors and Failures.

A Rule is captured when a FieldBuilder method is called and checked
later, during evaluation. It holds a reference to the value, so a
mutable object is checked in whatever state it has at evaluation time
(unless the validator is configured to snapshot values).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class RuleKind(str, Enum):
    """Built-in constraint names."""

    STRING = "string"
    REQUIRED = "required"
    EMAIL = "email"
    NUMBER = "number"
    MIN = "min"
    MAX = "max"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PHONE = "phone"


class FailureCategory(str, Enum):
    """Why a rule failed."""

    TYPE_MISMATCH = "TYPE_MISMATCH"  # Wrong value kind
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"  # Right kind, bad value


class Rule(BaseModel):
    """Deferred constraint check bound to one field."""

    kind: RuleKind = Field(..., description="Which constraint to check")
    value: Any = Field(default=None, description="Captured value under test")
    name: str = Field(..., description="Field name used in messages")
    param: Any = Field(
        default=None,
        description="Bound for min/max/min_length/max_length, kept as given",
    )
    message: Optional[str] = Field(
        default=None, description="Custom message replacing the default"
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, v: Any) -> str:
        return v if isinstance(v, str) else str(v)

    @field_validator("message", mode="before")
    @classmethod
    def _message_as_text(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @property
    def has_custom_message(self) -> bool:
        """True when a non-empty custom message was supplied."""
        return bool(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "value": repr(self.value),
            "param": self.param,
            "message": self.message,
        }


class Failure(BaseModel):
    """A single failed rule."""

    field: str = Field(..., description="Field name of the failed rule")
    rule: RuleKind
    category: FailureCategory
    message: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.message
