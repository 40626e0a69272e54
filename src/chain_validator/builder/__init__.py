"""
Builder Package - Per-Field Chaining Surface.

    - FieldBuilder: Appends one Rule per call to its Validator
"""

from chain_validator.builder.field_builder import FieldBuilder

__all__ = ["FieldBuilder"]
