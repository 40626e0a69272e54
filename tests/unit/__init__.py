"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_value_kinds.py: ValueKind classification
    - test_catalog.py: Built-in constraint checks and messages
    - test_field_builder.py: Chaining and rule capture
    - test_evaluator.py: Fail-fast and collect-all evaluation
    - test_validator.py: Registry behavior and error raising
    - test_engine_config.py: Configuration loading/validation
"""
