"""
Test Suite for Chain Validator.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Whole validation sessions through the public API
    - fixtures/: Sample configuration files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/chain_validator        # With coverage
"""
