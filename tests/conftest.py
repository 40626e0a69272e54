"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from chain_validator.config.models import EngineConfig
from chain_validator.domain.rules import Rule, RuleKind
from chain_validator.validator import Validator


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> EngineConfig:
    """Create default engine configuration."""
    return EngineConfig()


@pytest.fixture
def validator() -> Validator:
    """Create an empty validator with default configuration."""
    return Validator()


@pytest.fixture
def make_rule() -> Callable[..., Rule]:
    """Factory for rules built directly, bypassing the builder."""

    def _make(
        kind: RuleKind,
        value: Any,
        name: str = "Field",
        param: Any = None,
        message: Optional[str] = None,
    ) -> Rule:
        return Rule(kind=kind, value=value, name=name, param=param, message=message)

    return _make
