"""
Engine Configuration.

Session defaults for a Validator, validated by Pydantic. Settings can
live in their own YAML file or under a ``chain_validator:`` section of
a shared application file. Unknown keys are rejected, so a misspelled
setting fails loudly instead of silently keeping its default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, Field

SECTION_KEY = "chain_validator"


class EngineConfig(BaseModel):
    """Defaults for a validation session."""

    stop_on_first: bool = Field(
        default=False, description="Default mode when evaluate() gets no mode"
    )
    message_separator: str = Field(default="; ", min_length=1)
    snapshot_values: bool = Field(
        default=False,
        description="Deep-copy values at chain time instead of holding references",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> EngineConfig:
        """
        Read engine settings from a YAML file.

        An empty file gives the defaults. When the document has a
        ``chain_validator`` mapping, only that section is read.

        Args:
            path: YAML file path

        Returns:
            Validated EngineConfig

        Raises:
            FileNotFoundError: If the file doesn't exist
            pydantic.ValidationError: On unknown keys or bad values
        """
        with open(path, encoding="utf-8") as f:
            document: Any = yaml.safe_load(f) or {}

        if isinstance(document, dict) and isinstance(document.get(SECTION_KEY), dict):
            document = document[SECTION_KEY]
        return cls.model_validate(document)
