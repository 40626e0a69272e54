"""
Configuration Package.

    - EngineConfig: Session defaults, loadable from YAML via from_yaml()
"""

from chain_validator.config.models import EngineConfig

__all__ = ["EngineConfig"]
