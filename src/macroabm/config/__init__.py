"""Configuration schema and validation."""

from macroabm.config.schema import Config
from macroabm.config.validator import ConfigValidator

__all__ = ["Config", "ConfigValidator"]
