"""
Configuration module.

Frozen dataclass defaults, a YAML loader with 3-tier precedence
(defaults < per-pair file < per-run overrides) and parameter validation.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "ValidationError",
    "get_default_config",
]
