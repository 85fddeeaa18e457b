"""Configuration management for aoc-solver.

This module provides Hydra-based configuration loading with runtime
override support.
"""

from .config_manager import ConfigContext, ConfigManager, get_config, get_parameter, load_config
from .validators import ConfigValidationError, validate_config

__all__ = [
    'ConfigContext',
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'validate_config',
    'ConfigValidationError'
]
