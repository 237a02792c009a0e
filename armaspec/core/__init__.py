"""
armaspec core module

Exceptions, configuration, type aliases and input coercion shared by the
numerical modules.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("armaspec.core")

from .exceptions import (
    ARMAError,
    ParameterError,
    DimensionError,
    ConfigurationError,
)

from .config import (
    ConfigManager,
    initialize_config,
    get_config,
    set_config,
    reset_config,
    get_config_manager,
)

from .validation import as_coefficient_vector, validate_vector

__all__ = [
    'ARMAError',
    'ParameterError',
    'DimensionError',
    'ConfigurationError',
    'ConfigManager',
    'initialize_config',
    'get_config',
    'set_config',
    'reset_config',
    'get_config_manager',
    'as_coefficient_vector',
    'validate_vector',
]
