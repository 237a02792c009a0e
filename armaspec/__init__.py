# armaspec/__init__.py
"""
armaspec - diagnostics for scalar ARMA(p, q) processes

Build a process from its AR and MA coefficients and noise standard deviation,
then derive its classical characterisations:
- spectral density on a frequency grid
- autocovariance sequence (inverse Fourier transform of the spectral density)
- impulse response / psi weights of the MA(infinity) representation
- simulated sample paths
and plot each of them with matplotlib.

Examples:
    >>> from armaspec import arma, impulse_response
    >>> lp = arma(phi=[0.5], theta=[0.0, -0.8], sigma=1.0)
    >>> impulse_response(lp, length=5).round(4).tolist()
    [1.0, 0.5, -0.55, -0.275, -0.1375]
"""

import logging
from typing import Union

from .version import __version__, __license__

# Set up package-wide logger
logger = logging.getLogger("armaspec")
logger.setLevel(logging.INFO)

from .core.exceptions import ARMAError, ParameterError, DimensionError, ConfigurationError
from .core.config import (
    initialize_config, get_config, set_config, reset_config, get_config_manager
)
from .models import (
    ARMAProcess,
    arma,
    frequency_grid,
    frequency_response,
    spectral_density,
    autocovariance,
    impulse_response,
    simulate,
    plot_spectral_density,
    plot_autocovariance,
    plot_impulse_response,
    plot_simulation,
    quad_plot,
)


def _initialize_config() -> None:
    """
    Load user configuration on first import.

    A broken configuration file or environment override is reported and the
    built-in defaults are kept.
    """
    try:
        initialize_config()
    except ConfigurationError as e:
        logger.warning(f"Failed to initialize configuration: {e.message}")
        logger.warning("Using default settings")


def get_version() -> str:
    """
    Return the version of armaspec.

    Returns:
        str: Version string in format MAJOR.MINOR.PATCH
    """
    return __version__


def set_log_level(level: Union[str, int]) -> None:
    """
    Set the logging level of the package logger.

    Args:
        level: Logging level, either as string ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
              or as an integer constant from the logging module
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logger.setLevel(level)
    logger.debug(f"Log level set to {logging.getLevelName(level)}")


_initialize_config()

__all__ = [
    # Process and diagnostics
    'ARMAProcess',
    'arma',
    'frequency_grid',
    'frequency_response',
    'spectral_density',
    'autocovariance',
    'impulse_response',
    'simulate',

    # Plotting
    'plot_spectral_density',
    'plot_autocovariance',
    'plot_impulse_response',
    'plot_simulation',
    'quad_plot',

    # Errors
    'ARMAError',
    'ParameterError',
    'DimensionError',
    'ConfigurationError',

    # Configuration and logging
    'get_config',
    'set_config',
    'reset_config',
    'get_config_manager',
    'get_version',
    'set_log_level',

    '__version__',
]
