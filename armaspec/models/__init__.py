# armaspec/models/__init__.py
"""
ARMA process container and its diagnostics.

Key components:
- ARMAProcess / arma: immutable process container and convenience constructor
- spectral_density, autocovariance: frequency-domain diagnostics
- impulse_response: psi weights of the MA(infinity) representation
- simulate: Gaussian sample paths
- plot_*: matplotlib adapters for each diagnostic
"""

import logging

# Set up module-level logger
logger = logging.getLogger("armaspec.models")

from .arma import ARMAProcess, arma
from .spectral import frequency_grid, frequency_response, spectral_density, autocovariance
from .impulse_response import impulse_response
from .simulation import simulate
from .plots import (
    plot_spectral_density,
    plot_autocovariance,
    plot_impulse_response,
    plot_simulation,
    quad_plot,
)

__all__ = [
    'ARMAProcess',
    'arma',
    'frequency_grid',
    'frequency_response',
    'spectral_density',
    'autocovariance',
    'impulse_response',
    'simulate',
    'plot_spectral_density',
    'plot_autocovariance',
    'plot_impulse_response',
    'plot_simulation',
    'quad_plot',
]
