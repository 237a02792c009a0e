# armaspec/models/simulation.py

"""
Sample path simulation for scalar ARMA processes.
"""

import logging
from typing import Optional

import numpy as np

from armaspec.core.config import get_config
from armaspec.core.types import RandomState, Vector
from armaspec.core.validation import validate_non_negative_int
from armaspec.models._numba_core import arma_filter
from armaspec.models.arma import ARMAProcess

# Set up module-level logger
logger = logging.getLogger("armaspec.models.simulation")


def simulate(process: ARMAProcess,
             length: Optional[int] = None,
             random_state: RandomState = None) -> Vector:
    """
    Simulate a sample path of an ARMA process.

    The process is driven by Gaussian white noise with standard deviation
    ``noise_scale`` and started from zero pre-sample values, so early
    observations are not draws from the stationary distribution.

    Args:
        process: ARMA process
        length: Number of observations. Defaults to the
            ``numerical.simulation_length`` setting (90).
        random_state: Seed or generator for the innovations

    Returns:
        Vector: Simulated observations

    Raises:
        ParameterError: If length is not a non-negative integer
    """
    if length is None:
        length = get_config("numerical", "simulation_length")
    length = validate_non_negative_int(length, "length")

    rng = random_state if isinstance(random_state, np.random.Generator) \
        else np.random.default_rng(random_state)
    innovations = process.noise_scale * rng.standard_normal(length)

    path = arma_filter(
        np.ascontiguousarray(process.ar_coefficients),
        np.ascontiguousarray(process.ma_coefficients),
        innovations
    )
    logger.debug(f"Simulated {length} observations from ARMA{process.order}")
    return path
