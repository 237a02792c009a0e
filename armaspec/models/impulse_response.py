# armaspec/models/impulse_response.py

"""
Impulse response (psi weights) of a scalar ARMA process.

The MA(infinity) representation X_t = sum_j psi_j e_{t-j} of an ARMA process
has weights given by the recursion

    psi_0 = 1
    psi_j = theta_j + sum_{i=1}^{min(j, p)} phi_i psi_{j-i},   j >= 1

with theta_j = 0 for j > q. psi_j is the response of the process j periods
after a unit shock.
"""

import logging
from typing import Optional

import numpy as np

from armaspec.core.config import get_config
from armaspec.core.exceptions import ParameterError
from armaspec.core.types import Vector
from armaspec.core.validation import validate_non_negative_int
from armaspec.models._numba_core import psi_weights
from armaspec.models.arma import ARMAProcess

# Set up module-level logger
logger = logging.getLogger("armaspec.models.impulse_response")


def impulse_response(process: ARMAProcess, length: Optional[int] = None) -> Vector:
    """
    Compute the impulse response of an ARMA process.

    Args:
        process: ARMA process
        length: Number of coefficients psi_0, ..., psi_{length-1} to return.
            Defaults to the ``numerical.impulse_length`` setting (30).

    Returns:
        Vector: Impulse response coefficients, starting with psi_0 = 1

    Raises:
        ParameterError: If length is smaller than the number of AR coefficients
            or is not a non-negative integer

    Examples:
        >>> from armaspec import arma, impulse_response
        >>> impulse_response(arma([0.5], [0.0, -0.8]), length=3).tolist()
        [1.0, 0.5, -0.55]
    """
    if length is None:
        length = get_config("numerical", "impulse_length")

    if length < process.p:
        raise ParameterError(
            "Impulse length must be greater than number of AR coefficients",
            param_name="length",
            param_value=length,
            constraint=f">= p ({process.p})"
        )
    length = validate_non_negative_int(length, "length")

    psi = psi_weights(
        np.ascontiguousarray(process.ar_coefficients),
        np.ascontiguousarray(process.ma_coefficients),
        length
    )
    logger.debug(f"Computed {length} impulse response coefficients for ARMA{process.order}")
    return psi
