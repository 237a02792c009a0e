"""
Numba-accelerated core functions for ARMA diagnostics.

This module holds the loops behind the public diagnostics:
- evaluation of a lag polynomial on the unit circle (frequency response)
- the psi-weight recursion of the MA(infinity) representation
- the ARMA difference equation used to simulate sample paths

The functions take and return plain NumPy arrays and perform no argument
checking; callers in the public modules are responsible for preconditions.
"""

import logging

import numpy as np
from numba import jit

# Set up module-level logger
logger = logging.getLogger("armaspec.models._numba_core")


@jit(nopython=True, cache=True)
def lag_polynomial_on_unit_circle(coefficients: np.ndarray,
                                  frequencies: np.ndarray) -> np.ndarray:
    """
    Evaluate a lag polynomial at z = exp(-i w) for each frequency w.

    The polynomial c_0 + c_1 z + ... + c_n z^n is evaluated with Horner's
    rule, starting from the highest power.

    Args:
        coefficients: Polynomial coefficients, constant term first
        frequencies: Frequencies in radians

    Returns:
        np.ndarray: Complex values of the polynomial, one per frequency
    """
    n_freq = frequencies.shape[0]
    degree = coefficients.shape[0] - 1
    values = np.zeros(n_freq, dtype=np.complex128)

    if degree < 0:
        return values

    for k in range(n_freq):
        z = np.exp(-1j * frequencies[k])
        acc = coefficients[degree] + 0j
        for i in range(degree - 1, -1, -1):
            acc = acc * z + coefficients[i]
        values[k] = acc

    return values


@jit(nopython=True, cache=True)
def psi_weights(ar_params: np.ndarray,
                ma_params: np.ndarray,
                length: int) -> np.ndarray:
    """
    Compute the first `length` psi weights of an ARMA process.

    psi_0 = 1 and, for j >= 1,
    psi_j = theta_j + sum_{i=1}^{min(j, p)} phi_i * psi_{j-i}
    with theta_j = 0 beyond the MA order.

    Args:
        ar_params: AR coefficients phi_1, ..., phi_p
        ma_params: MA coefficients theta_1, ..., theta_q
        length: Number of weights to return

    Returns:
        np.ndarray: psi_0, ..., psi_{length-1}
    """
    p = ar_params.shape[0]
    q = ma_params.shape[0]
    psi = np.zeros(length)

    if length == 0:
        return psi

    psi[0] = 1.0
    for j in range(1, length):
        if j <= q:
            psi[j] = ma_params[j - 1]
        for i in range(1, min(j, p) + 1):
            psi[j] += ar_params[i - 1] * psi[j - i]

    return psi


@jit(nopython=True, cache=True)
def arma_filter(ar_params: np.ndarray,
                ma_params: np.ndarray,
                innovations: np.ndarray) -> np.ndarray:
    """
    Run innovations through the ARMA difference equation.

    x_t = sum_i phi_i x_{t-i} + e_t + sum_j theta_j e_{t-j}, with all
    pre-sample values of x and e equal to zero.

    Args:
        ar_params: AR coefficients phi_1, ..., phi_p
        ma_params: MA coefficients theta_1, ..., theta_q
        innovations: White noise draws e_0, ..., e_{n-1}

    Returns:
        np.ndarray: Filtered series x_0, ..., x_{n-1}
    """
    n = innovations.shape[0]
    p = ar_params.shape[0]
    q = ma_params.shape[0]
    x = np.zeros(n)

    for t in range(n):
        value = innovations[t]
        for i in range(1, p + 1):
            if t - i >= 0:
                value += ar_params[i - 1] * x[t - i]
        for j in range(1, q + 1):
            if t - j >= 0:
                value += ma_params[j - 1] * innovations[t - j]
        x[t] = value

    return x
