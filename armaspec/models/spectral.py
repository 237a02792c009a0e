# armaspec/models/spectral.py
"""
Frequency-domain diagnostics of an ARMA process.

The transfer function of the process is the ratio of its lag polynomials
evaluated on the unit circle,

    H(w) = MA(exp(-i w)) / AR(exp(-i w)),

and its spectral density is sigma^2 |H(w)|^2. The autocovariance sequence is
recovered as the real part of the inverse discrete Fourier transform of the
spectral density sampled on the full [0, 2 pi] grid.

Neither function checks stationarity. When the AR polynomial vanishes at a
grid frequency the corresponding spectral value is inf or nan, and any
autocovariance derived from it is meaningless.

Functions:
    frequency_grid: Evenly spaced frequencies on [0, pi] or [0, 2 pi]
    frequency_response: Complex transfer function on a frequency grid
    spectral_density: Frequencies and spectral density of a process
    autocovariance: Autocovariances at lags 0, ..., max_lag - 1
"""

import logging
from typing import Optional

import numpy as np
from scipy import fft

from armaspec.core.config import get_config
from armaspec.core.types import ComplexVector, FrequencyGrid, SpectralDensity, Vector
from armaspec.core.validation import validate_non_negative_int
from armaspec.models._numba_core import lag_polynomial_on_unit_circle
from armaspec.models.arma import ARMAProcess

# Set up module-level logger
logger = logging.getLogger("armaspec.models.spectral")


def frequency_grid(resolution: int, full_range: bool = True) -> FrequencyGrid:
    """
    Build the frequency grid used for spectral evaluation.

    Args:
        resolution: Number of grid points
        full_range: Span [0, 2 pi] if True, otherwise [0, pi]

    Returns:
        FrequencyGrid: `resolution` evenly spaced points, both endpoints included
    """
    w_max = 2 * np.pi if full_range else np.pi
    return np.linspace(0.0, w_max, resolution)


def frequency_response(process: ARMAProcess, frequencies: np.ndarray) -> ComplexVector:
    """
    Evaluate the transfer function of a process at the given frequencies.

    Args:
        process: ARMA process
        frequencies: Frequencies in radians

    Returns:
        ComplexVector: H(w) for each frequency
    """
    w = np.ascontiguousarray(frequencies, dtype=np.float64)
    numerator = lag_polynomial_on_unit_circle(np.ascontiguousarray(process.ma_polynomial), w)
    denominator = lag_polynomial_on_unit_circle(np.ascontiguousarray(process.ar_polynomial), w)

    # A root of the AR polynomial on the grid yields inf/nan rather than an error
    with np.errstate(divide="ignore", invalid="ignore"):
        return numerator / denominator


def spectral_density(process: ARMAProcess,
                     resolution: Optional[int] = None,
                     full_range: bool = True) -> SpectralDensity:
    """
    Compute the spectral density of an ARMA process.

    Args:
        process: ARMA process
        resolution: Number of frequency grid points. Defaults to the
            ``numerical.spectral_resolution`` setting (512).
        full_range: Evaluate on [0, 2 pi] if True, otherwise on [0, pi]

    Returns:
        SpectralDensity: Tuple (frequencies, power) of equal length, where
        power = sigma^2 |H(w)|^2

    Raises:
        ParameterError: If resolution is not a non-negative integer

    Examples:
        >>> from armaspec import arma, spectral_density
        >>> w, spect = spectral_density(arma(0.5), resolution=4, full_range=False)
        >>> len(w), len(spect)
        (4, 4)
    """
    if resolution is None:
        resolution = get_config("numerical", "spectral_resolution")
    resolution = validate_non_negative_int(resolution, "resolution")

    w = frequency_grid(resolution, full_range)
    h = frequency_response(process, w)

    with np.errstate(over="ignore", invalid="ignore"):
        spect = process.noise_scale ** 2 * np.abs(h) ** 2

    if not np.all(np.isfinite(spect)):
        logger.warning(
            f"Spectral density of ARMA({process.p}, {process.q}) contains non-finite values; "
            "the AR polynomial may have a root on the unit circle"
        )
    logger.debug(f"Computed spectral density on {resolution} frequencies (full_range={full_range})")

    return w, spect


def autocovariance(process: ARMAProcess, max_lag: Optional[int] = None) -> Vector:
    """
    Compute autocovariances from the spectral density.

    The spectral density is evaluated on the full [0, 2 pi] grid at the
    default resolution and inverted with the discrete Fourier transform.
    ``max_lag`` should not exceed half the spectral resolution (256 with the
    default 512 points); larger values return aliased autocovariances.

    Args:
        process: ARMA process
        max_lag: Number of lags to return. Defaults to the
            ``numerical.autocovariance_lags`` setting (16).

    Returns:
        Vector: Autocovariances at lags 0, ..., max_lag - 1

    Raises:
        ParameterError: If max_lag is not a non-negative integer
    """
    if max_lag is None:
        max_lag = get_config("numerical", "autocovariance_lags")
    max_lag = validate_non_negative_int(max_lag, "max_lag")

    _, spect = spectral_density(process)
    resolution = len(spect)
    if max_lag > resolution // 2:
        logger.warning(
            f"max_lag={max_lag} exceeds half the spectral resolution ({resolution}); "
            f"autocovariances beyond lag {resolution // 2 - 1} are aliased"
        )

    acov = np.real(fft.ifft(spect))
    return acov[:max_lag]
