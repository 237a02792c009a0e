# armaspec/models/arma.py
"""
Scalar ARMA(p, q) process container.

An ARMAProcess stores the coefficients of

    X_t = phi_1 X_{t-1} + ... + phi_p X_{t-p} + e_t + theta_1 e_{t-1} + ... + theta_q e_{t-q}

where e_t is white noise with standard deviation sigma, together with the two
lag polynomials of its filter representation:

    ma_polynomial = [1, theta_1, ..., theta_q]
    ar_polynomial = [1, -phi_1, ..., -phi_p]

The container is immutable. The polynomials are derived once at construction
and every diagnostic is a pure function of the process and its own arguments,
so a single instance can be shared freely between threads.

No stationarity or invertibility check is made. A process whose AR polynomial
has roots on or inside the unit circle is accepted; its spectral density and
autocovariances will contain inf/nan or meaningless values.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from armaspec.core.types import CoefficientLike, LagPolynomial, RandomState, SpectralDensity, Vector
from armaspec.core.validation import as_coefficient_vector

# Set up module-level logger
logger = logging.getLogger("armaspec.models.arma")


@dataclass(frozen=True, eq=False)
class ARMAProcess:
    """
    Immutable scalar ARMA(p, q) process.

    Attributes:
        ar_coefficients: AR coefficients phi_1, ..., phi_p
        ma_coefficients: MA coefficients theta_1, ..., theta_q
        noise_scale: Standard deviation of the driving white noise
        p: Number of AR coefficients
        q: Number of MA coefficients
        ma_polynomial: MA lag polynomial [1, theta_1, ..., theta_q]
        ar_polynomial: AR lag polynomial [1, -phi_1, ..., -phi_p]
    """

    ar_coefficients: Vector
    ma_coefficients: Vector
    noise_scale: float = 1.0
    p: int = field(init=False)
    q: int = field(init=False)
    ma_polynomial: LagPolynomial = field(init=False, repr=False)
    ar_polynomial: LagPolynomial = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Coerce inputs and derive the lag polynomials."""
        phi = as_coefficient_vector(self.ar_coefficients, "ar_coefficients")
        theta = as_coefficient_vector(self.ma_coefficients, "ma_coefficients")

        ma_poly = np.concatenate(([1.0], theta))
        ar_poly = np.concatenate(([1.0], -phi))
        ma_poly.setflags(write=False)
        ar_poly.setflags(write=False)

        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "ar_coefficients", phi)
        object.__setattr__(self, "ma_coefficients", theta)
        object.__setattr__(self, "noise_scale", float(self.noise_scale))
        object.__setattr__(self, "p", len(phi))
        object.__setattr__(self, "q", len(theta))
        object.__setattr__(self, "ma_polynomial", ma_poly)
        object.__setattr__(self, "ar_polynomial", ar_poly)

        logger.debug(f"Created ARMA({self.p}, {self.q}) process with sigma={self.noise_scale}")

    @classmethod
    def from_coefficients(cls,
                          phi: Optional[CoefficientLike] = None,
                          theta: Optional[CoefficientLike] = None,
                          sigma: float = 1.0) -> "ARMAProcess":
        """
        Build a process from scalar or sequence coefficients.

        A bare number is treated as a single coefficient and None as no
        coefficients.

        Args:
            phi: AR coefficient(s)
            theta: MA coefficient(s)
            sigma: Standard deviation of the white noise

        Returns:
            ARMAProcess: The process
        """
        return cls(phi, theta, sigma)

    @property
    def order(self) -> tuple:
        """(p, q) order of the process."""
        return (self.p, self.q)

    def __eq__(self, other: Any) -> bool:
        """
        Value equality over coefficients and noise scale.

        Comparison is elementwise, so a process with NaN coefficients is not
        equal to itself.
        """
        if not isinstance(other, ARMAProcess):
            return NotImplemented
        return (np.array_equal(self.ar_coefficients, other.ar_coefficients)
                and np.array_equal(self.ma_coefficients, other.ma_coefficients)
                and self.noise_scale == other.noise_scale)

    def __hash__(self) -> int:
        return hash((tuple(self.ar_coefficients.tolist()),
                     tuple(self.ma_coefficients.tolist()),
                     self.noise_scale))

    def spectral_density(self, resolution: Optional[int] = None,
                         full_range: bool = True) -> SpectralDensity:
        """See :func:`armaspec.models.spectral.spectral_density`."""
        from armaspec.models.spectral import spectral_density
        return spectral_density(self, resolution=resolution, full_range=full_range)

    def autocovariance(self, max_lag: Optional[int] = None) -> Vector:
        """See :func:`armaspec.models.spectral.autocovariance`."""
        from armaspec.models.spectral import autocovariance
        return autocovariance(self, max_lag=max_lag)

    def impulse_response(self, length: Optional[int] = None) -> Vector:
        """See :func:`armaspec.models.impulse_response.impulse_response`."""
        from armaspec.models.impulse_response import impulse_response
        return impulse_response(self, length=length)

    def simulate(self, length: Optional[int] = None,
                 random_state: RandomState = None) -> Vector:
        """See :func:`armaspec.models.simulation.simulate`."""
        from armaspec.models.simulation import simulate
        return simulate(self, length=length, random_state=random_state)

    def summary(self) -> str:
        """
        Generate a text summary of the process.

        Returns:
            str: Orders, coefficients and noise scale
        """
        header = f"ARMA({self.p}, {self.q}) process\n"
        header += "=" * (len(header) - 1) + "\n"

        lines = []
        if self.p:
            for i, coef in enumerate(self.ar_coefficients, start=1):
                lines.append(f"  phi_{i:<3d} {coef: .6f}")
        else:
            lines.append("  (no AR coefficients)")
        if self.q:
            for j, coef in enumerate(self.ma_coefficients, start=1):
                lines.append(f"  theta_{j:<3d} {coef: .6f}")
        else:
            lines.append("  (no MA coefficients)")
        lines.append(f"  sigma     {self.noise_scale: .6f}")

        return header + "\n".join(lines)

    def __repr__(self) -> str:
        return (f"ARMAProcess(ar_coefficients={self.ar_coefficients.tolist()}, "
                f"ma_coefficients={self.ma_coefficients.tolist()}, "
                f"noise_scale={self.noise_scale})")


def arma(phi: Optional[CoefficientLike] = None,
         theta: Optional[CoefficientLike] = None,
         sigma: float = 1.0) -> ARMAProcess:
    """
    Convenience constructor for an ARMAProcess.

    Args:
        phi: AR coefficient(s), a number or a sequence
        theta: MA coefficient(s), a number or a sequence
        sigma: Standard deviation of the white noise

    Returns:
        ARMAProcess: The process

    Examples:
        >>> from armaspec import arma
        >>> lp = arma([0.5], [0.0, -0.8], 1.0)
        >>> lp.order
        (1, 2)
        >>> lp.ar_polynomial.tolist()
        [1.0, -0.5]
    """
    return ARMAProcess.from_coefficients(phi, theta, sigma)
