# armaspec/core/types.py

"""
Type aliases shared across armaspec.

These aliases document the shape conventions of the arrays passed between the
model container, the numerical kernels and the plotting adapters.
"""

from typing import Literal, Optional, Sequence, Tuple, Union

import numpy as np

# NumPy array aliases
Vector = np.ndarray  # 1D float array
ComplexVector = np.ndarray  # 1D complex array

# Inputs accepted where coefficients are expected
Scalar = Union[int, float, np.floating, np.integer]
CoefficientLike = Union[Scalar, Sequence[float], np.ndarray]

# Lag polynomial stored constant term first: [1, c_1, ..., c_n]
LagPolynomial = np.ndarray

# Diagnostic outputs
FrequencyGrid = np.ndarray
SpectralDensity = Tuple[FrequencyGrid, Vector]

# Accepted seeds for simulation
RandomState = Optional[Union[int, np.random.Generator]]

# Logging levels understood by the configuration layer
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
