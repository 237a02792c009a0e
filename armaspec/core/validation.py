# armaspec/core/validation.py

"""
Validation and coercion helpers.

The model constructor performs type coercion only: coefficient inputs are
turned into 1-D float64 arrays, scalars become length-1 vectors, and row or
column vectors are flattened. Values themselves are never inspected, so
non-finite entries pass through unchanged.
"""

from typing import Any, Optional

import numpy as np

from armaspec.core.exceptions import raise_dimension_error, raise_parameter_error
from armaspec.core.types import CoefficientLike, Vector


def validate_vector(
    vector: np.ndarray,
    vector_name: str = "vector",
) -> np.ndarray:
    """Validate that an array is a vector.

    Args:
        vector: Vector to validate
        vector_name: Name of the vector for error messages

    Returns:
        np.ndarray: The validated vector, flattened to 1-D

    Raises:
        TypeError: If vector is not a NumPy array
        DimensionError: If vector is not 1-dimensional or a row/column vector
    """
    if not isinstance(vector, np.ndarray):
        raise TypeError(f"{vector_name} must be a NumPy array, got {type(vector).__name__}")

    if vector.ndim == 0:
        return vector.reshape(1)

    # Handle both 1D arrays and column/row vectors
    if vector.ndim == 2:
        if vector.shape[0] == 1 or vector.shape[1] == 1:
            vector = vector.ravel()
        else:
            raise_dimension_error(
                f"{vector_name} must be 1-dimensional or a column/row vector, got shape {vector.shape}",
                array_name=vector_name,
                expected_shape="1D vector",
                actual_shape=vector.shape
            )
    elif vector.ndim != 1:
        raise_dimension_error(
            f"{vector_name} must be 1-dimensional, got {vector.ndim} dimensions",
            array_name=vector_name,
            expected_shape="1D vector",
            actual_shape=vector.shape
        )

    return vector


def as_coefficient_vector(values: Optional[CoefficientLike], name: str) -> Vector:
    """Coerce a scalar or sequence of coefficients to a read-only float vector.

    ``None`` is treated as an empty coefficient sequence.

    Args:
        values: Scalar, sequence or array of coefficients
        name: Name of the coefficient set for error messages

    Returns:
        Vector: Read-only 1-D float64 array (a copy of the input)
    """
    if values is None:
        values = ()
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be numeric, got {values!r}") from e

    array = validate_vector(array, name)
    array.setflags(write=False)
    return array


def validate_non_negative_int(value: Any, param_name: str) -> int:
    """Validate that a parameter is a non-negative integer.

    Args:
        value: Value to validate
        param_name: Name of the parameter for error messages

    Returns:
        int: The validated value

    Raises:
        ParameterError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise_parameter_error(
            f"{param_name} must be an integer",
            param_name=param_name,
            param_value=value,
            constraint="integer"
        )
    if value < 0:
        raise_parameter_error(
            f"{param_name} must be non-negative",
            param_name=param_name,
            param_value=value,
            constraint=">= 0"
        )
    return int(value)
