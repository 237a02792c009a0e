'''
Pytest configuration and fixtures for the armaspec test suite.

Provides example processes, a seeded random number generator, hypothesis
strategies for stationary coefficient sets, and housekeeping fixtures that
restore the global configuration and close matplotlib figures after each test.
'''

from typing import List, Tuple

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from hypothesis import strategies as st

from armaspec.core.config import reset_config
from armaspec.models.arma import ARMAProcess, arma


# ---- Housekeeping ----

@pytest.fixture(autouse=True)
def _restore_config():
    """Reset the global configuration after every test."""
    yield
    reset_config()


@pytest.fixture(autouse=True)
def _close_figures():
    """Close all matplotlib figures after every test."""
    yield
    plt.close("all")


# ---- Example processes ----

@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def example_process() -> ARMAProcess:
    """ARMA(1, 2) process with phi = [0.5], theta = [0, -0.8], sigma = 1."""
    return arma([0.5], [0.0, -0.8], 1.0)


@pytest.fixture
def ar1_process() -> ARMAProcess:
    """Pure AR(1) process with phi = 0.5 and unit noise."""
    return arma([0.5], [], 1.0)


@pytest.fixture
def ma1_process() -> ARMAProcess:
    """Pure MA(1) process with theta = 0.5 and unit noise."""
    return arma([], [0.5], 1.0)


@pytest.fixture
def white_noise_process() -> ARMAProcess:
    """White noise with standard deviation 2."""
    return arma([], [], 2.0)


@pytest.fixture
def unit_root_process() -> ARMAProcess:
    """Random walk: AR polynomial 1 - L has a root at z = 1."""
    return arma([1.0], [], 1.0)


# ---- Hypothesis strategies ----

def stationary_ar_coefficients(max_order: int = 3, max_root: float = 0.9) -> st.SearchStrategy:
    """
    Strategy for AR coefficients of a stationary process.

    Draws inverse roots a_i with |a_i| < max_root and expands
    prod_i (1 - a_i L) = 1 - phi_1 L - ... - phi_p L^p.
    """
    inverse_roots = st.lists(
        st.floats(min_value=-max_root, max_value=max_root, allow_nan=False),
        min_size=0, max_size=max_order
    )
    return inverse_roots.map(lambda a: (-np.poly(a)[1:]).tolist() if a else [])


def ma_coefficients(max_order: int = 3) -> st.SearchStrategy:
    """Strategy for MA coefficients."""
    return st.lists(
        st.floats(min_value=-2.0, max_value=2.0, allow_nan=False),
        min_size=0, max_size=max_order
    )


def noise_scales() -> st.SearchStrategy:
    """Strategy for positive noise standard deviations."""
    return st.floats(min_value=0.1, max_value=5.0, allow_nan=False)
