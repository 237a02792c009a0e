# tests/test_simulation.py

"""
Tests for sample path simulation.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from armaspec.core.config import set_config
from armaspec.core.exceptions import ParameterError
from armaspec.models.arma import arma
from armaspec.models.simulation import simulate


class TestSimulate:
    """Tests for the ARMA simulator."""

    def test_default_length(self, example_process):
        path = simulate(example_process, random_state=1)
        assert path.shape == (90,)
        assert np.all(np.isfinite(path))

    def test_default_length_follows_config(self, example_process):
        set_config("numerical", "simulation_length", 25)
        assert len(simulate(example_process, random_state=1)) == 25

    def test_seed_is_reproducible(self, example_process):
        assert_array_equal(
            simulate(example_process, length=50, random_state=123),
            simulate(example_process, length=50, random_state=123)
        )

    def test_different_seeds_differ(self, example_process):
        a = simulate(example_process, length=50, random_state=1)
        b = simulate(example_process, length=50, random_state=2)
        assert not np.array_equal(a, b)

    def test_white_noise_is_scaled_innovations(self, white_noise_process):
        """Test that white noise reproduces sigma times the generator draws."""
        path = simulate(white_noise_process, length=20, random_state=np.random.default_rng(7))
        expected = 2.0 * np.random.default_rng(7).standard_normal(20)
        assert_allclose(path, expected)

    def test_difference_equation(self, example_process):
        """Test x_t = phi x_{t-1} + e_t + theta_2 e_{t-2} with zero start values."""
        length = 40
        path = simulate(example_process, length=length, random_state=np.random.default_rng(3))
        e = np.random.default_rng(3).standard_normal(length)

        x = np.zeros(length)
        for t in range(length):
            x[t] = e[t]
            if t >= 1:
                x[t] += 0.5 * x[t - 1]
            if t >= 2:
                x[t] += -0.8 * e[t - 2]
        assert_allclose(path, x, atol=1e-12)

    def test_generator_state_advances(self, example_process, rng):
        """Test that a passed generator is used directly, not reseeded."""
        first = simulate(example_process, length=10, random_state=rng)
        second = simulate(example_process, length=10, random_state=rng)
        assert not np.array_equal(first, second)

    def test_sample_variance_near_theoretical(self, ar1_process):
        """Test that a long AR(1) path has variance close to 1 / (1 - phi^2)."""
        path = simulate(ar1_process, length=20000, random_state=0)
        assert np.var(path[100:]) == pytest.approx(4.0 / 3.0, rel=0.1)

    def test_zero_length(self, example_process):
        assert simulate(example_process, length=0, random_state=0).shape == (0,)

    def test_negative_length_rejected(self, example_process):
        with pytest.raises(ParameterError) as exc_info:
            simulate(example_process, length=-1)
        assert exc_info.value.param_name == "length"

    def test_non_integer_length_rejected(self, example_process):
        with pytest.raises(ParameterError):
            simulate(example_process, length=2.5)

    def test_method_delegates(self, example_process):
        assert_array_equal(
            example_process.simulate(length=15, random_state=5),
            simulate(example_process, length=15, random_state=5)
        )

    def test_pure_ma_has_finite_memory(self):
        """Test that a shock is forgotten after q periods in an MA(q) path."""
        process = arma([], [1.0])
        path = simulate(process, length=30, random_state=np.random.default_rng(11))
        e = np.random.default_rng(11).standard_normal(30)
        assert_allclose(path[1:], e[1:] + e[:-1])
        assert path[0] == pytest.approx(e[0])
