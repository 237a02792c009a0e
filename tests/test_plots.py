# tests/test_plots.py

"""
Tests for the matplotlib plotting adapters.

Rendering uses the Agg backend selected in conftest; plt.show is replaced by
a recorder where display behaviour is checked.
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from numpy.testing import assert_allclose

from armaspec.core.config import set_config
from armaspec.models.impulse_response import impulse_response
from armaspec.models.plots import (
    plot_autocovariance, plot_impulse_response, plot_simulation,
    plot_spectral_density, quad_plot
)
from armaspec.models.spectral import autocovariance

pytestmark = pytest.mark.plots


@pytest.fixture
def show_calls(monkeypatch):
    """Record calls to plt.show instead of opening windows."""
    calls = []
    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: calls.append(1))
    return calls


def _stem_values(ax):
    return ax.containers[0].markerline.get_ydata()


class TestSpectralDensityPlot:
    """Tests for the spectral density plot."""

    def test_labels_and_limits(self, example_process, show_calls):
        ax = plot_spectral_density(example_process, show=False)
        assert isinstance(ax, Axes)
        assert ax.get_title() == "Spectral density"
        assert ax.get_xlabel() == "frequency"
        assert ax.get_ylabel() == "spectrum"
        assert_allclose(ax.get_xlim(), (0, np.pi))
        assert ax.get_yscale() == "log"
        assert show_calls == []

    def test_plots_half_range(self, example_process):
        ax = plot_spectral_density(example_process, show=False)
        line = ax.get_lines()[0]
        assert len(line.get_xdata()) == 512
        assert line.get_xdata()[-1] == pytest.approx(np.pi)

    def test_uses_configured_style(self, example_process):
        set_config("output", "plot_color", "red")
        set_config("output", "plot_linewidth", 3.5)
        line = plot_spectral_density(example_process, show=False).get_lines()[0]
        assert line.get_color() == "red"
        assert line.get_linewidth() == 3.5

    def test_new_figure_uses_configured_size(self, example_process):
        set_config("output", "plot_figsize", (4, 3))
        ax = plot_spectral_density(example_process, show=False)
        assert_allclose(ax.figure.get_size_inches(), (4, 3))

    def test_show(self, example_process, show_calls):
        ax = plot_spectral_density(example_process, show=True)
        assert isinstance(ax, Axes)
        assert show_calls == [1]


class TestStemPlots:
    """Tests for the autocovariance and impulse response plots."""

    def test_autocovariance(self, example_process):
        ax = plot_autocovariance(example_process, show=False)
        assert ax.get_title() == "Autocovariance"
        assert ax.get_xlabel() == "time"
        assert ax.get_ylabel() == "autocovariance"
        assert_allclose(ax.get_xlim(), (-0.5, 15.5))
        assert_allclose(_stem_values(ax), autocovariance(example_process))

    def test_impulse_response(self, example_process):
        ax = plot_impulse_response(example_process, show=False)
        assert ax.get_title() == "Impulse response"
        assert ax.get_xlabel() == "time"
        assert ax.get_ylabel() == "response"
        assert_allclose(ax.get_xlim(), (-0.5, 29.5))
        assert_allclose(_stem_values(ax), impulse_response(example_process))

    def test_draws_on_given_axes(self, example_process):
        fig, ax = plt.subplots()
        returned = plot_impulse_response(example_process, ax=ax, show=False)
        assert returned is ax
        assert len(fig.axes) == 1

    def test_show(self, example_process, show_calls):
        plot_autocovariance(example_process, show=True)
        plot_impulse_response(example_process, show=True)
        assert show_calls == [1, 1]


class TestSimulationPlot:
    """Tests for the sample path plot."""

    def test_labels_and_data(self, example_process):
        ax = plot_simulation(example_process, show=False, random_state=0)
        assert ax.get_title() == "Sample path"
        assert ax.get_xlabel() == "time"
        assert ax.get_ylabel() == "state space"
        assert len(ax.get_lines()[0].get_ydata()) == 90
        assert_allclose(ax.get_xlim(), (0, 90))

    def test_seeded_paths_match(self, example_process):
        a = plot_simulation(example_process, show=False, random_state=4)
        b = plot_simulation(example_process, show=False, random_state=4)
        assert_allclose(a.get_lines()[0].get_ydata(), b.get_lines()[0].get_ydata())


class TestQuadPlot:
    """Tests for the combined 2x2 figure."""

    def test_panels(self, example_process, show_calls):
        fig = quad_plot(example_process, show=False, random_state=0)
        assert isinstance(fig, Figure)
        titles = [ax.get_title() for ax in fig.axes]
        assert titles == ["Impulse response", "Spectral density", "Autocovariance", "Sample path"]
        assert_allclose(fig.get_size_inches(), (10, 6))
        assert show_calls == []

    def test_size_follows_config(self, example_process):
        set_config("output", "plot_figsize", (7, 5))
        fig = quad_plot(example_process, show=False, random_state=0)
        assert_allclose(fig.get_size_inches(), (7, 5))

    def test_explicit_size_wins(self, example_process):
        set_config("output", "plot_figsize", (7, 5))
        fig = quad_plot(example_process, show=False, figsize=(12, 8), random_state=0)
        assert_allclose(fig.get_size_inches(), (12, 8))

    def test_show(self, example_process, show_calls):
        quad_plot(example_process, show=True, random_state=0)
        assert show_calls == [1]
