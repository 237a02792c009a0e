# armaspec/models/plots.py
"""
Plotting adapters for ARMA diagnostics.

Each function draws one diagnostic of an ARMAProcess on a matplotlib Axes.
The axes can be supplied by the caller, which allows several diagnostics to
be composed on one figure; otherwise a new figure is created with the
configured size. With ``show=True`` the figure is displayed immediately.
The axes are returned in every case.

The adapters perform no numerical work beyond calling the diagnostics in
armaspec.models.

Functions:
    plot_spectral_density: Log-scale line plot of the spectral density on [0, pi]
    plot_autocovariance: Stem plot of the autocovariance function
    plot_impulse_response: Stem plot of the impulse response
    plot_simulation: Line plot of a simulated sample path
    quad_plot: 2x2 figure with all of the above
"""

import logging
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from armaspec.core.config import get_output_config
from armaspec.core.types import RandomState
from armaspec.models.arma import ARMAProcess
from armaspec.models.impulse_response import impulse_response
from armaspec.models.simulation import simulate
from armaspec.models.spectral import autocovariance, spectral_density

# Set up module-level logger
logger = logging.getLogger("armaspec.models.plots")


def _get_axes(ax: Optional[Axes]) -> Axes:
    if ax is None:
        _, ax = plt.subplots(figsize=get_output_config().plot_figsize)
    return ax


def _finish(ax: Axes, show: bool) -> Axes:
    if show:
        plt.show()
    return ax


def plot_spectral_density(process: ARMAProcess,
                          ax: Optional[Axes] = None,
                          show: bool = True) -> Axes:
    """
    Plot the spectral density of a process on [0, pi] with a log-scale y axis.

    Args:
        process: ARMA process
        ax: Existing axes to draw on (if None, creates a new figure)
        show: Whether to display the figure

    Returns:
        Axes: The axes the density was drawn on
    """
    w, spect = spectral_density(process, full_range=False)
    style = get_output_config()

    ax = _get_axes(ax)
    ax.set_xlim(0, np.pi)
    ax.set_title("Spectral density")
    ax.set_xlabel("frequency")
    ax.set_ylabel("spectrum")
    ax.semilogy(w, spect, color=style.plot_color, lw=style.plot_linewidth, alpha=style.plot_alpha)

    return _finish(ax, show)


def _stem(ax: Axes, values: np.ndarray, title: str, ylabel: str) -> None:
    n = len(values)
    ax.set_title(title)
    ax.set_xlim(-0.5, n - 0.5)
    ax.set_xlabel("time")
    ax.set_ylabel(ylabel)
    ax.stem(np.arange(n), values)


def plot_autocovariance(process: ARMAProcess,
                        ax: Optional[Axes] = None,
                        show: bool = True) -> Axes:
    """
    Stem plot of the autocovariance function.

    Args:
        process: ARMA process
        ax: Existing axes to draw on (if None, creates a new figure)
        show: Whether to display the figure

    Returns:
        Axes: The axes the autocovariances were drawn on
    """
    acov = autocovariance(process)
    ax = _get_axes(ax)
    _stem(ax, acov, "Autocovariance", "autocovariance")
    return _finish(ax, show)


def plot_impulse_response(process: ARMAProcess,
                          ax: Optional[Axes] = None,
                          show: bool = True) -> Axes:
    """
    Stem plot of the impulse response.

    Args:
        process: ARMA process
        ax: Existing axes to draw on (if None, creates a new figure)
        show: Whether to display the figure

    Returns:
        Axes: The axes the impulse response was drawn on
    """
    psi = impulse_response(process)
    ax = _get_axes(ax)
    _stem(ax, psi, "Impulse response", "response")
    return _finish(ax, show)


def plot_simulation(process: ARMAProcess,
                    ax: Optional[Axes] = None,
                    show: bool = True,
                    random_state: RandomState = None) -> Axes:
    """
    Line plot of a simulated sample path.

    Args:
        process: ARMA process
        ax: Existing axes to draw on (if None, creates a new figure)
        show: Whether to display the figure
        random_state: Seed or generator passed to the simulator

    Returns:
        Axes: The axes the path was drawn on
    """
    path = simulate(process, random_state=random_state)
    style = get_output_config()

    ax = _get_axes(ax)
    ax.set_title("Sample path")
    ax.set_xlim(0, len(path))
    ax.set_xlabel("time")
    ax.set_ylabel("state space")
    ax.plot(path, color=style.plot_color, lw=style.plot_linewidth, alpha=style.plot_alpha)

    return _finish(ax, show)


def quad_plot(process: ARMAProcess,
              show: bool = True,
              figsize: Optional[Tuple[float, float]] = None,
              random_state: RandomState = None) -> Figure:
    """
    Draw impulse response, spectral density, autocovariance and a sample path
    on a 2x2 grid.

    Args:
        process: ARMA process
        show: Whether to display the figure
        figsize: Figure size as (width, height) in inches. Defaults to the
            ``output.plot_figsize`` setting.
        random_state: Seed or generator for the sample path

    Returns:
        Figure: The figure holding the four panels
    """
    if figsize is None:
        figsize = get_output_config().plot_figsize
    fig, axes = plt.subplots(2, 2, figsize=figsize)

    plot_impulse_response(process, ax=axes[0, 0], show=False)
    plot_spectral_density(process, ax=axes[0, 1], show=False)
    plot_autocovariance(process, ax=axes[1, 0], show=False)
    plot_simulation(process, ax=axes[1, 1], show=False, random_state=random_state)

    fig.tight_layout()
    logger.debug(f"Drew quad plot for ARMA{process.order}")

    if show:
        plt.show()
    return fig
