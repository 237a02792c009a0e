# armaspec/__main__.py
"""
Demonstration: python -m armaspec

Builds the ARMA(1, 2) process with phi = [0.5], theta = [0, -0.8] and
sigma = 1, logs its summary and first impulse response coefficients, and
plots the impulse response (or all diagnostics with --quad).
"""

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from armaspec.models import arma, impulse_response, plot_impulse_response, quad_plot

logger = logging.getLogger("armaspec.demo")

DEMO_PHI = [0.5]
DEMO_THETA = [0.0, -0.8]
DEMO_SIGMA = 1.0


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m armaspec",
        description="Plot the diagnostics of an example ARMA(1, 2) process."
    )
    parser.add_argument("--quad", action="store_true",
                        help="draw impulse response, spectrum, autocovariance and a sample path")
    parser.add_argument("--no-show", action="store_true",
                        help="do not open a plot window")
    parser.add_argument("--save", metavar="PATH", default=None,
                        help="write the figure to PATH")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the simulated sample path")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    lp = arma(DEMO_PHI, DEMO_THETA, DEMO_SIGMA)
    logger.info("\n" + lp.summary())
    logger.info(f"First impulse response coefficients: {impulse_response(lp, length=5).round(4).tolist()}")

    if args.quad:
        fig = quad_plot(lp, show=False, random_state=args.seed)
    else:
        fig = plot_impulse_response(lp, show=False).figure

    if args.save:
        fig.savefig(args.save, dpi=100, bbox_inches="tight")
        logger.info(f"Saved figure to {args.save}")
    if not args.no_show:
        plt.show()
    plt.close(fig)

    return 0


if __name__ == "__main__":
    sys.exit(main())
