"""
armaspec test suite.

Covers the process container, the spectral and autocovariance diagnostics,
the impulse response recursion, simulation, configuration and the plotting
adapters.
"""
