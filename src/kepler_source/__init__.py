"""Kepler energy source: normalizes Kepler container energy into instances."""

__version__ = "0.1.0"
