# src/kepler_source/cli/__init__.py
"""
Kepler source CLI package.

Exposes the top-level Typer `app` used by the console entrypoint.
"""

from .main import app

__all__ = ["app"]
