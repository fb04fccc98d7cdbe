"""Slippy-map tile server for a procedurally generated planet."""

__version__ = "0.1.0"
