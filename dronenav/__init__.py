"""Polar geometry, obstacle histogram, failsafe, world loading, Bezier and path utilities for drones."""

__version__ = "0.1.0"
__all__ = ["__version__"]