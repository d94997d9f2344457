"""Parking garage slot management."""

__version__ = "1.0.0"
