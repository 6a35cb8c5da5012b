"""Animating check mark inscribed in a ring."""

__version__ = "0.1.0"
