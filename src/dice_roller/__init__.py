"""Dice roller: animated die widgets on a numpy core."""

__all__ = ["__version__"]

__version__ = "0.1.0"
