"""Secant-method root finding and a keyed substitution cipher."""

__version__ = "0.1.0"
__all__ = ["secant", "subcipher"]