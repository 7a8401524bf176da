"""Emulated serial graphic LCD backpack and a client for its command protocol."""

__version__ = "0.1.0"
__all__ = ["__version__"]