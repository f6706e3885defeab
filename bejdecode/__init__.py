"""Decode BEJ (Binary Encoded JSON) data into JSON text using a tag dictionary."""

__version__ = "0.1.0"
__all__ = ["__version__"]